from __future__ import annotations

from typing import Dict, Iterator, List, Set

from famtree.families.grouping import FamilyGroup, ParentPair, group_by_parents
from famtree.registry.member_registry import MemberRegistry


def first_generation(registry: MemberRegistry) -> List[FamilyGroup]:
    """
    Seed the walk with the root's own family.

    Included: every member whose father or mother is the root, and the root
    itself when it has no parents. Falls back to a single parentless group
    holding only the root.
    """
    root = registry.require_root()

    seeds = [
        person
        for person in registry.all_members()
        if root.handle in (person.father, person.mother)
        or (person.handle == root.handle and not person.has_parents())
    ]
    groups = group_by_parents(seeds)

    if not groups:
        groups = [FamilyGroup(father=None, mother=None, children=[root.handle])]
    return groups


def next_generation(
    registry: MemberRegistry, current: List[FamilyGroup]
) -> List[FamilyGroup]:
    """
    Families formed by the children of ``current`` who are parents themselves.

    Each such parent contributes its recorded children, grouped by parent
    pair. Groups accumulate across parents, and a child reached through two
    parents of this generation is placed once.
    """
    parents = []
    seen_parents: Set[int] = set()
    for group in current:
        for handle in group.children:
            if handle in seen_parents:
                continue
            seen_parents.add(handle)
            person = registry.get(handle)
            if person.is_parent():
                parents.append(person)

    groups: Dict[ParentPair, FamilyGroup] = {}
    placed: Set[int] = set()
    for parent in parents:
        group_by_parents(
            (registry.get(h) for h in parent.children),
            into=groups,
            skip=placed,
        )

    return list(groups.values())


def iter_generations(registry: MemberRegistry) -> Iterator[List[FamilyGroup]]:
    """
    Yield generations top-down until one produces no further families.

    Child lists only ever point at members created later than their owner,
    so the walk is bounded by the depth of the tree.
    """
    current = first_generation(registry)
    while current:
        yield current
        current = next_generation(registry, current)
