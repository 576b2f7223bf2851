from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional, Set, Tuple

from famtree.registry.entities import Person

ParentPair = Tuple[Optional[int], Optional[int]]


@dataclass(slots=True)
class FamilyGroup:
    """
    Children sharing one (father, mother) handle pair.

    Derived on every render pass and thrown away afterwards.
    """
    father: Optional[int] = None
    mother: Optional[int] = None
    children: List[int] = field(default_factory=list)

    @property
    def pair(self) -> ParentPair:
        return (self.father, self.mother)


def group_by_parents(
    members: Iterable[Person],
    *,
    into: Optional[Dict[ParentPair, FamilyGroup]] = None,
    skip: Optional[Set[int]] = None,
) -> List[FamilyGroup]:
    """
    Group members by the identity of their parent pair.

    PURE FUNCTION over its inputs:
      - groups keep the order in which each pair was first seen
      - children keep the order in which they were scanned

    ``into`` lets several scans accumulate into one ordered mapping (the
    next-generation build does this once per parent). Handles in ``skip``
    are ignored and every handle placed is added to it, so a child reached
    twice is grouped only once.
    """
    groups: Dict[ParentPair, FamilyGroup] = {} if into is None else into

    for person in members:
        if skip is not None:
            if person.handle in skip:
                continue
            skip.add(person.handle)

        key = (person.father, person.mother)
        group = groups.get(key)
        if group is None:
            group = FamilyGroup(father=person.father, mother=person.mother)
            groups[key] = group
        group.children.append(person.handle)

    return list(groups.values())
