from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Set, Tuple, Union

from famtree.core.exceptions import DuplicateName
from famtree.logging import get_logger
from famtree.registry.entities import Gender, Person
from famtree.registry.member_registry import MemberRegistry

log = get_logger(__name__)


@dataclass(slots=True)
class NewParent:
    """A parent that does not exist yet and is created with the member."""
    name: str
    gender: Gender
    alive: bool = True


# None: unknown parent. str: name of an existing member. NewParent: create it.
ParentRef = Union[None, str, NewParent]


@dataclass(slots=True)
class AddMemberRequest:
    name: str
    gender: Gender
    alive: bool = True
    father: ParentRef = None
    mother: ParentRef = None


@dataclass(slots=True)
class AddMemberResult:
    member: Person
    father: Optional[Person] = None
    mother: Optional[Person] = None
    created_parents: List[Person] = field(default_factory=list)


def _resolve_parent(
    registry: MemberRegistry,
    ref: ParentRef,
    reserved: Set[str],
) -> Tuple[Optional[Person], Optional[NewParent]]:
    """
    Check one parent slot without touching the registry.

    Returns (existing person, pending new parent); at most one is set.
    """
    if ref is None:
        return None, None

    if isinstance(ref, NewParent):
        name = registry.validate_new_name(ref.name)
        if name in reserved:
            raise DuplicateName()
        reserved.add(name)
        return None, NewParent(name=name, gender=ref.gender, alive=ref.alive)

    if not ref.strip():
        # blank name means "unknown"
        return None, None

    return registry.find_by_name(ref), None


def add_member(registry: MemberRegistry, request: AddMemberRequest) -> AddMemberResult:
    """
    Add a member, creating any missing parents along the way.

    Every name is validated before anything is registered, so a failing
    request leaves the registry exactly as it was.

    Raises:
      RootMissing   - no root yet
      InvalidInput  - empty member or new-parent name
      DuplicateName - a name is taken, or two new names collide
      NotFound      - a parent named as existing is not registered
    """
    registry.require_root()
    member_name = registry.validate_new_name(request.name)
    reserved = {member_name}

    father, pending_father = _resolve_parent(registry, request.father, reserved)
    mother, pending_mother = _resolve_parent(registry, request.mother, reserved)

    # ---- commit ----
    created: List[Person] = []
    if pending_father is not None:
        father = registry.create_auxiliary_parent(
            pending_father.name, pending_father.gender, pending_father.alive
        )
        created.append(father)
    if pending_mother is not None:
        mother = registry.create_auxiliary_parent(
            pending_mother.name, pending_mother.gender, pending_mother.alive
        )
        created.append(mother)

    member = registry.create_member(
        member_name,
        request.gender,
        request.alive,
        father=father,
        mother=mother,
    )

    if created:
        log.debug(
            f"{member.name}: created parents {[p.name for p in created]}"
        )

    return AddMemberResult(
        member=member,
        father=father,
        mother=mother,
        created_parents=created,
    )
