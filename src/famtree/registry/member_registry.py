from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, List, Optional

from famtree.core.exceptions import (
    AlreadyDeceased,
    AlreadyExists,
    DuplicateName,
    InvalidInput,
    NotFound,
    RootMissing,
)
from famtree.logging import get_logger
from famtree.registry.entities import Gender, Person
from famtree.registry.link_members import link_child

log = get_logger(__name__)


@dataclass(slots=True)
class MemberRegistry:
    """
    In-memory arena of every person in the session, indexed by handle.

    A person's handle is its position in ``members``; persons are never
    removed, so handles stay valid for the whole session.
    """
    members: List[Person] = field(default_factory=list)
    root_handle: Optional[int] = None
    max_name_length: int = 63

    # -----------------------------
    # Lookup
    # -----------------------------

    def __len__(self) -> int:
        return len(self.members)

    def __iter__(self) -> Iterator[Person]:
        return iter(self.members)

    @property
    def root(self) -> Optional[Person]:
        if self.root_handle is None:
            return None
        return self.members[self.root_handle]

    def has_root(self) -> bool:
        return self.root_handle is not None

    def get(self, handle: int) -> Person:
        return self.members[handle]

    def get_optional(self, handle: Optional[int]) -> Optional[Person]:
        if handle is None:
            return None
        return self.members[handle]

    def get_by_name(self, name: str) -> Optional[Person]:
        """Exact, case-sensitive match; first registered wins."""
        wanted = self.clean_name(name)
        for person in self:
            if person.name == wanted:
                return person
        return None

    def find_by_name(self, name: str) -> Person:
        person = self.get_by_name(name)
        if person is None:
            log.debug(f"Lookup miss: {name!r}")
            raise NotFound()
        return person

    def all_members(self) -> List[Person]:
        return list(self.members)

    # -----------------------------
    # Validation helpers
    # -----------------------------

    def clean_name(self, name: str) -> str:
        """Cut a name to the stored length bound."""
        return (name or "")[: self.max_name_length]

    def validate_new_name(self, name: str) -> str:
        """
        Return the name as it would be stored, or raise.

        Raises InvalidInput for an empty (or blank) name and DuplicateName
        when the name is already registered.
        """
        cleaned = self.clean_name(name)
        if not cleaned.strip():
            raise InvalidInput()
        if self.get_by_name(cleaned) is not None:
            raise DuplicateName()
        return cleaned

    def require_root(self) -> Person:
        root = self.root
        if root is None:
            raise RootMissing()
        return root

    # -----------------------------
    # Mutations
    # -----------------------------

    def _register(self, name: str, gender: Gender, alive: bool) -> Person:
        person = Person(
            handle=len(self.members),
            name=name,
            gender=Gender(gender),
            alive=bool(alive),
        )
        self.members.append(person)
        return person

    def create_root(self, name: str, gender: Gender, alive: bool = True) -> Person:
        if self.root_handle is not None:
            raise AlreadyExists()

        cleaned = self.clean_name(name)
        if not cleaned.strip():
            raise InvalidInput()

        person = self._register(cleaned, gender, alive)
        self.root_handle = person.handle
        log.info(f"Root created: {person.name} (handle={person.handle})")
        return person

    def create_member(
        self,
        name: str,
        gender: Gender,
        alive: bool = True,
        father: Optional[Person] = None,
        mother: Optional[Person] = None,
    ) -> Person:
        """
        Register a new member and link it to its (optional) parents.

        With no parents the member is attached under the root.
        """
        root = self.require_root()
        cleaned = self.validate_new_name(name)

        person = self._register(cleaned, gender, alive)
        link_child(person, father, mother, root)

        log.info(
            f"Member created: {person.name} "
            f"(father={person.father}, mother={person.mother})"
        )
        return person

    def create_auxiliary_parent(
        self, name: str, gender: Gender, alive: bool = True
    ) -> Person:
        """
        Register a parent that was named before it existed.

        The parent has no parents of its own and is attached under the root
        so it is reachable from the top of the tree.
        """
        root = self.require_root()
        cleaned = self.validate_new_name(name)

        person = self._register(cleaned, gender, alive)
        root.add_child(person)

        log.info(f"Auxiliary parent created under root: {person.name}")
        return person

    def mark_deceased(self, name: str) -> Person:
        person = self.find_by_name(name)
        if not person.alive:
            raise AlreadyDeceased()

        person.alive = False
        log.info(f"Marked deceased: {person.name}")
        return person
