from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional


# -----------------------------
# Small atoms
# -----------------------------

class Gender(str, Enum):
    MALE = "M"
    FEMALE = "F"


# -----------------------------
# Entities
# -----------------------------

@dataclass(slots=True)
class Person:
    """
    One member of the tree.

    Relations are registry handles, not object references:
      - father / mother: weak, a person does not own its parents
      - children: owned, in the order they were linked
    """
    handle: int
    name: str
    gender: Gender = Gender.MALE
    alive: bool = True

    father: Optional[int] = None
    mother: Optional[int] = None
    children: List[int] = field(default_factory=list)

    def has_parents(self) -> bool:
        return self.father is not None or self.mother is not None

    def is_parent(self) -> bool:
        return bool(self.children)

    def add_child(self, child: "Person") -> None:
        self.children.append(child.handle)
