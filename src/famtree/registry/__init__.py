from __future__ import annotations

from .entities import Gender, Person
from .member_registry import MemberRegistry
from .add_member import AddMemberRequest, AddMemberResult, NewParent, add_member

__all__ = [
    "AddMemberRequest",
    "AddMemberResult",
    "Gender",
    "MemberRegistry",
    "NewParent",
    "Person",
    "add_member",
]
