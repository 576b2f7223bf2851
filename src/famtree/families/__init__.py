from __future__ import annotations

from .grouping import FamilyGroup, ParentPair, group_by_parents

__all__ = [
    "FamilyGroup",
    "ParentPair",
    "group_by_parents",
]
