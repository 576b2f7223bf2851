"""
Text layout for one generation of family blocks.

Each family becomes a block three rows tall:

    <parent line>         e.g. "John (M) - Mary (F)"
    <connector>           a single bar near the middle of the parent line
    <children line>       e.g. "Alice Bob"

Blocks are as wide as their longest line (never narrower than the
configured minimum), text is centered inside a block with any odd space
going to the right, and blocks sit side by side separated by a fixed gap.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional

from famtree.config import DisplaySettings
from famtree.families.grouping import FamilyGroup
from famtree.registry.entities import Gender, Person
from famtree.registry.member_registry import MemberRegistry

UNKNOWN = "Unknown"
CONNECTOR = "│"


def display_name(name: str, cap: int) -> str:
    """Cut a name to ``cap`` characters, no ellipsis."""
    return name[:cap]


def _parent_label(person: Optional[Person], placeholder: Gender, cap: int) -> str:
    if person is None:
        return f"{UNKNOWN} ({placeholder.value})"
    return f"{display_name(person.name, cap)} ({person.gender.value})"


def parent_line(
    registry: MemberRegistry, group: FamilyGroup, settings: DisplaySettings
) -> str:
    # An absent father shows as male and an absent mother as female.
    father = _parent_label(
        registry.get_optional(group.father), Gender.MALE, settings.name_display_cap
    )
    mother = _parent_label(
        registry.get_optional(group.mother), Gender.FEMALE, settings.name_display_cap
    )
    return f"{father} - {mother}"


def children_line(
    registry: MemberRegistry, group: FamilyGroup, settings: DisplaySettings
) -> str:
    return " ".join(
        display_name(registry.get(h).name, settings.name_display_cap)
        for h in group.children
    )


def left_pad(text: str, width: int) -> int:
    return (width - len(text)) // 2


def center(text: str, width: int) -> str:
    """Center ``text`` in exactly ``width`` columns, extra space on the right."""
    pad = left_pad(text, width)
    return " " * pad + text + " " * max(width - pad - len(text), 0)


@dataclass(slots=True)
class FamilyBlock:
    parent_line: str
    children_line: str
    width: int

    @property
    def connector_offset(self) -> int:
        """Column of the connector inside the block."""
        return left_pad(self.parent_line, self.width) + len(self.parent_line) // 2

    def parent_cell(self) -> str:
        return center(self.parent_line, self.width)

    def connector_cell(self) -> str:
        offset = self.connector_offset
        return " " * offset + CONNECTOR + " " * max(self.width - offset - 1, 0)

    def children_cell(self) -> str:
        return center(self.children_line, self.width)


def build_block(
    registry: MemberRegistry, group: FamilyGroup, settings: DisplaySettings
) -> FamilyBlock:
    parents = parent_line(registry, group, settings)
    kids = children_line(registry, group, settings)
    width = max(len(parents), len(kids), settings.min_block_width)
    return FamilyBlock(parent_line=parents, children_line=kids, width=width)


def layout_rows(blocks: List[FamilyBlock], gap: int) -> List[str]:
    """Return the parent, connector and children rows for a generation."""
    spacer = " " * gap
    return [
        spacer.join(b.parent_cell() for b in blocks),
        spacer.join(b.connector_cell() for b in blocks),
        spacer.join(b.children_cell() for b in blocks),
    ]
