from __future__ import annotations

from typing import List, Optional

from famtree.config import DisplaySettings, get_config
from famtree.families.grouping import FamilyGroup
from famtree.logging import get_logger
from famtree.registry.member_registry import MemberRegistry
from famtree.render.generations import iter_generations
from famtree.render.layout import build_block, layout_rows

log = get_logger(__name__)

HEADER = "=== CENTERED FAMILY TREE ==="
FOOTER = "=== END OF TREE ==="


def render_generation(
    registry: MemberRegistry,
    groups: List[FamilyGroup],
    settings: DisplaySettings,
) -> List[str]:
    blocks = [build_block(registry, g, settings) for g in groups]
    return layout_rows(blocks, settings.group_gap)


def render_tree_lines(
    registry: MemberRegistry,
    settings: Optional[DisplaySettings] = None,
) -> List[str]:
    """
    Render the whole tree, header to footer, one string per output row.

    Every generation contributes its three rows followed by a blank row.
    Raises RootMissing when the tree is empty.
    """
    settings = settings or get_config().display_settings()

    lines = [HEADER, ""]
    count = 0
    for groups in iter_generations(registry):
        lines.extend(render_generation(registry, groups, settings))
        lines.append("")
        count += 1
    lines.append(FOOTER)

    log.debug(f"Rendered {count} generation(s) for {len(registry)} member(s)")
    return lines


def render_tree(
    registry: MemberRegistry,
    settings: Optional[DisplaySettings] = None,
) -> str:
    return "\n".join(render_tree_lines(registry, settings))
