from __future__ import annotations

from .generations import first_generation, iter_generations, next_generation
from .layout import FamilyBlock, build_block, center, display_name, layout_rows
from .renderer import FOOTER, HEADER, render_generation, render_tree, render_tree_lines

__all__ = [
    "FOOTER",
    "HEADER",
    "FamilyBlock",
    "build_block",
    "center",
    "display_name",
    "first_generation",
    "iter_generations",
    "layout_rows",
    "next_generation",
    "render_generation",
    "render_tree",
    "render_tree_lines",
]
