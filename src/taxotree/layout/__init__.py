"""Layout module - Rank grid and tidy-tree placement."""

from taxotree.layout.engine import (
    HORIZONTAL,
    VERTICAL,
    LayoutConfig,
    bounds,
    canvas_size,
    rank_layout,
    tree_layout,
)

__all__ = [
    "HORIZONTAL",
    "VERTICAL",
    "LayoutConfig",
    "bounds",
    "canvas_size",
    "rank_layout",
    "tree_layout",
]
