"""Layout Engine - Assign coordinates to taxonomy nodes.

Two placements are provided:

- Rank layout: a fixed-column grid driven only by item index, used for
  the flat top-level category view.
- Tree layout: a two-pass tidy tree. One axis is ``depth *
  horizontal_spacing``; the other is the in-order leaf rank, with each
  parent centred between its first and last child, scaled by
  ``vertical_spacing``.

Only visible children take part. Depth is counted from the node passed
in, so a pruned or re-rooted view starts at depth 0.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Sequence

from taxotree.tree.TreeNode import Position, TreeNode

HORIZONTAL = "horizontal"
VERTICAL = "vertical"


@dataclass(frozen=True)
class LayoutConfig:
    """Spacing constants for both layouts.

    Attributes:
        orientation: "horizontal" (depth on x) or "vertical" (depth on y).
        horizontal_spacing: Distance between depth levels.
        vertical_spacing: Distance between adjacent leaf ranks.
        margin_top/right/bottom/left: Padding around the drawing.
        columns: Grid columns for the rank layout.
        cell_size: Grid pitch for the rank layout.
        cell_offset: Position of the first grid cell on both axes.
    """

    orientation: str = HORIZONTAL
    horizontal_spacing: float = 250
    vertical_spacing: float = 40
    margin_top: float = 20
    margin_right: float = 90
    margin_bottom: float = 30
    margin_left: float = 90
    columns: int = 6
    cell_size: float = 160
    cell_offset: float = 100

    def __post_init__(self) -> None:
        if self.orientation not in (HORIZONTAL, VERTICAL):
            raise ValueError(f"Unknown orientation: {self.orientation}")
        if self.columns < 1:
            raise ValueError("columns must be at least 1")

    @classmethod
    def from_config(cls, config: dict[str, Any]) -> LayoutConfig:
        """Build from the ``[layout]`` table of a loaded config."""
        section = config.get("layout", {})
        known = cls.__dataclass_fields__
        return cls(**{k: v for k, v in section.items() if k in known})


def rank_layout(count: int, config: LayoutConfig | None = None) -> list[Position]:
    """Place ``count`` items on a grid by index.

    Item ``i`` goes to column ``i % columns`` and row ``i // columns``.

    Returns:
        One Position per item, in item order.
    """
    config = config or LayoutConfig()
    return [
        Position(
            (i % config.columns) * config.cell_size + config.cell_offset,
            (i // config.columns) * config.cell_size + config.cell_offset,
        )
        for i in range(count)
    ]


def _assign_breadth(root: TreeNode) -> dict[int, float]:
    """First pass: leaf ranks in order, parents centred on their children."""
    breadth: dict[int, float] = {}
    next_leaf = 0
    for node in root.walk("post"):
        if node.children:
            first = breadth[id(node.children[0])]
            last = breadth[id(node.children[-1])]
            breadth[id(node)] = (first + last) / 2.0
        else:
            breadth[id(node)] = float(next_leaf)
            next_leaf += 1
    return breadth


def tree_layout(root: TreeNode, config: LayoutConfig | None = None) -> list[TreeNode]:
    """Lay out the visible tree below ``root`` and set each node's position.

    Args:
        root: Displayed root; it gets depth 0.
        config: Spacing constants.

    Returns:
        Visible nodes in pre-order (root first).
    """
    config = config or LayoutConfig()
    breadth = _assign_breadth(root)

    nodes: list[TreeNode] = []
    for _parent, node, depth in root.walk_with_parent():
        along = depth * config.horizontal_spacing
        across = breadth[id(node)] * config.vertical_spacing
        if config.orientation == HORIZONTAL:
            node.position = Position(along, across)
        else:
            node.position = Position(across, along)
        nodes.append(node)
    return nodes


def bounds(positions: Sequence[Position]) -> tuple[float, float, float, float]:
    """Return ``(min_x, min_y, max_x, max_y)``; all zero for no positions."""
    if not positions:
        return (0.0, 0.0, 0.0, 0.0)
    xs = [p.x for p in positions]
    ys = [p.y for p in positions]
    return (min(xs), min(ys), max(xs), max(ys))


def canvas_size(nodes: Sequence[TreeNode], config: LayoutConfig) -> tuple[float, float]:
    """Width and height needed to show ``nodes`` inside the margins."""
    _, _, max_x, max_y = bounds([n.position for n in nodes if n.position is not None])
    width = max_x + config.margin_left + config.margin_right
    height = max_y + config.margin_top + config.margin_bottom
    return (width, height)
