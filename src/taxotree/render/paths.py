"""Link geometry - cubic curves between parent and child positions."""

from __future__ import annotations

from taxotree.layout.engine import HORIZONTAL
from taxotree.tree.TreeNode import Position


def diagonal(source: Position, target: Position, orientation: str = HORIZONTAL) -> str:
    """SVG path data for a smooth S-curve from ``source`` to ``target``.

    Both control points sit halfway along the depth axis, so the curve
    leaves and arrives parallel to it.
    """
    if orientation == HORIZONTAL:
        mid = (source.x + target.x) / 2
        return (
            f"M {source.x:g} {source.y:g} "
            f"C {mid:g} {source.y:g}, {mid:g} {target.y:g}, {target.x:g} {target.y:g}"
        )
    mid = (source.y + target.y) / 2
    return (
        f"M {source.x:g} {source.y:g} "
        f"C {source.x:g} {mid:g}, {target.x:g} {mid:g}, {target.x:g} {target.y:g}"
    )
