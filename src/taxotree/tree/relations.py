"""Relations - Parent/child links between tree nodes.

A child has exactly one parent, so an edge is identified by its child
alone. Edges are derived from the visible tree on every pass rather
than stored on nodes.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Iterator

if TYPE_CHECKING:
    from taxotree.tree.TreeNode import TreeNode


@dataclass(frozen=True, eq=False)
class Edge:
    """A visible parent -> child link.

    Attributes:
        source: The parent node.
        target: The child node.
    """

    source: TreeNode
    target: TreeNode

    @property
    def key(self) -> int | None:
        """Render identity of the edge: the child's ``render_id``."""
        return self.target.render_id

    def __eq__(self, other: object) -> bool:
        """Check equality based on endpoint identity."""
        if not isinstance(other, Edge):
            return NotImplemented
        return self.source is other.source and self.target is other.target

    def __hash__(self) -> int:
        return hash((id(self.source), id(self.target)))

    def __str__(self) -> str:
        return f"{self.source.name} --> {self.target.name}"


def visible_edges(root: TreeNode) -> Iterator[Edge]:
    """Yield edges between visible nodes in pre-order of their child."""
    for parent, node, _depth in root.walk_with_parent():
        if parent is not None:
            yield Edge(source=parent, target=node)
