"""TreeNode - Node record for the taxonomy tree.

This module provides the core data structures:
- Position: Immutable 2D coordinate pair
- TreeNode: Taxonomy node with visible/hidden child buffers and render state
"""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field
from typing import Callable, Iterator

ROOT_NAME = "Root"


@dataclass(frozen=True)
class Position:
    """A point on the drawing surface."""

    x: float
    y: float

    def lerp(self, other: Position, t: float) -> Position:
        """Linearly interpolate toward ``other``; ``t`` is clamped to [0, 1]."""
        t = min(1.0, max(0.0, t))
        return Position(self.x + (other.x - self.x) * t, self.y + (other.y - self.y) * t)

    def as_tuple(self) -> tuple[float, float]:
        return (self.x, self.y)

    def __str__(self) -> str:
        return f"({self.x:g}, {self.y:g})"


@dataclass(eq=False)
class TreeNode:
    """A node in the taxonomy tree.

    Every field exists from creation. Layout only writes the position
    fields, toggling only moves nodes between ``children`` and
    ``hidden_children``, and a render session writes ``render_id`` once.

    Attributes:
        name: Display label, unique among siblings.
        id: External identifier, set when the node ends an input path.
        children: Visible children in first-seen order.
        hidden_children: Children moved aside by a collapse.
        position: Coordinates from the latest layout pass.
        previous_position: Coordinates before the latest pass.
        render_id: Stable correlation key assigned by a render session.
    """

    name: str
    id: str | None = None
    children: list[TreeNode] = field(default_factory=list)
    hidden_children: list[TreeNode] = field(default_factory=list, repr=False)
    position: Position | None = field(default=None, repr=False)
    previous_position: Position | None = field(default=None, repr=False)
    render_id: int | None = field(default=None, repr=False)

    # Iterator access
    def iter_children(self) -> Iterator[TreeNode]:
        """Iterate over visible child nodes."""
        yield from self.children

    def child_count(self) -> int:
        """Return number of visible children."""
        return len(self.children)

    def find_child(self, name: str) -> TreeNode | None:
        """Return the visible child called ``name``, if any."""
        for child in self.children:
            if child.name == name:
                return child
        return None

    def add_child(self, child: TreeNode) -> TreeNode:
        """Append ``child`` after the existing children and return it."""
        self.children.append(child)
        return child

    @property
    def is_leaf(self) -> bool:
        """True if this node has neither visible nor hidden children."""
        return not self.children and not self.hidden_children

    @property
    def is_collapsed(self) -> bool:
        """True if this node's children are parked in the hidden buffer."""
        return bool(self.hidden_children)

    @property
    def has_children(self) -> bool:
        """True if this node has visible or hidden children."""
        return not self.is_leaf

    def walk(self, order: str = "pre", include_hidden: bool = False) -> Iterator[TreeNode]:
        """Iterate over this node and descendants.

        Args:
            order: Traversal order:
                - "pre": Parent first (depth-first, pre-order)
                - "post": Children first (depth-first, post-order)
                - "level": Breadth-first (level order)
            include_hidden: Also descend into collapsed children.

        Yields:
            TreeNode instances in the specified order.
        """
        if order == "pre":
            yield from self._walk_preorder(include_hidden)
        elif order == "post":
            yield from self._walk_postorder(include_hidden)
        elif order == "level":
            yield from self._walk_level(include_hidden)
        else:
            raise ValueError(f"Unknown traversal order: {order}")

    def _kids(self, include_hidden: bool) -> list[TreeNode]:
        if include_hidden:
            return self.children + self.hidden_children
        return self.children

    def _walk_preorder(self, include_hidden: bool) -> Iterator[TreeNode]:
        yield self
        for child in self._kids(include_hidden):
            yield from child._walk_preorder(include_hidden)

    def _walk_postorder(self, include_hidden: bool) -> Iterator[TreeNode]:
        for child in self._kids(include_hidden):
            yield from child._walk_postorder(include_hidden)
        yield self

    def _walk_level(self, include_hidden: bool) -> Iterator[TreeNode]:
        queue: deque[TreeNode] = deque([self])
        while queue:
            node = queue.popleft()
            yield node
            queue.extend(node._kids(include_hidden))

    def walk_with_parent(self) -> Iterator[tuple[TreeNode | None, TreeNode, int]]:
        """Pre-order walk over visible nodes yielding ``(parent, node, depth)``.

        Depth is counted from this node (depth 0).
        """
        stack: list[tuple[TreeNode | None, TreeNode, int]] = [(None, self, 0)]
        while stack:
            parent, node, depth = stack.pop()
            yield parent, node, depth
            for child in reversed(node.children):
                stack.append((node, child, depth + 1))

    def find(
        self, predicate: Callable[[TreeNode], bool], include_hidden: bool = True
    ) -> Iterator[TreeNode]:
        """Find all nodes in this subtree matching predicate.

        Args:
            predicate: Function that returns True for matching nodes.
            include_hidden: Also search collapsed subtrees.

        Yields:
            Matching TreeNode instances in pre-order.
        """
        for node in self.walk(include_hidden=include_hidden):
            if predicate(node):
                yield node

    def find_by_name(self, name: str) -> TreeNode | None:
        """Return the first node in pre-order whose name is ``name``."""
        return next(self.find(lambda n: n.name == name), None)

    def node_count(self, include_hidden: bool = True) -> int:
        """Count nodes in this subtree, including this one."""
        return sum(1 for _ in self.walk(include_hidden=include_hidden))


def new_root() -> TreeNode:
    """Create the synthetic root every built taxonomy hangs from."""
    return TreeNode(name=ROOT_NAME)
