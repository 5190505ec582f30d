"""Expand/collapse state for tree nodes.

A node is EXPANDED when its children are visible and COLLAPSED when
they sit in ``hidden_children``. Transitions move the whole child list
in one assignment, so order is preserved and no node is created or
destroyed. Leaves ignore every transition.
"""

from __future__ import annotations

from enum import Enum

from taxotree.tree.TreeNode import TreeNode


class NodeState(Enum):
    """Visibility state of a node's children."""

    EXPANDED = "expanded"
    COLLAPSED = "collapsed"


def node_state(node: TreeNode) -> NodeState:
    """Return the node's state; leaves report EXPANDED."""
    if node.hidden_children:
        return NodeState.COLLAPSED
    return NodeState.EXPANDED


def collapse(node: TreeNode) -> bool:
    """Move visible children into the hidden buffer.

    Returns:
        True if the node changed state.
    """
    if not node.children:
        return False
    node.hidden_children, node.children = node.children, []
    return True


def expand(node: TreeNode) -> bool:
    """Move hidden children back into view.

    Returns:
        True if the node changed state.
    """
    if not node.hidden_children:
        return False
    node.children, node.hidden_children = node.hidden_children, []
    return True


def toggle(node: TreeNode) -> bool:
    """Flip between EXPANDED and COLLAPSED; a no-op for leaves.

    Returns:
        True if the node changed state.
    """
    if node_state(node) is NodeState.COLLAPSED:
        return expand(node)
    return collapse(node)


def collapse_below(root: TreeNode, depth: int) -> int:
    """Collapse every node at ``depth`` (counted from ``root``).

    Returns:
        Number of nodes collapsed.
    """
    targets = [node for _parent, node, d in root.walk_with_parent() if d == depth]
    return sum(1 for node in targets if collapse(node))
