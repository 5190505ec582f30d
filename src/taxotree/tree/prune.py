"""Subtree Pruner - Focus a taxonomy on one category.

Pruning keeps the root, the chain of ancestors leading to the target
category, and the target's siblings. Every branch off that chain is
dropped. The tree is modified in place.

The search is a preorder walk over the root's descendants. Each child
is compared by name and then searched before its next sibling, so the
first match in insertion order wins even over a shallower match in a
later branch.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Union

from taxotree.tree.errors import CategoryNotFoundError
from taxotree.tree.TreeNode import TreeNode

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Found:
    """The target was located.

    Attributes:
        root: The (pruned) root that was passed in.
        path: Nodes from the root down to the target, inclusive.
    """

    root: TreeNode
    path: list[TreeNode] = field(default_factory=list)

    found = True

    @property
    def target(self) -> TreeNode:
        return self.path[-1]

    @property
    def parent(self) -> TreeNode:
        """The node whose children (the target and its siblings) were kept."""
        return self.path[-2]


@dataclass(frozen=True)
class NotFound:
    """No descendant of the root carries the target name."""

    target_name: str

    found = False


PruneResult = Union[Found, NotFound]


def _find_path(node: TreeNode, target_name: str) -> list[TreeNode] | None:
    """Return the chain from a child of ``node`` down to the first match.

    Each child is compared by name and then searched before its next
    sibling is looked at, so an earlier branch wins over a shallower
    match further along.
    """
    for child in node.children:
        if child.name == target_name:
            return [child]
        chain = _find_path(child, target_name)
        if chain is not None:
            return [child] + chain
    return None


def prune_to_category(root: TreeNode, target_name: str) -> PruneResult:
    """Prune ``root`` in place around the first category named ``target_name``.

    The root itself is never matched and never removed. When nothing
    matches, the root's children are cleared and NotFound is returned.

    Args:
        root: Tree root to prune.
        target_name: Category display name to focus on.

    Returns:
        Found with the root-to-target path, or NotFound.
    """
    chain = _find_path(root, target_name)
    if chain is None:
        logger.info("Category %r not found below %r", target_name, root.name)
        root.children = []
        return NotFound(target_name=target_name)

    path = [root] + chain
    # The target's parent keeps all of its children.
    for ancestor, next_node in zip(path[:-2], path[1:-1]):
        ancestor.children = [next_node]

    logger.debug("Pruned to %s", " / ".join(n.name for n in path))
    return Found(root=root, path=path)


def require_category(root: TreeNode, target_name: str) -> TreeNode:
    """Prune like prune_to_category, raising when the category is missing.

    Returns:
        The pruned root.

    Raises:
        CategoryNotFoundError: If no descendant is named ``target_name``.
    """
    result = prune_to_category(root, target_name)
    if isinstance(result, NotFound):
        raise CategoryNotFoundError(target_name)
    return result.root
