"""Tree Serialization - Nested dict/JSON form of a taxonomy tree.

The nested form is the ``{name, children: [...]}`` document the
taxonomy JSON files use, with an optional ``id`` per node.
"""

from __future__ import annotations

import logging
from typing import Any

from taxotree.tree.TreeNode import ROOT_NAME, TreeNode

logger = logging.getLogger(__name__)


def tree_to_dict(node: TreeNode, include_hidden: bool = True) -> dict[str, Any]:
    """Serialize a node and its descendants to a JSON-compatible dict.

    Args:
        node: Subtree root.
        include_hidden: Emit collapsed children too, flagged with
            ``"collapsed": true`` on their parent.

    Returns:
        Nested dict with ``name``, optional ``id`` and ``children``.
    """
    result: dict[str, Any] = {"name": node.name}
    if node.id is not None:
        result["id"] = node.id

    kids = list(node.children)
    if include_hidden and node.hidden_children:
        result["collapsed"] = True
        kids.extend(node.hidden_children)
    if kids:
        result["children"] = [tree_to_dict(child, include_hidden) for child in kids]
    return result


def tree_from_dict(data: dict[str, Any], is_root: bool = True) -> TreeNode:
    """Build a tree from a nested ``{name, children}`` dict.

    Children that are not objects are skipped. A missing root name
    falls back to ``Root``; ``collapsed`` flags are ignored so every
    node starts expanded.

    Args:
        data: Nested taxonomy dict.
        is_root: Whether ``data`` is the top-level document.

    Returns:
        The root TreeNode of the document.
    """
    name = data.get("name")
    if name is None:
        name = ROOT_NAME if is_root else ""
    node = TreeNode(name=str(name))
    if data.get("id") is not None:
        node.id = str(data["id"])

    for child in data.get("children") or []:
        if not isinstance(child, dict):
            logger.warning("Skipping non-object child under %r: %r", node.name, child)
            continue
        node.children.append(tree_from_dict(child, is_root=False))
    return node


def format_tree(node: TreeNode, include_ids: bool = True) -> list[str]:
    """Render a subtree as indented text lines, one per visible node."""
    lines: list[str] = []
    for _parent, current, depth in node.walk_with_parent():
        marker = "+" if current.is_collapsed else ("-" if current.children else "·")
        label = current.name
        if include_ids and current.id is not None:
            label = f"{label} [{current.id}]"
        lines.append(f"{'  ' * depth}{marker} {label}")
    return lines
