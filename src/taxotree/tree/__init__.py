"""Tree module - Taxonomy tree data structures and operations.

Exports:
- TreeNode: Taxonomy node record
- Position: 2D coordinate pair
- Edge: Visible parent -> child link
- TreeBuilder / build_tree: Flat path records -> rooted tree
- prune_to_category / require_category: Focus on one category
- NodeState / toggle / collapse / expand: Expand/collapse transitions
"""

from taxotree.tree.builder import BuildResult, PathRecord, TreeBuilder, build_tree, split_path
from taxotree.tree.errors import (
    CategoryNotFoundError,
    DuplicateTerminalIdWarning,
    MalformedRecordError,
    TaxonomyError,
)
from taxotree.tree.interaction import NodeState, collapse, expand, node_state, toggle
from taxotree.tree.prune import Found, NotFound, PruneResult, prune_to_category, require_category
from taxotree.tree.relations import Edge, visible_edges
from taxotree.tree.TreeNode import ROOT_NAME, Position, TreeNode, new_root

__all__ = [
    "ROOT_NAME",
    "Position",
    "TreeNode",
    "new_root",
    "Edge",
    "visible_edges",
    "BuildResult",
    "PathRecord",
    "TreeBuilder",
    "build_tree",
    "split_path",
    "TaxonomyError",
    "MalformedRecordError",
    "CategoryNotFoundError",
    "DuplicateTerminalIdWarning",
    "Found",
    "NotFound",
    "PruneResult",
    "prune_to_category",
    "require_category",
    "NodeState",
    "node_state",
    "toggle",
    "collapse",
    "expand",
]
