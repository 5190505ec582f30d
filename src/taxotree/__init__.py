"""
taxotree - Interactive taxonomy tree diagrams

taxotree turns a flat list of slash-delimited category paths into a
rooted tree, optionally focuses it on one category, lays it out as a
tidy tree, and animates expand/collapse interaction by reconciling
each new frame against the last one.
"""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("taxotree")
except PackageNotFoundError:
    __version__ = "0.0.0+unknown"  # Not installed
__license__ = "MIT"

from taxotree.tree import (
    CategoryNotFoundError,
    Position,
    TreeBuilder,
    TreeNode,
    build_tree,
    prune_to_category,
    require_category,
)

__all__ = [
    "__version__",
    "CategoryNotFoundError",
    "Position",
    "TreeBuilder",
    "TreeNode",
    "build_tree",
    "prune_to_category",
    "require_category",
]
