"""
taxotree.commands.show - Print a taxonomy as an indented tree or JSON.
"""

from __future__ import annotations

import argparse
import json

from taxotree.commands.common import load_root, load_settings
from taxotree.tree.serialize import format_tree, tree_to_dict


def run(args: argparse.Namespace) -> int:
    """Run the show command."""
    config = load_settings(args)
    root = load_root(args, config)

    if args.json:
        print(json.dumps(tree_to_dict(root), indent=2))
        return 0

    for line in format_tree(root, include_ids=not args.no_ids):
        print(line)
    if not args.quiet:
        print()
        print(f"{root.node_count() - 1} categories")
    return 0
