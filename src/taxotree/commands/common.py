"""
taxotree.commands.common - Shared loading steps for CLI commands.

Every command resolves configuration the same way, loads the taxonomy
named on the command line (or in ``[data] source``), and prunes it when
a target category is configured.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Any

from taxotree.config import find_config_file, load_config
from taxotree.tree.loader import load_taxonomy
from taxotree.tree.prune import require_category
from taxotree.tree.TreeNode import TreeNode

logger = logging.getLogger(__name__)


def load_settings(args: argparse.Namespace) -> dict[str, Any]:
    """Load config from ``--config`` or the nearest ``.taxotree.toml``."""
    config_path = getattr(args, "config", None) or find_config_file(Path.cwd())
    if config_path is not None and not Path(config_path).exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")
    return load_config(Path(config_path) if config_path else None)


def resolve_source(args: argparse.Namespace, config: dict[str, Any]) -> Path:
    """Pick the taxonomy file from the command line or config.

    Raises:
        ValueError: If neither names a file.
    """
    source = getattr(args, "source", None) or config.get("data", {}).get("source")
    if not source:
        raise ValueError("No taxonomy file given (pass SOURCE or set [data] source)")
    return Path(source)


def target_category(args: argparse.Namespace, config: dict[str, Any]) -> str:
    """Category name from ``--category`` or ``[view] target_category``.

    TOML lets ``target_category = 2001`` through as an integer, so the
    value is always turned back into a name.
    """
    value = getattr(args, "category", None) or config.get("view", {}).get("target_category")
    if value is None or value == "":
        return ""
    return str(value)


def load_root(args: argparse.Namespace, config: dict[str, Any]) -> TreeNode:
    """Load the taxonomy and apply the configured category focus.

    Raises:
        CategoryNotFoundError: If the target category does not exist.
    """
    source = resolve_source(args, config)
    result = load_taxonomy(source, config.get("data", {}).get("format", "auto"))
    if result.skipped and not getattr(args, "quiet", False):
        print(
            f"Skipped {len(result.skipped)} malformed record(s) in {source}",
            file=sys.stderr,
        )

    category = target_category(args, config)
    if category:
        require_category(result.root, category)
    return result.root
