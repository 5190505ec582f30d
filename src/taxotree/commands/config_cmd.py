"""
taxotree.commands.config_cmd - Inspect configuration.
"""

from __future__ import annotations

import argparse
import json
from pathlib import Path

import tomlkit

from taxotree.commands.common import load_settings
from taxotree.config import find_config_file


def run(args: argparse.Namespace) -> int:
    """Run the config command."""
    action = getattr(args, "config_action", None)
    if action == "path":
        return run_path(args)
    if action == "show":
        return run_show(args)
    print("Usage: taxotree config {show|path}")
    return 1


def run_path(args: argparse.Namespace) -> int:
    """Print the config file in effect."""
    path = args.config or find_config_file(Path.cwd())
    if path is None:
        print("No .taxotree.toml found (using defaults)")
        return 1
    print(path)
    return 0


def run_show(args: argparse.Namespace) -> int:
    """Print the merged configuration."""
    config = load_settings(args)
    if args.json:
        print(json.dumps(config, indent=2))
    else:
        print(tomlkit.dumps(config), end="")
    return 0
