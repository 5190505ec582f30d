"""
taxotree.commands.render - Export a static HTML/SVG view.
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from taxotree.commands.common import load_root, load_settings


def run(args: argparse.Namespace) -> int:
    """Run the render command."""
    from taxotree.html.generator import HTMLGenerator

    config = load_settings(args)
    root = load_root(args, config)
    mode = args.mode or config.get("view", {}).get("mode", "tree")

    generator = HTMLGenerator(config, title=args.title)
    html = generator.generate(root, mode=mode)

    if args.output is None:
        sys.stdout.write(html)
        return 0

    output = Path(args.output)
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(html, encoding="utf-8")
    if not args.quiet:
        print(f"Wrote {mode} view to {output}")
    return 0
