"""
taxotree.commands.serve - Run the interactive tree server.
"""

from __future__ import annotations

import argparse

from taxotree.commands.common import load_root, load_settings


def run(args: argparse.Namespace) -> int:
    """Run the serve command."""
    from taxotree.render.session import TreeView
    from taxotree.server.app import create_app

    config = load_settings(args)
    root = load_root(args, config)
    server_config = config.get("server", {})
    host = args.host or server_config.get("host", "127.0.0.1")
    port = args.port or int(server_config.get("port", 5000))

    view = TreeView.from_config(root, config)
    app = create_app(view, config, title=args.title)

    if not args.quiet:
        print(f"Serving {root.node_count() - 1} categories on http://{host}:{port}/")
    # One view is shared by every request
    app.run(host=host, port=port, threaded=False, debug=False)
    return 0
