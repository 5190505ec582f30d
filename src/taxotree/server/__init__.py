"""taxotree.server - Flask server for the interactive tree view.

Serves the animated page and a small JSON API over one TreeView.
"""

from taxotree.server.app import create_app

__all__ = ["create_app"]
