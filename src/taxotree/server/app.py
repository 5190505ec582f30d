"""taxotree.server.app - Flask app factory and JSON API routes.

The server owns one TreeView. The browser page draws the first frame,
posts clicks to ``/api/toggle/<render_id>`` and animates the returned
plan. All tree logic stays in the view; routes only translate between
HTTP and view calls.

State pattern:
    _state = {"view": view, "config": config, "start_time": time.time()}
"""

from __future__ import annotations

import logging
import time
from typing import Any

from flask import Flask, jsonify
from flask_cors import CORS

from taxotree.html.generator import HTMLGenerator
from taxotree.render.serialize import frame_to_dict, plan_to_dict
from taxotree.render.session import TreeView

logger = logging.getLogger(__name__)


def create_app(view: TreeView, config: dict[str, Any], title: str = "Taxonomy") -> Flask:
    """Create the Flask application.

    Args:
        view: View to serve; its first frame is rendered here if needed.
        config: taxotree configuration dict.
        title: Page heading.

    Returns:
        Configured Flask application.
    """
    app = Flask(__name__)
    CORS(app)

    if view.session.pass_count == 0:
        view.render()

    _state: dict[str, Any] = {
        "view": view,
        "config": config,
        "start_time": time.time(),
    }
    generator = HTMLGenerator(config, title=title)

    @app.after_request
    def _no_cache(response):
        response.headers["Cache-Control"] = "no-store, no-cache, must-revalidate, max-age=0"
        return response

    @app.route("/")
    def index():
        """Serve the interactive page with the current frame embedded."""
        return generator.generate_interactive(_state["view"])

    @app.route("/api/frame")
    def api_frame():
        """GET /api/frame - Nodes and edges of the current frame."""
        return jsonify(frame_to_dict(_state["view"]))

    @app.route("/api/status")
    def api_status():
        """GET /api/status - Counts and session info."""
        current: TreeView = _state["view"]
        return jsonify(
            {
                "root": current.root.name,
                "visible_nodes": len(current.session.nodes),
                "total_nodes": current.root.node_count(include_hidden=True),
                "passes": current.session.pass_count,
                "last_render_id": current.session.last_render_id,
                "uptime": time.time() - _state["start_time"],
            }
        )

    @app.route("/api/toggle/<int:render_id>", methods=["POST"])
    def api_toggle(render_id: int):
        """POST /api/toggle/<render_id> - Expand or collapse a node."""
        current: TreeView = _state["view"]
        try:
            plan = current.activate(render_id)
        except KeyError as e:
            return jsonify({"error": str(e.args[0])}), 404

        if plan is None:
            return jsonify({"changed": False, "render_id": render_id})
        return jsonify(
            {
                "changed": True,
                "render_id": render_id,
                "plan": plan_to_dict(plan, current.render_config, current.layout.orientation),
            }
        )

    return app
