"""Plan Serialization - JSON-compatible views of frames and plans.

These dicts feed the interactive page, which animates them in the
browser exactly as the painter does on a SceneSurface.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from taxotree.render.painter import RenderConfig, label_placement, node_fill

if TYPE_CHECKING:
    from taxotree.render.reconciler import EdgeTransition, NodeTransition, ReconcilePlan
    from taxotree.render.session import TreeView
    from taxotree.tree.TreeNode import Position, TreeNode


def _point(position: Position | None) -> list[float] | None:
    if position is None:
        return None
    return [position.x, position.y]


def serialize_view_node(
    node: TreeNode, config: RenderConfig, orientation: str
) -> dict[str, Any]:
    """Serialize a visible node with everything needed to draw it."""
    anchor, dx, dy = label_placement(node, config, orientation)
    return {
        "render_id": node.render_id,
        "name": node.name,
        "id": node.id,
        "position": _point(node.position),
        "collapsed": node.is_collapsed,
        "leaf": node.is_leaf,
        "fill": node_fill(node, config),
        "anchor": anchor,
        "dx": dx,
        "dy": dy,
    }


def _node_transition(
    nt: NodeTransition, config: RenderConfig, orientation: str
) -> dict[str, Any]:
    result = serialize_view_node(nt.node, config, orientation)
    result["start"] = _point(nt.start)
    result["end"] = _point(nt.end)
    return result


def _edge_transition(et: EdgeTransition) -> dict[str, Any]:
    return {
        "render_id": et.render_id,
        "start": [_point(et.start_source), _point(et.start_target)],
        "end": [_point(et.end_source), _point(et.end_target)],
    }


def plan_to_dict(plan: ReconcilePlan, config: RenderConfig, orientation: str) -> dict[str, Any]:
    """Serialize a reconcile plan.

    Returns:
        Dict with ``nodes`` and ``edges`` split into enter/update/exit,
        the transition ``duration`` and pass metadata.
    """
    return {
        "pass": plan.pass_number,
        "duration": config.transition_ms,
        "source": plan.source.render_id if plan.source is not None else None,
        "nodes": {
            "enter": [_node_transition(nt, config, orientation) for nt in plan.nodes.enter],
            "update": [_node_transition(nt, config, orientation) for nt in plan.nodes.update],
            "exit": [_node_transition(nt, config, orientation) for nt in plan.nodes.exit],
        },
        "edges": {
            "enter": [_edge_transition(et) for et in plan.edges.enter],
            "update": [_edge_transition(et) for et in plan.edges.update],
            "exit": [_edge_transition(et) for et in plan.edges.exit],
        },
        "summary": plan.summary(),
    }


def frame_to_dict(view: TreeView) -> dict[str, Any]:
    """Serialize the view's current frame (the last reconciled one)."""
    config = view.render_config
    orientation = view.layout.orientation
    nodes = list(view.session.nodes.values())
    edges = list(view.session.edges.values())
    return {
        "pass": view.session.pass_count,
        "nodes": [serialize_view_node(n, config, orientation) for n in nodes],
        "edges": [
            {
                "render_id": e.key,
                "source": _point(e.source.position),
                "target": _point(e.target.position),
            }
            for e in edges
        ],
    }
