"""Painter - Turn reconcile plans into surface calls.

Element ids are derived from render ids: ``node-<id>`` for a node
group (with ``/circle`` and ``/label`` children) and ``link-<id>`` for
the link ending at that node.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Sequence

from taxotree.layout.engine import HORIZONTAL, LayoutConfig, rank_layout
from taxotree.render.reconciler import EdgeTransition, NodeTransition, ReconcilePlan
from taxotree.render.surface import Surface
from taxotree.render.text import wrap_label
from taxotree.tree.TreeNode import TreeNode

# Effectively zero, but still a valid SVG radius/opacity
VANISH = 1e-6


@dataclass(frozen=True)
class RenderConfig:
    """Visual constants for the painter.

    Attributes:
        transition_ms: Duration of every transition.
        node_radius: Tree node circle radius.
        label_offset: Gap between a node circle and its label.
        category_radius: Circle radius in the category grid.
        wrap_width: Maximum label line width in the category grid.
        collapsed_fill: Fill for nodes with hidden children.
        leaf_fill: Fill for every other node.
        category_fill: Fill for category grid circles.
        stroke: Circle outline colour.
    """

    transition_ms: float = 500
    node_radius: float = 10
    label_offset: float = 13
    category_radius: float = 70
    wrap_width: float = 120
    collapsed_fill: str = "lightsteelblue"
    leaf_fill: str = "#fff"
    category_fill: str = "lightblue"
    stroke: str = "steelblue"

    @classmethod
    def from_config(cls, config: dict[str, Any]) -> RenderConfig:
        """Build from the ``[render]`` table of a loaded config."""
        section = config.get("render", {})
        known = cls.__dataclass_fields__
        return cls(**{k: v for k, v in section.items() if k in known})


def node_element_id(render_id: int) -> str:
    return f"node-{render_id}"


def link_element_id(render_id: int) -> str:
    return f"link-{render_id}"


def node_fill(node: TreeNode, config: RenderConfig) -> str:
    return config.collapsed_fill if node.is_collapsed else config.leaf_fill


def label_placement(
    node: TreeNode, config: RenderConfig, orientation: str = HORIZONTAL
) -> tuple[str, float, float]:
    """Return ``(anchor, dx, dy)`` for a node label.

    Nodes with children put the label before the circle, leaves after
    it. ``dy`` is in em so the text sits on the circle's centre line.
    """
    if orientation != HORIZONTAL:
        return ("middle", 0.0, -1.2 if node.has_children else 1.8)
    if node.has_children:
        return ("end", -config.label_offset, 0.35)
    return ("start", config.label_offset, 0.35)


class TreePainter:
    """Applies reconcile plans to a surface.

    Args:
        surface: Drawing surface.
        config: Visual constants.
        orientation: Layout orientation, used for label placement.
    """

    def __init__(
        self,
        surface: Surface,
        config: RenderConfig | None = None,
        orientation: str = HORIZONTAL,
    ) -> None:
        self.surface = surface
        self.config = config or RenderConfig()
        self.orientation = orientation

    def apply(self, plan: ReconcilePlan) -> None:
        """Issue every draw and transition call for ``plan``."""
        for et in plan.edges.enter:
            self._enter_edge(et)
        for et in plan.edges.update:
            self._move_edge(et)
        for et in plan.edges.exit:
            self._move_edge(et, remove=True)

        for nt in plan.nodes.enter:
            self._enter_node(nt)
        for nt in plan.nodes.update:
            self._update_node(nt)
        for nt in plan.nodes.exit:
            self._exit_node(nt)

    # Nodes

    def _enter_node(self, nt: NodeTransition) -> None:
        cfg = self.config
        gid = node_element_id(nt.render_id)
        anchor, dx, dy = label_placement(nt.node, cfg, self.orientation)
        self.surface.create_group(gid, nt.start, render_id=nt.render_id, name=nt.node.name)
        self.surface.draw_circle(
            f"{gid}/circle", gid, cfg.node_radius, node_fill(nt.node, cfg), cfg.stroke
        )
        self.surface.draw_text(f"{gid}/label", gid, nt.node.name, anchor, dx, dy)
        self.surface.transition(gid, cfg.transition_ms, position=nt.end)

    def _update_node(self, nt: NodeTransition) -> None:
        cfg = self.config
        gid = node_element_id(nt.render_id)
        self.surface.transition(gid, cfg.transition_ms, position=nt.end)
        self.surface.transition(
            f"{gid}/circle",
            cfg.transition_ms,
            radius=cfg.node_radius,
            fill=node_fill(nt.node, cfg),
        )

    def _exit_node(self, nt: NodeTransition) -> None:
        cfg = self.config
        gid = node_element_id(nt.render_id)
        self.surface.transition(f"{gid}/circle", cfg.transition_ms, radius=VANISH)
        self.surface.transition(f"{gid}/label", cfg.transition_ms, opacity=VANISH)
        self.surface.transition(gid, cfg.transition_ms, remove=True, position=nt.end)

    # Links

    def _enter_edge(self, et: EdgeTransition) -> None:
        lid = link_element_id(et.render_id)
        self.surface.draw_path(lid, et.start_source, et.start_target)
        self.surface.transition(
            lid, self.config.transition_ms, source=et.end_source, target=et.end_target
        )

    def _move_edge(self, et: EdgeTransition, remove: bool = False) -> None:
        self.surface.transition(
            link_element_id(et.render_id),
            self.config.transition_ms,
            remove=remove,
            source=et.end_source,
            target=et.end_target,
        )


def paint_category_grid(
    surface: Surface,
    categories: Sequence[TreeNode],
    layout: LayoutConfig | None = None,
    config: RenderConfig | None = None,
) -> list[str]:
    """Draw top-level categories as labelled circles on the rank grid.

    Returns:
        Group element ids in category order.
    """
    layout = layout or LayoutConfig()
    config = config or RenderConfig()
    ids: list[str] = []
    for index, (node, position) in enumerate(zip(categories, rank_layout(len(categories), layout))):
        gid = f"category-{index}"
        surface.create_group(gid, position, name=node.name)
        surface.draw_circle(
            f"{gid}/circle", gid, config.category_radius, config.category_fill, config.stroke
        )
        surface.draw_text(
            f"{gid}/label",
            gid,
            node.name,
            "middle",
            0,
            0.3,
            lines=wrap_label(node.name, config.wrap_width),
        )
        ids.append(gid)
    return ids
