"""TreeView - Interactive expand/collapse view over one taxonomy tree.

The view ties the pieces together for one rendering session:
layout the visible tree, reconcile against the previous frame, and
hand the plan to a painter. An activation toggles a node and repeats
the cycle with that node as the animation source.
"""

from __future__ import annotations

import logging
from typing import Any

from taxotree.layout.engine import LayoutConfig, tree_layout
from taxotree.render.painter import RenderConfig, TreePainter
from taxotree.render.reconciler import ReconcilePlan, RenderSession, reconcile
from taxotree.render.surface import Surface
from taxotree.tree.interaction import collapse_below, toggle
from taxotree.tree.relations import Edge, visible_edges
from taxotree.tree.TreeNode import TreeNode

logger = logging.getLogger(__name__)


class TreeView:
    """One interactive view of a tree.

    Args:
        root: Displayed root (already pruned, if pruning applies).
        layout: Layout constants.
        render: Visual constants for the painter.
        surface: Optional drawing surface; without one, plans are only
            returned.
        session: Render session; a fresh one is created by default.
    """

    def __init__(
        self,
        root: TreeNode,
        layout: LayoutConfig | None = None,
        render: RenderConfig | None = None,
        surface: Surface | None = None,
        session: RenderSession | None = None,
    ) -> None:
        self.root = root
        self.layout = layout or LayoutConfig()
        self.render_config = render or RenderConfig()
        self.session = session or RenderSession()
        self.painter: TreePainter | None = None
        if surface is not None:
            self.painter = TreePainter(surface, self.render_config, self.layout.orientation)
        self.last_plan: ReconcilePlan | None = None

    @classmethod
    def from_config(
        cls, root: TreeNode, config: dict[str, Any], surface: Surface | None = None
    ) -> TreeView:
        """Create a view using the ``[layout]``, ``[render]`` and ``[view]`` tables."""
        depth = int(config.get("view", {}).get("collapse_depth", -1))
        if depth >= 0:
            count = collapse_below(root, depth)
            logger.debug("Collapsed %d nodes at depth %d", count, depth)
        return cls(
            root,
            layout=LayoutConfig.from_config(config),
            render=RenderConfig.from_config(config),
            surface=surface,
        )

    def frame(self) -> tuple[list[TreeNode], list[Edge]]:
        """Lay out the visible tree and return its nodes and edges."""
        nodes = tree_layout(self.root, self.layout)
        edges = list(visible_edges(self.root))
        return nodes, edges

    def render(self) -> ReconcilePlan:
        """Run a pass with no interaction source (the initial draw)."""
        return self._update(source=None)

    def resolve(self, target: TreeNode | int) -> TreeNode:
        """Turn a render id into the visible node carrying it.

        Raises:
            KeyError: If no node in the current frame has that id.
        """
        if isinstance(target, TreeNode):
            return target
        node = self.session.node(target)
        if node is None:
            raise KeyError(f"No visible node with render id {target}")
        return node

    def activate(self, target: TreeNode | int) -> ReconcilePlan | None:
        """Handle a click on a node: toggle it and re-render.

        Args:
            target: The node, or its render id.

        Returns:
            The plan for the new frame, or None when the node is a leaf.

        Raises:
            KeyError: If a render id does not belong to the current frame.
        """
        node = self.resolve(target)
        if not toggle(node):
            logger.debug("Ignoring activation of leaf %r", node.name)
            return None
        logger.info(
            "%s %r", "Collapsed" if node.is_collapsed else "Expanded", node.name
        )
        return self._update(source=node)

    def close(self) -> None:
        """End the session and clear per-node render state."""
        self.session.close()
        self.last_plan = None

    def _update(self, source: TreeNode | None) -> ReconcilePlan:
        nodes, edges = self.frame()
        plan = reconcile(self.session, nodes, edges, source=source)
        if self.painter is not None:
            self.painter.apply(plan)
        self.last_plan = plan
        return plan
