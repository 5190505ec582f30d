"""Render module - Reconciliation, painting and drawing surfaces.

Exports:
- RenderSession / reconcile / partition: Frame-to-frame identity mapping
- ReconcilePlan / NodeTransition / EdgeTransition / Phase: Plan records
- TreePainter / RenderConfig: Plan -> surface calls
- Surface / SceneSurface: Drawing surface protocol and in-memory scene
- TreeView: Interactive expand/collapse controller
"""

from taxotree.render.painter import RenderConfig, TreePainter, paint_category_grid
from taxotree.render.reconciler import (
    EdgeTransition,
    NodeTransition,
    Partition,
    Phase,
    ReconcilePlan,
    RenderSession,
    partition,
    reconcile,
)
from taxotree.render.session import TreeView
from taxotree.render.surface import SceneElement, SceneSurface, Surface
from taxotree.render.text import wrap_label

__all__ = [
    "EdgeTransition",
    "NodeTransition",
    "Partition",
    "Phase",
    "ReconcilePlan",
    "RenderSession",
    "partition",
    "reconcile",
    "RenderConfig",
    "TreePainter",
    "paint_category_grid",
    "SceneElement",
    "SceneSurface",
    "Surface",
    "TreeView",
    "wrap_label",
]
