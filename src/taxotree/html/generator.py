"""HTML Generator for taxonomy views.

This module renders taxonomy trees to standalone HTML documents with
Jinja2 templates. Static exports draw through a SceneSurface, so the
exported SVG is exactly what the painter produces once every
transition has finished. The interactive page embeds the first frame
and animates later plans in the browser.
"""

from __future__ import annotations

import json
from typing import Any

from jinja2 import Environment, PackageLoader, select_autoescape

from taxotree import __version__
from taxotree.config import DEFAULT_CONFIG
from taxotree.layout.engine import HORIZONTAL, LayoutConfig, bounds
from taxotree.render.painter import RenderConfig, paint_category_grid
from taxotree.render.paths import diagonal
from taxotree.render.serialize import frame_to_dict
from taxotree.render.session import TreeView
from taxotree.render.surface import CIRCLE, GROUP, PATH, TEXT, SceneSurface
from taxotree.tree.TreeNode import TreeNode


class HTMLGenerator:
    """Generates HTML views of a taxonomy.

    Args:
        config: Loaded taxotree configuration (defaults if omitted).
        title: Page heading.
    """

    def __init__(self, config: dict[str, Any] | None = None, title: str = "Taxonomy") -> None:
        self.config = config if config is not None else DEFAULT_CONFIG
        self.title = title
        self.version = __version__
        self.layout = LayoutConfig.from_config(self.config)
        self.render_config = RenderConfig.from_config(self.config)
        self.env = Environment(
            loader=PackageLoader("taxotree.html", "templates"),
            autoescape=select_autoescape(["html", "xml", "j2"]),
            trim_blocks=True,
            lstrip_blocks=True,
        )
        self.env.filters["num"] = lambda v: f"{float(v):g}"

    def generate(self, root: TreeNode, mode: str = "tree") -> str:
        """Render a static document.

        Args:
            root: Tree root (already pruned if focusing on a category).
            mode: "tree" for the node-link diagram, "categories" for the
                grid of top-level categories.

        Returns:
            Complete HTML document as string.
        """
        if mode == "tree":
            return self.generate_tree(root)
        if mode == "categories":
            return self.generate_categories(root)
        raise ValueError(f"Unknown view mode: {mode}")

    def generate_tree(self, root: TreeNode) -> str:
        """Render the fully expanded-as-configured tree as SVG."""
        scene = SceneSurface()
        view = TreeView.from_config(root, self.config, surface=scene)
        view.render()
        scene.finish()
        context = self._scene_context(scene)
        try:
            template = self.env.get_template("tree_view.html.j2")
            return template.render(**context)
        finally:
            view.close()

    def generate_categories(self, root: TreeNode) -> str:
        """Render the root's children on the rank grid."""
        scene = SceneSurface()
        paint_category_grid(scene, root.children, self.layout, self.render_config)
        context = self._scene_context(scene, pad=self.render_config.category_radius)
        template = self.env.get_template("categories.html.j2")
        return template.render(**context)

    def generate_interactive(self, view: TreeView, api_base: str = "") -> str:
        """Render the live page served by the Flask app.

        The view must already have rendered its first frame.
        """
        template = self.env.get_template("interactive.html.j2")
        return template.render(
            title=self.title,
            version=self.version,
            margin=self._margin(),
            orientation=self.layout.orientation,
            render=self.render_config,
            frame_json=json.dumps(frame_to_dict(view)).replace("</", "<\\/"),
            api_base=api_base,
        )

    def _margin(self) -> dict[str, float]:
        return {
            "top": self.layout.margin_top,
            "right": self.layout.margin_right,
            "bottom": self.layout.margin_bottom,
            "left": self.layout.margin_left,
        }

    def _scene_context(self, scene: SceneSurface, pad: float = 0.0) -> dict[str, Any]:
        """Flatten a finished scene into template-friendly dicts."""
        orientation = self.layout.orientation
        links = [
            {
                "id": element.element_id,
                "d": diagonal(element.attrs["source"], element.attrs["target"], orientation),
            }
            for element in scene.elements(PATH)
        ]

        groups = []
        for element in scene.elements(GROUP):
            group: dict[str, Any] = {
                "id": element.element_id,
                "name": element.attrs.get("name", ""),
                "position": element.attrs["position"],
                "circle": None,
                "label": None,
            }
            for child in scene.children_of(element.element_id):
                if child.kind == CIRCLE:
                    group["circle"] = child.attrs
                elif child.kind == TEXT:
                    group["label"] = child.attrs
            groups.append(group)

        _, _, max_x, max_y = bounds([g["position"] for g in groups])
        margin = self._margin()
        width = max_x + pad + margin["left"] + margin["right"]
        height = max_y + pad + margin["top"] + margin["bottom"]
        if orientation != HORIZONTAL:
            height += self.render_config.node_radius * 3

        return {
            "title": self.title,
            "version": self.version,
            "margin": margin,
            "width": width,
            "height": height,
            "links": links,
            "groups": groups,
        }
