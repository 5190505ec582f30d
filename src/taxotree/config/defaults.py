"""Default configuration values for taxotree."""

from __future__ import annotations

from typing import Any

CONFIG_FILENAME = ".taxotree.toml"

ENV_PREFIX = "TAXOTREE_"

DEFAULT_CONFIG: dict[str, Any] = {
    "data": {
        # Taxonomy file; relative paths resolve against the config file
        "source": "",
        # "auto", "table" or "json"
        "format": "auto",
    },
    "view": {
        # "tree" or "categories"
        "mode": "tree",
        # Empty means show the whole taxonomy
        "target_category": "",
        # Collapse nodes at this depth on first render; -1 keeps all expanded
        "collapse_depth": -1,
    },
    "layout": {
        # "horizontal" puts depth on x, "vertical" puts depth on y
        "orientation": "horizontal",
        "horizontal_spacing": 250,
        "vertical_spacing": 40,
        "margin_top": 20,
        "margin_right": 90,
        "margin_bottom": 30,
        "margin_left": 90,
        # Rank grid for the category view
        "columns": 6,
        "cell_size": 160,
        "cell_offset": 100,
    },
    "render": {
        "transition_ms": 500,
        "node_radius": 10,
        "label_offset": 13,
        "category_radius": 70,
        "wrap_width": 120,
        "collapsed_fill": "lightsteelblue",
        "leaf_fill": "#fff",
        "category_fill": "lightblue",
        "stroke": "steelblue",
    },
    "server": {
        "host": "127.0.0.1",
        "port": 5000,
    },
}
