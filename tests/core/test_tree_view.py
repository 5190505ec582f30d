"""Tests for session.py - The TreeView controller."""

import pytest

from taxotree.config import DEFAULT_CONFIG, merge_configs
from taxotree.render.session import TreeView
from taxotree.render.surface import SceneSurface


class TestTreeView:
    """Tests for rendering and activation without a surface."""

    def test_render_returns_first_plan(self, film_tree):
        view = TreeView(film_tree)
        plan = view.render()

        assert plan.pass_number == 1
        assert len(plan.nodes.enter) == 5
        assert view.last_plan is plan
        assert view.painter is None

    def test_frame_lists_visible_nodes_and_edges(self, film_tree):
        nodes, edges = TreeView(film_tree).frame()

        assert len(nodes) == 5
        assert len(edges) == 4

    def test_activate_by_render_id(self, film_tree):
        view = TreeView(film_tree)
        view.render()

        plan = view.activate(3)

        assert plan.source is film_tree.find_by_name("Comedy Films")
        assert plan.summary()["nodes_exit"] == 1
        assert view.session.pass_count == 2

    def test_activate_by_node(self, film_tree):
        view = TreeView(film_tree)
        view.render()
        film = film_tree.children[0]

        plan = view.activate(film)

        assert len(plan.nodes.exit) == 3
        assert film.is_collapsed

    def test_activate_leaf_does_nothing(self, film_tree):
        view = TreeView(film_tree)
        view.render()

        assert view.activate(5) is None
        assert view.session.pass_count == 1

    def test_activate_unknown_id(self, film_tree):
        view = TreeView(film_tree)
        view.render()

        with pytest.raises(KeyError, match="No visible node with render id 99"):
            view.activate(99)

    def test_hidden_node_cannot_be_activated(self, film_tree):
        view = TreeView(film_tree)
        view.render()
        view.activate(3)

        with pytest.raises(KeyError):
            view.activate(4)

    def test_close_resets_nodes(self, film_tree):
        view = TreeView(film_tree)
        view.render()
        view.close()

        assert view.last_plan is None
        assert all(n.render_id is None for n in film_tree.walk())


class TestFromConfig:
    """Tests for TreeView.from_config()."""

    def test_applies_collapse_depth(self, film_tree):
        config = merge_configs(DEFAULT_CONFIG, {"view": {"collapse_depth": 1}})
        view = TreeView.from_config(film_tree, config)

        nodes, _edges = view.frame()
        assert [n.name for n in nodes] == ["Root", "Film"]

    def test_uses_layout_and_render_tables(self, film_tree):
        config = merge_configs(
            DEFAULT_CONFIG,
            {"layout": {"orientation": "vertical"}, "render": {"transition_ms": 0}},
        )
        scene = SceneSurface()
        view = TreeView.from_config(film_tree, config, surface=scene)
        view.render()

        assert view.layout.orientation == "vertical"
        assert not scene.is_animating
