"""Tests for render/serialize.py - JSON views of frames and plans."""

import json

from taxotree.render.painter import RenderConfig
from taxotree.render.serialize import frame_to_dict, plan_to_dict, serialize_view_node
from taxotree.render.session import TreeView


class TestSerializeViewNode:
    """Tests for serialize_view_node()."""

    def test_fields(self, film_tree):
        view = TreeView(film_tree)
        view.render()
        comedy = film_tree.find_by_name("Comedy Films")

        data = serialize_view_node(comedy, RenderConfig(), "horizontal")

        assert data == {
            "render_id": 3,
            "name": "Comedy Films",
            "id": "1",
            "position": [500, 0],
            "collapsed": False,
            "leaf": False,
            "fill": "#fff",
            "anchor": "end",
            "dx": -13,
            "dy": 0.35,
        }


class TestPlanToDict:
    """Tests for plan_to_dict()."""

    def test_first_plan(self, film_tree):
        view = TreeView(film_tree)
        plan = view.render()

        data = plan_to_dict(plan, view.render_config, "horizontal")

        assert data["pass"] == 1
        assert data["duration"] == 500
        assert data["source"] is None
        assert len(data["nodes"]["enter"]) == 5
        assert data["nodes"]["enter"][0]["start"] == [0, 20]
        assert len(data["edges"]["enter"]) == 4
        assert data["summary"]["edges_enter"] == 4
        json.dumps(data)

    def test_collapse_plan(self, film_tree):
        view = TreeView(film_tree)
        view.render()
        plan = view.activate(3)

        data = plan_to_dict(plan, view.render_config, "horizontal")

        assert data["source"] == 3
        exiting = data["nodes"]["exit"][0]
        assert exiting["render_id"] == 4
        assert exiting["start"] == [750, 0]
        assert exiting["end"] == [500, 0]
        assert data["edges"]["exit"] == [
            {"render_id": 4, "start": [[500, 0], [750, 0]], "end": [[500, 0], [500, 0]]}
        ]


class TestFrameToDict:
    """Tests for frame_to_dict()."""

    def test_current_frame(self, film_tree):
        view = TreeView(film_tree)
        view.render()

        data = frame_to_dict(view)

        assert data["pass"] == 1
        assert [n["render_id"] for n in data["nodes"]] == [1, 2, 3, 4, 5]
        assert data["edges"][0] == {"render_id": 2, "source": [0, 20], "target": [250, 20]}
