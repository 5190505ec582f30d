"""Tests for builder.py - Flat path records to tree."""

import pytest

from taxotree.tree.builder import PathRecord, TreeBuilder, build_tree, split_path
from taxotree.tree.errors import DuplicateTerminalIdWarning, MalformedRecordError


class TestSplitPath:
    """Tests for split_path()."""

    @pytest.mark.parametrize(
        "path,expected",
        [
            ("/Film/Drama/", ["Film", "Drama"]),
            ("Film/Drama", ["Film", "Drama"]),
            ("//Film//Drama//", ["Film", "Drama"]),
            ("/ Film / Comedy Films /", ["Film", "Comedy Films"]),
            ("/Film/   /Drama/", ["Film", "Drama"]),
            ("/ / /", []),
            ("///", []),
            ("", []),
        ],
    )
    def test_split(self, path, expected):
        assert split_path(path) == expected

    def test_record_segments(self):
        assert PathRecord(id="1", path="/A/B/").segments == ["A", "B"]
        assert PathRecord(id="1", path=None).segments == []


class TestBuildTree:
    """Tests for building the film example."""

    def test_film_example_shape(self, film_tree):
        assert film_tree.name == "Root"
        assert [c.name for c in film_tree.children] == ["Film"]

        film = film_tree.children[0]
        assert film.id is None
        assert [c.name for c in film.children] == ["Comedy Films", "Drama"]

        comedy, drama = film.children
        assert comedy.id == "1"
        assert drama.id == "2"
        assert [c.name for c in comedy.children] == ["Slapstick"]
        assert comedy.children[0].id == "3"
        assert drama.is_leaf

    def test_empty_input_gives_bare_root(self):
        root = build_tree([])
        assert root.name == "Root"
        assert root.children == []

    def test_sibling_order_is_first_seen(self):
        root = build_tree([("1", "/B/"), ("2", "/A/"), ("3", "/C/"), ("4", "/A/X/")])
        assert [c.name for c in root.children] == ["B", "A", "C"]

    def test_shared_prefixes_are_deduplicated(self):
        root = build_tree([("1", "/A/B/C/"), ("2", "/A/B/D/"), ("3", "/A/E/")])

        assert root.child_count() == 1
        a = root.children[0]
        assert [c.name for c in a.children] == ["B", "E"]
        assert [c.name for c in a.children[0].children] == ["C", "D"]
        assert root.node_count() == 6

    def test_intermediate_nodes_get_id_when_listed(self):
        """A path listed after its descendant still sets the id."""
        root = build_tree([("3", "/Film/Comedy Films/Slapstick/"), ("1", "/Film/Comedy Films/")])

        comedy = root.find_by_name("Comedy Films")
        assert comedy.id == "1"
        assert comedy.children[0].id == "3"

    def test_accepts_path_records(self):
        root = build_tree([PathRecord(id="9", path="/X/", line=4)])
        assert root.children[0].id == "9"

    def test_ids_are_stringified(self):
        root = build_tree([(42, "/X/")])
        assert root.children[0].id == "42"


class TestMalformedRecords:
    """Malformed records are skipped and reported, never raised."""

    def test_skips_and_reports(self):
        builder = TreeBuilder()
        builder.add_records(
            [
                (None, "/A/"),
                ("", "/A/"),
                ("5", None),
                ("6", "///"),
                ("7", "/Good/"),
            ]
        )
        result = builder.build()

        assert result.record_count == 1
        assert [c.name for c in result.root.children] == ["Good"]
        assert len(result.skipped) == 4
        assert all(isinstance(e, MalformedRecordError) for e in result.skipped)
        messages = [str(e) for e in result.skipped]
        assert messages[0] == "record has no id"
        assert messages[2] == "record has no path"
        assert "has no segments" in messages[3]

    def test_line_number_in_message(self):
        builder = TreeBuilder()

        assert builder.add("1", None, line=7) is False
        error = builder.build().skipped[0]
        assert error.line == 7
        assert str(error) == "line 7: record has no path"

    def test_non_pair_record(self):
        builder = TreeBuilder()

        assert builder.add_record(5) is False
        assert "not an (id, path) pair" in str(builder.build().skipped[0])

    def test_skip_is_logged(self, caplog):
        with caplog.at_level("WARNING", logger="taxotree"):
            TreeBuilder().add(None, "/A/")
        assert "Skipping malformed record" in caplog.text


class TestDuplicateTerminalIds:
    """Two records ending at the same node: last id wins, with a warning."""

    def test_last_id_wins(self):
        builder = TreeBuilder()
        builder.add("1", "/Film/Drama/")
        builder.add("2", "/Film/Drama")
        result = builder.build()

        drama = result.root.find_by_name("Drama")
        assert drama.id == "2"
        assert result.record_count == 2
        assert result.root.node_count() == 3

        assert len(result.duplicates) == 1
        warning = result.duplicates[0]
        assert isinstance(warning, DuplicateTerminalIdWarning)
        assert warning.path == "/Film/Drama"
        assert warning.previous_id == "1"
        assert warning.new_id == "2"

    def test_duplicate_is_logged(self, caplog):
        with caplog.at_level("WARNING", logger="taxotree"):
            build_tree([("1", "/A/"), ("2", "/A/")])
        assert "Duplicate terminal path" in caplog.text
