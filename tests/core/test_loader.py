"""Tests for loader.py - Table and JSON taxonomy files."""

import json

import pytest

from taxotree.tree.loader import build_from_table, load_taxonomy, parse_taxonomy_table


class TestParseTaxonomyTable:
    """Tests for parse_taxonomy_table()."""

    def test_film_table(self, film_table):
        records = parse_taxonomy_table(film_table)

        assert [(r.id, r.path) for r in records] == [
            ("1", "/Film/Comedy Films/"),
            ("3", "/Film/Comedy Films/Slapstick/"),
            ("2", "/Film/Drama/"),
        ]
        assert [r.line for r in records] == [3, 4, 5]

    def test_leading_and_interior_blank_lines(self):
        text = "\n\n| id | path |\n|---|---|\n| 1 | /A/ |\n\n| 2 | /B/ |\n"
        records = parse_taxonomy_table(text)

        assert [r.id for r in records] == ["1", "2"]
        assert [r.line for r in records] == [5, 7]

    def test_extra_columns_are_ignored(self):
        text = "| id | path | note |\n|---|---|---|\n| 1 | /A/ | ignored |\n"
        assert parse_taxonomy_table(text)[0].path == "/A/"

    def test_short_rows_yield_missing_fields(self):
        text = "| id | path |\n|---|---|\n| 9 |\ngarbage\n"
        records = parse_taxonomy_table(text)

        assert (records[0].id, records[0].path) == ("9", None)
        assert (records[1].id, records[1].path) == (None, None)

    def test_header_only(self):
        assert parse_taxonomy_table("| id | path |\n|---|---|\n") == []


class TestBuildFromTable:
    """Tests for build_from_table()."""

    def test_builds_film_tree(self, film_table):
        result = build_from_table(film_table)

        assert result.record_count == 3
        assert result.skipped == []
        assert [n.name for n in result.root.walk()] == [
            "Root",
            "Film",
            "Comedy Films",
            "Slapstick",
            "Drama",
        ]

    def test_malformed_rows_carry_line_numbers(self):
        text = "| id | path |\n|---|---|\n| 1 | /A/ |\n| 2 |\n"
        result = build_from_table(text)

        assert result.record_count == 1
        assert [e.line for e in result.skipped] == [4]


class TestLoadTaxonomy:
    """Tests for load_taxonomy()."""

    def test_table_file(self, film_table_file):
        result = load_taxonomy(film_table_file)
        assert result.root.find_by_name("Slapstick").id == "3"

    def test_json_file(self, tmp_path):
        path = tmp_path / "taxonomy.json"
        path.write_text(
            json.dumps(
                {
                    "name": "Root",
                    "children": [
                        {"name": "Film", "id": "1", "children": [{"name": "Drama"}]},
                    ],
                }
            ),
            encoding="utf-8",
        )
        result = load_taxonomy(path)

        assert result.record_count == 2
        assert result.root.children[0].id == "1"
        assert result.root.children[0].children[0].name == "Drama"

    def test_explicit_format_overrides_suffix(self, tmp_path):
        path = tmp_path / "taxonomy.txt"
        path.write_text('{"name": "Root", "children": [{"name": "A"}]}', encoding="utf-8")

        result = load_taxonomy(path, data_format="json")
        assert [c.name for c in result.root.children] == ["A"]

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text("{not json", encoding="utf-8")

        with pytest.raises(ValueError, match="invalid JSON"):
            load_taxonomy(path)

    def test_json_must_be_object(self, tmp_path):
        path = tmp_path / "list.json"
        path.write_text("[1, 2]", encoding="utf-8")

        with pytest.raises(ValueError, match="expected a JSON object"):
            load_taxonomy(path)

    def test_unknown_format(self, film_table_file):
        with pytest.raises(ValueError, match="Unknown data format"):
            load_taxonomy(film_table_file, data_format="xml")

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_taxonomy(tmp_path / "missing.md")
