"""Tests for prune.py - Focusing a taxonomy on one category."""

import pytest

from taxotree.tree.errors import CategoryNotFoundError
from taxotree.tree.prune import Found, NotFound, prune_to_category, require_category


def names(node):
    return [n.name for n in node.walk()]


class TestPruneToCategory:
    """Tests for prune_to_category()."""

    def test_leaf_target_drops_other_branches(self, film_tree):
        """Pruning to Slapstick keeps its ancestors and drops Drama."""
        result = prune_to_category(film_tree, "Slapstick")

        assert isinstance(result, Found)
        assert result.found
        assert names(film_tree) == ["Root", "Film", "Comedy Films", "Slapstick"]
        assert [n.name for n in result.path] == ["Root", "Film", "Comedy Films", "Slapstick"]
        assert result.target.name == "Slapstick"
        assert result.parent.name == "Comedy Films"

    def test_target_siblings_keep_their_subtrees(self, film_tree):
        """Pruning to Comedy Films keeps Drama and Slapstick."""
        result = prune_to_category(film_tree, "Comedy Films")

        assert result.found
        assert names(film_tree) == ["Root", "Film", "Comedy Films", "Slapstick", "Drama"]

    def test_other_top_level_branches_are_dropped(self, media_tree):
        prune_to_category(media_tree, "Rock")

        assert [c.name for c in media_tree.children] == ["Music"]
        music = media_tree.children[0]
        assert [c.name for c in music.children] == ["Rock", "Jazz"]
        assert [c.name for c in music.children[1].children] == ["Bebop"]

    def test_first_match_in_child_order_wins(self, media_tree):
        """Two categories named Shorts: the one under Comedy Films is first."""
        result = prune_to_category(media_tree, "Shorts")

        assert result.parent.name == "Comedy Films"
        film = media_tree.children[0]
        assert [c.name for c in media_tree.children] == ["Film"]
        assert [c.name for c in film.children] == ["Comedy Films"]

    def test_earlier_branch_wins_over_shallower_match(self):
        """/A/Deep/X is inserted first, so it beats the later /A/X."""
        from taxotree.tree.builder import build_tree

        root = build_tree([("1", "/A/Deep/X/"), ("2", "/A/X/")])
        deep_x = root.children[0].children[0].children[0]
        result = prune_to_category(root, "X")

        assert result.parent.name == "Deep"
        assert result.target is deep_x
        assert [n.name for n in result.path] == ["Root", "A", "Deep", "X"]
        assert [c.name for c in root.children[0].children] == ["Deep"]

    def test_shallower_match_wins_when_inserted_first(self):
        from taxotree.tree.builder import build_tree

        root = build_tree([("2", "/A/X/"), ("1", "/A/Deep/X/")])
        result = prune_to_category(root, "X")

        assert result.parent.name == "A"
        assert [c.name for c in root.children[0].children] == ["X", "Deep"]

    def test_top_level_target(self, media_tree):
        result = prune_to_category(media_tree, "Music")

        assert result.parent is media_tree
        assert [c.name for c in media_tree.children] == ["Film", "Music"]

    def test_not_found_clears_root(self, film_tree):
        result = prune_to_category(film_tree, "Westerns")

        assert isinstance(result, NotFound)
        assert not result.found
        assert result.target_name == "Westerns"
        assert film_tree.name == "Root"
        assert film_tree.children == []

    def test_root_itself_is_never_matched(self, film_tree):
        result = prune_to_category(film_tree, "Root")
        assert not result.found

    def test_identity_is_preserved(self, film_tree):
        slapstick = film_tree.find_by_name("Slapstick")
        result = prune_to_category(film_tree, "Slapstick")
        assert result.target is slapstick


class TestRequireCategory:
    """Tests for require_category()."""

    def test_returns_pruned_root(self, film_tree):
        assert require_category(film_tree, "Drama") is film_tree
        assert names(film_tree) == ["Root", "Film", "Comedy Films", "Slapstick", "Drama"]

    def test_raises_when_missing(self, film_tree):
        with pytest.raises(CategoryNotFoundError) as exc_info:
            require_category(film_tree, "Westerns")

        assert exc_info.value.name == "Westerns"
        assert str(exc_info.value) == 'Category "Westerns" not found in the taxonomy tree.'
