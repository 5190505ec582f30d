"""Shared pytest fixtures for taxotree tests."""

import logging

import pytest

FILM_TABLE = """\
| id | path |
|----|------|
| 1  | /Film/Comedy Films/ |
| 3  | /Film/Comedy Films/Slapstick/ |
| 2  | /Film/Drama/ |
"""


@pytest.fixture(autouse=True)
def _reset_package_logger():
    """Undo configure_logging() so caplog sees every test's records."""
    yield
    logger = logging.getLogger("taxotree")
    for handler in list(logger.handlers):
        if getattr(handler, "_taxotree_handler", False):
            logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
    logger.propagate = True


@pytest.fixture
def film_records():
    """The three-record film taxonomy as (id, path) pairs."""
    return [
        ("1", "/Film/Comedy Films/"),
        ("3", "/Film/Comedy Films/Slapstick/"),
        ("2", "/Film/Drama/"),
    ]


@pytest.fixture
def film_tree(film_records):
    """Root -> Film -> [Comedy Films -> [Slapstick], Drama]."""
    from taxotree.tree.builder import build_tree

    return build_tree(film_records)


@pytest.fixture
def media_tree(film_records):
    """Film taxonomy plus a Music branch and a second Shorts category."""
    from taxotree.tree.builder import build_tree

    return build_tree(
        film_records
        + [
            ("4", "/Music/Rock/"),
            ("5", "/Music/Jazz/Bebop/"),
            ("6", "/Film/Comedy Films/Shorts/"),
            ("7", "/Film/Drama/Shorts/"),
        ]
    )


@pytest.fixture
def film_table():
    return FILM_TABLE


@pytest.fixture
def film_table_file(tmp_path):
    """The film taxonomy written to a markdown table file."""
    path = tmp_path / "taxonomy.md"
    path.write_text(FILM_TABLE, encoding="utf-8")
    return path
