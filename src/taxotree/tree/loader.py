"""Taxonomy loading from files.

Two input formats are supported:

- Pipe table (``.md``/``.txt``): a two-line header followed by rows of
  the form ``| id | /segment/segment/ |``.
- Nested JSON (``.json``): ``{"name": ..., "children": [...]}``.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from taxotree.tree.builder import BuildResult, PathRecord, TreeBuilder
from taxotree.tree.serialize import tree_from_dict

logger = logging.getLogger(__name__)

HEADER_LINES = 2


def parse_taxonomy_table(text: str) -> list[PathRecord]:
    """Parse pipe-table text into path records.

    The first two non-blank lines are the header and separator. Rows
    with fewer than two cells produce a record with missing fields, so
    the builder reports them as malformed instead of this parser
    silently dropping them.

    Args:
        text: Table content.

    Returns:
        Records in file order.
    """
    lines = text.splitlines()
    start = 0
    while start < len(lines) and not lines[start].strip():
        start += 1

    records: list[PathRecord] = []
    for index in range(start + HEADER_LINES, len(lines)):
        raw = lines[index]
        if not raw.strip():
            continue
        cells = [cell.strip() for cell in raw.split("|")[1:3]]
        record_id = cells[0] if len(cells) > 0 and cells[0] else None
        path = cells[1] if len(cells) > 1 and cells[1] else None
        records.append(PathRecord(id=record_id, path=path, line=index + 1))
    return records


def build_from_table(text: str) -> BuildResult:
    """Parse table text and build the tree in one step."""
    return TreeBuilder().add_records(parse_taxonomy_table(text)).build()


def load_taxonomy(path: Path, data_format: str = "auto") -> BuildResult:
    """Load a taxonomy file into a tree.

    Args:
        path: File to read.
        data_format: "table", "json", or "auto" (decide by suffix).

    Returns:
        BuildResult for the loaded tree.

    Raises:
        OSError: If the file cannot be read.
        ValueError: If a JSON document is not a taxonomy object.
    """
    if data_format == "auto":
        data_format = "json" if path.suffix.lower() == ".json" else "table"

    text = path.read_text(encoding="utf-8")
    logger.info("Loading %s taxonomy from %s", data_format, path)

    if data_format == "json":
        try:
            data = json.loads(text)
        except json.JSONDecodeError as e:
            raise ValueError(f"{path}: invalid JSON: {e}") from e
        if not isinstance(data, dict):
            raise ValueError(f"{path}: expected a JSON object at top level")
        result = BuildResult(root=tree_from_dict(data))
        result.record_count = result.root.node_count() - 1
        return result

    if data_format != "table":
        raise ValueError(f"Unknown data format: {data_format}")
    return build_from_table(text)


__all__ = [
    "build_from_table",
    "load_taxonomy",
    "parse_taxonomy_table",
]
