"""Tree Builder - Turn flat path-encoded records into a rooted tree.

Each record carries an external id and a ``/``-delimited path such as
``/Film/Comedy Films/``. Segments become nodes under a synthetic
``Root``; siblings keep first-seen order, which later drives layout
rank.

Building is permissive: malformed records are dropped and reported on
the result, never raised.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterable, Sequence, Union

from taxotree.tree.errors import DuplicateTerminalIdWarning, MalformedRecordError
from taxotree.tree.TreeNode import TreeNode, new_root

logger = logging.getLogger(__name__)

PATH_SEPARATOR = "/"


@dataclass(frozen=True)
class PathRecord:
    """One ingestion record.

    Attributes:
        id: External identifier for the node ending the path.
        path: Slash-delimited segment names.
        line: Source line number, when read from a file.
    """

    id: str | None
    path: str | None
    line: int | None = None

    @property
    def segments(self) -> list[str]:
        """Non-empty segments of ``path`` in order."""
        return split_path(self.path or "")


RecordLike = Union[PathRecord, Sequence[object]]


@dataclass
class BuildResult:
    """Outcome of a build.

    Attributes:
        root: The synthetic root node.
        skipped: Records dropped as malformed.
        duplicates: Terminal ids that were overwritten.
        record_count: Records accepted into the tree.
    """

    root: TreeNode
    skipped: list[MalformedRecordError] = field(default_factory=list)
    duplicates: list[DuplicateTerminalIdWarning] = field(default_factory=list)
    record_count: int = 0


def split_path(path: str) -> list[str]:
    """Split a path on ``/`` and drop empty segments.

    Leading, trailing and doubled separators are tolerated, and segment
    names are stripped of surrounding whitespace.
    """
    return [part.strip() for part in path.split(PATH_SEPARATOR) if part.strip()]


class TreeBuilder:
    """Incrementally builds a taxonomy tree from path records.

    Example:
        >>> builder = TreeBuilder()
        >>> builder.add("1", "/Film/Drama")
        True
        >>> [c.name for c in builder.root.children]
        ['Film']
    """

    def __init__(self, root: TreeNode | None = None) -> None:
        self.root = root if root is not None else new_root()
        self._result = BuildResult(root=self.root)

    def add(self, record_id: object, path: object, line: int | None = None) -> bool:
        """Insert one record.

        Args:
            record_id: External id for the terminal node.
            path: Slash-delimited path.
            line: Optional source line for diagnostics.

        Returns:
            True if the record was inserted, False if it was skipped.
        """
        if record_id is None or not str(record_id).strip():
            return self._skip("record has no id", line, (record_id, path))
        if path is None or not isinstance(path, str):
            return self._skip("record has no path", line, (record_id, path))

        segments = split_path(path)
        if not segments:
            return self._skip(f"path {path!r} has no segments", line, (record_id, path))

        node = self.root
        for segment in segments:
            child = node.find_child(segment)
            if child is None:
                child = node.add_child(TreeNode(name=segment))
            node = child

        new_id = str(record_id).strip()
        if node.id is not None:
            warning = DuplicateTerminalIdWarning(
                PATH_SEPARATOR + PATH_SEPARATOR.join(segments), node.id, new_id
            )
            self._result.duplicates.append(warning)
            logger.warning("Duplicate terminal path: %s", warning)
        node.id = new_id
        self._result.record_count += 1
        return True

    def add_record(self, record: RecordLike) -> bool:
        """Insert a PathRecord or an ``(id, path)`` pair."""
        if isinstance(record, PathRecord):
            return self.add(record.id, record.path, record.line)
        try:
            record_id, path = record[0], record[1]
        except (TypeError, IndexError, KeyError):
            return self._skip("record is not an (id, path) pair", None, record)
        return self.add(record_id, path)

    def add_records(self, records: Iterable[RecordLike]) -> TreeBuilder:
        """Insert records in order; returns self for chaining."""
        for record in records:
            self.add_record(record)
        return self

    def build(self) -> BuildResult:
        """Return the build result for everything added so far."""
        logger.debug(
            "Built taxonomy: %d records, %d skipped, %d duplicate ids",
            self._result.record_count,
            len(self._result.skipped),
            len(self._result.duplicates),
        )
        return self._result

    def _skip(self, message: str, line: int | None, raw: object) -> bool:
        error = MalformedRecordError(message, line=line, raw=raw)
        self._result.skipped.append(error)
        logger.warning("Skipping malformed record: %s", error)
        return False


def build_tree(records: Iterable[RecordLike]) -> TreeNode:
    """Build a tree from records and return its root.

    Args:
        records: PathRecord instances or ``(id, path)`` pairs.

    Returns:
        The synthetic ``Root`` node (possibly with no children).
    """
    return TreeBuilder().add_records(records).build().root
