"""Error taxonomy for tree building and pruning.

Only CategoryNotFoundError is raised across the public build/prune
boundary. The other types are recorded on build results so callers can
report them without aborting.
"""

from __future__ import annotations


class TaxonomyError(Exception):
    """Base class for taxotree errors."""


class MalformedRecordError(TaxonomyError):
    """An ingestion record had no id, no path, or no path segments.

    Attributes:
        line: 1-based source line (table input) or record index, if known.
        raw: The offending raw record text or tuple.
    """

    def __init__(self, message: str, line: int | None = None, raw: object = None) -> None:
        super().__init__(message)
        self.line = line
        self.raw = raw

    def __str__(self) -> str:
        base = super().__str__()
        if self.line is not None:
            return f"line {self.line}: {base}"
        return base


class CategoryNotFoundError(TaxonomyError):
    """Pruning could not locate the requested category below the root."""

    def __init__(self, name: str) -> None:
        super().__init__(f'Category "{name}" not found in the taxonomy tree.')
        self.name = name


class DuplicateTerminalIdWarning(UserWarning):
    """Two input paths resolved to the same terminal node; the last id won."""

    def __init__(self, path: str, previous_id: str, new_id: str) -> None:
        super().__init__(
            f"{path}: id {previous_id!r} overwritten by {new_id!r}"
        )
        self.path = path
        self.previous_id = previous_id
        self.new_id = new_id
