"""Forward-only, single-pass cursor over a backend result set."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any


class ResultCursor:
    """Pull-based view of a DB-API cursor.

    Column metadata is read once on construction. Each ``read()`` performs
    exactly one ``fetchone()`` and copies the row into a tuple, so no
    backend-native row object outlives the pull that produced it.

    Args:
        cursor: DB-API cursor positioned before the first row.
        adapter: Backend adapter supplying ``column_names`` and ``null_value``.
    """

    def __init__(self, cursor: Any, adapter: Any) -> None:
        self._cursor = cursor
        self.null_value: Any = adapter.null_value
        self.columns: tuple[str, ...] = (
            tuple(adapter.column_names(cursor)) if cursor.description is not None else ()
        )
        self._positions: dict[str, int] = {}
        for position, name in enumerate(self.columns):
            # First column wins when names repeat
            self._positions.setdefault(name, position)
        self.rows_read = 0
        self._exhausted = not self.columns

    def position(self, column: str) -> int | None:
        """Zero-based position of *column*, matched case-sensitively."""
        return self._positions.get(column)

    def read(self) -> tuple[Any, ...] | None:
        """Read the next row, or None once the result set is exhausted."""
        if self._exhausted:
            return None
        row = self._cursor.fetchone()
        if row is None:
            self._exhausted = True
            return None
        self.rows_read += 1
        return tuple(row)

    def __iter__(self) -> Iterator[tuple[Any, ...]]:
        while (row := self.read()) is not None:
            yield row


class EmptyResult:
    """Stand-in cursor for a command that produced no result set."""

    description = None

    def fetchone(self) -> None:
        return None
