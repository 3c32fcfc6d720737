"""Shared test fixtures."""

from __future__ import annotations

import sqlite3
from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest

from data_fetch.core.cursor import ResultCursor
from data_fetch.core.enums import CommandKind
from data_fetch.core.params import Parameter


class DBNull:
    """Null sentinel distinct from None, as some drivers use."""

    def __repr__(self) -> str:
        return "DBNull"


NULL = DBNull()


class FakeCursor:
    """Recording DB-API cursor serving canned rows."""

    def __init__(self, columns: list[str] | None, rows: list[tuple[Any, ...]]) -> None:
        self.description = (
            None if columns is None else [(name, None, None, None, None, None, None) for name in columns]
        )
        self._rows = iter(rows)
        self.fetch_count = 0
        self.closed = False

    def fetchone(self) -> tuple[Any, ...] | None:
        self.fetch_count += 1
        return next(self._rows, None)

    def close(self) -> None:
        self.closed = True


class FakeConnection:
    def __init__(self) -> None:
        self.cursors: list[FakeCursor] = []
        self.closed = False

    def close(self) -> None:
        self.closed = True


class FakeAdapter:
    """In-memory backend that records every call made through it."""

    def __init__(
        self,
        columns: list[str] | None = None,
        rows: list[tuple[Any, ...]] | None = None,
        connect_error: Exception | None = None,
        execute_error: Exception | None = None,
        result_set: bool = True,
    ) -> None:
        self.columns = ["id", "name"] if columns is None else columns
        self.rows = rows or []
        self.connect_error = connect_error
        self.execute_error = execute_error
        self.result_set = result_set
        self.connections: list[FakeConnection] = []
        self.connect_calls: list[tuple[str, dict[str, Any]]] = []
        self.executed: list[tuple[CommandKind, str, list[Parameter]]] = []

    @property
    def null_value(self) -> Any:
        return NULL

    def connect(self, connection_string: str, options: dict[str, Any]) -> FakeConnection:
        self.connect_calls.append((connection_string, options))
        if self.connect_error is not None:
            raise self.connect_error
        connection = FakeConnection()
        self.connections.append(connection)
        return connection

    def create_command(self, connection: FakeConnection) -> FakeCursor:
        cursor = FakeCursor(self.columns if self.result_set else None, self.rows)
        connection.cursors.append(cursor)
        return cursor

    def create_parameter(self, name: str, value: Any) -> Parameter:
        return Parameter(name, self.null_value if value is None else value)

    def execute(
        self,
        command: FakeCursor,
        kind: CommandKind,
        text: str,
        parameters: list[Parameter],
    ) -> FakeCursor:
        self.executed.append((kind, text, parameters))
        if self.execute_error is not None:
            raise self.execute_error
        return command

    def column_names(self, cursor: FakeCursor) -> list[str]:
        return [desc[0] for desc in cursor.description]

    @property
    def connection(self) -> FakeConnection:
        """The single connection opened so far."""
        assert len(self.connections) == 1
        return self.connections[0]

    @property
    def cursor(self) -> FakeCursor:
        return self.connection.cursors[0]


@pytest.fixture
def fake_adapter() -> Callable[..., FakeAdapter]:
    """Factory for FakeAdapter instances.

    Usage:
        adapter = fake_adapter(columns=["id"], rows=[(1,), (2,)])
    """

    def _make(**kwargs: Any) -> FakeAdapter:
        return FakeAdapter(**kwargs)

    return _make


@pytest.fixture
def result_cursor() -> Callable[..., tuple[ResultCursor, FakeCursor]]:
    """Factory for a ResultCursor over canned rows, plus the raw cursor beneath it."""

    def _make(
        columns: list[str],
        rows: list[tuple[Any, ...]] | None = None,
        result_set: bool = True,
    ) -> tuple[ResultCursor, FakeCursor]:
        adapter = FakeAdapter(columns=columns, rows=rows, result_set=result_set)
        raw = adapter.create_command(FakeConnection())
        return ResultCursor(raw, adapter), raw

    return _make


@pytest.fixture
def db_null() -> DBNull:
    """The null sentinel FakeAdapter reports."""
    return NULL


@pytest.fixture
def sqlite_db(tmp_path: Path) -> str:
    """SQLite database file with a populated ``users`` table."""
    db_path = tmp_path / "test.db"
    conn = sqlite3.connect(db_path)
    conn.execute(
        "CREATE TABLE users (Id INTEGER PRIMARY KEY, Name TEXT, Email TEXT, CreatedAt TEXT)"
    )
    conn.executemany(
        "INSERT INTO users (Id, Name, Email, CreatedAt) VALUES (?, ?, ?, ?)",
        [
            (1, "a", "a@example.com", "2024-01-01"),
            (2, "b", None, "2024-01-02"),
            (3, "c", "c@example.com", "2024-01-03"),
        ],
    )
    conn.commit()
    conn.close()
    return str(db_path)
