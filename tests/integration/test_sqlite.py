"""Integration test for SQLite full workflow.

Covers: adapter loading, command execution, object mapping, null
translation and resource release against a real SQLite database file.
"""

from __future__ import annotations

import sqlite3
from contextlib import closing
from dataclasses import dataclass
from typing import Any

import pytest
from pydantic import BaseModel

from data_fetch.adapters.sqlite import SqliteAdapter
from data_fetch.core.command import CommandDescriptor
from data_fetch.core.exceptions import (
    ColumnResolutionError,
    CommandConstructionError,
    ConnectionError,  # noqa: A004
    ExecutionError,
    ParameterBindingError,
)
from data_fetch.core.executor import CommandExecutor
from data_fetch.core.fetcher import DataFetcher
from data_fetch.repository.base import Repository

# --- Test models ---


@dataclass
class User:
    Id: int
    Name: str


@dataclass
class Contact:
    Id: int
    Email: str | None


class ContactModel(BaseModel):
    Id: int
    Email: str = "unknown"


class UserRecord:
    Id: int
    Name: str

    def __init__(self) -> None:
        self.Id = 0
        self.Name = ""


class RecordingAdapter(SqliteAdapter):
    """SqliteAdapter that keeps every connection it opens."""

    def __init__(self) -> None:
        self.connections: list[sqlite3.Connection] = []

    def connect(self, connection_string: str, options: dict[str, Any]) -> sqlite3.Connection:
        connection = super().connect(connection_string, options)
        self.connections.append(connection)
        return connection


def _is_closed(connection: sqlite3.Connection) -> bool:
    try:
        connection.execute("SELECT 1")
    except sqlite3.ProgrammingError:
        return True
    return False


# --- Fixtures ---


@pytest.fixture
def fetcher() -> DataFetcher:
    return DataFetcher.for_driver("sqlite")


@pytest.fixture
def recording() -> RecordingAdapter:
    return RecordingAdapter()


# --- Tests ---


class TestSqliteWorkflow:
    def test_extra_columns_ignored(self, fetcher: DataFetcher, sqlite_db: str) -> None:
        users = list(
            fetcher.command(User, "SELECT Id, Name, CreatedAt FROM users ORDER BY Id LIMIT 2", sqlite_db)
        )
        assert users == [User(1, "a"), User(2, "b")]

    def test_select_star(self, fetcher: DataFetcher, sqlite_db: str) -> None:
        users = list(fetcher.command(User, "SELECT * FROM users ORDER BY Id", sqlite_db))
        assert [u.Name for u in users] == ["a", "b", "c"]

    def test_plain_class_target(self, fetcher: DataFetcher, sqlite_db: str) -> None:
        [record] = fetcher.command(UserRecord, "SELECT * FROM users WHERE Id = 3", sqlite_db)
        assert (record.Id, record.Name) == (3, "c")

    def test_null_to_optional_field(self, fetcher: DataFetcher, sqlite_db: str) -> None:
        contacts = list(fetcher.command(Contact, "SELECT Id, Email FROM users ORDER BY Id", sqlite_db))
        assert contacts[1] == Contact(2, None)

    def test_null_to_field_default(self, fetcher: DataFetcher, sqlite_db: str) -> None:
        [contact] = fetcher.command(ContactModel, "SELECT Id, Email FROM users WHERE Id = 2", sqlite_db)
        assert contact.Email == "unknown"

    def test_missing_column(self, fetcher: DataFetcher, sqlite_db: str) -> None:
        with pytest.raises(ColumnResolutionError) as exc_info:
            list(fetcher.command(User, "SELECT Id FROM users", sqlite_db))
        assert exc_info.value.missing_fields == ["Name"]

    def test_empty_result_set(self, fetcher: DataFetcher, sqlite_db: str) -> None:
        assert list(fetcher.command(User, "SELECT Id, Name FROM users WHERE Id < 0", sqlite_db)) == []

    def test_empty_result_set_validates_schema(self, fetcher: DataFetcher, sqlite_db: str) -> None:
        with pytest.raises(ColumnResolutionError):
            list(fetcher.command(User, "SELECT Id FROM users WHERE Id < 0", sqlite_db))

    def test_statement_without_result_set(self, fetcher: DataFetcher, sqlite_db: str) -> None:
        with pytest.raises(ColumnResolutionError):
            list(fetcher.command(User, "UPDATE users SET Name = Name", sqlite_db))

    def test_bad_command_text(self, fetcher: DataFetcher, sqlite_db: str) -> None:
        with pytest.raises(ExecutionError):
            list(fetcher.command(User, "SELEC Id FROM users", sqlite_db))

    def test_connection_error(self, fetcher: DataFetcher, tmp_path) -> None:
        missing = f"file:{tmp_path / 'missing.db'}?mode=ro"
        with pytest.raises(ConnectionError):
            list(fetcher.command(User, "SELECT Id, Name FROM users", missing))

    def test_stored_procedure_unsupported(self, fetcher: DataFetcher, sqlite_db: str) -> None:
        with pytest.raises(CommandConstructionError):
            list(fetcher.stored_procedure(User, "get_user", sqlite_db, {"UserId": 1}))

    def test_parameters_bound_by_name(self, sqlite_db: str) -> None:
        executor = CommandExecutor(SqliteAdapter())
        command = CommandDescriptor(
            "SELECT Id, Name FROM users WHERE Id = :UserId",
            parameters={"UserId": 2},
        )
        assert list(executor.rows(command, sqlite_db)) == [(2, "b")]

    def test_unbindable_parameter(self, sqlite_db: str) -> None:
        executor = CommandExecutor(SqliteAdapter())
        command = CommandDescriptor(
            "SELECT Id, Name FROM users WHERE Id = :UserId",
            parameters={"UserId": object()},
        )
        with pytest.raises(ParameterBindingError):
            list(executor.rows(command, sqlite_db))

    def test_repository(self, fetcher: DataFetcher, sqlite_db: str) -> None:
        repo = Repository(fetcher, sqlite_db)
        assert len(list(repo.command(User, "SELECT Id, Name FROM users"))) == 3


class TestSqliteResourceRelease:
    def test_closed_after_full_consumption(self, recording: RecordingAdapter, sqlite_db: str) -> None:
        list(DataFetcher(recording).command(User, "SELECT Id, Name FROM users", sqlite_db))
        assert _is_closed(recording.connections[0])

    def test_closed_after_abandonment(self, recording: RecordingAdapter, sqlite_db: str) -> None:
        with closing(DataFetcher(recording).command(User, "SELECT Id, Name FROM users", sqlite_db)) as rows:
            next(rows)
            assert not _is_closed(recording.connections[0])
        assert _is_closed(recording.connections[0])

    def test_closed_after_error(self, recording: RecordingAdapter, sqlite_db: str) -> None:
        with pytest.raises(ColumnResolutionError):
            list(DataFetcher(recording).command(User, "SELECT Id FROM users", sqlite_db))
        assert _is_closed(recording.connections[0])
