"""SQLite adapter using stdlib sqlite3."""

from __future__ import annotations

import sqlite3
from typing import Any

from data_fetch.core.enums import CommandKind
from data_fetch.core.exceptions import CommandConstructionError
from data_fetch.core.params import Parameter, as_named


class SqliteAdapter:
    """SQLite adapter.

    The connection string is a database path, ``:memory:``, or a
    ``file:`` URI. Text commands use ``:name`` placeholders. SQLite has no
    stored procedures.
    """

    @property
    def null_value(self) -> Any:
        return None

    def connect(self, connection_string: str, options: dict[str, Any]) -> sqlite3.Connection:
        uri = connection_string.startswith("file:")
        return sqlite3.connect(connection_string, uri=uri, **options)

    def create_command(self, connection: sqlite3.Connection) -> sqlite3.Cursor:
        return connection.cursor()

    def create_parameter(self, name: str, value: Any) -> Parameter:
        return Parameter(name, self.null_value if value is None else value)

    def execute(
        self,
        command: sqlite3.Cursor,
        kind: CommandKind,
        text: str,
        parameters: list[Parameter],
    ) -> sqlite3.Cursor:
        if kind is CommandKind.STORED_PROCEDURE:
            raise CommandConstructionError(text, "SQLite does not support stored procedures")
        return command.execute(text, as_named(parameters))

    def column_names(self, cursor: sqlite3.Cursor) -> list[str]:
        return [desc[0] for desc in cursor.description]
