"""MySQL adapter using mysql-connector-python."""

from __future__ import annotations

from typing import Any

from data_fetch.core.cursor import EmptyResult
from data_fetch.core.enums import CommandKind
from data_fetch.core.params import Parameter, as_named

# Connection string keys whose values mysql.connector expects as integers
_INT_KEYS = frozenset({"port", "connection_timeout", "read_timeout", "write_timeout"})


def parse_connection_string(connection_string: str) -> dict[str, Any]:
    """Parse ``key=value;key=value`` into mysql.connector.connect kwargs.

    Keys are case-insensitive; ``server`` and ``uid``/``pwd`` are accepted
    as aliases of ``host`` and ``user``/``password``.
    """
    aliases = {"server": "host", "uid": "user", "pwd": "password", "db": "database"}
    kwargs: dict[str, Any] = {}
    for part in connection_string.split(";"):
        if not part.strip():
            continue
        key, sep, value = part.partition("=")
        if not sep:
            raise ValueError(f"Malformed connection string segment: '{part.strip()}'")
        key = key.strip().lower()
        key = aliases.get(key, key)
        value = value.strip()
        kwargs[key] = int(value) if key in _INT_KEYS else value
    return kwargs


class MysqlAdapter:
    """MySQL adapter.

    Text commands use ``%(name)s`` placeholders. MySQL procedure
    arguments are positional, so parameters are passed in field
    declaration order and the first result set is returned.
    """

    @property
    def null_value(self) -> Any:
        return None

    def connect(self, connection_string: str, options: dict[str, Any]) -> Any:
        import mysql.connector

        return mysql.connector.connect(**parse_connection_string(connection_string), **options)

    def create_command(self, connection: Any) -> Any:
        return connection.cursor()

    def create_parameter(self, name: str, value: Any) -> Parameter:
        return Parameter(name, self.null_value if value is None else value)

    def execute(
        self,
        command: Any,
        kind: CommandKind,
        text: str,
        parameters: list[Parameter],
    ) -> Any:
        if kind is CommandKind.STORED_PROCEDURE:
            command.callproc(text, tuple(p.value for p in parameters))
            return next(iter(command.stored_results()), EmptyResult())
        command.execute(text, as_named(parameters) if parameters else None)
        return command

    def column_names(self, cursor: Any) -> list[str]:
        return [desc[0] for desc in cursor.description]
