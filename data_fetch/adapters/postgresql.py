"""PostgreSQL adapter using psycopg (v3+)."""

from __future__ import annotations

from typing import Any

from data_fetch.core.enums import CommandKind
from data_fetch.core.params import Parameter, as_named


def _procedure_call(name: str, parameters: list[Parameter]) -> Any:
    """Compose ``SELECT * FROM name(param => %(param)s, ...)``.

    Set-returning functions are PostgreSQL's way to return a result set
    from a stored routine; named notation lets the server match
    parameters by name.
    """
    from psycopg import sql

    arguments = sql.SQL(", ").join(
        sql.SQL("{} => {}").format(sql.Identifier(p.name), sql.Placeholder(p.name))
        for p in parameters
    )
    return sql.SQL("SELECT * FROM {}({})").format(sql.Identifier(*name.split(".")), arguments)


class PostgresqlAdapter:
    """PostgreSQL adapter.

    The connection string is a libpq conninfo string or URI. Text commands
    use ``%(name)s`` placeholders.
    """

    @property
    def null_value(self) -> Any:
        return None

    def connect(self, connection_string: str, options: dict[str, Any]) -> Any:
        import psycopg

        return psycopg.connect(connection_string, **options)

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
            return command.execute(_procedure_call(text, parameters), as_named(parameters))
        return command.execute(text, as_named(parameters) if parameters else None)

    def column_names(self, cursor: Any) -> list[str]:
        return [desc.name for desc in cursor.description]
