"""Oracle adapter using oracledb."""

from __future__ import annotations

from typing import Any

from data_fetch.core.cursor import EmptyResult
from data_fetch.core.enums import CommandKind
from data_fetch.core.params import Parameter, as_named


class OracleAdapter:
    """Oracle adapter.

    The connection string is ``user/password@host:port/service``. Text
    commands use ``:name`` placeholders. Procedures return their rows as
    implicit results (``DBMS_SQL.RETURN_RESULT``); the first is used.
    Column names are reported lower-cased.
    """

    @property
    def null_value(self) -> Any:
        return None

    def connect(self, connection_string: str, options: dict[str, Any]) -> Any:
        import oracledb

        return oracledb.connect(connection_string, **options)

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
            command.callproc(text, keyword_parameters=as_named(parameters))
            results = command.getimplicitresults()
            return results[0] if results else EmptyResult()
        command.execute(text, as_named(parameters))
        return command

    def column_names(self, cursor: Any) -> list[str]:
        return [desc[0].lower() for desc in cursor.description]
