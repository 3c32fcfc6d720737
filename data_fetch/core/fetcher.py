"""Public entry points.

The DataFetcher runs a raw command or a stored procedure and streams each
result row back as an instance of the requested type.
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any, TypeVar

from data_fetch.core.command import CommandDescriptor
from data_fetch.core.connection import ConnectionConfig, load_adapter
from data_fetch.core.enums import CommandKind, DatabaseBackend
from data_fetch.core.executor import CommandExecutor
from data_fetch.mapping.model import ObjectMapper
from data_fetch.mapping.protocol import Mapper

T = TypeVar("T")


class DataFetcher:
    """Fetches typed objects from any DB-API backend.

    Both entry points validate the command and introspect the result type
    immediately, then return a generator. The connection is opened on the
    first pull and released when the generator is exhausted, closed, or
    raises. Generators are single-pass.

    Args:
        adapter: Backend adapter implementing the SyncAdapter protocol.
        connect_options: Extra keyword arguments for the driver's connect call.
    """

    def __init__(self, adapter: Any, connect_options: dict[str, Any] | None = None) -> None:
        self._executor = CommandExecutor(adapter, connect_options)

    @classmethod
    def for_driver(cls, driver: str | DatabaseBackend, **connect_options: Any) -> DataFetcher:
        """Create a DataFetcher for a driver name such as ``"sqlite"``."""
        return cls(load_adapter(driver), connect_options)

    @classmethod
    def from_config(cls, config: ConnectionConfig) -> DataFetcher:
        """Create a DataFetcher from a ConnectionConfig."""
        return cls(load_adapter(config.driver), config.options)

    @property
    def adapter(self) -> Any:
        return self._executor.adapter

    def stored_procedure(
        self,
        result_type: type[T],
        name: str,
        connection_string: str,
        parameters: Any = None,
    ) -> Iterator[T]:
        """Execute a stored procedure.

        Args:
            result_type: Class whose fields match the procedure's result columns.
            name: The stored procedure name, optionally schema-qualified.
            connection_string: Backend-specific connection string.
            parameters: Object whose fields are bound as named parameters.

        Returns:
            A lazy, single-pass iterator of result_type instances.
        """
        command = CommandDescriptor(name, CommandKind.STORED_PROCEDURE, parameters)
        return self._fetch(ObjectMapper(result_type), command, connection_string)

    def command(
        self,
        result_type: type[T],
        text: str,
        connection_string: str,
    ) -> Iterator[T]:
        """Execute a raw text command.

        Args:
            result_type: Class whose fields match the command's result columns.
            text: The command text to execute.
            connection_string: Backend-specific connection string.

        Returns:
            A lazy, single-pass iterator of result_type instances.
        """
        command = CommandDescriptor(text, CommandKind.TEXT)
        return self._fetch(ObjectMapper(result_type), command, connection_string)

    def _fetch(
        self,
        mapper: Mapper[T],
        command: CommandDescriptor,
        connection_string: str,
    ) -> Iterator[T]:
        with self._executor.open(command, connection_string) as cursor:
            yield from mapper.map_rows(cursor)
