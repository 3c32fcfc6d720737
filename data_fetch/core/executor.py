"""Command execution.

The CommandExecutor owns one connection, one command and one result
cursor per call. All three are released on every exit path: exhaustion,
early close of the consuming generator, or an error.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import closing, contextmanager
from typing import Any

import structlog

from data_fetch.core.command import CommandDescriptor
from data_fetch.core.cursor import ResultCursor
from data_fetch.core.exceptions import (
    CommandConstructionError,
    ConnectionError,  # noqa: A004
    DataFetchError,
    ExecutionError,
    ParameterBindingError,
)
from data_fetch.core.params import Parameter, bind_parameters

log = structlog.wrap_logger(logging.getLogger(__name__))

# DB-API exception classes raised for values the driver cannot bind
_BINDING_ERROR_NAMES = frozenset({"InterfaceError", "DataError"})


def _is_binding_failure(error: Exception) -> bool:
    """Heuristic: did the driver reject a parameter rather than the command?"""
    if isinstance(error, (TypeError, ValueError, OverflowError)):
        return True
    if any(cls.__name__ in _BINDING_ERROR_NAMES for cls in type(error).__mro__):
        return True
    return "binding" in str(error).lower()


class CommandExecutor:
    """Runs a single command against a backend adapter.

    Args:
        adapter: Backend adapter implementing the SyncAdapter protocol.
        connect_options: Extra keyword arguments for the driver's connect call.
    """

    def __init__(self, adapter: Any, connect_options: dict[str, Any] | None = None) -> None:
        self._adapter = adapter
        self._connect_options = dict(connect_options or {})

    @property
    def adapter(self) -> Any:
        return self._adapter

    @contextmanager
    def open(self, command: CommandDescriptor, connection_string: str) -> Iterator[ResultCursor]:
        """Open a connection, execute *command* and yield its result cursor.

        Raises:
            ConnectionError: If the connection cannot be opened.
            CommandConstructionError: If the backend cannot build the command.
            ParameterBindingError: If the backend rejects a parameter.
            ExecutionError: On any other execution failure.
        """
        connection = self._connect(connection_string)
        try:
            with closing(connection):
                try:
                    cursor = self._adapter.create_command(connection)
                except Exception as e:
                    raise CommandConstructionError(command.label, str(e)) from e

                with closing(cursor):
                    parameters = bind_parameters(self._adapter, command.parameters)
                    result = self._execute(cursor, command, parameters)
                    try:
                        yield ResultCursor(result, self._adapter)
                    finally:
                        log.debug("Command closed.", command=command.label)
        finally:
            log.debug("Connection closed.")

    def rows(self, command: CommandDescriptor, connection_string: str) -> Iterator[tuple[Any, ...]]:
        """Lazily yield raw row tuples; resources live as long as the generator."""
        with self.open(command, connection_string) as cursor:
            yield from cursor

    def _connect(self, connection_string: str) -> Any:
        try:
            connection = self._adapter.connect(connection_string, self._connect_options)
        except DataFetchError:
            raise
        except Exception as e:
            log.error("Connection failed.", adapter=type(self._adapter).__name__, error=str(e))
            raise ConnectionError(f"Cannot open connection: {e}") from e
        log.debug("Connection opened.", adapter=type(self._adapter).__name__)
        return connection

    def _execute(
        self,
        cursor: Any,
        command: CommandDescriptor,
        parameters: list[Parameter],
    ) -> Any:
        names = [p.name for p in parameters]
        log.debug(
            "Executing command.",
            kind=command.kind.value,
            command=command.label,
            parameters=names,
        )
        try:
            return self._adapter.execute(cursor, command.kind, command.text, parameters)
        except DataFetchError:
            raise
        except Exception as e:
            log.error("Command execution failed.", command=command.label, error=str(e))
            if parameters and _is_binding_failure(e):
                raise ParameterBindingError(command.label, names, str(e)) from e
            raise ExecutionError(command.label, str(e)) from e
