"""Database adapter protocol.

Every adapter module MUST implement this protocol. It is the backend
driver capability the executor delegates to: open a connection, create a
command, create parameters, execute, and describe the result columns.
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

from data_fetch.core.enums import CommandKind
from data_fetch.core.params import Parameter


@runtime_checkable
class SyncAdapter(Protocol):
    """Synchronous database adapter protocol."""

    @property
    def null_value(self) -> Any:
        """Sentinel the driver uses for a missing value."""
        ...

    def connect(self, connection_string: str, options: dict[str, Any]) -> Any:
        """Open one connection from a backend-specific connection string."""
        ...

    def create_command(self, connection: Any) -> Any:
        """Create one command (DB-API cursor) on the connection."""
        ...

    def create_parameter(self, name: str, value: Any) -> Parameter:
        """Create a named parameter, substituting null_value for None."""
        ...

    def execute(
        self,
        command: Any,
        kind: CommandKind,
        text: str,
        parameters: list[Parameter],
    ) -> Any:
        """Execute and return a cursor exposing ``description`` and ``fetchone``."""
        ...

    def column_names(self, cursor: Any) -> list[str]:
        """Result column names in position order."""
        ...
