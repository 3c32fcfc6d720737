"""Backend and command kind enumerations."""

from __future__ import annotations

from enum import Enum


class DatabaseBackend(Enum):
    """Supported database backends."""

    SQLITE = "sqlite"
    POSTGRESQL = "postgresql"
    MYSQL = "mysql"
    ORACLE = "oracle"


class CommandKind(Enum):
    """How the command text is interpreted by the backend."""

    TEXT = "text"
    STORED_PROCEDURE = "stored_procedure"
