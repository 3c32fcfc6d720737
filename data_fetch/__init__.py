"""DataFetch - typed row streaming from raw commands and stored procedures."""

from __future__ import annotations

from data_fetch.core.command import CommandDescriptor
from data_fetch.core.connection import ConnectionConfig, load_adapter
from data_fetch.core.enums import CommandKind, DatabaseBackend
from data_fetch.core.exceptions import (
    AdapterError,
    ColumnResolutionError,
    CommandConstructionError,
    CommandError,
    ConnectionError,  # noqa: A004
    DataFetchError,
    ExecutionError,
    MappingError,
    ParameterBindingError,
    RowMaterializationError,
    TargetTypeError,
)
from data_fetch.core.executor import CommandExecutor
from data_fetch.core.fetcher import DataFetcher
from data_fetch.core.log import setup_logging
from data_fetch.mapping.model import ObjectMapper
from data_fetch.repository.base import Repository

__all__ = [
    # Connection
    "ConnectionConfig",
    "load_adapter",
    # Fetcher
    "DataFetcher",
    "CommandExecutor",
    "CommandDescriptor",
    # Mapping
    "ObjectMapper",
    # Repository
    "Repository",
    # Logging
    "setup_logging",
    # Enums
    "DatabaseBackend",
    "CommandKind",
    # Exceptions
    "DataFetchError",
    "AdapterError",
    "ConnectionError",
    "CommandError",
    "CommandConstructionError",
    "ExecutionError",
    "ParameterBindingError",
    "MappingError",
    "TargetTypeError",
    "ColumnResolutionError",
    "RowMaterializationError",
]
