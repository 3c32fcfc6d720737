"""Connection configuration and adapter loading.

ConnectionConfig is a Pydantic model for type-safe connection config.
Adapters are resolved by driver name and imported lazily so optional
drivers are only required when used.
"""

from __future__ import annotations

import importlib
from typing import Any

from pydantic import BaseModel

from data_fetch.core.enums import DatabaseBackend
from data_fetch.core.exceptions import AdapterError


class ConnectionConfig(BaseModel):
    """Configuration for database connections.

    ``options`` are forwarded to the driver's connect call, e.g. a
    ``timeout`` for sqlite3 or ``connect_timeout`` for psycopg.
    """

    driver: str
    connection_string: str
    options: dict[str, Any] = {}


# Adapter module mapping: driver name → (module_path, class_name)
_ADAPTER_MAP: dict[str, tuple[str, str]] = {
    DatabaseBackend.SQLITE.value: ("data_fetch.adapters.sqlite", "SqliteAdapter"),
    DatabaseBackend.POSTGRESQL.value: ("data_fetch.adapters.postgresql", "PostgresqlAdapter"),
    DatabaseBackend.MYSQL.value: ("data_fetch.adapters.mysql", "MysqlAdapter"),
    DatabaseBackend.ORACLE.value: ("data_fetch.adapters.oracle", "OracleAdapter"),
}


def load_adapter(driver: str | DatabaseBackend) -> Any:
    """Load an adapter instance by driver name."""
    name = driver.value if isinstance(driver, DatabaseBackend) else driver.lower()
    if name not in _ADAPTER_MAP:
        raise AdapterError(f"Unsupported database driver: {driver}")

    module_path, cls_name = _ADAPTER_MAP[name]
    try:
        module = importlib.import_module(module_path)
        return getattr(module, cls_name)()
    except (ImportError, AttributeError) as e:
        raise AdapterError(f"Failed to load adapter for '{name}': {e}") from e
