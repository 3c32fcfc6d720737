"""DataFetch exception hierarchy.

All exceptions are DataFetch-specific. Raw driver exceptions are wrapped
and chained, never exposed to callers directly.
"""

from __future__ import annotations


class DataFetchError(Exception):
    """Base exception for all DataFetch errors."""


# --- Adapter ---


class AdapterError(DataFetchError):
    """Base for adapter errors."""


class ConnectionError(AdapterError):  # noqa: A001
    """Raised when the backend connection cannot be opened."""


# --- Command ---


class CommandError(DataFetchError):
    """Base for command errors."""


class CommandConstructionError(CommandError):
    """Raised for malformed command text or kind, before execution."""

    def __init__(self, command_text: str, detail: str) -> None:
        self.command_text = command_text
        super().__init__(f"Cannot build command '{command_text}': {detail}")


# --- Execution ---


class ExecutionError(DataFetchError):
    """Raised when the backend fails to execute a command."""

    def __init__(self, command_text: str, detail: str) -> None:
        self.command_text = command_text
        super().__init__(f"Execution failed for '{command_text}': {detail}")


class ParameterBindingError(ExecutionError):
    """Raised when the backend rejects a bound parameter."""

    def __init__(self, command_text: str, parameter_names: list[str], detail: str) -> None:
        self.parameter_names = parameter_names
        super().__init__(command_text, f"parameter binding {parameter_names}: {detail}")


# --- Mapping ---


class MappingError(DataFetchError):
    """Base for mapping errors."""


class TargetTypeError(MappingError):
    """Raised when a type cannot be used as a mapping target."""

    def __init__(self, target_class: str, detail: str) -> None:
        self.target_class = target_class
        super().__init__(f"Cannot map to {target_class}: {detail}")


class ColumnResolutionError(MappingError):
    """Raised before the first row when target fields have no matching column."""

    def __init__(self, target_class: str, missing_fields: list[str], columns: list[str]) -> None:
        self.target_class = target_class
        self.missing_fields = missing_fields
        self.columns = columns
        super().__init__(
            f"Cannot map to {target_class}: missing columns for fields {missing_fields} "
            f"(result set has {columns})"
        )


class RowMaterializationError(MappingError):
    """Raised when a row value cannot be assigned to its target field."""

    def __init__(self, target_class: str, row_number: int, detail: str) -> None:
        self.target_class = target_class
        self.row_number = row_number
        super().__init__(f"Cannot map row {row_number} to {target_class}: {detail}")
