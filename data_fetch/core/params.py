"""Parameter binding.

Every field of a parameter object becomes exactly one named command
parameter, its value taken verbatim. ``None`` becomes the backend's
null marker; no other conversion is performed.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from data_fetch.core.fields import parameter_fields


@dataclass(frozen=True)
class Parameter:
    """A named command parameter."""

    name: str
    value: Any


def bind_parameters(adapter: Any, parameters: Any) -> list[Parameter]:
    """Create one backend parameter per field of *parameters*.

    Args:
        adapter: Backend adapter supplying ``create_parameter``.
        parameters: Parameter object, or None for no parameters.

    Returns:
        Parameters in field declaration order.
    """
    if parameters is None:
        return []
    return [adapter.create_parameter(name, value) for name, value in parameter_fields(parameters)]


def as_named(parameters: list[Parameter]) -> dict[str, Any]:
    """Parameters as a ``{name: value}`` dict for named/pyformat drivers."""
    return {p.name: p.value for p in parameters}
