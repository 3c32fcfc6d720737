"""Command descriptor: what to run, how to interpret it, and its parameters."""

from __future__ import annotations

import re
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from data_fetch.core.enums import CommandKind
from data_fetch.core.exceptions import CommandConstructionError
from data_fetch.core.fields import parameter_fields

# Optionally schema-qualified procedure name: ``proc`` or ``schema.proc``
_PROCEDURE_NAME = re.compile(r"^[A-Za-z_][\w$#]*(\.[A-Za-z_][\w$#]*)*$")


@dataclass(frozen=True)
class CommandDescriptor:
    """A single command to execute.

    Args:
        text: Raw command text, or the stored procedure name.
        kind: How ``text`` is interpreted.
        parameters: Optional object whose fields are bound as named parameters.

    Raises:
        CommandConstructionError: If text or kind is malformed.
    """

    text: str
    kind: CommandKind = CommandKind.TEXT
    parameters: Any = None

    def __post_init__(self) -> None:
        if not isinstance(self.kind, CommandKind):
            raise CommandConstructionError(str(self.text), f"unknown command kind {self.kind!r}")
        if not isinstance(self.text, str) or not self.text.strip():
            raise CommandConstructionError(str(self.text), "command text must be a non-empty string")
        if self.kind is CommandKind.STORED_PROCEDURE and not _PROCEDURE_NAME.match(self.text):
            raise CommandConstructionError(self.text, "not a valid stored procedure name")
        if (
            self.parameters is not None
            and not isinstance(self.parameters, Mapping)
            and not parameter_fields(self.parameters)
        ):
            raise CommandConstructionError(
                self.text, f"parameter object {self.parameters!r} exposes no fields to bind"
            )

    @property
    def label(self) -> str:
        """Short form used in log events and error messages."""
        text = " ".join(self.text.split())
        return text if len(text) <= 80 else text[:77] + "..."
