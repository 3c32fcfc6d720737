"""Mapper protocol.

The fetcher hands each mapper an open ResultCursor and pulls mapped
objects from it one at a time.
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import Protocol, TypeVar, runtime_checkable

from data_fetch.core.cursor import ResultCursor

T_co = TypeVar("T_co", covariant=True)


@runtime_checkable
class Mapper(Protocol[T_co]):
    """Base mapper protocol."""

    def map_rows(self, cursor: ResultCursor) -> Iterator[T_co]:
        """Lazily map every remaining row of *cursor* to a target object."""
        ...
