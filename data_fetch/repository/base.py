"""Repository base class.

Thin wrapper over DataFetcher for DDD-oriented usage.
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any, TypeVar

from data_fetch.core.fetcher import DataFetcher

T = TypeVar("T")


class Repository:
    """Base repository class for DDD-oriented usage.

    Subclasses define concrete data access methods that delegate to the
    fetcher without repeating the connection string.
    """

    def __init__(self, fetcher: DataFetcher, connection_string: str) -> None:
        self.fetcher = fetcher
        self.connection_string = connection_string

    def command(self, result_type: type[T], text: str) -> Iterator[T]:
        return self.fetcher.command(result_type, text, self.connection_string)

    def stored_procedure(
        self,
        result_type: type[T],
        name: str,
        parameters: Any = None,
    ) -> Iterator[T]:
        return self.fetcher.stored_procedure(result_type, name, self.connection_string, parameters)
