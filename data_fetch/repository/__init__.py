"""Repository layer - DDD repository pattern."""

from __future__ import annotations

from data_fetch.repository.base import Repository

__all__ = [
    "Repository",
]
