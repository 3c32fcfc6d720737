"""Mapping layer - transform result rows into typed objects."""

from __future__ import annotations

from data_fetch.mapping.model import ObjectMapper
from data_fetch.mapping.protocol import Mapper

__all__ = [
    "Mapper",
    "ObjectMapper",
]
