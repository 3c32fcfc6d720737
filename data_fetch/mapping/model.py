"""Row-to-object mapper.

Supports dataclasses, Pydantic models, and plain classes with a
parameterless constructor. Fields are matched to columns by exact name.
"""

from __future__ import annotations

import dataclasses
import logging
from collections.abc import Iterator
from typing import Any, Generic, TypeVar

import structlog
from pydantic import ValidationError

from data_fetch.core.cursor import ResultCursor
from data_fetch.core.exceptions import ColumnResolutionError, RowMaterializationError
from data_fetch.core.fields import FieldAccessor, is_pydantic_model, target_fields

T = TypeVar("T")

log = structlog.wrap_logger(logging.getLogger(__name__))

# Ordered (field, column position) pairs resolved against one result set
Plan = list[tuple[FieldAccessor, int]]


class ObjectMapper(Generic[T]):
    """Maps result rows onto fresh instances of a target type.

    The target type's fields are introspected once, on construction.

    Construction strategy:
    1. Pydantic BaseModel -> model_validate(values, strict=True), or
       model_construct when a null left a non-optional field as None
    2. dataclass -> target_class(**init_values), then non-init fields
    3. Plain class -> target_class(), then setattr per field

    Args:
        target_class: The class to construct for each row.

    Raises:
        TargetTypeError: If target_class cannot be used as a mapping target.
    """

    def __init__(self, target_class: type[T]) -> None:
        self._target_class = target_class
        self._fields = target_fields(target_class)
        self._is_pydantic = is_pydantic_model(target_class)
        self._is_dataclass = dataclasses.is_dataclass(target_class)
        self._is_frozen = self._is_dataclass and target_class.__dataclass_params__.frozen  # type: ignore[attr-defined]

    @property
    def fields(self) -> tuple[FieldAccessor, ...]:
        return self._fields

    def resolve(self, cursor: ResultCursor) -> Plan:
        """Resolve every field to a column position.

        Raises:
            ColumnResolutionError: If any field has no column of the same name.
        """
        plan: Plan = []
        missing: list[str] = []
        for field in self._fields:
            position = cursor.position(field.name)
            if position is None:
                missing.append(field.name)
            else:
                plan.append((field, position))

        if missing:
            raise ColumnResolutionError(self._target_class.__name__, missing, list(cursor.columns))
        log.debug(
            "Mapping plan resolved.",
            target=self._target_class.__name__,
            fields=[field.name for field, _ in plan],
        )
        return plan

    def map_rows(self, cursor: ResultCursor) -> Iterator[T]:
        """Yield one target instance per row, in cursor order.

        Column resolution happens before the first row is read.
        """
        plan = self.resolve(cursor)
        for values in cursor:
            yield self.map_row(plan, values, cursor.null_value, cursor.rows_read)
        log.debug("Rows mapped.", target=self._target_class.__name__, rows=cursor.rows_read)

    def map_row(
        self,
        plan: Plan,
        values: tuple[Any, ...],
        null_value: Any = None,
        row_number: int = 0,
    ) -> T:
        """Build one instance from a row buffer."""
        try:
            assigned: dict[str, Any] = {}
            # Fields left as None although their annotation rejects it
            unset: set[str] = set()
            for field, position in plan:
                value = values[position]
                if value is null_value:
                    value = field.absent_value()
                    if value is None and not field.nullable:
                        unset.add(field.name)
                else:
                    field.check(value)
                assigned[field.name] = value
            return self._construct(assigned, unset)
        except (ValidationError, TypeError, ValueError, AttributeError) as e:
            raise RowMaterializationError(self._target_class.__name__, row_number, str(e)) from e

    def _construct(self, assigned: dict[str, Any], unset: set[str]) -> T:
        if self._is_pydantic:
            public = {f.name: assigned[f.name] for f in self._fields if f.init}
            if unset.isdisjoint(public):
                result = self._target_class.model_validate(public, strict=True)  # type: ignore[attr-defined]
            else:
                # Present values were already checked field by field
                result = self._target_class.model_construct(**public)  # type: ignore[attr-defined]
            for field in self._fields:
                if not field.init:
                    field.set(result, assigned[field.name])
            return result  # type: ignore[no-any-return]

        if self._is_dataclass:
            result = self._target_class(**{f.name: assigned[f.name] for f in self._fields if f.init})
            for field in self._fields:
                if not field.init:
                    if self._is_frozen:
                        object.__setattr__(result, field.name, assigned[field.name])
                    else:
                        field.set(result, assigned[field.name])
            return result

        result = self._target_class()
        for field in self._fields:
            field.set(result, assigned[field.name])
        return result
