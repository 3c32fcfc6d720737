"""Field introspection for parameter objects and mapping targets.

A FieldAccessor is the per-field capability the mapper works through:
a name, a getter, a setter, a strict type check, and the value the field
takes when the backend reports no value.

Supports dataclasses, Pydantic models, and plain classes.
"""

from __future__ import annotations

import copy
import dataclasses
import inspect
import types
import typing
from collections.abc import Callable, Mapping
from typing import Any, ClassVar, Union

from pydantic import BaseModel, ConfigDict, PydanticUserError, TypeAdapter

from data_fetch.core.exceptions import TargetTypeError

class _Missing:
    """Marker for a field declared without a default."""

    def __repr__(self) -> str:
        return "<MISSING>"


_MISSING: Any = _Missing()

# Types whose no-argument call yields their empty value
_EMPTY_TYPES: tuple[type, ...] = (
    int,
    float,
    complex,
    bool,
    str,
    bytes,
    list,
    dict,
    tuple,
    set,
    frozenset,
)

_STRICT_CONFIG = ConfigDict(strict=True, arbitrary_types_allowed=True)


def is_pydantic_model(cls: Any) -> bool:
    """Check if a class is a Pydantic BaseModel."""
    return isinstance(cls, type) and issubclass(cls, BaseModel)


def _strip_annotated(annotation: Any) -> Any:
    if typing.get_origin(annotation) is typing.Annotated:
        return typing.get_args(annotation)[0]
    return annotation


def _is_class_var(annotation: Any) -> bool:
    return annotation is ClassVar or typing.get_origin(annotation) is ClassVar


def _admits_none(annotation: Any) -> bool:
    """True if ``None`` is a legal value for the annotation."""
    annotation = _strip_annotated(annotation)
    if annotation is Any or annotation is None or annotation is type(None):
        return True
    origin = typing.get_origin(annotation)
    if origin is Union or origin is types.UnionType:
        return any(_admits_none(arg) for arg in typing.get_args(annotation))
    return False


def _type_adapter(annotation: Any) -> TypeAdapter[Any] | None:
    if annotation is Any:
        return None
    try:
        return TypeAdapter(annotation, config=_STRICT_CONFIG)
    except PydanticUserError:
        # Models, dataclasses and TypedDicts carry their own config
        return TypeAdapter(annotation)


@dataclasses.dataclass
class FieldAccessor:
    """Access to one named field of a mapping target.

    Args:
        name: Attribute name, matched verbatim against column names.
        annotation: Declared type, or ``Any`` when undeclared.
        default: Declared default value, if any.
        default_factory: Declared default factory, if any.
        init: Whether the field is a constructor argument (dataclasses).
        checked: Whether values are type-checked before assignment.
    """

    name: str
    annotation: Any = Any
    default: Any = _MISSING
    default_factory: Callable[[], Any] | None = None
    init: bool = True
    checked: bool = True
    _validator: TypeAdapter[Any] | None = dataclasses.field(
        default=None, init=False, repr=False, compare=False
    )

    def __post_init__(self) -> None:
        if self.checked:
            self._validator = _type_adapter(self.annotation)

    def get(self, obj: Any) -> Any:
        return getattr(obj, self.name)

    def set(self, obj: Any, value: Any) -> None:
        setattr(obj, self.name, value)

    def check(self, value: Any) -> None:
        """Validate ``value`` against the annotation without coercing it.

        Raises:
            pydantic.ValidationError: If the value's type is incompatible.
        """
        if self._validator is not None:
            self._validator.validate_python(value, strict=True)

    @property
    def nullable(self) -> bool:
        return _admits_none(self.annotation)

    def absent_value(self) -> Any:
        """Value assigned when the backend reports no value for this field.

        ``None`` if the annotation admits it, else the declared default,
        else the empty value of a builtin type, else ``None``.
        """
        if self.nullable:
            return None
        if self.default_factory is not None:
            return self.default_factory()
        if self.default is not _MISSING:
            return copy.copy(self.default)
        annotation = _strip_annotated(self.annotation)
        empty = typing.get_origin(annotation) or annotation
        if empty in _EMPTY_TYPES:
            return empty()
        return None


def _resolved_hints(cls: type) -> dict[str, Any]:
    """Type hints across the MRO, base classes first.

    Annotations that cannot be resolved (e.g. names local to a function)
    degrade to ``Any``.
    """
    try:
        return typing.get_type_hints(cls, include_extras=True)
    except (NameError, TypeError):
        hints: dict[str, Any] = {}
        for base in reversed(cls.__mro__):
            hints.update(inspect.get_annotations(base))
        return {name: Any if isinstance(hint, str) else hint for name, hint in hints.items()}


def _slot_names(cls: type) -> list[str]:
    names: list[str] = []
    for base in reversed(cls.__mro__):
        slots = base.__dict__.get("__slots__", ())
        if isinstance(slots, str):
            slots = (slots,)
        names.extend(s for s in slots if s not in ("__dict__", "__weakref__") and s not in names)
    return names


def _dataclass_fields(cls: type) -> list[FieldAccessor]:
    hints = _resolved_hints(cls)
    return [
        FieldAccessor(
            f.name,
            hints.get(f.name, Any),
            default=_MISSING if f.default is dataclasses.MISSING else f.default,
            default_factory=None if f.default_factory is dataclasses.MISSING else f.default_factory,
            init=f.init,
        )
        for f in dataclasses.fields(cls)  # type: ignore[arg-type]
    ]


def _pydantic_fields(cls: type[BaseModel]) -> list[FieldAccessor]:
    fields = [
        FieldAccessor(
            name,
            info.annotation if info.annotation is not None else Any,
            default=_MISSING if info.is_required() or info.default_factory is not None else info.default,
            default_factory=info.default_factory,  # type: ignore[arg-type]
        )
        for name, info in cls.model_fields.items()
    ]
    hints = _resolved_hints(cls)
    fields.extend(
        FieldAccessor(name, hints.get(name, Any), init=False)
        for name in cls.__private_attributes__
    )
    return fields


def _plain_fields(cls: type) -> list[FieldAccessor]:
    try:
        probe = cls()
    except TypeError as e:
        raise TargetTypeError(cls.__name__, f"a parameterless constructor is required: {e}") from e

    fields: dict[str, FieldAccessor] = {}
    for name, hint in _resolved_hints(cls).items():
        if not _is_class_var(hint):
            fields[name] = FieldAccessor(name, hint, default=getattr(probe, name, _MISSING))

    # Attributes assigned by the constructor without a class-level annotation
    assigned = list(vars(probe)) if hasattr(probe, "__dict__") else []
    for name in assigned + _slot_names(cls):
        if name not in fields:
            fields[name] = FieldAccessor(name, default=getattr(probe, name, _MISSING))
    return list(fields.values())


def target_fields(cls: type) -> tuple[FieldAccessor, ...]:
    """Introspect the instance fields of a mapping target type.

    Public and non-public (underscore) fields are both included, in
    declaration order.

    Raises:
        TargetTypeError: If ``cls`` is not a class, has no fields, has no
            parameterless constructor (plain classes), or declares a field
            type that cannot be checked.
    """
    if not isinstance(cls, type):
        raise TargetTypeError(repr(cls), "mapping target must be a class")
    try:
        if is_pydantic_model(cls):
            fields = _pydantic_fields(cls)
        elif dataclasses.is_dataclass(cls):
            fields = _dataclass_fields(cls)
        else:
            fields = _plain_fields(cls)
    except PydanticUserError as e:
        raise TargetTypeError(cls.__name__, f"unsupported field annotation: {e}") from e

    if not fields:
        raise TargetTypeError(cls.__name__, "no instance fields to map")
    return tuple(fields)


def parameter_fields(obj: Any) -> list[tuple[str, Any]]:
    """Return ``(name, current value)`` for every instance field of ``obj``.

    Mappings contribute their items; dataclass, Pydantic and named tuple
    instances their declared fields; any other object its instance
    ``__dict__`` followed by its ``__slots__``.
    """
    if isinstance(obj, Mapping):
        return [(str(key), value) for key, value in obj.items()]
    if is_pydantic_model(type(obj)):
        pairs = [(name, getattr(obj, name)) for name in type(obj).model_fields]
        pairs.extend((obj.__pydantic_private__ or {}).items())
        return pairs
    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        return [(f.name, getattr(obj, f.name)) for f in dataclasses.fields(obj)]
    if isinstance(obj, tuple) and hasattr(obj, "_fields"):
        return list(zip(obj._fields, obj, strict=True))

    pairs = list(vars(obj).items()) if hasattr(obj, "__dict__") else []
    seen = {name for name, _ in pairs}
    for name in _slot_names(type(obj)):
        if name not in seen and hasattr(obj, name):
            pairs.append((name, getattr(obj, name)))
    return pairs
