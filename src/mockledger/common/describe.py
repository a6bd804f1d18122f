from __future__ import annotations

import numbers
import uuid
from collections.abc import Iterable, Mapping, Sequence, Set
from dataclasses import fields, is_dataclass
from datetime import date, time, timedelta, tzinfo
from enum import Enum
from pathlib import PurePath
from typing import Any, Callable, Optional

SEPARATOR = "\x1f"
TERMINATOR = "\x1e"
NONE_LITERAL = "None"
CYCLE_MARKER = "<cycle>"
UNSET_LITERAL = "<unset>"

_MISSING = object()

Retain = Callable[[Any], None]


class Kind(Enum):
    VALUE = "value"
    IDENTITY = "identity"
    ORDERED = "ordered"
    UNORDERED = "unordered"


VALUE_TYPES: tuple[type, ...] = (
    numbers.Number,
    str,
    bytes,
    bytearray,
    date,
    time,
    timedelta,
    tzinfo,
    uuid.UUID,
    PurePath,
    range,
)

_REGISTERED_KINDS: dict[type, Kind] = {}


def register_kind(cls: type, kind: Kind) -> type:
    """Pin how instances of ``cls`` (and its subclasses) are described.

    Registrations win over the built-in classification, so a class that would
    otherwise be compared by identity can opt into value semantics and vice
    versa. Returns ``cls`` so it can wrap a class statement.
    """
    if not isinstance(cls, type):
        raise TypeError("cls must be a type")
    kind = Kind(kind)
    if kind in (Kind.ORDERED, Kind.UNORDERED) and not issubclass(cls, Iterable):
        raise TypeError(f"{cls.__qualname__} is not iterable and cannot be described as {kind.value}")
    _REGISTERED_KINDS[cls] = kind
    return cls


def unregister_kind(cls: type) -> None:
    _REGISTERED_KINDS.pop(cls, None)


def type_name(obj: Any) -> str:
    t = type(obj)
    if t.__module__ == "builtins":
        return t.__qualname__
    return f"{t.__module__}.{t.__qualname__}"


def _is_model(obj: Any) -> bool:
    if isinstance(obj, type):
        return False
    t = type(obj)
    if callable(getattr(t, "model_dump", None)):
        return True
    return hasattr(t, "__fields__") and callable(getattr(t, "dict", None))


def _model_fields(obj: Any) -> Mapping[str, Any]:
    if callable(getattr(type(obj), "model_dump", None)):
        return obj.model_dump()
    return obj.dict()


def kind_of(obj: Any) -> Kind:
    for klass in type(obj).__mro__:
        registered = _REGISTERED_KINDS.get(klass)
        if registered is not None:
            return registered
    if isinstance(obj, VALUE_TYPES) or isinstance(obj, Enum):
        return Kind.VALUE
    if is_dataclass(obj) and not isinstance(obj, type):
        return Kind.VALUE
    if _is_model(obj):
        return Kind.VALUE
    if isinstance(obj, (Set, Mapping)):
        return Kind.UNORDERED
    if isinstance(obj, Sequence):
        return Kind.ORDERED
    return Kind.IDENTITY


def _render_value(obj: Any, seen: set[int], retain: Optional[Retain]) -> str:
    if isinstance(obj, Enum):
        return f"{type(obj).__qualname__}.{obj.name}"
    if is_dataclass(obj):
        parts = [
            f"{f.name}={_describe_field(getattr(obj, f.name, _MISSING), seen, retain)}"
            for f in fields(obj)
            if f.compare
        ]
        return f"{type(obj).__qualname__}({','.join(parts)})"
    if _is_model(obj):
        parts = [f"{k}={_describe(v, seen, retain)}" for k, v in _model_fields(obj).items()]
        return f"{type(obj).__qualname__}({','.join(parts)})"
    return repr(obj)


def _render(obj: Any, seen: set[int], retain: Optional[Retain]) -> str:
    hook = getattr(type(obj), "__fingerprint__", None)
    if hook is not None:
        return str(hook(obj))

    kind = kind_of(obj)
    if kind is Kind.IDENTITY:
        if retain is not None:
            retain(obj)
        return str(id(obj))

    # Anything below may recurse, so guard against self-references.
    marker = id(obj)
    if marker in seen:
        return CYCLE_MARKER
    seen.add(marker)
    try:
        if kind is Kind.VALUE:
            return _render_value(obj, seen, retain)
        if kind is Kind.ORDERED:
            return "[" + "".join(_describe(item, seen, retain) for item in obj) + "]"
        if isinstance(obj, Mapping):
            pairs = sorted(
                (_describe(k, seen, retain), _describe(v, seen, retain)) for k, v in obj.items()
            )
            return "{" + "".join(k + ":" + v for k, v in pairs) + "}"
        return "{" + "".join(sorted(_describe(item, seen, retain) for item in obj)) + "}"
    finally:
        seen.discard(marker)


def _describe_field(value: Any, seen: set[int], retain: Optional[Retain]) -> str:
    # init=False fields may never have been assigned
    if value is _MISSING:
        return UNSET_LITERAL + TERMINATOR
    return _describe(value, seen, retain)


def _describe(obj: Any, seen: set[int], retain: Optional[Retain]) -> str:
    if obj is None:
        return NONE_LITERAL + TERMINATOR
    return _render(obj, seen, retain) + SEPARATOR + type_name(obj) + TERMINATOR


def describe_value(obj: Any, *, retain: Optional[Retain] = None) -> str:
    """Render one argument as ``value SEPARATOR type TERMINATOR``.

    Value-semantic objects render their contents, identity-semantic objects
    render ``id(obj)``. Sets and mappings are sorted by the descriptions of
    their elements (keys for mappings), sequences keep their order. ``retain``
    is called with every identity-described object so the caller can keep it
    alive while its ``id`` is in use.
    """
    return _describe(obj, set(), retain)
