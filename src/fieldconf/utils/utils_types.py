# src/fieldconf/utils/utils_types.py


import builtins
import dataclasses
import sys
from types import NoneType, UnionType
from typing import (
    Any,
    TypeVar,
    Union,
    cast,
    get_args,
    get_origin,
    get_type_hints,
)


T = TypeVar("T")


def cast_hint(typ: type[T], value: Any) -> T:  # noqa: ARG001
    """Explicit cast that documents intent but is purely for type hinting.

    A drop-in replacement for `typing.cast`, meant for places where the
    narrowing is intentional and a plain cast() would read as noise.

    This function performs *no runtime checks*.
    """
    return cast("T", value)


def _hint_for_field(cls: type[Any], f: dataclasses.Field[Any]) -> Any:
    if not isinstance(f.type, str):
        return f.type
    module = sys.modules.get(cls.__module__)
    globalns = {**vars(builtins), **getattr(module, "__dict__", {})}
    holder = type(f"_{f.name}_hint", (), {"__annotations__": {f.name: f.type}})
    try:
        return get_type_hints(holder, globalns, dict(vars(cls)))[f.name]
    except (NameError, TypeError):
        return f.type


def schema_from_dataclass(cls: type[Any]) -> dict[str, Any]:
    """Map each dataclass field name to its resolved annotation.

    String annotations (``from __future__ import annotations``) are resolved
    with get_type_hints(). When that fails for the class as a whole, e.g.
    because one field names a type that only exists in a function's local
    scope, each field is resolved on its own against the class's module and
    only the failing ones keep their raw annotation.
    """
    try:
        hints = get_type_hints(cls)
    except (NameError, TypeError):
        return {f.name: _hint_for_field(cls, f) for f in dataclasses.fields(cls)}
    return {f.name: hints.get(f.name, f.type) for f in dataclasses.fields(cls)}


def unwrap_optional(tp: Any) -> Any:
    """Return T for ``T | None`` / ``Optional[T]``; anything else unchanged."""
    if get_origin(tp) not in {Union, UnionType}:
        return tp
    members = [a for a in get_args(tp) if a is not NoneType]
    if len(members) == 1:
        return members[0]
    return tp
