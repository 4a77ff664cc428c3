# src/fieldconf/config/config_convert.py
"""Typed string-to-value conversion for record fields."""

import math
import re
from collections.abc import Callable
from datetime import datetime, timedelta, timezone
from decimal import Decimal
from typing import Any, get_args, get_origin

from fieldconf.constants import (
    INT64_MAX,
    INT64_MIN,
    KV_SEPARATOR,
    SLICE_SEPARATOR,
    UINT64_MAX,
)
from fieldconf.errors import ConversionError, MapFormatError, UnsupportedTypeError
from fieldconf.utils import unwrap_optional

from .config_types import TypeCategory, Unsigned


# --- constants ------------------------------------------------------

_BOOL_TRUE = {"1", "t", "T", "TRUE", "true", "True"}
_BOOL_FALSE = {"0", "f", "F", "FALSE", "false", "False"}

_INT_RE = re.compile(r"[+-]?[0-9]+")
_UINT_RE = re.compile(r"[0-9]+")
_FLOAT_RE = re.compile(
    r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?"
    r"|[+-]?(?:inf|infinity|nan)",
    re.IGNORECASE,
)

_DURATION_PART_RE = re.compile(r"([0-9]*\.?[0-9]*)(ns|us|µs|μs|ms|s|m|h)")  # noqa: RUF001
_DURATION_UNIT_NS: dict[str, int] = {
    "ns": 1,
    "us": 1_000,
    "µs": 1_000,  # U+00B5 micro sign
    "μs": 1_000,  # U+03BC greek mu  # noqa: RUF003
    "ms": 1_000_000,
    "s": 1_000_000_000,
    "m": 60 * 1_000_000_000,
    "h": 3600 * 1_000_000_000,
}

# RFC 3339, e.g. 2006-01-02T15:04:05Z or 2006-01-02T15:04:05.5+07:00
_TIMESTAMP_RE = re.compile(
    r"([0-9]{4})-([0-9]{2})-([0-9]{2})"
    r"T([0-9]{2}):([0-9]{2}):([0-9]{2})(?:\.([0-9]{1,9}))?"
    r"(Z|[+-][0-9]{2}:[0-9]{2})"
)

TYPE_LABELS: dict[TypeCategory, str] = {
    "bool": "True or False",
    "int": "Integer",
    "uint": "Unsigned Integer",
    "float": "Float",
    "str": "String",
    "duration": "Duration",
    "timestamp": "Timestamp",
    "list": "List",
    "map": "Map",
    "unsupported": "String",
}


# --- type inspection ------------------------------------------------


def _scalar_category(target: Any) -> TypeCategory:
    # order matters: Unsigned and bool are both ints at runtime
    if target is Unsigned:
        return "uint"
    if target is bool:
        return "bool"
    if target is int:
        return "int"
    if target is float:
        return "float"
    if target is str:
        return "str"
    if target is timedelta:
        return "duration"
    if target is datetime:
        return "timestamp"
    return "unsupported"


def type_category(target: Any) -> TypeCategory:
    """Classify a field annotation into its conversion family."""
    target = unwrap_optional(target)
    origin = get_origin(target)
    args = get_args(target)

    if target is list or origin is list:
        elem = args[0] if args else str
        return "list" if _scalar_category(elem) != "unsupported" else "unsupported"

    if target is dict or origin is dict:
        key_t, val_t = args if len(args) == 2 else (str, str)  # noqa: PLR2004
        if key_t is not str or _scalar_category(val_t) == "unsupported":
            return "unsupported"
        return "map"

    return _scalar_category(target)


def is_bool_type(target: Any) -> bool:
    return type_category(target) == "bool"


def type_label(target: Any) -> str:
    """Readable type name for usage text (e.g. 'Integer', 'Map')."""
    return TYPE_LABELS[type_category(target)]


# --- scalar parsers -------------------------------------------------


def parse_bool(s: str) -> bool:
    if s in _BOOL_TRUE:
        return True
    if s in _BOOL_FALSE:
        return False
    xmsg = f"invalid boolean {s!r}"
    raise ValueError(xmsg)


def parse_int(s: str) -> int:
    if not _INT_RE.fullmatch(s):
        xmsg = f"invalid integer {s!r}"
        raise ValueError(xmsg)
    v = int(s)
    if not INT64_MIN <= v <= INT64_MAX:
        xmsg = f"integer {s!r} out of range"
        raise ValueError(xmsg)
    return v


def parse_uint(s: str) -> int:
    if not _UINT_RE.fullmatch(s):
        xmsg = f"invalid unsigned integer {s!r}"
        raise ValueError(xmsg)
    v = int(s)
    if v > UINT64_MAX:
        xmsg = f"unsigned integer {s!r} out of range"
        raise ValueError(xmsg)
    return v


def parse_float(s: str) -> float:
    if not _FLOAT_RE.fullmatch(s):
        xmsg = f"invalid float {s!r}"
        raise ValueError(xmsg)
    v = float(s)
    # finite text that overflowed to ±inf
    if math.isinf(v) and "inf" not in s.lower():
        xmsg = f"float {s!r} out of range"
        raise ValueError(xmsg)
    return v


def parse_duration(s: str) -> timedelta:
    """Parse a duration such as '300ms', '-1.5h' or '2h45m'.

    Units: ns, us (or µs), ms, s, m, h. A bare '0' is allowed.
    Sub-microsecond remainders are truncated.
    """
    text = s
    negative = False
    if text[:1] in {"+", "-"}:
        negative = text[0] == "-"
        text = text[1:]
    if text == "0":
        return timedelta(0)
    if not text:
        xmsg = f"invalid duration {s!r}"
        raise ValueError(xmsg)

    total_ns = Decimal(0)
    pos = 0
    while pos < len(text):
        m = _DURATION_PART_RE.match(text, pos)
        if m is None or m.group(1) in {"", "."}:
            xmsg = f"invalid duration {s!r}"
            raise ValueError(xmsg)
        total_ns += Decimal(m.group(1)) * _DURATION_UNIT_NS[m.group(2)]
        pos = m.end()

    ns = -int(total_ns) if negative else int(total_ns)
    if not INT64_MIN <= ns <= INT64_MAX:
        xmsg = f"invalid duration {s!r}: out of range"
        raise ValueError(xmsg)
    # truncate toward zero
    micros = abs(ns) // 1000
    return timedelta(microseconds=-micros if ns < 0 else micros)


def parse_timestamp(s: str) -> datetime:
    """Parse an RFC 3339 date-time with an explicit offset ('Z' or ±HH:MM)."""
    m = _TIMESTAMP_RE.fullmatch(s)
    if m is None:
        xmsg = f"invalid RFC 3339 timestamp {s!r}"
        raise ValueError(xmsg)
    year, month, day, hour, minute, second, frac, offset = m.groups()
    micros = int((frac or "").ljust(6, "0")[:6])
    if offset == "Z":
        tz = timezone.utc
    else:
        sign = -1 if offset[0] == "-" else 1
        delta = timedelta(hours=int(offset[1:3]), minutes=int(offset[4:6]))
        tz = timezone(sign * delta)
    return datetime(
        int(year),
        int(month),
        int(day),
        int(hour),
        int(minute),
        int(second),
        micros,
        tzinfo=tz,
    )


_SCALAR_PARSERS: dict[TypeCategory, Callable[[str], Any]] = {
    "bool": parse_bool,
    "int": parse_int,
    "uint": parse_uint,
    "float": parse_float,
    "str": str,
    "duration": parse_duration,
    "timestamp": parse_timestamp,
}


# --- conversion -----------------------------------------------------


def _prefix(field: str | None) -> str:
    return f"parse field {field}: " if field else ""


def _convert_scalar(raw: str, target: Any, *, field: str | None) -> Any:
    parser = _SCALAR_PARSERS[_scalar_category(target)]
    try:
        return parser(raw)
    except ValueError as e:
        xmsg = f"{_prefix(field)}{e}"
        raise ConversionError(xmsg, field=field, value=raw, target=target) from e


def _convert_list(raw: str, target: Any, *, field: str | None) -> list[Any]:
    args = get_args(target)
    elem_t = args[0] if args else str
    result: list[Any] = []
    for i, elem in enumerate(raw.split(SLICE_SEPARATOR)):
        try:
            result.append(_convert_scalar(elem.strip(), elem_t, field=field))
        except ConversionError as e:
            xmsg = f"{e} (element #{i})"
            raise ConversionError(xmsg, field=field, value=raw, target=target) from e
    return result


def _convert_map(raw: str, target: Any, *, field: str | None) -> dict[str, Any]:
    args = get_args(target)
    val_t = args[1] if len(args) == 2 else str  # noqa: PLR2004
    result: dict[str, Any] = {}
    for pair in raw.split(SLICE_SEPARATOR):
        kv = pair.split(KV_SEPARATOR, 1)
        if len(kv) != 2:  # noqa: PLR2004
            xmsg = f"{_prefix(field)}invalid map value: {pair}"
            raise MapFormatError(xmsg, token=pair, field=field)
        key, val = kv
        result[key.strip()] = _convert_scalar(val.strip(), val_t, field=field)
    return result


def convert_value(raw: str, target: Any, *, field: str | None = None) -> Any:
    """Convert raw text into a value of the field type ``target``.

    Args:
        raw: Text from a default literal, the file, the environment or argv.
        target: The field annotation (``int``, ``list[float]``, ``dict[str,
            timedelta]``, ``Unsigned``, ``datetime | None``, ...).
        field: Field name, used in error messages.

    Raises:
        ConversionError: the text does not parse as ``target``.
        MapFormatError: a mapping pair is not ``key:value``.
        UnsupportedTypeError: ``target`` has no conversion rule.
    """
    target = unwrap_optional(target)
    category = type_category(target)
    if category == "unsupported":
        name = getattr(target, "__name__", repr(target))
        xmsg = f"{_prefix(field)}unsupported type {name}"
        raise UnsupportedTypeError(xmsg, target=target, field=field)
    if category == "list":
        return _convert_list(raw, target, field=field)
    if category == "map":
        return _convert_map(raw, target, field=field)
    return _convert_scalar(raw, target, field=field)
