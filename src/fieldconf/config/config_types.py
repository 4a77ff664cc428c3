# src/fieldconf/config/config_types.py


from dataclasses import dataclass
from typing import Any, Literal, NewType, TypedDict

from typing_extensions import NotRequired


# Unsigned 64-bit integer field type; values are plain ints at runtime.
Unsigned = NewType("Unsigned", int)

# Which pass assigned a field.
OriginType = Literal["default", "file", "env", "arg"]

# Conversion family of a field type, used for dispatch and usage text.
TypeCategory = Literal[
    "bool",
    "int",
    "uint",
    "float",
    "str",
    "duration",
    "timestamp",
    "list",
    "map",
    "unsupported",
]


class FieldTags(TypedDict):
    """Per-field declaration stored in dataclasses.field(metadata=...)."""

    file: NotRequired[str]  # key in the configuration file
    env: NotRequired[str]  # environment variable name
    arg: NotRequired[str]  # argument name (defaults to lower-cased field name)
    default: NotRequired[str]  # default literal, converted like any other source
    desc: NotRequired[str]  # human-readable description
    required: NotRequired[bool]
    depends: NotRequired[str | list[str]]  # comma-separated field names


@dataclass(frozen=True)
class FieldSpec:
    """Resolved, immutable declaration of one record field."""

    name: str
    type: Any
    file: str = ""
    env: str = ""
    arg: str = ""
    default: str = ""
    desc: str = ""
    required: bool = False
    depends: tuple[str, ...] = ()


@dataclass
class ResolveResult:
    """Outcome of a successful resolution."""

    # field name → True once any pass assigned it
    is_set: dict[str, bool]
    # field name → last pass that assigned it (only set fields appear)
    origins: dict[str, OriginType]
