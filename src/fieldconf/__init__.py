# src/fieldconf/__init__.py

"""Fieldconf: populate a dataclass from defaults, a file, env and argv.

Full developer API
==================
This package re-exports all non-private symbols from its submodules.
Anything prefixed with "_" is considered internal and may change.

Highlights:
    - setting()                 → Declare a configurable dataclass field
    - resolve()                 → Merge all sources into a record and validate it
    - load() / must_load()      → resolve() plus -help handling for app startup
    - Loader                    → resolve() with an explicit load-once latch
    - print_usage()             → Describe a record's settings
    - drop_args_after_target()  → Trim flags a task runner must not see
"""

from .args import drop_args_after_target
from .config import (
    FieldSpec,
    FieldTags,
    OriginType,
    ResolveResult,
    Unsigned,
    check_required_and_depends,
    convert_value,
    read_fields,
    resolve,
    setting,
)
from .constants import DEFAULT_LOG_LEVEL, DEFAULT_PASSTHROUGH_OPTIONS
from .errors import (
    ConfigError,
    ConfigShapeError,
    ConversionError,
    DependsNotSetError,
    FileAccessError,
    MapFormatError,
    RequiredNotSetError,
    UnsupportedTypeError,
)
from .loader import Loader, load, must_load
from .logs import get_app_logger
from .meta import PROGRAM_DISPLAY, PROGRAM_ENV, PROGRAM_PACKAGE
from .usage import format_usage, is_help_requested, print_usage


__all__ = [  # noqa: RUF022
    # args
    "drop_args_after_target",
    # config
    "FieldSpec",
    "FieldTags",
    "OriginType",
    "ResolveResult",
    "Unsigned",
    "check_required_and_depends",
    "convert_value",
    "read_fields",
    "resolve",
    "setting",
    # constants
    "DEFAULT_LOG_LEVEL",
    "DEFAULT_PASSTHROUGH_OPTIONS",
    # errors
    "ConfigError",
    "ConfigShapeError",
    "ConversionError",
    "DependsNotSetError",
    "FileAccessError",
    "MapFormatError",
    "RequiredNotSetError",
    "UnsupportedTypeError",
    # loader
    "Loader",
    "load",
    "must_load",
    # logs
    "get_app_logger",
    # meta
    "PROGRAM_DISPLAY",
    "PROGRAM_ENV",
    "PROGRAM_PACKAGE",
    # usage
    "format_usage",
    "is_help_requested",
    "print_usage",
]
