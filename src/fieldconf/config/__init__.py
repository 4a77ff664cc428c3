# src/fieldconf/config/__init__.py

"""Configuration resolution for fieldconf.

This module provides field declaration, value conversion, source lookup,
resolution and validation.
"""

from .config_convert import convert_value, type_category, type_label
from .config_fields import arg_name_for, read_fields, setting, split_depends
from .config_resolve import resolve
from .config_sources import (
    lookup_arg,
    lookup_env,
    parse_config_lines,
    read_config_file,
    strip_quotes,
)
from .config_types import (
    FieldSpec,
    FieldTags,
    OriginType,
    ResolveResult,
    TypeCategory,
    Unsigned,
)
from .config_validate import check_required_and_depends


__all__ = [  # noqa: RUF022
    # config_convert
    "convert_value",
    "type_category",
    "type_label",
    # config_fields
    "arg_name_for",
    "read_fields",
    "setting",
    "split_depends",
    # config_resolve
    "resolve",
    # config_sources
    "lookup_arg",
    "lookup_env",
    "parse_config_lines",
    "read_config_file",
    "strip_quotes",
    # config_types
    "FieldSpec",
    "FieldTags",
    "OriginType",
    "ResolveResult",
    "TypeCategory",
    "Unsigned",
    # config_validate
    "check_required_and_depends",
]
