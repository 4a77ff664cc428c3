# src/fieldconf/utils/__init__.py

from .utils_types import cast_hint, schema_from_dataclass, unwrap_optional


__all__ = [
    # utils_types
    "cast_hint",
    "schema_from_dataclass",
    "unwrap_optional",
]
