# src/fieldconf/config/config_fields.py
"""Read per-field declarations off a dataclass.

A record declares its fields with setting(), which stores a FieldTags
mapping in the dataclass field's metadata:

    @dataclass
    class Config:
        db_url: str = setting("", file="dbURL", env="DB_URL", arg="db-url",
                              required=True, desc="Database URL")
        retries: int = setting(0, default="3", desc="Maximum number of retries")

Fields declared with a plain annotation still take part in resolution: they
have no file key, no environment variable, and are matched on the command
line by their lower-cased name.
"""

import dataclasses
from collections.abc import Callable, Mapping
from functools import lru_cache
from typing import Any

from fieldconf.constants import DEPENDS_SEPARATOR, FIELD_METADATA_KEY
from fieldconf.errors import ConfigShapeError
from fieldconf.utils import cast_hint, schema_from_dataclass

from .config_types import FieldSpec, FieldTags


def setting(  # noqa: PLR0913
    value: Any = dataclasses.MISSING,
    *,
    factory: Callable[[], Any] | Any = dataclasses.MISSING,
    file: str = "",
    env: str = "",
    arg: str = "",
    default: str = "",
    desc: str = "",
    required: bool = False,
    depends: str | list[str] = "",
) -> Any:
    """Declare a configurable dataclass field.

    Args:
        value: Initial Python value of the field (its "zero" value).
        factory: Zero-argument callable for mutable initial values
            (e.g. ``list`` or ``dict``); exclusive with ``value``.
        file: Key of the field in the configuration file.
        env: Environment variable supplying the field.
        arg: Command-line argument name; defaults to the lower-cased field name.
        default: Default literal, converted like any other source value.
        desc: Description shown in usage text.
        required: Fail resolution if no source sets the field.
        depends: Names of fields that must be set, comma-separated or as a list.

    Returns:
        A dataclasses.field() carrying the tags in its metadata.
    """
    tags: FieldTags = {}
    if file:
        tags["file"] = file
    if env:
        tags["env"] = env
    if arg:
        tags["arg"] = arg
    if default:
        tags["default"] = default
    if desc:
        tags["desc"] = desc
    if required:
        tags["required"] = True
    if depends:
        tags["depends"] = depends

    metadata = {FIELD_METADATA_KEY: tags}
    if factory is not dataclasses.MISSING:
        return dataclasses.field(default_factory=factory, metadata=metadata)
    return dataclasses.field(default=value, metadata=metadata)


def split_depends(raw: str | list[str] | tuple[str, ...] | None) -> tuple[str, ...]:
    """Normalize a dependency declaration into a tuple of field names."""
    if not raw:
        return ()
    parts = raw.split(DEPENDS_SEPARATOR) if isinstance(raw, str) else list(raw)
    return tuple(p.strip() for p in parts if p.strip())


def arg_name_for(name: str, tags: Mapping[str, Any]) -> str:
    """Argument name of a field: the explicit tag or the lower-cased name."""
    return tags.get("arg") or name.lower()


def _tags_of(f: dataclasses.Field[Any]) -> Mapping[str, Any]:
    tags = f.metadata.get(FIELD_METADATA_KEY)
    if isinstance(tags, Mapping):
        return cast_hint(Mapping[str, Any], tags)
    return {}


@lru_cache(maxsize=None)
def _read_fields_cached(cls: type[Any]) -> tuple[FieldSpec, ...]:
    schema = schema_from_dataclass(cls)
    specs: list[FieldSpec] = []
    for f in dataclasses.fields(cls):
        tags = _tags_of(f)
        specs.append(
            FieldSpec(
                name=f.name,
                type=schema[f.name],
                file=tags.get("file") or "",
                env=tags.get("env") or "",
                arg=arg_name_for(f.name, tags),
                default=tags.get("default") or "",
                desc=tags.get("desc") or "",
                required=bool(tags.get("required", False)),
                depends=split_depends(tags.get("depends")),
            )
        )
    return tuple(specs)


def read_fields(record: Any) -> tuple[FieldSpec, ...]:
    """Return the declarations of a dataclass (instance or class), in order.

    Raises:
        ConfigShapeError: if ``record`` is not a dataclass.
    """
    cls = record if isinstance(record, type) else type(record)
    if not dataclasses.is_dataclass(cls):
        xmsg = f"config must be a dataclass, not {cls.__name__}"
        raise ConfigShapeError(xmsg, record=record)
    return _read_fields_cached(cls)
