# src/fieldconf/config/config_resolve.py
"""Merge defaults, file, environment and arguments into a record.

Passes run in a fixed order and each one overwrites what the previous ones
assigned, so precedence is (lowest → highest):

    default → file → env → arg

After the last pass, required fields and declared dependencies are checked.
Any error aborts the call; the record may then be partially populated and
should be discarded.
"""

import dataclasses
import os
import sys
from collections.abc import Callable, Mapping, Sequence
from pathlib import Path
from typing import Any

from fieldconf.errors import ConfigShapeError
from fieldconf.logs import get_app_logger

from .config_convert import convert_value, is_bool_type
from .config_fields import read_fields
from .config_sources import lookup_arg, lookup_env, read_config_file
from .config_types import FieldSpec, OriginType, ResolveResult
from .config_validate import check_required_and_depends


# Returns the raw text for a field from one source, or None if absent.
RawLookup = Callable[[FieldSpec], str | None]


def _check_shape(record: Any) -> tuple[FieldSpec, ...]:
    """Return the record's field specs, or fail if it cannot be populated."""
    if isinstance(record, type) or not dataclasses.is_dataclass(record):
        xmsg = (
            "config must be a dataclass instance, "
            f"not {getattr(record, '__name__', type(record).__name__)}"
        )
        raise ConfigShapeError(xmsg, record=record)

    params = getattr(record, "__dataclass_params__", None)
    if params is not None and params.frozen:
        xmsg = f"config must be mutable; {type(record).__name__} is frozen"
        raise ConfigShapeError(xmsg, record=record)

    return read_fields(record)


def _apply_pass(
    record: Any,
    specs: Sequence[FieldSpec],
    origin: OriginType,
    lookup: RawLookup,
    *,
    result: ResolveResult,  # modified
) -> None:
    """Convert and assign every field for which ``lookup`` finds a value."""
    logger = get_app_logger()
    logger.trace(f"[resolve] {origin} pass")

    for spec in specs:
        raw = lookup(spec)
        if raw is None:
            continue

        value = convert_value(raw, spec.type, field=spec.name)
        setattr(record, spec.name, value)
        result.is_set[spec.name] = True
        result.origins[spec.name] = origin
        logger.trace(f"[resolve] {spec.name} ← {origin}")


def resolve(
    record: Any,
    file_path: str | Path | None = None,
    *,
    args: Sequence[str] | None = None,
    environ: Mapping[str, str] | None = None,
) -> ResolveResult:
    """Populate ``record`` in place from all sources, then validate it.

    Args:
        record: Mutable dataclass instance whose fields are declared with
            setting() (plain fields take part under their lower-cased name).
        file_path: Key-value configuration file. Empty or None skips the
            file pass; a missing file is not an error.
        args: Command-line tokens without the program name
            (default: ``sys.argv[1:]``).
        environ: Environment mapping (default: ``os.environ``).

    Returns:
        Which fields were set, and by which pass.

    Raises:
        ConfigShapeError: ``record`` is not a mutable dataclass instance.
        FileAccessError: the file exists but cannot be read.
        ConversionError, MapFormatError, UnsupportedTypeError: a value
            could not be converted to its field type.
        RequiredNotSetError, DependsNotSetError: validation failed.
    """
    logger = get_app_logger()
    specs = _check_shape(record)
    arg_list = list(sys.argv[1:] if args is None else args)
    env = os.environ if environ is None else environ

    logger.debug(
        "Resolving %s (%d field(s), file=%s)",
        type(record).__name__,
        len(specs),
        file_path or "<none>",
    )

    result = ResolveResult(is_set={s.name: False for s in specs}, origins={})

    # --- 1. defaults ---
    _apply_pass(
        record, specs, "default", lambda s: s.default or None, result=result
    )

    # --- 2. file ---
    content = read_config_file(file_path)
    if content is not None:
        file_content = content
        _apply_pass(
            record,
            specs,
            "file",
            lambda s: file_content.get(s.file) if s.file else None,
            result=result,
        )

    # --- 3. environment ---
    _apply_pass(record, specs, "env", lambda s: lookup_env(s.env, env), result=result)

    # --- 4. arguments ---
    # an explicit empty value (--name=) leaves the field untouched
    _apply_pass(
        record,
        specs,
        "arg",
        lambda s: lookup_arg(s.arg, arg_list, is_bool=is_bool_type(s.type)) or None,
        result=result,
    )

    # --- 5. validate ---
    check_required_and_depends(specs, result.is_set)
    return result
