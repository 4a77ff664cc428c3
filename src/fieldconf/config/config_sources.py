# src/fieldconf/config/config_sources.py
"""Raw value lookup for the file, environment and argument passes."""

from collections.abc import Iterable, Mapping, Sequence
from pathlib import Path

from fieldconf.constants import (
    ARG_PREFIX,
    ARG_VALUE_SEPARATOR,
    BARE_BOOL_VALUE,
    KV_SEPARATOR,
)
from fieldconf.errors import FileAccessError
from fieldconf.logs import get_app_logger


# --- file -----------------------------------------------------------


def strip_quotes(value: str) -> str:
    """Remove one layer of matching single or double quotes."""
    if len(value) >= 2 and value[0] == value[-1] and value[0] in {'"', "'"}:  # noqa: PLR2004
        return value[1:-1]
    return value


def parse_config_lines(lines: Iterable[str]) -> dict[str, str]:
    """Build the key → value map of a configuration file.

    Each line is split on its first colon; key and value are trimmed and
    the value loses one layer of matching quotes. Lines without a colon
    are skipped. Later duplicates win.
    """
    content: dict[str, str] = {}
    for line in lines:
        parts = line.split(KV_SEPARATOR, 1)
        if len(parts) != 2:  # noqa: PLR2004
            continue
        key, value = parts
        content[key.strip()] = strip_quotes(value.strip())
    return content


def read_config_file(path: str | Path | None) -> dict[str, str] | None:
    """Read a key-value configuration file.

    Returns:
        The parsed content, or None when no path was given or the file
        does not exist.

    Raises:
        FileAccessError: the file exists but cannot be opened, read
            or decoded.
    """
    logger = get_app_logger()
    if not path:
        return None

    config_path = Path(path)
    try:
        with config_path.open(encoding="utf-8") as f:
            content = parse_config_lines(f)
    except FileNotFoundError:
        # no file configuration supplied
        logger.debug("No config file at %s; skipping file source", config_path)
        return None
    except (OSError, UnicodeDecodeError) as e:
        xmsg = f"Could not read config file {config_path}: {e}"
        raise FileAccessError(xmsg, path=config_path) from e

    logger.trace(f"[read_config_file] {len(content)} key(s) from {config_path}")
    return content


# --- environment ----------------------------------------------------


def lookup_env(name: str, environ: Mapping[str, str]) -> str | None:
    """Value of an environment variable; an empty string still counts."""
    if not name:
        return None
    return environ.get(name)


# --- arguments ------------------------------------------------------


def lookup_arg(name: str, args: Sequence[str], *, is_bool: bool = False) -> str | None:
    """Scan command-line tokens for ``name`` and return its value.

    Accepted forms (one or more leading dashes, stripped before comparing):
      - ``-name=value`` / ``--name=value``
      - ``-name value`` / ``--name value`` when ``value`` does not start
        with a dash
      - ``-name`` / ``--name`` alone, for boolean fields only, meaning "true"

    ``args`` excludes the program name. The first matching token wins.
    Returns None when nothing matches. An explicit empty value
    (``--name=``) is returned as "" and ends the scan.
    """
    for i, token in enumerate(args):
        # positionals (task names, values) never match
        if not token.startswith(ARG_PREFIX):
            continue
        arg = token.lstrip(ARG_PREFIX)
        equal_index = arg.find(ARG_VALUE_SEPARATOR)

        if equal_index > 0:
            if arg[:equal_index] == name:
                return arg[equal_index + 1 :]
        elif arg == name:
            has_next = i + 1 < len(args)
            if has_next and not args[i + 1].startswith(ARG_PREFIX):
                return args[i + 1]
            if is_bool:
                return BARE_BOOL_VALUE

    return None
