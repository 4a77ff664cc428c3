# src/fieldconf/loader.py
"""Application-facing entry points around resolve()."""

from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any, TextIO

from .config import ResolveResult, resolve
from .errors import ConfigError
from .logs import get_app_logger
from .usage import is_help_requested, print_usage


def load(
    record: Any,
    file_path: str | Path | None = None,
    *,
    args: Sequence[str] | None = None,
    environ: Mapping[str, str] | None = None,
    stream: TextIO | None = None,
) -> ResolveResult:
    """Resolve ``record``, or print its usage and exit if help was requested.

    Raises:
        SystemExit: with status 0 after printing usage for -help/--help.
        ConfigError: any resolution error (see resolve()).
    """
    if is_help_requested(args):
        print_usage(record, stream=stream)
        raise SystemExit(0)
    return resolve(record, file_path, args=args, environ=environ)


def must_load(
    record: Any,
    file_path: str | Path | None = None,
    *,
    args: Sequence[str] | None = None,
    environ: Mapping[str, str] | None = None,
    stream: TextIO | None = None,
) -> ResolveResult:
    """Like load(), but report a resolution error and exit with status 1.

    Meant for application startup code, where a bad configuration is fatal.
    """
    logger = get_app_logger()
    try:
        return load(record, file_path, args=args, environ=environ, stream=stream)
    except ConfigError as e:
        logger.error_if_not_debug("Failed to load configuration: %s", e)
        raise SystemExit(1) from e


class Loader:
    """Resolve one record, with an explicit "only once" latch.

    Each resolve() call is independent and always re-runs every pass. When
    ``once`` is True, the first successful load() is remembered and later
    calls return its result without touching the record until reset().
    """

    def __init__(
        self,
        record: Any,
        file_path: str | Path | None = None,
        *,
        once: bool = False,
    ) -> None:
        self.record = record
        self.file_path = file_path
        self.once = once
        self._result: ResolveResult | None = None

    @property
    def loaded(self) -> bool:
        return self._result is not None

    def load(
        self,
        *,
        args: Sequence[str] | None = None,
        environ: Mapping[str, str] | None = None,
    ) -> ResolveResult:
        if self.once and self._result is not None:
            get_app_logger().trace("[Loader.load] Already loaded; skipping")
            return self._result

        result = resolve(self.record, self.file_path, args=args, environ=environ)
        self._result = result
        return result

    def reset(self) -> None:
        self._result = None
