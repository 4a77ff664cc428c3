# src/fieldconf/utils/utils_logs.py
"""Console logger shared by the library and the applications built on it."""

from __future__ import annotations

import builtins
import importlib
import logging
import os
import sys
from collections.abc import Callable
from typing import Any, TextIO


# --- Constants ---------------------------------------------------------------

DEFAULT_CONSOLE_LOG_LEVEL: str = "info"
DEFAULT_CONSOLE_LOG_LEVEL_ENV_VARS: list[str] = ["LOG_LEVEL"]

# Flag for quick runtime enable/disable
TEST_TRACE_ENABLED = os.getenv("TEST_TRACE", "").lower() in {"1", "true", "yes"}

# Imported lazily to avoid patched time modules
#   in environments like pytest or eventlet
_real_time = importlib.import_module("time")

# ANSI Colors
RESET = "\033[0m"
CYAN = "\033[36m"
GRAY = "\033[90m"

# Logger levels
TRACE_LEVEL = logging.DEBUG - 5
# DEBUG      - builtin
# INFO       - builtin
# WARNING    - builtin
# ERROR      - builtin
# CRITICAL   - builtin
SILENT_LEVEL = logging.CRITICAL + 1  # one above the highest builtin level

LEVEL_ORDER = [
    "trace",
    "debug",
    "info",
    "warning",
    "error",
    "critical",
    "silent",  # disables all logging
]

TAG_STYLES = {
    "TRACE": (GRAY, "[TRACE]"),
    "DEBUG": (CYAN, "[DEBUG]"),
    "WARNING": ("", "⚠️ "),
    "ERROR": ("", "❌ "),
    "CRITICAL": ("", "💥 "),
}

# sanity check
assert set(TAG_STYLES.keys()) <= {lvl.upper() for lvl in LEVEL_ORDER}, (  # noqa: S101
    "TAG_STYLES contains unknown levels"
)

# --- globals ---------------------------------------------------------------

_registered_log_level_env_vars: list[str] | None = None
_registered_default_log_level: str | None = None


# --- Logging for debugging tests -------------------------------------------------


def make_test_trace(icon: str = "🧵") -> Callable[..., Any]:
    def local_trace(label: str, *args: Any) -> Any:
        return TEST_TRACE(label, *args, icon=icon)

    return local_trace


def TEST_TRACE(label: str, *args: Any, icon: str = "🧵") -> None:  # noqa: N802
    """Emit a synchronized, flush-safe diagnostic line.

    Args:
        label: Short identifier or context string.
        *args: Optional values to append.
        icon: Emoji prefix/suffix for easier visual scanning.

    """
    if not TEST_TRACE_ENABLED:
        return

    ts = _real_time.monotonic()
    builtins.print(
        f"{icon} [TEST TRACE {ts:.6f}] {label}",
        *args,
        file=sys.__stderr__,
        flush=True,
    )


# --- Console logger -----------------------------------------------------


class ConsoleLogger(logging.Logger):
    """Logger with TRACE/SILENT levels, tagged output and split streams."""

    enable_color: bool = False

    _logging_module_extended: bool = False

    # if stdout or stderr are redirected, we need to repoint
    _last_stream_ids: tuple[TextIO, TextIO] | None = None

    def __init__(
        self,
        name: str,
        level: int = logging.NOTSET,
        *,
        enable_color: bool | None = None,
    ) -> None:
        super().__init__(name, level)

        if self.level == logging.NOTSET:
            self.setLevel(self.determine_log_level())

        self.enable_color = (
            enable_color
            if enable_color is not None
            else type(self).determine_color_enabled()
        )

        # a library logger must not leak into the host's root handlers
        self.propagate = False

        # handler attachment will happen in _log() with ensure_handlers()

    def ensure_handlers(self) -> None:
        if self._last_stream_ids is None or not self.handlers:
            rebuild = True
        else:
            last_stdout, last_stderr = self._last_stream_ids
            rebuild = (last_stdout is not sys.stdout) or (last_stderr is not sys.stderr)

        if rebuild:
            self.handlers.clear()
            h = DualStreamHandler()
            h.setFormatter(TagFormatter("%(message)s"))
            h.enable_color = self.enable_color
            self.addHandler(h)
            self._last_stream_ids = (sys.stdout, sys.stderr)
            TEST_TRACE("ensure_handlers()", f"rebuilt_handlers={self.handlers}")

    def _log(  # type: ignore[override]
        self, level: int, msg: str, args: tuple[Any, ...], **kwargs: Any
    ) -> None:
        TEST_TRACE(
            "_log",
            f"logger={self.name}",
            f"level={self.level_name}",
            f"msg={msg!r}",
        )
        self.ensure_handlers()
        super()._log(level, msg, args, **kwargs)

    def setLevel(self, level: int | str) -> None:  # noqa: N802
        """Case insensitive version"""
        if isinstance(level, str):
            level = level.upper()
        super().setLevel(level)

    @classmethod
    def determine_color_enabled(cls) -> bool:
        """Return True if colored output should be enabled."""
        if "NO_COLOR" in os.environ:
            return False
        if os.getenv("FORCE_COLOR", "").lower() in {"1", "true", "yes"}:
            return True

        return sys.stdout.isatty()

    @classmethod
    def extend_logging_module(cls) -> bool:
        """Register the TRACE and SILENT level names with `logging`.

        Returns False when it already ran.
        """
        if cls._logging_module_extended:
            return False
        cls._logging_module_extended = True

        logging.addLevelName(TRACE_LEVEL, "TRACE")
        logging.addLevelName(SILENT_LEVEL, "SILENT")

        logging.TRACE = TRACE_LEVEL  # type: ignore[attr-defined]
        logging.SILENT = SILENT_LEVEL  # type: ignore[attr-defined]

        return True

    def determine_log_level(self, *, root_log_level: str | None = None) -> str:
        """Resolve log level from env → explicit root level → default.

        Names logging does not know (e.g. a host's LOG_LEVEL=verbose) are
        skipped rather than passed on to setLevel().
        """
        env_vars_to_check = (
            _registered_log_level_env_vars or DEFAULT_CONSOLE_LOG_LEVEL_ENV_VARS
        )
        for env_var in env_vars_to_check:
            env_log_level = os.getenv(env_var)
            if env_log_level and self.resolve_level_name(env_log_level) is not None:
                return env_log_level.upper()

        if root_log_level and self.resolve_level_name(root_log_level) is not None:
            return root_log_level.upper()

        default_level = _registered_default_log_level or DEFAULT_CONSOLE_LOG_LEVEL
        return default_level.upper()

    @property
    def level_name(self) -> str:
        """Return the current effective level name
        (see also: logging.getLevelName)."""
        return logging.getLevelName(self.getEffectiveLevel())

    def error_if_not_debug(self, msg: str, *args: Any, **kwargs: Any) -> None:
        """Logs an exception with the real traceback starting from the caller.
        Only shows full traceback if debug/trace is enabled."""
        exc_info = kwargs.pop("exc_info", True)
        stacklevel = kwargs.pop("stacklevel", 2)  # skip helper frame
        if self.isEnabledFor(logging.DEBUG):
            self.exception(msg, *args, exc_info=exc_info, stacklevel=stacklevel)
        else:
            self.error(msg, *args)

    def trace(self, msg: str, *args: Any, **kwargs: Any) -> None:
        if self.isEnabledFor(TRACE_LEVEL):
            self._log(TRACE_LEVEL, msg, args, **kwargs)

    def resolve_level_name(self, level_name: str) -> int | None:
        """Numeric level for a name, or None if logging does not know it.

        logging.getLevelNamesMapping() is only introduced in 3.11
        """
        level = getattr(logging, level_name.upper(), None)
        return level if isinstance(level, int) else None


# --- Tag formatter ---------------------------------------------------------


class TagFormatter(logging.Formatter):
    def format(self: TagFormatter, record: logging.LogRecord) -> str:
        tag_color, tag_text = TAG_STYLES.get(record.levelname, ("", ""))
        msg = super().format(record)
        if tag_text:
            if getattr(record, "enable_color", False) and tag_color:
                prefix = f"{tag_color}{tag_text}{RESET}"
            else:
                prefix = tag_text
            return f"{prefix} {msg}"
        return msg


# --- DualStreamHandler ---------------------------------------------------------


class DualStreamHandler(logging.StreamHandler):  # type: ignore[type-arg]
    """Send info/debug/trace to stdout, everything else to stderr."""

    enable_color: bool = False

    def __init__(self) -> None:
        # default to stdout, overridden per record in emit()
        super().__init__()  # pyright: ignore[reportUnknownMemberType]

    def emit(self, record: logging.LogRecord) -> None:
        if record.levelno >= logging.WARNING:
            self.stream = sys.stderr
        else:
            self.stream = sys.stdout

        # used by TagFormatter
        record.enable_color = getattr(self, "enable_color", False)

        super().emit(record)


# --- Level registry ---------------------------------------------------------


def register_log_level_env_vars(env_vars: list[str]) -> None:
    """Register environment variable names to check for log level.

    The environment variables will be checked in order, and the first
    non-empty value found will be used.

    Example:
        >>> register_log_level_env_vars(["FIELDCONF_LOG_LEVEL", "LOG_LEVEL"])
    """
    global _registered_log_level_env_vars  # noqa: PLW0603
    _registered_log_level_env_vars = env_vars
    TEST_TRACE("register_log_level_env_vars() called", f"env_vars={env_vars}")


def register_default_log_level(default_level: str) -> None:
    """Register the default log level to use when no other source is found."""
    global _registered_default_log_level  # noqa: PLW0603
    _registered_default_log_level = default_level
    TEST_TRACE(
        "register_default_log_level() called",
        f"default_level={default_level}",
    )
