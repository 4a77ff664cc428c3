# src/fieldconf/args.py
"""Command-line list helpers for hosts that run tasks by name."""

import sys
from collections.abc import Collection

from .constants import ARG_PREFIX, DEFAULT_PASSTHROUGH_OPTIONS
from .logs import get_app_logger


def drop_args_after_target(
    argv: list[str] | None = None,
    *,
    passthrough: Collection[str] = DEFAULT_PASSTHROUGH_OPTIONS,
) -> list[str]:
    """Cut the argument list at the first flag that is not a pass-through option.

    Task runners treat every remaining token as another task name, so
    configuration flags must be removed once they have been resolved:

        ["mage", "-v", "deploy", "--db-url", "x"] → ["mage", "-v", "deploy"]

    Args:
        argv: Full argument list including the program name. When None,
            ``sys.argv`` is trimmed in place.
        passthrough: Flags the host itself understands; they are kept.

    Returns:
        The trimmed list.
    """
    logger = get_app_logger()
    target = sys.argv if argv is None else argv

    for i, arg in enumerate(target):
        if not arg.startswith(ARG_PREFIX) or arg in passthrough:
            continue
        logger.trace(f"[drop_args_after_target] Dropping {len(target) - i} arg(s)")
        if argv is None:
            del sys.argv[i:]
            return sys.argv
        return target[:i]

    return target if argv is None else list(target)
