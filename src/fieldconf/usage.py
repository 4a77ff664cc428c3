# src/fieldconf/usage.py
"""Help text for a configuration record."""

import sys
from collections.abc import Sequence
from pathlib import Path
from typing import Any, TextIO

from .config import FieldSpec, read_fields, type_label
from .constants import HELP_FLAGS, NOT_USED_PLACEHOLDER, USAGE_MESSAGE


def is_help_requested(args: Sequence[str] | None = None) -> bool:
    """True if ``-help`` or ``--help`` is among ``args`` (default: sys.argv)."""
    tokens = sys.argv if args is None else args
    return any(arg in HELP_FLAGS for arg in tokens)


def _format_field(spec: FieldSpec) -> list[str]:
    file_key = spec.file or NOT_USED_PLACEHOLDER
    env_name = spec.env or NOT_USED_PLACEHOLDER
    lines = [
        f"{file_key}, {env_name}, --{spec.arg}:",
        f"    description: {spec.desc}",
        f"    type:        {type_label(spec.type)}",
    ]
    if spec.default:
        lines.append(f"    default:     {spec.default}")
    if spec.required:
        lines.append("    required:    true")
    if spec.depends:
        lines.append(f"    depends:     {', '.join(spec.depends)}")
    return lines


def format_usage(record: Any, prog: str | None = None) -> str:
    """Render the usage text for a dataclass (class or instance)."""
    if prog is None:
        prog = Path(sys.argv[0]).name if sys.argv and sys.argv[0] else "app"

    lines = [f"Usage of {prog}", "", USAGE_MESSAGE, ""]
    for spec in read_fields(record):
        lines.extend(_format_field(spec))
        lines.append("")
    return "\n".join(lines) + "\n"


def print_usage(
    record: Any,
    *,
    prog: str | None = None,
    stream: TextIO | None = None,
) -> None:
    """Write the usage text to ``stream`` (default: stderr)."""
    out = sys.stderr if stream is None else stream
    out.write(format_usage(record, prog))
    out.flush()
