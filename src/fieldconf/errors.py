# src/fieldconf/errors.py
"""Exceptions raised while resolving a configuration record.

Every error derives from ConfigError, so callers that treat any failure as
fatal to startup only need a single except clause. Each error also keeps
what it names (field, token, dependency, ...) as attributes.
"""

from pathlib import Path
from typing import Any


class ConfigError(Exception):
    """Base class for all resolution errors."""


class ConfigShapeError(ConfigError, TypeError):
    """The destination is not a mutable dataclass instance."""

    def __init__(self, msg: str, *, record: Any = None) -> None:
        super().__init__(msg)
        self.record = record


class FileAccessError(ConfigError):
    """The configuration file exists but could not be opened or read."""

    def __init__(self, msg: str, *, path: str | Path) -> None:
        super().__init__(msg)
        self.path = path


class ConversionError(ConfigError, ValueError):
    """Raw text does not parse into the field's declared type."""

    def __init__(
        self,
        msg: str,
        *,
        field: str | None = None,
        value: str | None = None,
        target: Any = None,
    ) -> None:
        super().__init__(msg)
        self.field = field
        self.value = value
        self.target = target


class MapFormatError(ConfigError, ValueError):
    """A mapping pair token is not of the form key:value."""

    def __init__(self, msg: str, *, token: str, field: str | None = None) -> None:
        super().__init__(msg)
        self.token = token
        self.field = field


class UnsupportedTypeError(ConfigError, TypeError):
    """The field's type has no conversion rule."""

    def __init__(self, msg: str, *, target: Any, field: str | None = None) -> None:
        super().__init__(msg)
        self.target = target
        self.field = field


class RequiredNotSetError(ConfigError):
    """A required field was not set by any source."""

    def __init__(self, field: str) -> None:
        super().__init__(f"required parameter not set: {field}")
        self.field = field


class DependsNotSetError(ConfigError):
    """A field named in another field's dependency list was not set.

    The message names the missing dependency; the field that declared the
    dependency is available as `dependent`.
    """

    def __init__(self, dependency: str, *, dependent: str | None = None) -> None:
        super().__init__(f"dependent parameter not set: {dependency}")
        self.dependency = dependency
        self.dependent = dependent
