# src/fieldconf/config/config_validate.py


from collections.abc import Mapping, Sequence

from fieldconf.errors import DependsNotSetError, RequiredNotSetError
from fieldconf.logs import get_app_logger

from .config_types import FieldSpec


def check_required_and_depends(
    specs: Sequence[FieldSpec],
    is_set: Mapping[str, bool],
) -> None:
    """Verify required fields and declared dependencies were set.

    Fields are scanned in declaration order and the first violation wins;
    violations are not aggregated.

    Raises:
        RequiredNotSetError: a required field is unset (names the field).
        DependsNotSetError: a declared dependency is unset (names the
            dependency, not the field declaring it).
    """
    logger = get_app_logger()
    logger.trace(f"[check_required_and_depends] Checking {len(specs)} field(s)")

    for spec in specs:
        if spec.required and not is_set.get(spec.name, False):
            raise RequiredNotSetError(spec.name)

        for dependency in spec.depends:
            if not is_set.get(dependency, False):
                raise DependsNotSetError(dependency, dependent=spec.name)
