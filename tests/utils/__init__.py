# tests/utils/__init__.py

from .constants import DEFAULT_TEST_LOG_LEVEL, PROJ_SRC
from .patch_everywhere import patch_everywhere
from .records import (
    SAMPLE_FILE_CONTENT,
    SampleConfig,
    ServiceConfig,
    TypedConfig,
    write_config_file,
)
from .trace import TEST_TRACE, make_test_trace


__all__ = [  # noqa: RUF022
    # constants
    "DEFAULT_TEST_LOG_LEVEL",
    "PROJ_SRC",
    # patch_everywhere
    "patch_everywhere",
    # records
    "SAMPLE_FILE_CONTENT",
    "SampleConfig",
    "ServiceConfig",
    "TypedConfig",
    "write_config_file",
    # trace
    "TEST_TRACE",
    "make_test_trace",
]
