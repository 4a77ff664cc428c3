# src/fieldconf/constants.py
"""Central constants used across the project."""


# --- env keys ---
DEFAULT_ENV_LOG_LEVEL: str = "LOG_LEVEL"

# --- program defaults ---
DEFAULT_LOG_LEVEL: str = "info"

# --- field declarations ---
# key under which setting() stores its tags in dataclasses.field(metadata=...)
FIELD_METADATA_KEY: str = "fieldconf"
DEPENDS_SEPARATOR: str = ","

# --- value syntax ---
ARG_PREFIX: str = "-"
ARG_VALUE_SEPARATOR: str = "="
SLICE_SEPARATOR: str = ","
KV_SEPARATOR: str = ":"  # file lines and map pairs
BARE_BOOL_VALUE: str = "true"

# --- help / usage ---
HELP_FLAGS: frozenset[str] = frozenset({"-help", "--help"})
NOT_USED_PLACEHOLDER: str = "<NOTUSED>"
USAGE_MESSAGE: str = (
    "This application is configured via the config file,"
    " environment variables, or command-line arguments.\n"
    "The following configurations can be used:\n"
    "[CONFIG FILE KEY, ENVIRONMENT VARIABLE, CLI ARGUMENT]"
)

# --- argument trimming ---
# options a task runner accepts before the target name
DEFAULT_PASSTHROUGH_OPTIONS: frozenset[str] = frozenset({"-h", "-t", "-v"})

# --- numeric limits ---
INT64_MIN: int = -(2**63)
INT64_MAX: int = 2**63 - 1
UINT64_MAX: int = 2**64 - 1
