# src/fieldconf/meta.py
"""Program identity shared by logging, usage text and tests."""

# Import name of the package; also the name of the library logger.
PROGRAM_PACKAGE = "fieldconf"

# Human-facing name.
PROGRAM_DISPLAY = "Fieldconf"

# Prefix for the library's own environment variables.
PROGRAM_ENV = "FIELDCONF"
