# tests/50_core/test_format_usage.py
"""Tests for format_usage() and print_usage()."""

import io
import sys

import pytest

import fieldconf.constants as mod_constants
import fieldconf.usage as mod_usage
from tests.utils import SampleConfig, ServiceConfig


EXPECTED_SERVICE_FIELDS = """\
dbURL, DB_URL, --db-url:
    description: Database URL
    type:        String
    required:    true

backupDBURL, BACKUP_DB_URL, --backup-db-url:
    description: Backup Database URL
    type:        String
    depends:     database_url

maxRetries, MAX_RETRIES, --max-retries:
    description: Maximum number of retries
    type:        Integer
    default:     3

timeout, TIMEOUT, --timeout:
    description: Timeout duration
    type:        Duration
    default:     5s
"""


def test_format_usage_service() -> None:
    text = mod_usage.format_usage(ServiceConfig(), prog="mage")

    expected = (
        f"Usage of mage\n\n{mod_constants.USAGE_MESSAGE}\n\n{EXPECTED_SERVICE_FIELDS}\n"
    )
    assert text == expected


def test_format_usage_placeholders_for_unused_sources() -> None:
    text = mod_usage.format_usage(SampleConfig, prog="mage")

    assert "<NOTUSED>, <NOTUSED>, --dfield0:" in text
    assert "<NOTUSED>, FIELD3, --field3:" in text
    assert "field4, <NOTUSED>, --field4:" in text
    assert "    type:        True or False" in text
    assert "    depends:     field1, dfield0" in text


def test_format_usage_default_prog(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(sys, "argv", ["/usr/local/bin/mage", "deploy"])
    text = mod_usage.format_usage(ServiceConfig)
    assert text.startswith("Usage of mage\n")


def test_print_usage_to_stream() -> None:
    buf = io.StringIO()
    mod_usage.print_usage(ServiceConfig(), prog="mage", stream=buf)
    assert buf.getvalue() == mod_usage.format_usage(ServiceConfig(), prog="mage")


def test_print_usage_defaults_to_stderr(capsys: pytest.CaptureFixture[str]) -> None:
    mod_usage.print_usage(ServiceConfig(), prog="mage")

    captured = capsys.readouterr()
    assert captured.out == ""
    assert "Usage of mage" in captured.err
