# tests/50_core/test_parse_scalars.py
"""Tests for the scalar parsers behind convert_value()."""

import math
from datetime import datetime, timedelta, timezone

import pytest

import fieldconf.config.config_convert as mod_convert


# ---------------------------------------------------------------------------
# durations
# ---------------------------------------------------------------------------


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("0", timedelta(0)),
        ("-0", timedelta(0)),
        ("5s", timedelta(seconds=5)),
        ("300ms", timedelta(milliseconds=300)),
        ("1h30m", timedelta(minutes=90)),
        ("2h45m10s", timedelta(hours=2, minutes=45, seconds=10)),
        ("1.5h", timedelta(minutes=90)),
        (".5s", timedelta(milliseconds=500)),
        ("-1.5h", timedelta(minutes=-90)),
        ("+10m", timedelta(minutes=10)),
        ("10us", timedelta(microseconds=10)),
        ("10µs", timedelta(microseconds=10)),
        ("10μs", timedelta(microseconds=10)),  # noqa: RUF001
        ("1500ns", timedelta(microseconds=1)),
        ("999ns", timedelta(0)),
        ("-1500ns", timedelta(microseconds=-1)),
        ("9223372036854775807ns", timedelta(microseconds=9223372036854775)),
        ("-9223372036854775808ns", timedelta(microseconds=-9223372036854775)),
    ],
)
def test_parse_duration(raw: str, expected: timedelta) -> None:
    assert mod_convert.parse_duration(raw) == expected


@pytest.mark.parametrize(
    "raw",
    [
        "",
        "-",
        "5",
        "s",
        ".s",
        "5 s",
        "5d",
        "1h-30m",
        "9223372036854775808ns",
        "-9223372036854775809ns",
    ],
)
def test_parse_duration_invalid(raw: str) -> None:
    with pytest.raises(ValueError, match="invalid duration"):
        mod_convert.parse_duration(raw)


# ---------------------------------------------------------------------------
# timestamps
# ---------------------------------------------------------------------------


def test_parse_timestamp_utc() -> None:
    assert mod_convert.parse_timestamp("2006-01-02T15:04:05Z") == datetime(
        2006, 1, 2, 15, 4, 5, tzinfo=timezone.utc
    )


def test_parse_timestamp_offset_and_fraction() -> None:
    value = mod_convert.parse_timestamp("2006-01-02T15:04:05.123456789+07:00")

    assert value.microsecond == 123456
    assert value.utcoffset() == timedelta(hours=7)


def test_parse_timestamp_negative_offset() -> None:
    value = mod_convert.parse_timestamp("2006-01-02T15:04:05-03:30")
    assert value.utcoffset() == -timedelta(hours=3, minutes=30)


@pytest.mark.parametrize(
    "raw",
    [
        "2006-01-02",
        "2006-01-02T15:04:05",
        "2006-01-02 15:04:05Z",
        "2006-13-02T15:04:05Z",
        "yesterday",
        "\uff12\uff10\uff12\uff14-01-02T15:04:05Z",  # full-width digits
    ],
)
def test_parse_timestamp_invalid(raw: str) -> None:
    with pytest.raises(ValueError):  # noqa: PT011
        mod_convert.parse_timestamp(raw)


# ---------------------------------------------------------------------------
# numbers and booleans
# ---------------------------------------------------------------------------


@pytest.mark.parametrize("raw", ["1", "t", "T", "TRUE", "true", "True"])
def test_parse_bool_true(raw: str) -> None:
    assert mod_convert.parse_bool(raw) is True


@pytest.mark.parametrize("raw", ["0", "f", "F", "FALSE", "false", "False"])
def test_parse_bool_false(raw: str) -> None:
    assert mod_convert.parse_bool(raw) is False


@pytest.mark.parametrize("raw", ["yes", "no", "tRuE", "", " true"])
def test_parse_bool_invalid(raw: str) -> None:
    with pytest.raises(ValueError, match="invalid boolean"):
        mod_convert.parse_bool(raw)


def test_parse_int_limits() -> None:
    assert mod_convert.parse_int("9223372036854775807") == 2**63 - 1
    assert mod_convert.parse_int("-9223372036854775808") == -(2**63)
    with pytest.raises(ValueError, match="out of range"):
        mod_convert.parse_int("-9223372036854775809")


@pytest.mark.parametrize("raw", ["", " 1", "1_000", "0x10", "1.0"])
def test_parse_int_rejects_non_decimal(raw: str) -> None:
    with pytest.raises(ValueError, match="invalid integer"):
        mod_convert.parse_int(raw)


def test_parse_uint_rejects_sign() -> None:
    with pytest.raises(ValueError, match="invalid unsigned integer"):
        mod_convert.parse_uint("+1")


def test_parse_float_special_values() -> None:
    assert mod_convert.parse_float("inf") == math.inf
    assert mod_convert.parse_float("-Infinity") == -math.inf
    assert math.isnan(mod_convert.parse_float("NaN"))


def test_parse_float_overflow() -> None:
    with pytest.raises(ValueError, match="out of range"):
        mod_convert.parse_float("1e400")
