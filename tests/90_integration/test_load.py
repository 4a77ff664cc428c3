# tests/90_integration/test_load.py
"""End-to-end tests for load() with a real file, environment and argv."""

import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import pytest

import fieldconf.errors as mod_errors
import fieldconf.loader as mod_loader
from tests.utils import SAMPLE_FILE_CONTENT, SampleConfig, write_config_file


ENV_VARS = ("FIELD3", "FIELD5", "FIELD6")


@dataclass
class LoadCase:
    name: str
    use_file: bool
    env: dict[str, str]
    args: list[str]
    want: dict[str, Any] | None = None
    want_error: str | None = None


BASE_WANT: dict[str, Any] = {
    "dfield0": True,
    "dfield1": False,
    "field0": False,
    "field1": "default1",
    "field2": 2,
    "field3": "envDefault",
    "field4": "fileDefault",
    "field5": "allDefault",
}

CASES = [
    LoadCase(
        name="default values",
        use_file=False,
        env={},
        args=["-dfield0=true", "-field6=required"],
        want={**BASE_WANT, "field6": "required"},
    ),
    LoadCase(
        name="args values",
        use_file=False,
        env={},
        args=[
            "-dfield0=true",
            "-field1=arg1",
            "-field2",
            "3",
            "--field0",
            "-field6=required",
        ],
        want={
            **BASE_WANT,
            "field0": True,
            "field1": "arg1",
            "field2": 3,
            "field6": "required",
        },
    ),
    LoadCase(
        name="env values",
        use_file=False,
        env={"FIELD3": "env3", "FIELD5": "env5", "FIELD6": "required"},
        args=["-dfield0=true"],
        want={**BASE_WANT, "field3": "env3", "field5": "env5", "field6": "required"},
    ),
    LoadCase(
        name="file values",
        use_file=True,
        env={},
        args=["-dfield0=true"],
        want={**BASE_WANT, "field4": "file4", "field5": "file5", "field6": "file6"},
    ),
    LoadCase(
        name="all sources",
        use_file=True,
        env={"FIELD3": "env3", "FIELD5": "env5"},
        args=[
            "-dfield0=true",
            "-field1",
            "arg1",
            "-field2=3",
            "--field6=required",
            "--field0",
        ],
        want={
            **BASE_WANT,
            "field0": True,
            "field1": "arg1",
            "field2": 3,
            "field3": "env3",
            "field4": "file4",
            "field5": "env5",
            "field6": "required",
        },
    ),
    LoadCase(
        name="required field not set",
        use_file=False,
        env={},
        args=["-dfield0=true"],
        want_error="required parameter not set: field6",
    ),
    LoadCase(
        name="depends field not set",
        use_file=False,
        env={},
        args=["-field6=required"],
        want_error="dependent parameter not set: dfield0",
    ),
]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for var in ENV_VARS:
        monkeypatch.delenv(var, raising=False)


@pytest.mark.parametrize("case", CASES, ids=[c.name for c in CASES])
def test_load(
    case: LoadCase,
    tmp_path: Path,
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    # --- setup ---
    file_path = (
        write_config_file(tmp_path, SAMPLE_FILE_CONTENT) if case.use_file else ""
    )
    monkeypatch.setattr(sys, "argv", ["cmd", *case.args])
    for key, value in case.env.items():
        monkeypatch.setenv(key, value)
    cfg = SampleConfig()

    # --- execute and verify ---
    if case.want_error is not None:
        with pytest.raises(mod_errors.ConfigError) as exc_info:
            mod_loader.load(cfg, file_path)
        assert str(exc_info.value) == case.want_error
        return

    mod_loader.load(cfg, file_path)
    assert cfg == SampleConfig(**(case.want or {}))


def test_load_rejects_non_instance(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(sys, "argv", ["cmd", "-dfield0=true", "-field6=x"])

    with pytest.raises(mod_errors.ConfigShapeError):
        mod_loader.load(SampleConfig)


def test_load_help_prints_usage_and_exits(
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    monkeypatch.setattr(sys, "argv", ["mage", "--help"])
    cfg = SampleConfig()

    with pytest.raises(SystemExit) as exc_info:
        mod_loader.load(cfg)

    assert exc_info.value.code == 0
    err = capsys.readouterr().err
    assert "Usage of mage" in err
    assert "field6, FIELD6, --field6:" in err
    # nothing was resolved
    assert cfg == SampleConfig()


def test_load_help_with_explicit_args(capsys: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(SystemExit):
        mod_loader.load(SampleConfig(), args=["-help"], environ={})

    assert "Usage of" in capsys.readouterr().err
