"""Unit test fixtures."""

import json
from pathlib import Path

import pytest
from _helpers import FakeRunner, FakeWeb, minimal_config_dict, minimal_larc_config

from larc.api.log.DiagnosticLog import DiagnosticLog


@pytest.fixture(name="minimal_config_dict")
def minimal_config_dict_fixture(tmp_path: Path) -> dict:
    """Minimal config dict with artifact and companion directories under tmp_path."""
    return minimal_config_dict(tmp_path)


@pytest.fixture
def larc_config(tmp_path: Path):
    return minimal_larc_config(tmp_path)


@pytest.fixture
def larc_home(tmp_path: Path, monkeypatch, minimal_config_dict: dict) -> Path:
    """Set up LARC_HOME with a minimal config file.

    Returns:
        Path to the larc home directory
    """
    home = tmp_path / ".larc"
    home.mkdir(parents=True, exist_ok=True)
    monkeypatch.setenv("LARC_HOME", str(home))
    (home / "config.json").write_text(json.dumps(minimal_config_dict), encoding="utf-8")
    return home


@pytest.fixture
def diagnostic_log() -> DiagnosticLog:
    return DiagnosticLog(None, "test", "DEBUG")


@pytest.fixture
def fake_web() -> FakeWeb:
    return FakeWeb()


@pytest.fixture
def fake_runner(fake_web: FakeWeb) -> FakeRunner:
    return FakeRunner(fake_web)
