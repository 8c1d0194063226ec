"""Shared pytest configuration and fixtures for all tests."""

import pytest


def pytest_configure(config):
    config.addinivalue_line("markers", "unit: fast tests that need no network")


def pytest_collection_modifyitems(config, items):
    """Automatically apply markers based on test file location."""
    for item in items:
        if "/unit/" in str(item.fspath):
            item.add_marker(pytest.mark.unit)


@pytest.fixture(autouse=True)
def isolated_larc_home(tmp_path, monkeypatch):
    """Never touch the real ~/.larc from tests."""
    monkeypatch.setenv("LARC_HOME", str(tmp_path / ".larc"))
