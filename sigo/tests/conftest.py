"""
Shared fixtures for the sigo test suite.

Provides an isolated task home and configuration for every test category
(core, store, cli). Environment variables that would point sigo at the real
home directory are cleared for every test.
"""

import json

import pytest

from sigo.config import SigoConfig
from sigo.core.models import TaskRecord


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch, tmp_path):
    """Keep tests away from the user's real config and home."""
    monkeypatch.delenv("SIGO_HOME", raising=False)
    monkeypatch.delenv("SIGO_CONFIG", raising=False)
    monkeypatch.setenv("HOME", str(tmp_path / "user-home"))


@pytest.fixture
def home(tmp_path):
    """Task home directory (not created yet)."""
    return tmp_path / "sigo-home"


@pytest.fixture
def cfg(home):
    """Configuration pointing at the temporary home."""
    return SigoConfig(home=home)


@pytest.fixture
def write_store(home):
    """Write raw records into a store file, bypassing the store layer."""

    def _write(file_name, records):
        home.mkdir(parents=True, exist_ok=True)
        data = [
            r.to_dict() if isinstance(r, TaskRecord) else r for r in records
        ]
        (home / file_name).write_text(json.dumps(data))

    return _write


@pytest.fixture
def read_store(home):
    """Read raw JSON from a store file."""

    def _read(file_name):
        return json.loads((home / file_name).read_text())

    return _read
