"""Pytest fixtures shared by the test suite."""

from __future__ import annotations

import os

import pytest

from tests.scripted import ScriptedExecutor


@pytest.fixture
def executor() -> ScriptedExecutor:
    return ScriptedExecutor()


@pytest.fixture(autouse=True)
def _isolated_environment(monkeypatch, tmp_path):
    # Developer overrides must not leak into tests; reports go to tmp_path.
    for key in list(os.environ):
        if key.startswith("UUID_REMOUNT_"):
            monkeypatch.delenv(key, raising=False)
    monkeypatch.setenv("UUID_REMOUNT_ERROR_DIR", str(tmp_path / "error_reports"))
