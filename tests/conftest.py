"""Shared test fixtures for the confloader test suite."""

from __future__ import annotations

from pathlib import Path
from typing import Callable

import pytest

# === Fixtures ===


@pytest.fixture
def write_config(tmp_path: Path) -> Callable[[str, str], Path]:
    """Factory writing a document under tmp_path and returning its path."""

    def write(name: str, content: str) -> Path:
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return path

    return write


@pytest.fixture
def test_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Environment variables referenced by the WITH_ENV documents."""
    monkeypatch.setenv("ENV_STRING", "foo")
    monkeypatch.setenv("ENV_INT", "42")
    monkeypatch.setenv("ENV_FLOAT", "42.3")
    monkeypatch.setenv("ENV_BOOL", "true")
    monkeypatch.setenv("ENV_ARR_0", "fooz")
