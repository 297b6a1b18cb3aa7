"""Shared pytest fixtures."""

from __future__ import annotations

import os
import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

os.environ.setdefault("ENVIRONMENT", "test")

from greeting.config import get_settings  # noqa: E402
from greeting.main import create_app  # noqa: E402


@pytest.fixture(autouse=True)
def configure_env(monkeypatch: pytest.MonkeyPatch):
    """Pin the environment and drop cached settings around each test."""

    monkeypatch.setenv("ENVIRONMENT", "test")
    monkeypatch.delenv("BACKEND_URL", raising=False)
    monkeypatch.delenv("PORT", raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def app():
    return create_app()
