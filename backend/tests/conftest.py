"""Root conftest - shared test configuration and store fixtures."""

import os

import pytest

# Error envelopes must not carry stack traces unless a test opts in
os.environ["ENVIRONMENT"] = "test"
os.environ.setdefault("LOG_FORMAT", "text")

from app.config import get_settings  # noqa: E402
from app.infrastructure.memory_store import build_seeded_store  # noqa: E402


@pytest.fixture
def store():
    """Freshly seeded store: 2 users, 3 products."""
    return build_seeded_store()


@pytest.fixture
def development_mode(monkeypatch):
    """Switch settings to ENVIRONMENT=development for one test."""
    monkeypatch.setenv("ENVIRONMENT", "development")
    get_settings.cache_clear()
    yield
    monkeypatch.undo()
    get_settings.cache_clear()
