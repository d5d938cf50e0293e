"""
tests/conftest.py -- Shared test fixtures for AccountDesk.

This module provides:
  - _clear_settings_cache (autouse): resets the get_settings() lru_cache around
    every test so monkeypatched env vars take effect.
  - default_hash / other_hash: bcrypt hashes computed once per session. bcrypt
    is deliberately slow, so hashing per test would dominate the run time.

APP_ENV must be set before any core/auth import so an ambient APP_ENV from the
developer's shell cannot change the defaults the tests assume.
"""

from __future__ import annotations

import os
from collections.abc import Iterator

# Set before any core/auth import.
os.environ.setdefault("APP_ENV", "production")

import pytest

from auth.models import get_default_credential
from auth.passwords import hash_password
from core.config import get_settings

_ENV_VARS = ("APP_ENV", "HTTP_TIMEOUT", "HTTP_VERIFY_TLS", "GOOGLE_CLIENT_ID", "GOOGLE_CLIENT_SECRET", "LOG_LEVEL")


@pytest.fixture(autouse=True)
def _clear_settings_cache(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    # Keep a developer's .env out of the test run.
    monkeypatch.chdir(os.path.dirname(__file__))
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture(scope="session")
def default_hash() -> str:
    """bcrypt hash of the default OAuth credential."""
    return hash_password(get_default_credential())


@pytest.fixture(scope="session")
def other_hash() -> str:
    """bcrypt hash of an ordinary user-chosen password."""
    return hash_password("mypassword")
