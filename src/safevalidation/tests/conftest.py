"""Shared fixtures: every test starts from default settings."""

import os
from collections.abc import Iterator

import pytest

from safevalidation.foundation.config import clear_settings_cache


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Drop SAFEVALIDATION_* env vars and the cached settings around each test."""
    for key in [k for k in os.environ if k.startswith("SAFEVALIDATION_")]:
        monkeypatch.delenv(key)
    monkeypatch.chdir(os.path.dirname(__file__))  # keep a stray .env out of reach
    clear_settings_cache()
    yield
    clear_settings_cache()
