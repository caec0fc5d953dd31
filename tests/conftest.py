"""Pytest fixtures for simplejwt tests."""

import os

import pytest

from simplejwt.settings import get_settings
from simplejwt.validator import ClaimValidator

# Fixed point in time for clock dependent tests
NOW = 1_700_000_000

VALID_SECRET = "Str0ng!Secret123"


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch):
    """Isolate tests from SIMPLEJWT_* variables and cached settings."""
    for name in list(os.environ):
        if name.upper().startswith("SIMPLEJWT_"):
            monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def secret():
    """A secret that satisfies the default policy."""
    return VALID_SECRET


@pytest.fixture
def now():
    return NOW


@pytest.fixture
def frozen_validator():
    """Claim validator whose clock always returns NOW."""
    return ClaimValidator(clock=lambda: NOW)
