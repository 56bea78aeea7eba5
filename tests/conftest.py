"""Pytest configuration and shared fixtures."""

import os

import pytest


@pytest.fixture(autouse=True)
def isolated_environment(monkeypatch):
    """Keep developer CLUBAUTHZ_* variables out of the tests."""
    for key in list(os.environ):
        if key.startswith("CLUBAUTHZ_"):
            monkeypatch.delenv(key, raising=False)
    yield
