"""Shared fixtures: environment isolation between tests."""

from __future__ import annotations

import os

import pytest

from woosmap_geocoder.config import reset_config


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch):
    """Hide WOOSMAP_* variables from the developer shell and reset config."""
    for key in list(os.environ):
        if key.startswith("WOOSMAP_"):
            monkeypatch.delenv(key, raising=False)
    reset_config()
    yield
    reset_config()
