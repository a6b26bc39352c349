"""Shared test fixtures for cloudstore tests."""

from __future__ import annotations

import os

import pytest

from cloudstore import StorageOptions
from cloudstore.config import ENV_PREFIX


@pytest.fixture
def defaults() -> StorageOptions:
    return StorageOptions.new_builder().build()


@pytest.fixture
def clean_env(monkeypatch):
    """Remove any CLOUDSTORE_* variables inherited from the outer environment."""
    for key in list(os.environ):
        if key.startswith(ENV_PREFIX):
            monkeypatch.delenv(key)
    return monkeypatch
