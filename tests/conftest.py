"""Shared test fixtures for vessot."""

import base64
import os

import pytest

from vessot.connectors import LocalConnector


@pytest.fixture
def key() -> bytes:
    """A fresh random 32-byte key."""
    return os.urandom(32)


@pytest.fixture
def env(key: bytes) -> dict:
    """Environment mapping with a provisioned key and API token."""
    return {
        "VESSOT_CRYPT_KEY": base64.b64encode(key).decode(),
        "VESSOT_INT_TOKEN": "test-token",
    }


@pytest.fixture
def local_store(tmp_path) -> LocalConnector:
    """A LocalConnector rooted in a temporary directory."""
    return LocalConnector(tmp_path / "store")
