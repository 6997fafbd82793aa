"""
Pytest fixtures for Solkit tests. No network, no database: every test builds
its own keys from fixed seeds or a deterministic random source.
"""

from __future__ import annotations

import pytest
from solders.keypair import Keypair

# Fixed test seed: bytes 0..31
TEST_SEED = bytes(range(32))


@pytest.fixture
def test_keypair() -> Keypair:
    """Known keypair derived from TEST_SEED."""
    return Keypair.from_seed(TEST_SEED)


@pytest.fixture
def deterministic_random():
    """Install a deterministic random source for key generation; restore the previous one after."""
    from backend_solkit.crypto import keys

    source = keys.DeterministicRandomSource(b"conftest")
    previous = keys.set_random_source(source)
    yield source
    keys.set_random_source(previous)


@pytest.fixture
def settings_env(monkeypatch):
    """Clear cached settings before and after a test that changes env vars."""
    from backend_solkit.config import reset_settings_cache

    monkeypatch.delenv("ALLOW_ZERO_TOKEN_TRANSFER", raising=False)
    reset_settings_cache()
    yield monkeypatch
    reset_settings_cache()


@pytest.fixture
def client(settings_env):
    """FastAPI TestClient over the app with default settings."""
    from fastapi.testclient import TestClient

    from backend_solkit.api_server.server import app

    return TestClient(app)
