# =============================================================================
# tests/conftest.py - Pytest Configuration
# =============================================================================
# This module provides pytest fixtures and configuration for all tests.
#
# Key features:
# - Sets up environment variables before any imports
# - Clears the cached settings around every test
# - Provides settings and client fixtures
# =============================================================================

import os

# =============================================================================
# Set up test environment BEFORE any imports
# =============================================================================
# This must happen before importing app.main, which builds the app on import

os.environ.setdefault("STELLAR_RPC_URL", "https://soroban-testnet.stellar.org")
os.environ.setdefault("ENVIRONMENT", "development")
os.environ.setdefault("DEBUG", "true")

import pytest
from fastapi.testclient import TestClient

from app.config import Settings, get_settings
from app.main import create_app

SETTINGS_KEYS = (
    "STELLAR_RPC_URL",
    "STELLAR_NETWORK",
    "CONTRACT_ID",
    "ENVIRONMENT",
    "DEBUG",
    "API_HOST",
    "API_PORT",
    "CORS_ORIGINS",
)

TEST_RPC_URL = "https://soroban-testnet.stellar.org"


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Each test sees a fresh get_settings() cache."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def clean_env(monkeypatch, tmp_path):
    """
    Remove every settings key from the environment.

    Also moves into an empty directory so a developer's .env file can't
    supply values the test expects to be missing.
    """
    for key in SETTINGS_KEYS:
        monkeypatch.delenv(key, raising=False)
    monkeypatch.chdir(tmp_path)
    return monkeypatch


@pytest.fixture
def settings():
    """Valid settings built without touching .env."""
    return Settings(_env_file=None, STELLAR_RPC_URL=TEST_RPC_URL)


@pytest.fixture
def client(settings):
    """TestClient for the fully composed app."""
    return TestClient(create_app(settings))
