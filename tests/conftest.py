"""Root pytest configuration.

Test Structure:
    tests/
    ├── unit/              # Fast, isolated tests (mocks, in-memory store)
    ├── integration/       # HTTP API and SQLAlchemy store over SQLite
    └── shared/            # Shared fixtures and utilities
"""

import os

import pytest

from passgate_config import clear_settings_cache

# Settings() requires a secret; tests never read a real one
os.environ.setdefault(
    "JWT_SECRET_KEY",
    "test-jwt-secret-for-testing-only-0123456789",
)


@pytest.fixture(autouse=True)
def reset_settings_cache():
    """Make every test start from freshly loaded settings."""
    clear_settings_cache()
    yield
    clear_settings_cache()
