"""Shared fixtures and test doubles for all test suites."""

from tests.shared.fixtures.factories import (
    FAST_BCRYPT_ROUNDS,
    TEST_EMAIL,
    TEST_ISSUER,
    TEST_JWT_SECRET,
    TEST_NAME,
    TEST_PASSWORD,
    MutableClock,
    TestUserFactory,
)
from tests.shared.fixtures.in_memory_store import InMemoryUserStore

__all__ = [
    "FAST_BCRYPT_ROUNDS",
    "InMemoryUserStore",
    "MutableClock",
    "TEST_EMAIL",
    "TEST_ISSUER",
    "TEST_JWT_SECRET",
    "TEST_NAME",
    "TEST_PASSWORD",
    "TestUserFactory",
]
