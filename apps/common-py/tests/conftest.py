"""Pytest configuration for common-py tests."""

import pytest

from common.models.user import User
from common.services.user_store import InMemoryUserStore


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "unit: fast tests with no external services"
    )


@pytest.fixture
def store() -> InMemoryUserStore:
    """Create an empty in-memory user store."""
    return InMemoryUserStore()


@pytest.fixture
def filled_store(store: InMemoryUserStore) -> InMemoryUserStore:
    """Store holding 25 users, login user00 .. user24 in creation order."""
    for index in range(25):
        store.insert(User(login=f"user{index:02d}", first_name="First", last_name=f"Last{index}"))
    return store
