"""Pytest configuration and fixtures."""

from collections.abc import Iterator

import pytest
from api.main import app
from fastapi.testclient import TestClient


@pytest.fixture
def client() -> Iterator[TestClient]:
    """Create a FastAPI test client.

    Entering the client runs the application lifespan, so every test starts
    with a fresh, empty user store.
    """
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def create_user(client: TestClient):
    """Create a user through the API and return its id."""

    def _create(login: str = "johndoe", first_name: str = "John", last_name: str = "Doe") -> str:
        response = client.post(
            "/api/users",
            json={"login": login, "firstName": first_name, "lastName": last_name},
        )
        assert response.status_code == 201
        return response.json()

    return _create
