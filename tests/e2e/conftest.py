"""Shared fixtures for end-to-end API tests."""

from uuid import uuid4

import pytest
from fastapi.testclient import TestClient

from storefront.config import Settings
from storefront.interface.api.app import create_app
from storefront.util.jwt import create_token
from tests.di import build_test_container
from tests.harness import bearer


@pytest.fixture
def client():
    """Create test client backed by in-memory repositories."""
    return TestClient(create_app(build_test_container()))


@pytest.fixture
def admin_headers() -> dict[str, str]:
    """Authorization header for an administrator."""
    token = create_token(
        str(uuid4()), "admin", "admin@x.com", "admin", Settings().auth
    )
    return bearer(token)


@pytest.fixture
def user_headers(client) -> dict[str, str]:
    """Authorization header for a freshly registered regular user."""
    response = client.post(
        "/auth/signup",
        json={"username": "alice", "email": "a@x.com", "password": "secret1"},
    )
    return bearer(response.json()["token"])
