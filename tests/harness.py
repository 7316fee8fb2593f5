"""Test harness for integration and E2E tests.

Settings are loaded from environment variables (configure via .env or export).
Integration tests need a migrated PostgreSQL reachable at DATABASE__URL.
"""

import os

import pytest
import pytest_asyncio

from storefront.util.di import Component
from tests.di import build_test_container

requires_database = pytest.mark.skipif(
    "DATABASE__URL" not in os.environ,
    reason="DATABASE__URL not set; integration tests need PostgreSQL",
)


def create_env_fixture(unmock: set[Component] | None = None):
    """Factory for creating test environment fixtures.

    Creates a pytest fixture that:
    - Builds a test container with specified unmocking
    - Yields request-scoped container for service access
    - Settings loaded from environment automatically

    Args:
        unmock: Components to use real implementations for

    Returns:
        Pytest fixture function that yields AsyncContainer

    Usage:
        # Unit tests - everything mocked, no database needed
        unit_env = create_env_fixture()

        # Integration tests - real persistence, assumes postgres running
        integration_env = create_env_fixture(unmock={"persistence"})

        @pytest.mark.asyncio
        async def test_create_user(integration_env):
            repo = await integration_env.get(UserRepository)
            user = await repo.create(User(...))
            assert user.id is not None
    """

    @pytest_asyncio.fixture
    async def _test_environment():
        container = build_test_container(unmock=unmock or set())

        async with container() as request_container:
            yield request_container

        await container.close()

    return _test_environment


# 1x1 transparent PNG as a data URL
PNG_DATA_URL = (
    "data:image/png;base64,"
    "iVBORw0KGgoAAAANSUhEUgAAAAEAAAABCAQAAAC1HAwCAAAAC0lEQVR42mNkYAAAAAYAAjCB0C8AAAAASUVORK5CYII="
)


def bearer(token: str) -> dict[str, str]:
    """Authorization header for a bearer token."""
    return {"Authorization": f"Bearer {token}"}
