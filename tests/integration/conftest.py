"""Integration fixtures: real PostgreSQL, migrated to head beforehand."""

import pytest_asyncio
from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession

from tests.harness import create_env_fixture

# Integration test fixture - real PostgreSQL
integration_env = create_env_fixture(unmock={"persistence"})


@pytest_asyncio.fixture
async def clean_database(integration_env):
    """Empty all tables before the test runs."""
    session = await integration_env.get(AsyncSession)
    await session.execute(text("TRUNCATE TABLE searches, products, users"))
    await session.commit()
    return integration_env
