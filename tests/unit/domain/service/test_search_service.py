"""Unit tests for SearchService."""

from uuid import uuid4

import pytest

from storefront.domain.error import NotFoundError
from storefront.domain.service import SearchService
from storefront.domain.value import Email, SearchId, SearchTerm
from storefront.persistence.repository.inmemory import InMemorySearchRepository


class TestSearchService:
    """Tests for search history recording and scoping."""

    @pytest.mark.asyncio
    async def test_repeated_term_is_recorded_once(self):
        # Arrange
        service = SearchService(InMemorySearchRepository())
        email = Email("a@x.com")

        # Act
        first = await service.record(email, SearchTerm("shoes"))
        second = await service.record(email, SearchTerm("shoes"))

        # Assert
        assert first.id == second.id
        assert second.updated_at >= first.updated_at
        assert len(await service.history(email)) == 1

    @pytest.mark.asyncio
    async def test_history_is_scoped_and_most_recent_first(self):
        # Arrange
        service = SearchService(InMemorySearchRepository())
        alice, bob = Email("a@x.com"), Email("b@x.com")
        await service.record(alice, SearchTerm("shoes"))
        await service.record(alice, SearchTerm("hats"))
        await service.record(bob, SearchTerm("socks"))
        await service.record(alice, SearchTerm("shoes"))

        # Act
        history = await service.history(alice)

        # Assert
        assert [s.term.root for s in history] == ["shoes", "hats"]

    @pytest.mark.asyncio
    async def test_delete_refuses_other_owner(self):
        # Arrange
        service = SearchService(InMemorySearchRepository())
        entry = await service.record(Email("a@x.com"), SearchTerm("shoes"))

        # Act & Assert
        with pytest.raises(NotFoundError):
            await service.delete(entry.id, Email("b@x.com"))
        assert len(await service.history(Email("a@x.com"))) == 1

    @pytest.mark.asyncio
    async def test_delete_missing_entry(self):
        service = SearchService(InMemorySearchRepository())

        with pytest.raises(NotFoundError):
            await service.delete(SearchId(uuid4()), Email("a@x.com"))
