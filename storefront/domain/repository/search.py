"""Search history repository interface."""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Optional

from storefront.domain.model.search import Search
from storefront.domain.value import Email, SearchId, SearchTerm


class SearchRepository(ABC):
    """Repository for per-user search history."""

    @abstractmethod
    async def upsert(self, email: Email, term: SearchTerm, now: datetime) -> Search:
        """Record a search, refreshing ``updated_at`` if it already exists.

        Args:
            email: Owner's email
            term: Search term
            now: Timestamp to record

        Returns:
            The new or updated search entry
        """
        pass

    @abstractmethod
    async def find_by_id(self, search_id: SearchId) -> Optional[Search]:
        """Find a search entry by ID."""
        pass

    @abstractmethod
    async def find_by_email(self, email: Email) -> list[Search]:
        """List a user's searches, most recently updated first."""
        pass

    @abstractmethod
    async def delete(self, search_id: SearchId) -> bool:
        """Delete a search entry.

        Returns:
            True if an entry was deleted
        """
        pass
