"""Search history domain service."""

from datetime import datetime, timezone

import logfire

from storefront.domain.error import NotFoundError
from storefront.domain.model import Search
from storefront.domain.repository import SearchRepository
from storefront.domain.value import Email, SearchId, SearchTerm


class SearchService:
    """Domain service for per-user search history."""

    def __init__(self, search_repository: SearchRepository) -> None:
        self.search_repository = search_repository

    async def record(self, email: Email, term: SearchTerm) -> Search:
        """Record a search; repeating a term only refreshes its timestamp."""
        with logfire.span("search_service.record", email=email.root):
            return await self.search_repository.upsert(
                email, term, datetime.now(timezone.utc)
            )

    async def history(self, email: Email) -> list[Search]:
        """Get a user's searches, most recently updated first."""
        with logfire.span("search_service.history", email=email.root):
            searches = await self.search_repository.find_by_email(email)
            logfire.info("Search history fetched", count=len(searches))
            return searches

    async def delete(self, search_id: SearchId, owner: Email) -> None:
        """Delete one of the owner's searches.

        Entries belonging to someone else are reported as missing.

        Raises:
            NotFoundError: If no such entry exists for this owner
        """
        with logfire.span("search_service.delete", search_id=str(search_id)):
            search = await self.search_repository.find_by_id(search_id)
            if not search or search.email != owner:
                raise NotFoundError("Search", str(search_id))
            await self.search_repository.delete(search_id)
