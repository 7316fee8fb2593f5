"""In-memory search repository for testing."""

from datetime import datetime
from typing import Optional
from uuid import uuid4

from storefront.domain.model import Search
from storefront.domain.repository import SearchRepository
from storefront.domain.value import Email, SearchId, SearchTerm


class InMemorySearchRepository(SearchRepository):
    """In-memory implementation of SearchRepository for testing."""

    def __init__(self) -> None:
        self._searches: dict[SearchId, Search] = {}

    async def upsert(self, email: Email, term: SearchTerm, now: datetime) -> Search:
        for search in self._searches.values():
            if search.email == email and search.term == term:
                updated = search.model_copy(update={"updated_at": now})
                self._searches[search.id] = updated
                return updated

        search = Search(
            id=SearchId(uuid4()), email=email, term=term, created_at=now, updated_at=now
        )
        self._searches[search.id] = search
        return search

    async def find_by_id(self, search_id: SearchId) -> Optional[Search]:
        return self._searches.get(search_id)

    async def find_by_email(self, email: Email) -> list[Search]:
        return sorted(
            (s for s in self._searches.values() if s.email == email),
            key=lambda s: s.updated_at,
            reverse=True,
        )

    async def delete(self, search_id: SearchId) -> bool:
        return self._searches.pop(search_id, None) is not None
