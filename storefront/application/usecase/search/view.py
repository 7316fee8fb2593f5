"""Search entry representation returned to clients."""

from datetime import datetime

from pydantic import BaseModel

from storefront.domain.model import Search


class SearchView(BaseModel):
    id: str
    email: str
    search: str
    createdAt: datetime
    updatedAt: datetime

    @classmethod
    def from_search(cls, search: Search) -> "SearchView":
        return cls(
            id=str(search.id),
            email=search.email.root,
            search=search.term.root,
            createdAt=search.created_at,
            updatedAt=search.updated_at,
        )
