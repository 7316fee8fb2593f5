"""Search history entry."""

from datetime import datetime

from pydantic import Field

from storefront.domain.base import DomainModel
from storefront.domain.model.user import utcnow
from storefront.domain.value import Email, SearchId, SearchTerm


class Search(DomainModel):
    """A term a user searched for. Unique per (email, term)."""

    id: SearchId
    email: Email
    term: SearchTerm
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)
