"""PostgreSQL implementation of Search repository."""

from datetime import datetime
from typing import Optional
from uuid import uuid4

from sqlalchemy import delete, select
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from storefront.domain.model import Search
from storefront.domain.repository import SearchRepository
from storefront.domain.value import Email, SearchId, SearchTerm
from storefront.persistence.mappers import row_to_search
from storefront.persistence.tables import searches_table


class PostgresSearchRepository(SearchRepository):
    """PostgreSQL implementation of SearchRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def upsert(self, email: Email, term: SearchTerm, now: datetime) -> Search:
        """Insert the search or refresh ``updated_at`` on (email, term) conflict."""
        stmt = (
            insert(searches_table)
            .values(
                id=uuid4(),
                email=email.root,
                term=term.root,
                created_at=now,
                updated_at=now,
            )
            .on_conflict_do_update(
                constraint="uq_searches_email_term",
                set_={"updated_at": now},
            )
            .returning(*searches_table.c)
        )
        result = await self.session.execute(stmt)
        row = result.mappings().one()
        await self.session.flush()
        return row_to_search(dict(row))

    async def find_by_id(self, search_id: SearchId) -> Optional[Search]:
        stmt = select(searches_table).where(searches_table.c.id == search_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_search(dict(row)) if row else None

    async def find_by_email(self, email: Email) -> list[Search]:
        stmt = (
            select(searches_table)
            .where(searches_table.c.email == email.root)
            .order_by(searches_table.c.updated_at.desc())
        )
        result = await self.session.execute(stmt)
        return [row_to_search(dict(row)) for row in result.mappings().all()]

    async def delete(self, search_id: SearchId) -> bool:
        stmt = delete(searches_table).where(searches_table.c.id == search_id)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0
