"""PostgreSQL implementation of Product repository."""

from typing import Optional

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from storefront.domain.model import Product
from storefront.domain.repository import ProductRepository
from storefront.domain.value import ProductId
from storefront.persistence.mappers import product_to_dict, row_to_product
from storefront.persistence.tables import products_table


class PostgresProductRepository(ProductRepository):
    """PostgreSQL implementation of ProductRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def save(self, product: Product) -> Product:
        stmt = products_table.insert().values(**product_to_dict(product))
        await self.session.execute(stmt)
        await self.session.flush()
        return product

    async def find_by_id(self, product_id: ProductId) -> Optional[Product]:
        stmt = select(products_table).where(products_table.c.id == product_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_product(dict(row)) if row else None

    async def find_all(self) -> list[Product]:
        stmt = select(products_table).order_by(products_table.c.created_at)
        result = await self.session.execute(stmt)
        return [row_to_product(dict(row)) for row in result.mappings().all()]

    async def delete(self, product_id: ProductId) -> bool:
        stmt = delete(products_table).where(products_table.c.id == product_id)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0
