"""Unit tests for ProductService."""

from datetime import datetime, timezone
from uuid import uuid4

import pytest

from storefront.domain.error import NotFoundError
from storefront.domain.model import Product
from storefront.domain.service import ProductService
from storefront.domain.value import ProductId
from storefront.persistence.repository.inmemory import InMemoryProductRepository


def make_product(name: str = "Ridge 2") -> Product:
    return Product(
        id=ProductId(uuid4()),
        category="shoes",
        description="Trail runners",
        name=name,
        price=89.5,
        image=b"\x89PNG",
        image_content_type="image/png",
        created_at=datetime.now(timezone.utc),
    )


class TestProductService:
    @pytest.mark.asyncio
    async def test_create_then_get(self):
        # Arrange
        service = ProductService(InMemoryProductRepository())
        product = await service.create(make_product())

        # Act
        fetched = await service.get_by_id(product.id)

        # Assert
        assert fetched == product

    @pytest.mark.asyncio
    async def test_delete_removes_product(self):
        # Arrange
        service = ProductService(InMemoryProductRepository())
        product = await service.create(make_product())

        # Act
        await service.delete(product.id)

        # Assert
        assert await service.list_all() == []
        with pytest.raises(NotFoundError):
            await service.delete(product.id)

    @pytest.mark.asyncio
    async def test_get_missing_product(self):
        service = ProductService(InMemoryProductRepository())

        with pytest.raises(NotFoundError):
            await service.get_by_id(ProductId(uuid4()))
