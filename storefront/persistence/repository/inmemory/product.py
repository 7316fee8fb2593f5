"""In-memory product repository for testing."""

from typing import Optional

from storefront.domain.model import Product
from storefront.domain.repository import ProductRepository
from storefront.domain.value import ProductId


class InMemoryProductRepository(ProductRepository):
    """In-memory implementation of ProductRepository for testing."""

    def __init__(self) -> None:
        self._products: dict[ProductId, Product] = {}

    async def save(self, product: Product) -> Product:
        self._products[product.id] = product
        return product

    async def find_by_id(self, product_id: ProductId) -> Optional[Product]:
        return self._products.get(product_id)

    async def find_all(self) -> list[Product]:
        return sorted(self._products.values(), key=lambda p: p.created_at)

    async def delete(self, product_id: ProductId) -> bool:
        return self._products.pop(product_id, None) is not None
