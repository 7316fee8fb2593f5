"""Product repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from storefront.domain.model.product import Product
from storefront.domain.value import ProductId


class ProductRepository(ABC):
    """Repository for catalog products."""

    @abstractmethod
    async def save(self, product: Product) -> Product:
        """Insert a product."""
        pass

    @abstractmethod
    async def find_by_id(self, product_id: ProductId) -> Optional[Product]:
        """Find a product by ID."""
        pass

    @abstractmethod
    async def find_all(self) -> list[Product]:
        """List all products, oldest first."""
        pass

    @abstractmethod
    async def delete(self, product_id: ProductId) -> bool:
        """Delete a product.

        Returns:
            True if a product was deleted, False if it did not exist
        """
        pass
