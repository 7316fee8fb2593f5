"""Catalog product."""

from datetime import datetime

from pydantic import Field

from storefront.domain.base import DomainModel
from storefront.domain.model.user import utcnow
from storefront.domain.value import ProductId


class Product(DomainModel):
    """Product in the catalog with its image stored as raw bytes."""

    id: ProductId
    category: str = Field(min_length=1)
    description: str = Field(min_length=1)
    name: str = Field(min_length=1)
    price: float = Field(ge=0)
    image: bytes = Field(repr=False)
    image_content_type: str = "image/jpeg"
    created_at: datetime = Field(default_factory=utcnow)
