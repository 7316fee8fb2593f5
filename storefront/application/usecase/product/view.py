"""Product representation returned to clients."""

from datetime import datetime

from pydantic import BaseModel

from storefront.domain.model import Product
from storefront.util.image import encode_data_url


class ProductView(BaseModel):
    """Product with its image re-encoded as a data URL."""

    id: str
    productCategory: str
    productDescription: str
    productName: str
    productPrice: float
    productImage: str
    createdAt: datetime

    @classmethod
    def from_product(cls, product: Product) -> "ProductView":
        return cls(
            id=str(product.id),
            productCategory=product.category,
            productDescription=product.description,
            productName=product.name,
            productPrice=product.price,
            productImage=encode_data_url(product.image, product.image_content_type),
            createdAt=product.created_at,
        )
