"""Create product use case."""

from datetime import datetime, timezone
from uuid import uuid4

from pydantic import BaseModel

from storefront.config import CatalogSettings
from storefront.domain.error import ValidationError
from storefront.domain.model import Product
from storefront.domain.service import ProductService
from storefront.domain.value import ProductId
from storefront.util.image import InvalidImageError, decode_data_url

from ..base import BaseUseCase

REQUIRED_TEXT_FIELDS = (
    "productCategory",
    "productDescription",
    "productName",
    "productImage",
)


class CreateProductRequest(BaseModel):
    """Create product request. ``image`` is a base64 data URL."""

    category: str
    description: str
    name: str
    price: float | None = None
    image: str


class CreateProductResponse(BaseModel):
    """Create product response."""

    product_id: str


class CreateProductUseCase(BaseUseCase[CreateProductRequest, CreateProductResponse]):
    """Use case for adding a product to the catalog."""

    def __init__(
        self, product_service: ProductService, catalog_settings: CatalogSettings
    ) -> None:
        self.product_service = product_service
        self.catalog_settings = catalog_settings

    async def execute(self, request: CreateProductRequest) -> CreateProductResponse:
        """Decode the image and store the product.

        Raises:
            ValidationError: If a field is missing or the image is not a data URL
        """
        values = (request.category, request.description, request.name, request.image)
        missing = [
            name for name, v in zip(REQUIRED_TEXT_FIELDS, values) if not v.strip()
        ]
        if request.price is None:
            missing.append("productPrice")
        if missing:
            raise ValidationError(
                f"Missing {', '.join(repr(m) for m in missing)}", field=missing[0]
            )
        if request.price < 0:
            raise ValidationError("Price must not be negative", field="productPrice")

        try:
            image, content_type = decode_data_url(request.image)
        except InvalidImageError as e:
            raise ValidationError(str(e), field="productImage")

        if len(image) > self.catalog_settings.max_image_bytes:
            raise ValidationError("Image is too large", field="productImage")

        product = await self.product_service.create(
            Product(
                id=ProductId(uuid4()),
                category=request.category.strip(),
                description=request.description.strip(),
                name=request.name.strip(),
                price=request.price,
                image=image,
                image_content_type=content_type,
                created_at=datetime.now(timezone.utc),
            )
        )
        return CreateProductResponse(product_id=str(product.id))
