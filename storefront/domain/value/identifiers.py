"""Strongly typed identifiers for storefront domain entities."""

from typing import NewType
from uuid import UUID

UserId = NewType("UserId", UUID)
ProductId = NewType("ProductId", UUID)
SearchId = NewType("SearchId", UUID)
