"""Product DTOs for the Service Layer.

Framework-agnostic data transfer objects using Pydantic v2.
These are the contracts between the API layer and the Service layer;
they are only built by ``modules.products.validation`` from an already
checked payload.  DTOs are immutable (``frozen=True``).

- ``CreateVariantDTO``: one variant of a product creation request.
- ``CreateProductDTO``: input for product creation.
- ``UpdateProductDTO``: input for partial product updates.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from modules.core.validation import MAX_STORED_INT
from modules.products.models import ProductStatus


class CreateVariantDTO(BaseModel):
    model_config = ConfigDict(frozen=True)

    sku: str
    name: str
    price_cents: int = Field(ge=0, le=MAX_STORED_INT)
    inventory_count: int = Field(ge=0, le=MAX_STORED_INT)


class CreateProductDTO(BaseModel):
    """Immutable DTO for product creation requests."""

    model_config = ConfigDict(frozen=True)

    name: str
    description: Optional[str] = None
    category_id: Optional[int] = None
    status: ProductStatus = ProductStatus.ACTIVE
    variants: List[CreateVariantDTO] = Field(min_length=1)


class UpdateProductDTO(BaseModel):
    """Immutable DTO for product update requests.

    Only fields that were present in the request end up in
    ``model_fields_set``; ``changes()`` returns exactly those, so an
    explicit ``null`` (clear the value) differs from an absent key
    (leave it alone).
    """

    model_config = ConfigDict(frozen=True)

    name: Optional[str] = None
    description: Optional[str] = None
    category_id: Optional[int] = None
    status: Optional[ProductStatus] = None

    def changes(self) -> Dict[str, Any]:
        return self.model_dump(exclude_unset=True)
