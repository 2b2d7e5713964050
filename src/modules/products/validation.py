"""Request validators for the product endpoints.

Each validator takes the raw JSON body, checks it field by field and
stops at the first violation (``ValidationError``).  On success it
returns a frozen DTO; services never see the raw payload.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from modules.core.exceptions import ValidationError
from modules.core.validation import (
    optional_int,
    optional_text,
    require_mapping,
    require_non_negative_int,
    required_text,
)
from modules.products.dtos import CreateProductDTO, CreateVariantDTO, UpdateProductDTO
from modules.products.models import ProductStatus
from modules.variants.models import normalize_sku


def _status(value: Any) -> ProductStatus:
    if value not in ProductStatus.values:
        raise ValidationError("invalid status")
    return ProductStatus(value)


def _variant(raw: Any, index: int, seen_skus: set[str]) -> CreateVariantDTO:
    label = f"Variant #{index}"
    if not isinstance(raw, dict):
        raise ValidationError(f"{label}: must be an object")

    sku = required_text(raw.get("sku"), f"{label}: SKU is required")
    key = normalize_sku(sku)
    if key in seen_skus:
        raise ValidationError(f"{label}: SKU must be unique")
    seen_skus.add(key)

    name = required_text(raw.get("name"), f"{label}: name is required")
    price_cents = require_non_negative_int(raw.get("price_cents"), f"{label}: price_cents")
    inventory_count = require_non_negative_int(
        raw.get("inventory_count"), f"{label}: inventory_count"
    )
    return CreateVariantDTO(
        sku=sku,
        name=name,
        price_cents=price_cents,
        inventory_count=inventory_count,
    )


def validate_product_create(data: Any) -> CreateProductDTO:
    """Narrow a POST /api/products body into a ``CreateProductDTO``.

    SKUs are compared case-insensitively within the request; the second
    occurrence is the one reported.
    """
    data = require_mapping(data)

    name = required_text(data.get("name"), "name required")
    description = optional_text(data.get("description"), "description")
    category_id = optional_int(data.get("category_id"), "category_id")
    status = _status(data["status"]) if data.get("status") is not None else ProductStatus.ACTIVE

    raw_variants = data.get("variants")
    if not isinstance(raw_variants, list) or not raw_variants:
        raise ValidationError("at least one variant required")

    seen: set[str] = set()
    variants = [_variant(raw, i, seen) for i, raw in enumerate(raw_variants, start=1)]

    return CreateProductDTO(
        name=name,
        description=description,
        category_id=category_id,
        status=status,
        variants=variants,
    )


def validate_product_update(data: Any) -> UpdateProductDTO:
    """Narrow a PUT /api/products/{id} body into an ``UpdateProductDTO``.

    Every field is optional.  ``description`` and ``category_id`` may be
    ``null`` to clear them; ``name`` and ``status`` may not.
    """
    data = require_mapping(data)
    fields: dict[str, Any] = {}

    if "name" in data:
        fields["name"] = required_text(data["name"], "name required")
    if "description" in data:
        fields["description"] = optional_text(data["description"], "description")
    if "category_id" in data:
        fields["category_id"] = optional_int(data["category_id"], "category_id")
    if "status" in data:
        fields["status"] = _status(data["status"])

    return UpdateProductDTO(**fields)


def validate_product_filters(params: Mapping[str, Any]) -> dict[str, Any]:
    """Narrow the list query string; blank parameters are dropped."""
    filters: dict[str, Any] = {}
    search = params.get("search")
    if search:
        filters["search"] = search
    if params.get("category_id"):
        filters["category_id"] = optional_int(params["category_id"], "category_id")
    return filters
