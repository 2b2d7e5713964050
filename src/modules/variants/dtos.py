"""Variant DTOs for the Service Layer (Pydantic v2, frozen)."""

from __future__ import annotations

from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field

from modules.core.validation import MAX_STORED_INT


class UpdateVariantDTO(BaseModel):
    """Partial update of a variant.

    Only ``price_cents`` and ``inventory_count`` are editable.  Other
    keys in the payload (``name``, ``sku``, ...) are dropped.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    price_cents: Optional[int] = Field(default=None, ge=0, le=MAX_STORED_INT)
    inventory_count: Optional[int] = Field(default=None, ge=0, le=MAX_STORED_INT)

    def changes(self) -> Dict[str, Any]:
        return self.model_dump(exclude_unset=True)
