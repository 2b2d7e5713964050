"""Variant model: the purchasable, SKU-level unit of a product.

Business rules implemented:
- SKU is unique across all variants, compared case-insensitively.  The
  comparison key ``sku_key`` (stripped, Unicode case-folded) carries the
  unique index; the stored ``sku`` keeps its case.
- ``price_cents`` and ``inventory_count`` are never negative.
- Variants are physically deleted; the last variant of a product cannot
  be removed (enforced at service layer).
"""

from __future__ import annotations

from django.db import models

from modules.core.models import BaseModel


def normalize_sku(sku: str) -> str:
    """Key under which two SKUs count as the same one."""
    return sku.strip().casefold()


class Variant(BaseModel):
    product = models.ForeignKey(
        "products.Product",
        on_delete=models.CASCADE,
        related_name="variants",
    )
    sku = models.CharField(max_length=64)
    sku_key = models.CharField(max_length=128, editable=False)
    name = models.CharField(max_length=255)
    price_cents = models.PositiveIntegerField()
    inventory_count = models.PositiveIntegerField(default=0)

    class Meta:
        db_table = "variants"
        ordering = ["created_at", "id"]
        constraints = [
            models.UniqueConstraint(fields=["sku_key"], name="variants_sku_key_unique"),
            models.CheckConstraint(
                condition=models.Q(price_cents__gte=0),
                name="variants_price_cents_non_negative",
            ),
            models.CheckConstraint(
                condition=models.Q(inventory_count__gte=0),
                name="variants_inventory_count_non_negative",
            ),
        ]

    def save(self, *args, **kwargs) -> None:
        self.sku = (self.sku or "").strip()
        self.sku_key = normalize_sku(self.sku)
        update_fields = kwargs.get("update_fields")
        if update_fields is not None and "sku" in update_fields and "sku_key" not in update_fields:
            kwargs["update_fields"] = list(update_fields) + ["sku_key"]
        super().save(*args, **kwargs)

    def __str__(self) -> str:
        return f"{self.sku} - {self.name}"
