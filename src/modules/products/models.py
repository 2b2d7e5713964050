"""Product model.

Business rules implemented:
- ``status`` is one of active / draft / archived (CHECK constraint).
- ``category`` is optional and cannot be removed while products reference it.
- Soft delete via ``deleted_at`` (inherited from SoftDeleteModel).
- A product is created together with at least one variant; see
  ``ProductService.create_product``.
"""

from __future__ import annotations

from django.db import models

from modules.core.models import SoftDeleteModel


class ProductStatus(models.TextChoices):
    ACTIVE = "active", "Active"
    DRAFT = "draft", "Draft"
    ARCHIVED = "archived", "Archived"


class Product(SoftDeleteModel):
    """Product aggregate root; owns its variants."""

    name = models.CharField(max_length=255)
    description = models.TextField(null=True, blank=True, default=None)  # noqa: DJ01
    category = models.ForeignKey(
        "categories.Category",
        on_delete=models.PROTECT,
        null=True,
        blank=True,
        related_name="products",
    )
    status = models.CharField(
        max_length=20,
        choices=ProductStatus.choices,
        default=ProductStatus.ACTIVE,
    )

    class Meta:
        db_table = "products"
        ordering = ["-created_at", "-id"]
        indexes = [
            models.Index(fields=["status"], name="products_status_idx"),
        ]
        constraints = [
            models.CheckConstraint(
                condition=models.Q(status__in=ProductStatus.values),
                name="products_status_valid",
            ),
        ]

    def __str__(self) -> str:
        return self.name
