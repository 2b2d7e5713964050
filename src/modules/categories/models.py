"""Category model.

Categories are created out-of-band (seed command or Django admin) and are
never deleted by the API.  Products reference them; they do not own them.
"""

from __future__ import annotations

from django.db import models

from modules.core.models import BaseModel


class Category(BaseModel):
    """Grouping for products (e.g. "Proteins", "Beverages")."""

    name = models.CharField(max_length=255, unique=True)
    description = models.TextField(null=True, blank=True, default=None)  # noqa: DJ01

    class Meta:
        db_table = "categories"
        ordering = ["name"]
        verbose_name_plural = "categories"

    def __str__(self) -> str:
        return self.name
