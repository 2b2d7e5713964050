"""Django ORM implementation of the Category repository.

``product_count`` is computed live on every read: the number of
products referencing the category that are not soft-deleted.
"""

from __future__ import annotations

from typing import List, Optional

from django.db.models import Count, Q

from modules.categories.models import Category
from modules.categories.repositories.interfaces import ICategoryRepository


class CategoryDjangoRepository(ICategoryRepository):
    """Concrete Category repository backed by Django ORM."""

    @staticmethod
    def _annotated():
        return Category.objects.annotate(
            product_count=Count(
                "products",
                filter=Q(products__deleted_at__isnull=True),
            )
        )

    def get_by_id(self, id: int) -> Optional[Category]:
        return self._annotated().filter(pk=id).first()

    def list(self) -> List[Category]:
        return list(self._annotated().order_by("name"))

    def exists(self, id: int) -> bool:
        return Category.objects.filter(pk=id).exists()
