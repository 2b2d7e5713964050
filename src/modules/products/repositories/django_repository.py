"""Django ORM implementation of the Product repository.

Satisfies ``IProductRepository`` using Django's QuerySet API.
Error handling follows the Null Object pattern: look-ups return ``None``
instead of raising, and the Service Layer decides how to translate a
missing entity into an API error.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

import structlog
from django.db.models import Count, F, IntegerField, Max, Min, Sum
from django.db.models.functions import Coalesce

from modules.products.dtos import CreateProductDTO
from modules.products.filters import ProductFilter
from modules.products.models import Product
from modules.products.repositories.interfaces import IProductRepository

logger = structlog.get_logger(__name__)


class ProductDjangoRepository(IProductRepository):
    """Concrete Product repository backed by Django ORM."""

    @staticmethod
    def _with_category():
        return Product.objects.annotate(category_name=F("category__name"))

    def get_by_id(self, id: int) -> Optional[Product]:
        return self._with_category().prefetch_related("variants").filter(pk=id).first()

    def list_summaries(self, filters: Optional[Dict[str, Any]] = None) -> List[Product]:
        queryset = (
            self._with_category()
            .alive()
            .annotate(
                variant_count=Count("variants"),
                min_price_cents=Min("variants__price_cents"),
                max_price_cents=Max("variants__price_cents"),
                total_inventory=Coalesce(
                    Sum("variants__inventory_count"), 0, output_field=IntegerField()
                ),
            )
        )
        filterset = ProductFilter(data=filters or {}, queryset=queryset)
        return list(filterset.qs.order_by("-created_at", "-id"))

    def get_for_update(self, id: int) -> Optional[Product]:
        return Product.objects.select_for_update().filter(pk=id).first()

    def create(self, dto: CreateProductDTO) -> Product:
        product = Product.objects.create(
            name=dto.name,
            description=dto.description,
            category_id=dto.category_id,
            status=dto.status,
        )
        logger.debug("product.inserted", product_id=product.pk)
        return product

    def update(self, product: Product, changes: Dict[str, Any]) -> Product:
        for field, value in changes.items():
            setattr(product, field, value)
        # BaseModel.save() adds updated_at, so an empty patch still touches it.
        product.save(update_fields=list(changes))
        return product

    def soft_delete(self, id: int) -> bool:
        count, _ = Product.objects.filter(pk=id).delete()
        return count > 0
