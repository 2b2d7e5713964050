"""Django ORM implementation of the Variant repository."""

from __future__ import annotations

from typing import Any, Dict, Iterable, List, Optional

from modules.products.dtos import CreateVariantDTO
from modules.variants.models import Variant, normalize_sku
from modules.variants.repositories.interfaces import IVariantRepository


class VariantDjangoRepository(IVariantRepository):
    """Concrete Variant repository backed by Django ORM."""

    def get_by_id(self, id: int) -> Optional[Variant]:
        return Variant.objects.filter(pk=id).first()

    def find_existing_skus(self, skus: Iterable[str]) -> List[str]:
        keys = {normalize_sku(sku) for sku in skus}
        if not keys:
            return []
        return list(Variant.objects.filter(sku_key__in=keys).values_list("sku", flat=True))

    def create(self, product_id: int, dto: CreateVariantDTO) -> Variant:
        return Variant.objects.create(
            product_id=product_id,
            sku=dto.sku,
            name=dto.name,
            price_cents=dto.price_cents,
            inventory_count=dto.inventory_count,
        )

    def update(self, variant: Variant, changes: Dict[str, Any]) -> Variant:
        for field, value in changes.items():
            setattr(variant, field, value)
        variant.save(update_fields=list(changes))
        return variant

    def count_for_product(self, product_id: int) -> int:
        return Variant.objects.filter(product_id=product_id).count()

    def delete(self, variant: Variant) -> None:
        variant.delete()
