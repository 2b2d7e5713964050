"""Variant service layer (Use Cases).

Business rules enforced here:
- Only ``price_cents`` and ``inventory_count`` change on update.
- A product always keeps at least one variant: deleting the last one
  raises ``LastVariantError``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import structlog
from django.db import transaction

from modules.variants.exceptions import LastVariantError, VariantNotFound

if TYPE_CHECKING:
    from modules.products.repositories.interfaces import IProductRepository
    from modules.variants.dtos import UpdateVariantDTO
    from modules.variants.models import Variant
    from modules.variants.repositories.interfaces import IVariantRepository

logger = structlog.get_logger(__name__)


class VariantService:
    """Application service for Variant use-cases.

    The product repository is only used to lock the parent row while
    the sibling count is checked.
    """

    def __init__(
        self,
        repository: IVariantRepository,
        product_repository: IProductRepository,
    ) -> None:
        self._repo = repository
        self._products = product_repository

    def get_variant(self, id: int) -> Variant:
        variant = self._repo.get_by_id(id)
        if variant is None:
            raise VariantNotFound()
        return variant

    @transaction.atomic
    def update_variant(self, id: int, dto: UpdateVariantDTO) -> Variant:
        """Apply the fields present in ``dto``; the rest stay untouched.

        Raises:
            VariantNotFound: if the variant does not exist.
        """
        variant = self.get_variant(id)
        changes = dto.changes()
        variant = self._repo.update(variant, changes)
        logger.info("variant.updated", variant_id=id, fields=sorted(changes))
        return variant

    @transaction.atomic
    def delete_variant(self, id: int) -> None:
        """Physically delete a variant unless it is its product's last one.

        Raises:
            VariantNotFound: if the variant does not exist.
            LastVariantError: if the product has no other variant.
        """
        variant = self.get_variant(id)
        log = logger.bind(variant_id=id, product_id=variant.product_id)

        self._products.get_for_update(variant.product_id)
        if self._repo.count_for_product(variant.product_id) <= 1:
            log.warning("variant.last_variant_guard")
            raise LastVariantError()

        self._repo.delete(variant)
        log.info("variant.deleted")
