"""Variant repository interface."""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING, Any, Dict, Iterable, List, Optional

from modules.core.repositories.interfaces import IRepository

if TYPE_CHECKING:
    from modules.products.dtos import CreateVariantDTO
    from modules.variants.models import Variant


class IVariantRepository(IRepository["Variant"]):
    """Repository contract for variants."""

    @abstractmethod
    def get_by_id(self, id: int) -> Optional[Variant]:
        """Retrieve a variant by primary key."""

    @abstractmethod
    def find_existing_skus(self, skus: Iterable[str]) -> List[str]:
        """Stored SKUs matching any of ``skus`` case-insensitively."""

    @abstractmethod
    def create(self, product_id: int, dto: CreateVariantDTO) -> Variant:
        """Insert one variant bound to ``product_id``."""

    @abstractmethod
    def update(self, variant: Variant, changes: Dict[str, Any]) -> Variant:
        """Apply ``changes`` and persist only those fields."""

    @abstractmethod
    def count_for_product(self, product_id: int) -> int:
        """Number of variants belonging to ``product_id``."""

    @abstractmethod
    def delete(self, variant: Variant) -> None:
        """Physically remove the variant."""
