"""Product repository interface.

Extends ``IRepository[Product]`` with the aggregated read models used by
the list and detail endpoints.
"""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING, Any, Dict, List, Optional

from modules.core.repositories.interfaces import IRepository

if TYPE_CHECKING:
    from modules.products.dtos import CreateProductDTO
    from modules.products.models import Product


class IProductRepository(IRepository["Product"]):
    """Repository contract for the Product aggregate."""

    @abstractmethod
    def get_by_id(self, id: int) -> Optional[Product]:
        """Retrieve a product (deleted or not) annotated with ``category_name``.

        ``product.variants.all()`` is prefetched, oldest variant first.
        """

    @abstractmethod
    def list_summaries(self, filters: Optional[Dict[str, Any]] = None) -> List[Product]:
        """Non-deleted products with variant aggregates, newest first.

        Supported filters: ``search`` (name/description substring,
        case-insensitive) and ``category_id``.
        """

    @abstractmethod
    def get_for_update(self, id: int) -> Optional[Product]:
        """Retrieve a product with a row-level lock (SELECT FOR UPDATE).

        Must be called inside ``transaction.atomic``.
        """

    @abstractmethod
    def create(self, dto: CreateProductDTO) -> Product:
        """Insert the product row only (variants are inserted separately)."""

    @abstractmethod
    def update(self, product: Product, changes: Dict[str, Any]) -> Product:
        """Apply ``changes`` to ``product`` and persist only those fields."""

    @abstractmethod
    def soft_delete(self, id: int) -> bool:
        """Stamp ``deleted_at``.  Returns ``False`` when the id is unknown."""
