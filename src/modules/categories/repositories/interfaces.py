"""Category repository interface."""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING, List, Optional

from modules.core.repositories.interfaces import IRepository

if TYPE_CHECKING:
    from modules.categories.models import Category


class ICategoryRepository(IRepository["Category"]):
    """Repository contract for the (read-only) Category aggregate."""

    @abstractmethod
    def get_by_id(self, id: int) -> Optional[Category]:
        """Retrieve a category annotated with ``product_count``."""

    @abstractmethod
    def list(self) -> List[Category]:
        """All categories ordered by name, annotated with ``product_count``."""

    @abstractmethod
    def exists(self, id: int) -> bool:
        """Whether a category with this primary key exists."""
