"""Category service layer (read-only use cases)."""

from __future__ import annotations

from typing import TYPE_CHECKING, List

import structlog

from modules.categories.exceptions import CategoryNotFound

if TYPE_CHECKING:
    from modules.categories.models import Category
    from modules.categories.repositories.interfaces import ICategoryRepository

logger = structlog.get_logger(__name__)


class CategoryService:
    """Application service for Category queries.

    Receives an ``ICategoryRepository`` via constructor injection.
    """

    def __init__(self, repository: ICategoryRepository) -> None:
        self._repo = repository

    def list_categories(self) -> List[Category]:
        """All categories by name, each with its live product count."""
        return self._repo.list()

    def get_category(self, id: int) -> Category:
        """Raises:
            CategoryNotFound: if no category has this id.
        """
        category = self._repo.get_by_id(id)
        if category is None:
            logger.info("category.not_found", category_id=id)
            raise CategoryNotFound()
        return category
