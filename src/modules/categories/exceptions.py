"""Category domain exceptions."""

from __future__ import annotations

from modules.core.exceptions import NotFoundError


class CategoryNotFound(NotFoundError):
    """The requested category does not exist."""

    default_message = "Category not found"
