"""Product domain exceptions.

Raised by the Service Layer when business rules are violated and
rendered by ``modules.core.exceptions.api_exception_handler``.
"""

from __future__ import annotations

from modules.core.exceptions import NotFoundError


class ProductNotFound(NotFoundError):
    """The requested product does not exist."""

    default_message = "Product not found"
