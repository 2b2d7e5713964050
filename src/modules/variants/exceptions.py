"""Variant domain exceptions."""

from __future__ import annotations

from modules.core.exceptions import ConflictError, NotFoundError


class VariantNotFound(NotFoundError):
    """The requested variant does not exist."""

    default_message = "Variant not found"


class SkuAlreadyExists(ConflictError):
    """A variant with the same SKU (case-insensitive) already exists."""

    default_message = "SKU must be unique"


class LastVariantError(ConflictError):
    """Deleting this variant would leave its product without variants."""

    default_message = "Cannot delete the last variant of a product"
