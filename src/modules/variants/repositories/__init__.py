"""Variant repositories package."""

from modules.variants.repositories.django_repository import VariantDjangoRepository
from modules.variants.repositories.interfaces import IVariantRepository

__all__ = ["IVariantRepository", "VariantDjangoRepository"]
