"""Product service layer (Use Cases).

Orchestrates business logic for the Product aggregate, delegating
persistence to the injected repositories.

Business rules enforced here:
- A product is created with at least one variant, all in one transaction.
- Variant SKUs are unique across the store, case-insensitively.
- A referenced category must exist.
- Soft delete via ``deleted_at``; soft-deleted products leave list reads.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Dict, List, Optional

import structlog
from django.db import IntegrityError, transaction

from modules.core.exceptions import ConflictError, ValidationError
from modules.products.exceptions import ProductNotFound
from modules.variants.exceptions import SkuAlreadyExists
from modules.variants.models import normalize_sku

if TYPE_CHECKING:
    from modules.categories.repositories.interfaces import ICategoryRepository
    from modules.products.dtos import CreateProductDTO, UpdateProductDTO
    from modules.products.models import Product
    from modules.products.repositories.interfaces import IProductRepository
    from modules.variants.repositories.interfaces import IVariantRepository

logger = structlog.get_logger(__name__)


class ProductService:
    """Application service for Product use-cases.

    Receives its repositories via constructor injection (DIP).
    """

    def __init__(
        self,
        repository: IProductRepository,
        variant_repository: IVariantRepository,
        category_repository: ICategoryRepository,
    ) -> None:
        self._repo = repository
        self._variants = variant_repository
        self._categories = category_repository

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    def create_product(self, dto: CreateProductDTO) -> Product:
        """Insert the product and all of its variants atomically.

        Raises:
            ValidationError: if ``category_id`` references no category.
            SkuAlreadyExists: if a variant SKU is already stored, either
                found up front or rejected by the unique index.
        """
        log = logger.bind(product_name=dto.name, variant_count=len(dto.variants))
        self._ensure_category(dto.category_id)

        existing = self._variants.find_existing_skus(v.sku for v in dto.variants)
        taken = {normalize_sku(sku) for sku in existing}
        for index, variant in enumerate(dto.variants, start=1):
            if normalize_sku(variant.sku) in taken:
                log.warning("product.duplicate_sku", sku=variant.sku)
                raise SkuAlreadyExists(f"Variant #{index}: SKU '{variant.sku}' already exists")

        try:
            with transaction.atomic():
                product = self._repo.create(dto)
                for variant in dto.variants:
                    self._variants.create(product.pk, variant)
                created = self._repo.get_by_id(product.pk)
        except IntegrityError as exc:
            # Lost a race with a concurrent writer; the whole block rolled back.
            log.warning("product.create_conflict", error=str(exc))
            raise self._translate_integrity_error(exc, dto) from exc

        log.info("product.created", product_id=created.pk)
        return created

    @transaction.atomic
    def update_product(self, id: int, dto: UpdateProductDTO) -> Product:
        """Overwrite only the fields present in ``dto``.

        Raises:
            ProductNotFound: if the product does not exist.
            ValidationError: if a new ``category_id`` references no category.
        """
        product = self._repo.get_by_id(id)
        if product is None:
            raise ProductNotFound()

        changes = dto.changes()
        if "category_id" in changes:
            self._ensure_category(changes["category_id"])

        self._repo.update(product, changes)
        logger.info("product.updated", product_id=id, fields=sorted(changes))
        return self._repo.get_by_id(id)

    def soft_delete_product(self, id: int) -> None:
        """Stamp ``deleted_at``; repeating it moves the stamp forward.

        Raises:
            ProductNotFound: if the product does not exist.
        """
        if not self._repo.soft_delete(id):
            raise ProductNotFound()
        logger.info("product.soft_deleted", product_id=id)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def list_products(self, filters: Optional[Dict[str, Any]] = None) -> List[Product]:
        """Non-deleted products with variant aggregates, newest first."""
        return self._repo.list_summaries(filters)

    def get_product(self, id: int) -> Product:
        """Retrieve a product with its variants.

        Soft-deleted products are still returned, with ``deleted_at`` set.

        Raises:
            ProductNotFound: if the product does not exist.
        """
        product = self._repo.get_by_id(id)
        if product is None:
            raise ProductNotFound()
        return product

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _ensure_category(self, category_id: Optional[int]) -> None:
        if category_id is not None and not self._categories.exists(category_id):
            raise ValidationError(f"Category {category_id} does not exist")

    @staticmethod
    def _translate_integrity_error(exc: IntegrityError, dto: CreateProductDTO) -> Exception:
        """Map a store constraint failure to a domain error; driver text stays in the logs."""
        message = str(exc).lower()
        if "unique" in message:
            return SkuAlreadyExists()
        if "foreign key" in message and dto.category_id is not None:
            # The category was removed between the existence check and commit.
            return ValidationError(f"Category {dto.category_id} does not exist")
        return ConflictError("Product could not be saved")
