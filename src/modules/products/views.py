"""Product API views.

Exposes the ``ProductService`` via HTTP using a DRF ViewSet.  Request
bodies are narrowed by ``modules.products.validation`` before they reach
the service; domain exceptions propagate to the project-wide exception
handler, which renders them as ``{"error": ...}``.
"""

from __future__ import annotations

from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.viewsets import GenericViewSet

from modules.categories.repositories.django_repository import CategoryDjangoRepository
from modules.products.repositories.django_repository import ProductDjangoRepository
from modules.products.serializers import (
    ProductDetailSerializer,
    ProductListSerializer,
    ProductSerializer,
)
from modules.products.services import ProductService
from modules.products.validation import (
    validate_product_create,
    validate_product_filters,
    validate_product_update,
)
from modules.variants.repositories.django_repository import VariantDjangoRepository


class ProductViewSet(GenericViewSet):
    """ViewSet for Product CRUD operations.

    Uses ``ProductService`` with the Django repositories (DIP).  Does
    **not** extend ``ModelViewSet``: all ORM access goes through the
    service/repository layer.
    """

    serializer_class = ProductSerializer
    lookup_value_regex = r"\d{1,18}"

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._service = ProductService(
            repository=ProductDjangoRepository(),
            variant_repository=VariantDjangoRepository(),
            category_repository=CategoryDjangoRepository(),
        )

    def list(self, request: Request) -> Response:
        """GET /api/products?search=&category_id="""
        filters = validate_product_filters(request.query_params)
        products = self._service.list_products(filters)
        return Response(ProductListSerializer(products, many=True).data)

    def retrieve(self, request: Request, pk: str | None = None) -> Response:
        """GET /api/products/{pk}"""
        product = self._service.get_product(int(pk))
        return Response(ProductDetailSerializer(product).data)

    def create(self, request: Request) -> Response:
        """POST /api/products"""
        dto = validate_product_create(request.data)
        product = self._service.create_product(dto)
        return Response(
            ProductDetailSerializer(product).data,
            status=status.HTTP_201_CREATED,
        )

    def update(self, request: Request, pk: str | None = None) -> Response:
        """PUT /api/products/{pk}"""
        dto = validate_product_update(request.data)
        product = self._service.update_product(int(pk), dto)
        return Response(ProductSerializer(product).data)

    def destroy(self, request: Request, pk: str | None = None) -> Response:
        """DELETE /api/products/{pk} (soft delete)"""
        self._service.soft_delete_product(int(pk))
        return Response({"success": True})
