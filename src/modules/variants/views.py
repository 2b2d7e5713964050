"""Variant API views.

Variants are created together with their product (POST /api/products);
this ViewSet only reads, edits and deletes them.
"""

from __future__ import annotations

from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.viewsets import GenericViewSet

from modules.products.repositories.django_repository import ProductDjangoRepository
from modules.variants.repositories.django_repository import VariantDjangoRepository
from modules.variants.serializers import VariantSerializer
from modules.variants.services import VariantService
from modules.variants.validation import validate_variant_update


class VariantViewSet(GenericViewSet):
    """GET / PUT / DELETE /api/variants/{id}."""

    serializer_class = VariantSerializer
    lookup_value_regex = r"\d{1,18}"

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._service = VariantService(
            repository=VariantDjangoRepository(),
            product_repository=ProductDjangoRepository(),
        )

    def retrieve(self, request: Request, pk: str | None = None) -> Response:
        variant = self._service.get_variant(int(pk))
        return Response(VariantSerializer(variant).data)

    def update(self, request: Request, pk: str | None = None) -> Response:
        dto = validate_variant_update(request.data)
        variant = self._service.update_variant(int(pk), dto)
        return Response(VariantSerializer(variant).data)

    def destroy(self, request: Request, pk: str | None = None) -> Response:
        self._service.delete_variant(int(pk))
        return Response({"success": True})
