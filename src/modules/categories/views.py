"""Category API views.

Exposes the ``CategoryService`` via HTTP using a DRF ViewSet.  Domain
exceptions propagate to ``modules.core.exceptions.api_exception_handler``.
"""

from __future__ import annotations

from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.viewsets import GenericViewSet

from modules.categories.repositories.django_repository import CategoryDjangoRepository
from modules.categories.serializers import CategorySerializer
from modules.categories.services import CategoryService


class CategoryViewSet(GenericViewSet):
    """GET /api/categories and GET /api/categories/{id}."""

    serializer_class = CategorySerializer
    lookup_value_regex = r"\d{1,18}"

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._service = CategoryService(repository=CategoryDjangoRepository())

    def list(self, request: Request) -> Response:
        categories = self._service.list_categories()
        return Response(CategorySerializer(categories, many=True).data)

    def retrieve(self, request: Request, pk: str | None = None) -> Response:
        category = self._service.get_category(int(pk))
        return Response(CategorySerializer(category).data)
