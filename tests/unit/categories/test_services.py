"""Unit tests for CategoryService."""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest

from modules.categories.exceptions import CategoryNotFound
from modules.categories.models import Category
from modules.categories.services import CategoryService

pytestmark = pytest.mark.unit


@pytest.fixture()
def mock_repo():
    return MagicMock()


@pytest.fixture()
def service(mock_repo):
    return CategoryService(repository=mock_repo)


class TestListCategories:
    def test_delegates_to_repository(self, service, mock_repo):
        categories = [Category(name="A"), Category(name="B")]
        mock_repo.list.return_value = categories
        assert service.list_categories() == categories
        mock_repo.list.assert_called_once_with()


class TestGetCategory:
    def test_success(self, service, mock_repo):
        category = Category(id=3, name="Produce")
        mock_repo.get_by_id.return_value = category
        assert service.get_category(3) is category
        mock_repo.get_by_id.assert_called_once_with(3)

    def test_not_found(self, service, mock_repo):
        mock_repo.get_by_id.return_value = None
        with pytest.raises(CategoryNotFound, match="Category not found"):
            service.get_category(42)
