"""Unit tests for CategoryDjangoRepository."""

from __future__ import annotations

import pytest

from modules.categories.models import Category
from modules.categories.repositories.django_repository import CategoryDjangoRepository
from modules.categories.repositories.interfaces import ICategoryRepository
from modules.products.models import Product

pytestmark = pytest.mark.unit


@pytest.fixture()
def repo():
    return CategoryDjangoRepository()


class TestRepositoryInstantiation:
    def test_is_instance_of_interface(self, repo):
        assert isinstance(repo, ICategoryRepository)


class TestList:
    def test_ordered_by_name(self, repo):
        Category.objects.create(name="Produce")
        Category.objects.create(name="Beverages")
        Category.objects.create(name="Dairy & Eggs")
        assert [c.name for c in repo.list()] == ["Beverages", "Dairy & Eggs", "Produce"]

    def test_product_count_excludes_soft_deleted(self, repo, category):
        Product.objects.create(name="Kept", category=category)
        Product.objects.create(name="Also kept", category=category)
        Product.objects.create(name="Gone", category=category).delete()
        Category.objects.create(name="Empty")

        counts = {c.name: c.product_count for c in repo.list()}
        assert counts == {"Proteins": 2, "Empty": 0}

    def test_empty_store(self, repo):
        assert repo.list() == []


class TestGetById:
    def test_returns_annotated_category(self, repo, category):
        Product.objects.create(name="Steak", category=category)
        found = repo.get_by_id(category.pk)
        assert found == category
        assert found.product_count == 1

    def test_unknown_id_returns_none(self, repo):
        assert repo.get_by_id(999999) is None


class TestExists:
    def test_exists(self, repo, category):
        assert repo.exists(category.pk) is True
        assert repo.exists(category.pk + 1000) is False
