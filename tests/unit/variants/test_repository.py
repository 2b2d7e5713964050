"""Unit tests for VariantDjangoRepository."""

from __future__ import annotations

import pytest

from modules.products.dtos import CreateVariantDTO
from modules.products.models import Product
from modules.variants.models import Variant
from modules.variants.repositories.django_repository import VariantDjangoRepository
from modules.variants.repositories.interfaces import IVariantRepository

pytestmark = pytest.mark.unit


@pytest.fixture()
def repo():
    return VariantDjangoRepository()


@pytest.fixture()
def product():
    return Product.objects.create(name="Widget")


def _variant(product, sku="W-1", **overrides) -> Variant:
    data = {"name": "One", "price_cents": 100, "inventory_count": 1}
    data.update(overrides)
    return Variant.objects.create(product=product, sku=sku, **data)


class TestRepositoryInstantiation:
    def test_is_instance_of_interface(self, repo):
        assert isinstance(repo, IVariantRepository)


class TestGetById:
    def test_found(self, repo, product):
        variant = _variant(product)
        assert repo.get_by_id(variant.pk) == variant

    def test_missing(self, repo):
        assert repo.get_by_id(999999) is None


class TestFindExistingSkus:
    def test_matches_case_insensitively(self, repo, product):
        _variant(product, sku="ABP-4OZ")
        _variant(product, sku="other")
        assert repo.find_existing_skus(["abp-4oz", "NEW"]) == ["ABP-4OZ"]

    def test_empty_input(self, repo):
        assert repo.find_existing_skus([]) == []

    def test_accepts_generator(self, repo, product):
        _variant(product, sku="X")
        assert repo.find_existing_skus(s for s in ["x"]) == ["X"]

    def test_matches_beyond_ascii(self, repo, product):
        _variant(product, sku="ÉCLAIR")
        assert repo.find_existing_skus(["éclair"]) == ["ÉCLAIR"]


class TestCreate:
    def test_binds_to_product(self, repo, product):
        dto = CreateVariantDTO(sku="NEW-1", name="New", price_cents=250, inventory_count=4)
        variant = repo.create(product.pk, dto)
        variant.refresh_from_db()
        assert variant.product_id == product.pk
        assert (variant.sku, variant.name, variant.price_cents, variant.inventory_count) == (
            "NEW-1",
            "New",
            250,
            4,
        )


class TestUpdate:
    def test_partial_update_keeps_other_fields(self, repo, product):
        variant = _variant(product, price_cents=100, inventory_count=7)
        repo.update(variant, {"price_cents": 300})
        variant.refresh_from_db()
        assert variant.price_cents == 300
        assert variant.inventory_count == 7
        assert variant.sku == "W-1"
        assert variant.name == "One"


class TestCountAndDelete:
    def test_count_for_product(self, repo, product):
        _variant(product, sku="A")
        _variant(product, sku="B")
        _variant(Product.objects.create(name="Other"), sku="C")
        assert repo.count_for_product(product.pk) == 2

    def test_delete_is_physical(self, repo, product):
        variant = _variant(product)
        repo.delete(variant)
        assert not Variant.objects.filter(sku="W-1").exists()
