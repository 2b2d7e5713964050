"""Integration tests for the ``seed_data`` management command."""

from io import StringIO

import pytest
from django.core.management import call_command

from modules.categories.models import Category
from modules.products.models import Product, ProductStatus
from modules.variants.models import Variant

pytestmark = pytest.mark.integration


class TestSeedData:
    def test_counts(self, seeded):
        assert Category.objects.count() == 6
        assert Product.objects.count() == 30
        assert Variant.objects.count() == 65

    def test_soft_deleted_and_drafts(self, seeded):
        assert set(Product.objects.dead().values_list("name", flat=True)) == {
            "Organic Baby Spinach",
            "Sriracha Hot Sauce (Original)",
        }
        assert set(
            Product.objects.filter(status=ProductStatus.DRAFT).values_list("name", flat=True)
        ) == {"Plant-Based Burger Patty", "Crumbled Feta Cheese", "Chai Tea Latte Mix"}

    def test_abp_4oz_present(self, seeded):
        variant = Variant.objects.get(sku="ABP-4OZ")
        assert variant.product.name == "Angus Beef Patties"
        assert variant.price_cents == 8999

    def test_every_product_has_a_variant(self, seeded):
        assert not Product.objects.filter(variants__isnull=True).exists()

    def test_idempotent(self, seeded):
        call_command("seed_data", stdout=StringIO())
        assert Product.objects.count() == 30
        assert Variant.objects.count() == 65

    def test_reset_removes_extra_rows(self, seeded):
        extra = Product.objects.create(name="Scratch")
        Variant.objects.create(product=extra, sku="SCR-1", name="x", price_cents=1, inventory_count=1)

        out = StringIO()
        call_command("seed_data", "--reset", stdout=out)

        assert not Product.objects.filter(name="Scratch").exists()
        assert Product.objects.count() == 30
        assert "variants=65" in out.getvalue()

    def test_created_at_backdated(self, seeded):
        chai = Product.objects.get(name="Chai Tea Latte Mix")
        spinach = Product.objects.get(name="Organic Baby Spinach")
        assert (chai.created_at - spinach.created_at).days == 58
