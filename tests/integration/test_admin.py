"""Integration tests for the Django admin delete paths.

Covers:
- Product delete view and "delete selected" only stamp ``deleted_at``.
- Variant delete view and "delete selected" keep at least one variant
  per product.
"""

from __future__ import annotations

import pytest
from django.contrib import admin

from modules.products.admin import VariantInline
from modules.products.models import Product
from modules.variants.models import Variant

pytestmark = pytest.mark.integration


def _product(*skus: str) -> Product:
    product = Product.objects.create(name="Widget")
    for sku in skus:
        Variant.objects.create(
            product=product, sku=sku, name=sku, price_cents=100, inventory_count=1
        )
    return product


def _delete_selected(client, url, pks):
    return client.post(
        url,
        {"action": "delete_selected", "_selected_action": [str(pk) for pk in pks], "post": "yes"},
    )


# ===========================================================================
# Products
# ===========================================================================


class TestProductAdminDelete:
    def test_delete_selected_soft_deletes(self, admin_client):
        product = _product("W-1", "W-2")

        response = _delete_selected(admin_client, "/admin/products/product/", [product.pk])

        assert response.status_code == 302
        product.refresh_from_db()
        assert product.deleted_at is not None
        assert Variant.objects.filter(product=product).count() == 2

    def test_delete_view_soft_deletes(self, admin_client):
        product = _product("W-1")

        response = admin_client.post(f"/admin/products/product/{product.pk}/delete/", {"post": "yes"})

        assert response.status_code == 302
        product.refresh_from_db()
        assert product.deleted_at is not None
        assert Variant.objects.filter(product=product).count() == 1

    def test_confirmation_page_lists_only_products(self, admin_client):
        product = _product("W-1")
        response = admin_client.get(f"/admin/products/product/{product.pk}/delete/")
        assert response.status_code == 200
        assert response.context["perms_lacking"] == set()

    def test_inline_requires_one_variant(self, rf, admin_user):
        product = _product("W-1")
        request = rf.get("/admin/")
        request.user = admin_user

        formset_class = VariantInline(Product, admin.site).get_formset(request, product)

        assert formset_class.min_num == 1
        assert formset_class.validate_min is True


# ===========================================================================
# Variants
# ===========================================================================


class TestVariantAdminDelete:
    def test_delete_view_with_sibling(self, admin_client):
        product = _product("W-1", "W-2")
        first = product.variants.first()

        response = admin_client.post(f"/admin/variants/variant/{first.pk}/delete/", {"post": "yes"})

        assert response.status_code == 302
        assert list(Variant.objects.filter(product=product).values_list("sku", flat=True)) == ["W-2"]

    def test_delete_view_refused_for_last_variant(self, admin_client):
        product = _product("W-1")
        only = product.variants.get()

        response = admin_client.post(f"/admin/variants/variant/{only.pk}/delete/", {"post": "yes"})

        assert response.status_code == 403
        assert Variant.objects.filter(pk=only.pk).exists()

    def test_delete_selected_keeps_one_per_product(self, admin_client):
        product = _product("W-1", "W-2")
        pks = list(product.variants.values_list("pk", flat=True))

        response = _delete_selected(admin_client, "/admin/variants/variant/", pks)

        assert response.status_code == 302
        assert Variant.objects.filter(product=product).count() == 1

    def test_delete_selected_refused_for_last_variant(self, admin_client):
        product = _product("W-1")
        only = product.variants.get()

        response = _delete_selected(admin_client, "/admin/variants/variant/", [only.pk])

        assert response.status_code == 403
        assert Variant.objects.filter(pk=only.pk).exists()
