"""Product DRF serializers (output shapes).

Input is narrowed by ``modules.products.validation`` into DTOs; these
serializers only render what the service layer returns.
"""

from __future__ import annotations

from rest_framework import serializers

from modules.products.models import Product
from modules.variants.serializers import VariantSerializer

BASE_FIELDS = [
    "id",
    "name",
    "description",
    "category_id",
    "category_name",
    "status",
    "deleted_at",
    "created_at",
    "updated_at",
]


class ProductSerializer(serializers.ModelSerializer):
    """Product row plus its category name (update response)."""

    category_name = serializers.CharField(read_only=True, allow_null=True)

    class Meta:
        model = Product
        fields = BASE_FIELDS
        read_only_fields = fields


class ProductListSerializer(ProductSerializer):
    """List item: product plus aggregates over its variants."""

    variant_count = serializers.IntegerField(read_only=True)
    min_price_cents = serializers.IntegerField(read_only=True, allow_null=True)
    max_price_cents = serializers.IntegerField(read_only=True, allow_null=True)
    total_inventory = serializers.IntegerField(read_only=True)

    class Meta(ProductSerializer.Meta):
        fields = BASE_FIELDS + [
            "variant_count",
            "min_price_cents",
            "max_price_cents",
            "total_inventory",
        ]
        read_only_fields = fields


class ProductDetailSerializer(ProductSerializer):
    """Detail: product plus its variants, oldest first."""

    variants = VariantSerializer(many=True, read_only=True)

    class Meta(ProductSerializer.Meta):
        fields = BASE_FIELDS + ["variants"]
        read_only_fields = fields
