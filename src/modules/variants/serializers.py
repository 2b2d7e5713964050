"""Variant DRF serializers (output only)."""

from __future__ import annotations

from rest_framework import serializers

from modules.variants.models import Variant


class VariantSerializer(serializers.ModelSerializer):
    class Meta:
        model = Variant
        fields = [
            "id",
            "product_id",
            "sku",
            "name",
            "price_cents",
            "inventory_count",
            "created_at",
            "updated_at",
        ]
        read_only_fields = fields
