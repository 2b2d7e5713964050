"""Category DRF serializers (output only)."""

from __future__ import annotations

from rest_framework import serializers

from modules.categories.models import Category


class CategorySerializer(serializers.ModelSerializer):
    """Read serializer; expects the ``product_count`` annotation."""

    product_count = serializers.IntegerField(read_only=True)

    class Meta:
        model = Category
        fields = [
            "id",
            "name",
            "description",
            "product_count",
            "created_at",
            "updated_at",
        ]
        read_only_fields = fields
