"""Unit tests for validate_variant_update and UpdateVariantDTO."""

from __future__ import annotations

import pytest
from pydantic import ValidationError as PydanticValidationError

from modules.core.exceptions import ValidationError
from modules.variants.dtos import UpdateVariantDTO
from modules.variants.validation import validate_variant_update

pytestmark = pytest.mark.unit


class TestValidateVariantUpdate:
    def test_empty_patch(self):
        assert validate_variant_update({}).changes() == {}

    def test_price_only(self):
        assert validate_variant_update({"price_cents": 1999}).changes() == {"price_cents": 1999}

    def test_both_fields(self):
        dto = validate_variant_update({"price_cents": "10", "inventory_count": 0})
        assert dto.changes() == {"price_cents": 10, "inventory_count": 0}

    def test_name_and_sku_are_ignored(self):
        dto = validate_variant_update({"name": "Renamed", "sku": "NEW", "inventory_count": 5})
        assert dto.changes() == {"inventory_count": 5}

    @pytest.mark.parametrize("value", [-1, 2.5, "abc", None, True, float("inf")])
    def test_invalid_price(self, value):
        with pytest.raises(ValidationError, match="price_cents must be a non-negative integer"):
            validate_variant_update({"price_cents": value})

    def test_invalid_inventory(self):
        with pytest.raises(ValidationError, match="inventory_count must be a non-negative integer"):
            validate_variant_update({"inventory_count": -3})

    def test_value_beyond_store_range(self):
        with pytest.raises(ValidationError, match="inventory_count must be a non-negative integer"):
            validate_variant_update({"inventory_count": 10**20})

    def test_price_checked_before_inventory(self):
        with pytest.raises(ValidationError, match="price_cents"):
            validate_variant_update({"inventory_count": -1, "price_cents": -1})

    def test_body_must_be_object(self):
        with pytest.raises(ValidationError, match="JSON object"):
            validate_variant_update("price_cents=1")


class TestUpdateVariantDTO:
    def test_extra_keys_dropped(self):
        dto = UpdateVariantDTO(price_cents=1, name="x")
        assert not hasattr(dto, "name")
        assert dto.changes() == {"price_cents": 1}

    def test_negative_rejected(self):
        with pytest.raises(PydanticValidationError):
            UpdateVariantDTO(inventory_count=-1)

    def test_above_store_range_rejected(self):
        with pytest.raises(PydanticValidationError):
            UpdateVariantDTO(price_cents=2**31)

    def test_is_frozen(self):
        dto = UpdateVariantDTO(price_cents=1)
        with pytest.raises(PydanticValidationError):
            dto.price_cents = 2
