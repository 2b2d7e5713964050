"""Request validator for PUT /api/variants/{id}."""

from __future__ import annotations

from typing import Any

from modules.core.validation import require_mapping, require_non_negative_int
from modules.variants.dtos import UpdateVariantDTO

EDITABLE_FIELDS = ("price_cents", "inventory_count")


def validate_variant_update(data: Any) -> UpdateVariantDTO:
    """Check the editable fields that are present; absent ones stay unset.

    An explicit ``null`` is rejected like any other non-numeric value.
    """
    data = require_mapping(data)
    fields = {
        name: require_non_negative_int(data[name], name)
        for name in EDITABLE_FIELDS
        if name in data
    }
    return UpdateVariantDTO(**fields)
