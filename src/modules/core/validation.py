"""Coercion helpers shared by the request validators.

JSON bodies arrive untyped.  These helpers narrow a single raw value
into a Python type or raise ``ValidationError`` with a message that
names the offending field.
"""

from __future__ import annotations

import math
from collections.abc import Mapping
from typing import Any

from modules.core.exceptions import ValidationError

# Largest value a PositiveIntegerField holds on every supported backend.
MAX_STORED_INT = 2_147_483_647
# Range of a BigAutoField primary key.
MAX_ID = 2**63 - 1


def require_mapping(data: Any) -> Mapping[str, Any]:
    """Return *data* if it is a JSON object, otherwise fail."""
    if not isinstance(data, Mapping):
        raise ValidationError("Request body must be a JSON object")
    return data


def non_negative_int(value: Any) -> int | None:
    """Coerce *value* to a whole number in ``0..MAX_STORED_INT``.

    Accepts ints, integral floats and numeric strings.  Returns ``None``
    when the value cannot be interpreted that way; callers decide the
    message.
    """
    if isinstance(value, bool) or value is None:
        return None
    if isinstance(value, int):
        number: float = value
    elif isinstance(value, float):
        number = value
    elif isinstance(value, str):
        try:
            number = float(value.strip())
        except ValueError:
            return None
    else:
        return None

    if not math.isfinite(number) or number < 0 or number != int(number):
        return None
    if number > MAX_STORED_INT:
        return None
    return int(number)


def require_non_negative_int(value: Any, label: str) -> int:
    result = non_negative_int(value)
    if result is None:
        raise ValidationError(f"{label} must be a non-negative integer")
    return result


def optional_int(value: Any, label: str) -> int | None:
    """Coerce an optional integer reference (``None`` stays ``None``)."""
    if value is None:
        return None
    if isinstance(value, bool):
        raise ValidationError(f"{label} must be an integer")
    if isinstance(value, int):
        result = value
    elif isinstance(value, str) and value.strip().lstrip("-").isdigit():
        result = int(value.strip())
    elif isinstance(value, float) and math.isfinite(value) and value == int(value):
        result = int(value)
    else:
        raise ValidationError(f"{label} must be an integer")
    if abs(result) > MAX_ID:
        raise ValidationError(f"{label} is out of range")
    return result


def optional_text(value: Any, label: str) -> str | None:
    if value is None:
        return None
    if not isinstance(value, str):
        raise ValidationError(f"{label} must be a string")
    return value


def required_text(value: Any, message: str) -> str:
    """Return the stripped string, failing with *message* when blank."""
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(message)
    return value.strip()
