"""Unit tests for the domain error taxonomy and the DRF exception handler."""

from __future__ import annotations

import pytest
from rest_framework.exceptions import MethodNotAllowed, ParseError
from rest_framework.exceptions import ValidationError as DRFValidationError

from modules.core.exceptions import (
    ConflictError,
    DomainError,
    InternalError,
    NotFoundError,
    ValidationError,
    api_exception_handler,
)

pytestmark = pytest.mark.unit


class TestTaxonomy:
    @pytest.mark.parametrize(
        "exc_class,status_code",
        [
            (ValidationError, 400),
            (NotFoundError, 404),
            (ConflictError, 400),
            (InternalError, 500),
        ],
    )
    def test_status_codes(self, exc_class, status_code):
        assert exc_class.status_code == status_code
        assert issubclass(exc_class, DomainError)

    def test_default_message(self):
        assert NotFoundError().message == "Not found"

    def test_custom_message(self):
        exc = ConflictError("SKU taken")
        assert exc.message == "SKU taken"
        assert str(exc) == "SKU taken"


class TestApiExceptionHandler:
    def test_domain_error_rendered_with_status(self):
        response = api_exception_handler(NotFoundError("Product not found"), {})
        assert response.status_code == 404
        assert response.data == {"error": "Product not found"}

    def test_drf_parse_error_flattened(self):
        response = api_exception_handler(ParseError("JSON parse error"), {})
        assert response.status_code == 400
        assert response.data == {"error": "JSON parse error"}

    def test_drf_method_not_allowed(self):
        response = api_exception_handler(MethodNotAllowed("PATCH"), {})
        assert response.status_code == 405
        assert "PATCH" in response.data["error"]

    def test_drf_field_errors_collapse_to_first(self):
        exc = DRFValidationError({"name": ["This field is required."]})
        response = api_exception_handler(exc, {})
        assert response.data == {"error": "name: This field is required."}

    def test_unexpected_exception_becomes_500(self):
        response = api_exception_handler(RuntimeError("disk on fire"), {})
        assert response.status_code == 500
        assert response.data == {"error": "disk on fire"}

    def test_unexpected_exception_without_message(self):
        response = api_exception_handler(RuntimeError(), {})
        assert response.data == {"error": "Unexpected error"}
