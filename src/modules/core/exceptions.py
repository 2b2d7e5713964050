"""Domain error taxonomy and the API error renderer.

Services raise subclasses of ``DomainError``; the DRF exception handler
below turns them (and every other failure) into the single error shape
the API exposes::

    {"error": "<human readable message>"}
"""

from __future__ import annotations

from typing import Any

import structlog
from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import exception_handler as drf_exception_handler

logger = structlog.get_logger(__name__)


class DomainError(Exception):
    """Base class for errors raised by the service layer."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message = "Unexpected error"

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(DomainError):
    """Input failed a field or cross-field rule."""

    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Invalid input"


class NotFoundError(DomainError):
    """The addressed resource does not exist."""

    status_code = status.HTTP_404_NOT_FOUND
    default_message = "Not found"


class ConflictError(DomainError):
    """A uniqueness rule or a structural guard rejected the write."""

    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Conflict"


class InternalError(DomainError):
    """Unexpected store or runtime failure."""


# ---------------------------------------------------------------------------
# DRF integration
# ---------------------------------------------------------------------------


def _first_message(detail: Any) -> str:
    """Collapse DRF's nested ``detail`` structures into one message."""
    if isinstance(detail, dict):
        if "detail" in detail:
            return _first_message(detail["detail"])
        for key, value in detail.items():
            return f"{key}: {_first_message(value)}"
        return "Invalid request"
    if isinstance(detail, (list, tuple)):
        return _first_message(detail[0]) if detail else "Invalid request"
    return str(detail)


def api_exception_handler(exc: Exception, context: dict[str, Any]) -> Response:
    """``REST_FRAMEWORK["EXCEPTION_HANDLER"]`` entry point.

    - ``DomainError`` -> its own status code.
    - DRF ``APIException`` (parse errors, 405, ...) -> DRF's status code.
    - Anything else -> 500, logged with traceback.
    """
    view = context.get("view")
    view_name = type(view).__name__ if view is not None else None

    if isinstance(exc, DomainError):
        if exc.status_code >= 500:
            logger.error("api.domain_error", view=view_name, error=exc.message)
        return Response({"error": exc.message}, status=exc.status_code)

    response = drf_exception_handler(exc, context)
    if response is not None:
        response.data = {"error": _first_message(response.data)}
        return response

    logger.exception("api.unhandled_exception", view=view_name)
    return Response(
        {"error": str(exc) or InternalError.default_message},
        status=status.HTTP_500_INTERNAL_SERVER_ERROR,
    )
