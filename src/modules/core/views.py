import structlog
from django.db import DatabaseError, connections
from django.http import HttpRequest, JsonResponse

logger = structlog.get_logger(__name__)


def health_check(request: HttpRequest) -> JsonResponse:
    """GET /health -- liveness plus a ``SELECT 1`` round trip to the store."""
    try:
        conn = connections["default"]
        conn.ensure_connection()
        with conn.cursor() as cursor:
            cursor.execute("SELECT 1")
            cursor.fetchone()
    except DatabaseError:
        logger.error("health_check_db_failure", exc_info=True)
        return JsonResponse(
            {"ok": False, "error": "database unavailable"}, status=503
        )

    return JsonResponse({"ok": True})


# ---------------------------------------------------------------------------
# Django-level error handlers (outside DRF views)
# ---------------------------------------------------------------------------


def not_found(request: HttpRequest, exception: Exception | None = None) -> JsonResponse:
    return JsonResponse({"error": "Not found"}, status=404)


def server_error(request: HttpRequest) -> JsonResponse:
    return JsonResponse({"error": "Internal server error"}, status=500)
