import re
import time
import uuid
from typing import Callable

import structlog
from django.http import HttpRequest, HttpResponse

logger = structlog.get_logger(__name__)

REQUEST_ID_HEADER = "X-Request-ID"
# Client-supplied ids are echoed in headers and logs; keep them short and inert.
_VALID_REQUEST_ID = re.compile(r"[A-Za-z0-9._:-]{1,128}")


def _request_id(request: HttpRequest) -> str:
    candidate = request.headers.get(REQUEST_ID_HEADER, "")
    if _VALID_REQUEST_ID.fullmatch(candidate):
        return candidate
    return str(uuid.uuid4())


class CorrelationIdMiddleware:
    """Tag every request with a correlation id.

    Reuses a well-formed ``X-Request-ID`` from the client or mints a UUID4,
    binds it as ``correlation_id`` in structlog contextvars for the rest of
    the request, and echoes it on the response.  One ``request_finished``
    line per request records status and duration.
    """

    def __init__(self, get_response: Callable[[HttpRequest], HttpResponse]) -> None:
        self.get_response = get_response

    def __call__(self, request: HttpRequest) -> HttpResponse:
        cid = _request_id(request)
        structlog.contextvars.clear_contextvars()
        structlog.contextvars.bind_contextvars(correlation_id=cid)

        log = logger.bind(method=request.method, path=request.path)
        log.info("request_started")
        started = time.perf_counter()

        response = self.get_response(request)

        duration_ms = round((time.perf_counter() - started) * 1000, 2)
        emit = log.error if response.status_code >= 500 else log.info
        emit("request_finished", status_code=response.status_code, duration_ms=duration_ms)

        response[REQUEST_ID_HEADER] = cid
        return response
