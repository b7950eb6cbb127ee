import time
import uuid
from typing import Callable

import structlog
from django.http import HttpRequest, HttpResponse

REQUEST_ID_HEADER = "X-Request-ID"

logger = structlog.get_logger()


def resolve_request_id(request: HttpRequest) -> str:
    """Caller-supplied ``X-Request-ID``, or a fresh UUID4."""
    return request.headers.get(REQUEST_ID_HEADER) or str(uuid.uuid4())


class CorrelationIdMiddleware:
    """Scope one API call's log lines under a single request id.

    ``correlation_id``, ``method`` and ``path`` are bound for the duration
    of the call, so the gate's ``request.validation_failed`` and the
    ``product.*`` events carry them without passing the request around.
    The id is returned to the caller in the same header.
    """

    def __init__(self, get_response: Callable[[HttpRequest], HttpResponse]) -> None:
        self.get_response = get_response

    def __call__(self, request: HttpRequest) -> HttpResponse:
        request_id = resolve_request_id(request)

        structlog.contextvars.clear_contextvars()
        with structlog.contextvars.bound_contextvars(
            correlation_id=request_id,
            method=request.method,
            path=request.path,
        ):
            logger.info("request.received")
            started = time.monotonic()
            response = self.get_response(request)
            logger.info(
                "request.completed",
                status_code=response.status_code,
                duration_ms=round((time.monotonic() - started) * 1000, 2),
            )

        response[REQUEST_ID_HEADER] = request_id
        return response
