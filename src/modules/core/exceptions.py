"""DRF exception handler shared by every API view.

- ``ParseError`` (malformed JSON body) is answered in the same
  ``{"errors": [...]}`` shape the validation gate uses.
- ``DatabaseError`` escaping a view is a persistence failure: it is
  logged with the traceback and answered with a generic 500.
- Everything else goes through DRF's default handler.
"""

from __future__ import annotations

from typing import Any, Optional

import structlog
from django.db import DatabaseError
from rest_framework import status
from rest_framework.exceptions import ParseError
from rest_framework.response import Response
from rest_framework.views import exception_handler

logger = structlog.get_logger(__name__)

INTERNAL_ERROR_MESSAGE = "Error interno del servidor"


def api_exception_handler(
    exc: Exception, context: dict[str, Any]
) -> Optional[Response]:
    if isinstance(exc, ParseError):
        return Response(
            {
                "errors": [
                    {"type": "body", "msg": str(exc.detail), "location": "body"}
                ]
            },
            status=status.HTTP_400_BAD_REQUEST,
        )

    if isinstance(exc, DatabaseError):
        view = context.get("view")
        logger.error(
            "persistence_error",
            view=type(view).__name__ if view is not None else None,
            error=str(exc),
            exc_info=exc,
        )
        return Response(
            {"error": INTERNAL_ERROR_MESSAGE},
            status=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )

    return exception_handler(exc, context)
