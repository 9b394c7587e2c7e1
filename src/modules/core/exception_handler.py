"""Global DRF exception handler.

Views translate the domain exceptions they know about.  Anything that
escapes them is either a DRF ``APIException`` (rendered by DRF as usual)
or an unexpected failure, which is logged with its traceback and
rendered as a generic 500 ``ErrorResponseDTO`` so internals never leak.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

import structlog
from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import exception_handler

from modules.core.dtos import ErrorResponseDTO

logger = structlog.get_logger(__name__)


def fulfillment_exception_handler(
    exc: Exception, context: Dict[str, Any]
) -> Optional[Response]:
    response = exception_handler(exc, context)
    if response is not None:
        return response

    view = context.get("view")
    logger.exception(
        "api.unhandled_exception",
        view=type(view).__name__ if view is not None else None,
        error_type=type(exc).__name__,
    )
    body = ErrorResponseDTO(
        status=status.HTTP_500_INTERNAL_SERVER_ERROR,
        title="Internal Server Error",
        message="An unexpected error occurred",
    )
    return Response(
        body.model_dump(mode="json"),
        status=status.HTTP_500_INTERNAL_SERVER_ERROR,
    )
