"""DRF exception handler producing the service's error body."""

from datetime import UTC, datetime
from typing import Any

from django.conf import settings
from django.core.exceptions import PermissionDenied
from django.http import Http404

import structlog
from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import exception_handler

from core.constants import REQUEST_ID_HEADER
from core.exceptions.domain_exceptions import ReviewAnalyticsError
from core.logging.context import get_request_id

logger = structlog.get_logger(__name__)

INTERNAL_ERROR_MESSAGE = "An internal server error occurred."


def _status_and_message(exc: Exception) -> tuple[int, str]:
    """Map an exception DRF did not handle to a status code and client message."""
    if isinstance(exc, ReviewAnalyticsError):
        return exc.status_code, str(exc)
    if isinstance(exc, Http404):
        return status.HTTP_404_NOT_FOUND, "The requested resource was not found."
    if isinstance(exc, PermissionDenied):
        return (
            status.HTTP_403_FORBIDDEN,
            "You do not have permission to perform this action.",
        )
    return status.HTTP_500_INTERNAL_SERVER_ERROR, INTERNAL_ERROR_MESSAGE


def custom_exception_handler(
    exc: Exception, context: dict[str, Any]
) -> Response | None:
    """Exception handler for Django REST Framework.

    DRF's own exceptions, such as the NotFound raised for an out-of-range
    page, keep DRF's ``{detail}`` body. Domain errors (e.g.
    RestaurantNotFoundError), Http404, PermissionDenied and anything
    unexpected get ``{status, message, request_id, timestamp}``. Django's
    Http404 and PermissionDenied are handled here before DRF would rewrite
    them. Unexpected errors never leak their message to the client.

    Args:
        exc: The exception that was raised.
        context: Context dictionary containing request and view information.

    Returns:
        A Response object with the error details.
    """
    view = context.get("view")
    request = view.request if view else context.get("request")
    request_id = get_request_id()

    response = None
    if not isinstance(exc, (Http404, PermissionDenied)):
        response = exception_handler(exc, context)
    if response is None:
        status_code, message = _status_and_message(exc)
        response = Response(
            {
                "status": status_code,
                "message": message,
                "request_id": request_id,
                "timestamp": datetime.now(UTC).isoformat(),
            },
            status=status_code,
        )

    if request_id:
        response[REQUEST_ID_HEADER] = request_id

    _log_exception(exc, request, response.status_code)
    return response


def _log_exception(exc: Exception, request: Any, status_code: int) -> None:
    """Log 4xx as warnings and everything else as errors.

    The traceback is attached for server errors, and for every error when
    DEBUG is on.
    """
    log = logger.warning if 400 <= status_code < 500 else logger.error
    fields = {
        "error_type": type(exc).__name__,
        "error": str(exc),
        "method": getattr(request, "method", "unknown"),
        "path": getattr(request, "path", "unknown"),
        "status_code": status_code,
    }
    if settings.DEBUG and request is not None and request.GET:
        fields["query_params"] = dict(request.GET)

    if status_code >= 500 or settings.DEBUG:
        fields["exc_info"] = exc

    log("request_failed", **fields)
