"""DRF exception handler: one JSON error shape for every failure."""

import logging
from datetime import UTC, datetime
from typing import Any

from django.conf import settings

from pydantic import ValidationError
from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import exception_handler

from core.constants import REQUEST_ID_HEADER
from core.exceptions.business_exceptions import BaseError
from core.logging.context import get_request_id

logger = logging.getLogger(__name__)

INTERNAL_ERROR_MESSAGE = "An internal server error occurred."
VALIDATION_ERROR_MESSAGE = "Invalid request parameters"


def custom_exception_handler(
    exc: Exception, context: dict[str, Any]
) -> Response:
    """Turn an exception raised in a view into an error response.

    DRF exceptions, including Django's ``Http404`` and ``PermissionDenied``,
    keep DRF's response. Everything else becomes
    ``{status, message, request_id, timestamp}``:

    - ``BaseError``: its status code and its already formatted message
    - pydantic ``ValidationError``: 400, plus ``errors`` with one
      ``{field, message}`` entry per failed field
    - anything else: 500 with a generic message

    Args:
        exc: The exception that was raised.
        context: DRF context with the view and request.

    Returns:
        The error response.
    """
    view = context.get("view")
    request = view.request if view else context.get("request")
    request_id = get_request_id()

    response = exception_handler(exc, context)
    if response is None:
        status_code, message = _status_and_message(exc)
        body = _error_body(status_code, message, request_id)
        if isinstance(exc, ValidationError):
            body["errors"] = _format_validation_errors(exc)
        response = Response(body, status=status_code)

    if request_id:
        response[REQUEST_ID_HEADER] = request_id

    _log_exception(exc, request, response)
    return response


def _status_and_message(exc: Exception) -> tuple[int, str]:
    if isinstance(exc, BaseError):
        return exc.status_code, exc.message
    if isinstance(exc, ValidationError):
        return status.HTTP_400_BAD_REQUEST, VALIDATION_ERROR_MESSAGE
    # Never leak internals to the client
    return status.HTTP_500_INTERNAL_SERVER_ERROR, INTERNAL_ERROR_MESSAGE


def _error_body(
    status_code: int, message: str, request_id: str | None
) -> dict[str, Any]:
    return {
        "status": status_code,
        "message": message,
        "request_id": request_id,
        "timestamp": datetime.now(UTC).isoformat(),
    }


def _format_validation_errors(exc: ValidationError) -> list[dict[str, str]]:
    """Flatten pydantic errors into field/message pairs."""
    return [
        {
            "field": ".".join(str(part) for part in error["loc"]),
            "message": error["msg"],
        }
        for error in exc.errors()
    ]


def _log_exception(exc: Exception, request: Any, response: Response) -> None:
    """Log one line per handled exception.

    Business errors and client errors are warnings; anything unexpected is
    an error with its traceback. In DEBUG the request details are appended.
    """
    expected = isinstance(exc, BaseError | ValidationError) or (
        response.status_code < status.HTTP_500_INTERNAL_SERVER_ERROR
    )
    method = getattr(request, "method", "unknown")
    path = getattr(request, "path", "unknown")

    message = "Exception occurred: %s: %s | Path: %s %s | Status: %s"
    args: list[Any] = [type(exc).__name__, exc, method, path, response.status_code]
    if request is not None and settings.DEBUG:
        message += " | Request: %s"
        args.append(_get_request_details(request))

    if expected:
        logger.warning(message, *args)
    else:
        logger.error(message, *args, exc_info=exc)


def _get_request_details(request: Any) -> dict[str, Any]:
    details = {
        "user": str(getattr(request, "user", "anonymous")),
        "ip": request.META.get("REMOTE_ADDR", "unknown"),
    }
    if request.GET:
        details["query_params"] = dict(request.GET)
    return details
