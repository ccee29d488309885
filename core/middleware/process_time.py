"""Process time middleware for performance monitoring."""

import logging
import time
from collections.abc import Callable

from django.http import HttpRequest, HttpResponse

from core.constants import PROCESS_TIME_HEADER, SLOW_REQUEST_THRESHOLD

logger = logging.getLogger(__name__)


class ProcessTimeMiddleware:
    """Add an X-Process-Time header and warn about slow requests."""

    def __init__(self, get_response: Callable[[HttpRequest], HttpResponse]) -> None:
        """Initialize the middleware.

        Args:
            get_response: The next middleware or view in the chain.
        """
        self.get_response = get_response

    def __call__(self, request: HttpRequest) -> HttpResponse:
        """Process the request and record its duration in seconds."""
        start_time = time.perf_counter()

        response = self.get_response(request)

        duration = time.perf_counter() - start_time
        response[PROCESS_TIME_HEADER] = f"{duration:.6f}"

        if duration > SLOW_REQUEST_THRESHOLD:
            logger.warning(
                "Slow request detected: %s %s took %.2fs (threshold: %ss)",
                request.method,
                request.path,
                duration,
                SLOW_REQUEST_THRESHOLD,
            )

        return response
