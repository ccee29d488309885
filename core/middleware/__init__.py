"""Middleware components for the admin service."""

from core.middleware.process_time import ProcessTimeMiddleware
from core.middleware.request_id import RequestIDMiddleware

__all__ = [
    "ProcessTimeMiddleware",
    "RequestIDMiddleware",
]
