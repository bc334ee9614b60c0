"""HTTP middleware and exception handlers."""

from expo_directory.api.middleware.errors import error_response, unhandled_exception_handler
from expo_directory.api.middleware.request_id import RequestIDMiddleware
from expo_directory.api.middleware.timing import TimingMiddleware

__all__ = [
    "RequestIDMiddleware",
    "TimingMiddleware",
    "error_response",
    "unhandled_exception_handler",
]
