"""Shared core utilities for the catalog services.

Provides structured logging, health checks and uniform error handling.
"""

from .errors import error_body, install_error_handlers
from .health import (
    HealthStatus,
    ServiceHealth,
    database_check,
    http_dependency_check,
)
from .logging_config import (
    REQUEST_ID_HEADER,
    RequestLoggingMiddleware,
    generate_request_id,
    get_logger,
    outgoing_trace_headers,
    set_request_context,
    setup_logging,
)

__all__ = [
    # Health checks
    "ServiceHealth",
    "HealthStatus",
    "database_check",
    "http_dependency_check",
    # Logging
    "setup_logging",
    "get_logger",
    "RequestLoggingMiddleware",
    "set_request_context",
    "generate_request_id",
    "outgoing_trace_headers",
    "REQUEST_ID_HEADER",
    # Errors
    "error_body",
    "install_error_handlers",
]
