"""
Uniform JSON error responses.

Both services answer every failure with the same body::

    {"timestamp": ..., "status": 404, "error": "Not Found",
     "message": "...", "path": "/data/products/7"}

Validation failures add an ``errors`` object mapping field names to messages
and are reported as 400.
"""

import logging
from datetime import datetime
from http import HTTPStatus
from typing import Any, Dict, Optional, Type

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)


def reason_phrase(status_code: int) -> str:
    try:
        return HTTPStatus(status_code).phrase
    except ValueError:
        return "Error"


def error_body(
    status_code: int,
    message: str,
    path: str,
    errors: Optional[Dict[str, str]] = None,
) -> Dict[str, Any]:
    body: Dict[str, Any] = {
        "timestamp": datetime.now().isoformat(),
        "status": status_code,
        "error": reason_phrase(status_code),
        "message": message,
        "path": path,
    }
    if errors:
        body["errors"] = errors
    return body


def error_response(
    status_code: int,
    message: str,
    request: Request,
    errors: Optional[Dict[str, str]] = None,
) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=error_body(status_code, message, request.scope["path"], errors),
    )


def validation_errors(exc: RequestValidationError) -> Dict[str, str]:
    """Flatten pydantic errors into ``{field: message}``."""
    errors: Dict[str, str] = {}
    for error in exc.errors():
        loc = [str(part) for part in error.get("loc", ()) if part not in ("body", "query", "path")]
        field = ".".join(loc) or "request"
        message = error.get("msg", "Invalid value")
        if message.startswith("Value error, "):
            message = message[len("Value error, "):]
        errors.setdefault(field, message)
    return errors


def install_error_handlers(app: FastAPI, service_error: Type[Exception]) -> None:
    """
    Register the uniform error handlers on ``app``.

    ``service_error`` is the root of the service's exception hierarchy; its
    instances must expose ``status_code`` and ``message`` and may expose
    ``errors``.
    """

    @app.exception_handler(service_error)
    async def handle_service_error(request: Request, exc: Exception) -> JSONResponse:
        status_code = getattr(exc, "status_code", 500)
        message = getattr(exc, "message", str(exc))
        if status_code >= 500:
            logger.error(f"{type(exc).__name__}: {message}", exc_info=exc)
        else:
            logger.warning(f"{type(exc).__name__}: {message}")
        return error_response(status_code, message, request, getattr(exc, "errors", None))

    @app.exception_handler(RequestValidationError)
    async def handle_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
        errors = validation_errors(exc)
        logger.warning(f"Validation failed for {request.method} {request.url.path}: {errors}")
        return error_response(400, "Validation failed", request, errors)

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_exception(request: Request, exc: StarletteHTTPException) -> JSONResponse:
        message = exc.detail if isinstance(exc.detail, str) else reason_phrase(exc.status_code)
        response = error_response(exc.status_code, message, request)
        if exc.headers:
            response.headers.update(exc.headers)
        return response

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
        logger.error(f"Unhandled error on {request.method} {request.url.path}", exc_info=exc)
        return error_response(500, str(exc) or "Internal server error", request)
