"""
Centralized error translation.

Maps every error that escapes an endpoint to an HTTP status code and an
error envelope. Internal error text and tracebacks are logged, never returned.
"""

import logging
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from jobtracker.core.exceptions import AppError, AuthenticationError, UnknownError, ValidationError
from jobtracker.schemas.response import error_response

logger = logging.getLogger(__name__)


def _format_validation_errors(exc: RequestValidationError) -> str:
    messages = []
    for error in exc.errors():
        # Drop the leading "body"/"query"/"path" segment
        location = ".".join(str(part) for part in error.get("loc", ())[1:])
        text = error.get("msg", "Invalid value")
        messages.append(f"{location}: {text}" if location else text)
    return "Validation error: " + "; ".join(messages)


def _app_error_response(exc: AppError) -> JSONResponse:
    headers = {"WWW-Authenticate": "Bearer"} if isinstance(exc, AuthenticationError) else None
    return JSONResponse(
        status_code=exc.status_code,
        content=error_response(exc.message, exc.code),
        headers=headers,
    )


async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    """Handle errors raised by the application itself"""
    if exc.status_code >= 500:
        logger.error(f"{exc.__class__.__name__} on {request.method} {request.url.path}: {exc.message}")
    else:
        logger.warning(f"{exc.__class__.__name__} on {request.method} {request.url.path}: {exc.message}")
    return _app_error_response(exc)


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Schema violations on path, query or body"""
    error = ValidationError(_format_validation_errors(exc))
    logger.warning(f"Validation failed on {request.method} {request.url.path}: {error.message}")
    return _app_error_response(error)


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Framework-level errors: unknown routes, wrong methods"""
    return JSONResponse(
        status_code=exc.status_code,
        content=error_response(str(exc.detail)),
        headers=getattr(exc, "headers", None),
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Catch-all: log the real error, return a generic one"""
    logger.error(f"Unhandled exception on {request.method} {request.url.path}: {exc}", exc_info=exc)
    return _app_error_response(UnknownError("An unexpected error occurred"))


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(AppError, app_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
