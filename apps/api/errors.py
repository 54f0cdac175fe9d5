"""
Error translation at the HTTP boundary.

Domain errors travel up unchanged from where they are raised; this module
is the only place that turns them into status codes.
"""
import logging
from typing import Dict, Type

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from core.domain.errors import (
    AlreadyPaid,
    Forbidden,
    InvalidSignature,
    InvalidTransition,
    NotFound,
    OrderFlowError,
    RateLimited,
    Unauthorized,
    UpstreamUnavailable,
    ValidationFailed,
)


logger = logging.getLogger(__name__)


STATUS_BY_ERROR: Dict[Type[OrderFlowError], int] = {
    Unauthorized: status.HTTP_401_UNAUTHORIZED,
    Forbidden: status.HTTP_403_FORBIDDEN,
    NotFound: status.HTTP_404_NOT_FOUND,
    InvalidTransition: status.HTTP_400_BAD_REQUEST,
    AlreadyPaid: status.HTTP_400_BAD_REQUEST,
    ValidationFailed: status.HTTP_400_BAD_REQUEST,
    InvalidSignature: status.HTTP_400_BAD_REQUEST,
    RateLimited: status.HTTP_429_TOO_MANY_REQUESTS,
    UpstreamUnavailable: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def status_for(exc: OrderFlowError) -> int:
    for cls in type(exc).__mro__:
        if cls in STATUS_BY_ERROR:
            return STATUS_BY_ERROR[cls]
    return status.HTTP_500_INTERNAL_SERVER_ERROR


async def order_flow_error_handler(request: Request, exc: OrderFlowError) -> JSONResponse:
    """Handle domain errors.

    Args:
        request: FastAPI request
        exc: Domain error

    Returns:
        JSONResponse with {"error": message}
    """
    status_code = status_for(exc)
    headers = {}
    if isinstance(exc, RateLimited):
        headers["X-RateLimit-Remaining"] = str(exc.remaining)
        if exc.reset_at is not None:
            headers["X-RateLimit-Reset"] = str(int(exc.reset_at))

    if status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc.message}")

    return JSONResponse(status_code=status_code, content={"error": exc.message}, headers=headers)


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Handle request body / query validation errors."""
    details = [
        {
            "path": ".".join(str(part) for part in error.get("loc", ()) if part != "body"),
            "message": error.get("msg", ""),
        }
        for error in exc.errors()
    ]
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"error": "Validation error", "details": details},
    )


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Keep framework errors (404 route, 405 method) in the same envelope."""
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": str(exc.detail)},
        headers=getattr(exc, "headers", None),
    )


async def general_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle all uncaught exceptions."""
    logger.error(f"Unhandled exception: {exc}", exc_info=True)

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": "Internal server error"},
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(OrderFlowError, order_flow_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, general_exception_handler)
