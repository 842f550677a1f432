"""Global exception handlers for the FastAPI application.

Every non-2xx response uses the same ``{error, message, details?}`` body as
domain errors, including framework errors (unknown route, bad query
parameter, missing authentication).

Handlers:
    http_exception_handler: Converts HTTPException
    validation_exception_handler: Converts RequestValidationError
    generic_exception_handler: Catches all unhandled exceptions

Exports:
    register_exception_handlers: Register all exception handlers with FastAPI app
"""

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from ledger_sync.core.config import get_settings
from ledger_sync.core.container import get_logger
from ledger_sync.schemas.common_schemas import ErrorResponse

# HTTP status code to error kind
_HTTP_STATUS_ERRORS: dict[int, str] = {
    400: "bad_request",
    401: "unauthorized",
    403: "forbidden",
    404: "not_found",
    405: "method_not_allowed",
    409: "conflict",
    415: "unsupported_media_type",
    422: "validation_failed",
    500: "internal_error",
    502: "bad_gateway",
    503: "service_unavailable",
}


def _error_response(
    status_code: int,
    body: ErrorResponse,
    headers: dict[str, str] | None = None,
) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=jsonable_encoder(body.model_dump(exclude_none=True)),
        headers=headers,
    )


async def http_exception_handler(
    request: Request,
    exc: Exception,
) -> JSONResponse:
    """Convert HTTPException (auth dependencies, routing) to an error body."""
    # Type narrowing: registered only for HTTPException
    assert isinstance(exc, StarletteHTTPException)

    body = ErrorResponse(
        error=_HTTP_STATUS_ERRORS.get(exc.status_code, "error"),
        message=exc.detail if isinstance(exc.detail, str) else str(exc.detail),
    )
    # Preserve headers such as WWW-Authenticate
    return _error_response(exc.status_code, body, getattr(exc, "headers", None))


async def validation_exception_handler(
    request: Request,
    exc: Exception,
) -> JSONResponse:
    """Convert RequestValidationError to an error body with field errors.

    Example:
        >>> # POST /api/v1/syncs?period=abc
        >>> # 422 {
        >>> #   "error": "validation_failed",
        >>> #   "message": "Request validation failed",
        >>> #   "details": {"errors": [{"field": "period", ...}]}
        >>> # }
    """
    assert isinstance(exc, RequestValidationError)

    errors = [
        {
            # Skip the location prefix ("query", "path")
            "field": ".".join(str(loc) for loc in error["loc"][1:]) or "unknown",
            "code": error["type"],
            "message": error["msg"],
        }
        for error in exc.errors()
    ]
    body = ErrorResponse(
        error="validation_failed",
        message="Request validation failed",
        details={"errors": errors},
    )
    return _error_response(status.HTTP_422_UNPROCESSABLE_ENTITY, body)


async def generic_exception_handler(
    request: Request,
    exc: Exception,
) -> JSONResponse:
    """Catch unhandled exceptions; log them and hide internals outside debug."""
    get_logger().error(
        "unhandled_exception",
        path=str(request.url.path),
        error=exc,
    )

    message = (
        str(exc) if get_settings().debug else "An unexpected error occurred"
    )
    body = ErrorResponse(error="internal_error", message=message)
    return _error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, body)


def register_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers with FastAPI app.

    Args:
        app: FastAPI application instance.
    """
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, generic_exception_handler)
