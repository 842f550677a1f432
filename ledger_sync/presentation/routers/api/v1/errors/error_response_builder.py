"""Error response builder.

Converts domain errors into ``{error, message, details?}`` JSON responses
with the HTTP status mapped from the error code.

Exports:
    ErrorResponseBuilder: Utility class for building error responses
"""

from dataclasses import fields
from enum import Enum
from typing import Any

from fastapi import status
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse

from ledger_sync.core.enums import ErrorCode
from ledger_sync.core.errors import DomainError
from ledger_sync.schemas.common_schemas import ErrorResponse

_BASE_FIELDS = frozenset(f.name for f in fields(DomainError))

_STATUS_BY_CODE: dict[ErrorCode, int] = {
    ErrorCode.UNAUTHORIZED: status.HTTP_401_UNAUTHORIZED,
    ErrorCode.NOT_CONNECTED: status.HTTP_401_UNAUTHORIZED,
    ErrorCode.CONFIGURATION_ERROR: status.HTTP_500_INTERNAL_SERVER_ERROR,
    ErrorCode.REFRESH_FAILED: status.HTTP_502_BAD_GATEWAY,
    ErrorCode.FETCH_FAILED: status.HTTP_502_BAD_GATEWAY,
    ErrorCode.ALREADY_SYNCED: status.HTTP_200_OK,
    ErrorCode.STORAGE_ERROR: status.HTTP_500_INTERNAL_SERVER_ERROR,
    ErrorCode.CONCURRENT_UPDATE: status.HTTP_409_CONFLICT,
    ErrorCode.NO_CACHED_DATA: status.HTTP_404_NOT_FOUND,
}


class ErrorResponseBuilder:
    """Build JSON error responses from domain errors.

    Example:
        >>> error = ReportFetchError(
        ...     code=ErrorCode.FETCH_FAILED,
        ...     message="balance_sheet request failed with HTTP 500",
        ...     step=FetchStep.BALANCE_SHEET,
        ...     status_code=500,
        ... )
        >>> response = ErrorResponseBuilder.from_domain_error(error)
        >>> # 502 {"error": "fetch_failed", "message": ..., "details": {"step": ...}}
    """

    @staticmethod
    def from_domain_error(error: DomainError) -> JSONResponse:
        """Convert DomainError to JSON response.

        Args:
            error: Domain error returned by a handler.

        Returns:
            JSONResponse with ErrorResponse content.
        """
        body = ErrorResponse(
            error=error.code.value,
            message=error.message,
            details=ErrorResponseBuilder._get_details(error),
        )
        return JSONResponse(
            status_code=ErrorResponseBuilder.get_status_code(error.code),
            content=jsonable_encoder(body.model_dump(exclude_none=True)),
        )

    @staticmethod
    def get_status_code(code: ErrorCode) -> int:
        """Map error code to HTTP status code.

        Example:
            >>> ErrorResponseBuilder.get_status_code(ErrorCode.CONCURRENT_UPDATE)
            409
        """
        return _STATUS_BY_CODE.get(code, status.HTTP_500_INTERNAL_SERVER_ERROR)

    @staticmethod
    def _get_details(error: DomainError) -> dict[str, Any] | None:
        """Collect the error's explicit details plus its subclass attributes."""
        details: dict[str, Any] = dict(error.details or {})
        for field in fields(error):
            if field.name in _BASE_FIELDS:
                continue
            value = getattr(error, field.name)
            if value is None:
                continue
            details[field.name] = value.value if isinstance(value, Enum) else value
        return details or None
