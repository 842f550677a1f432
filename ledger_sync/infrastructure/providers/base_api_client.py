"""Shared HTTP plumbing for the remote report endpoints.

Every report and query call in a bundle goes through ``_get_object``:
one GET, a 2xx check and a JSON-object check. Any miss becomes a
``ReportFetchError`` tagged with the bundle step, so the sync run can
record exactly where it stopped.

Transience:
    - timeouts and connection errors: transient
    - 429 and 5xx: transient
    - other non-2xx, invalid JSON, non-object bodies: not transient
"""

from typing import Any

import httpx
import structlog

from ledger_sync.core.constants import (
    BEARER_PREFIX,
    PROVIDER_TIMEOUT_DEFAULT,
    QBO_MINOR_VERSION,
    RESPONSE_BODY_MAX_LENGTH,
)
from ledger_sync.core.enums import ErrorCode
from ledger_sync.core.result import Failure, Result, Success
from ledger_sync.domain.enums.fetch_step import FetchStep
from ledger_sync.domain.errors import ReportFetchError


def _fetch_failure(
    step: FetchStep,
    message: str,
    *,
    response: httpx.Response | None = None,
    is_transient: bool = False,
) -> Failure[ReportFetchError]:
    return Failure(
        error=ReportFetchError(
            code=ErrorCode.FETCH_FAILED,
            message=f"{step.value} {message}",
            step=step,
            status_code=response.status_code if response is not None else None,
            response_body=(
                response.text[:RESPONSE_BODY_MAX_LENGTH] if response is not None else None
            ),
            is_transient=is_transient,
        )
    )


def _is_transient_status(status: int) -> bool:
    return status == 429 or status >= 500


class BaseProviderAPIClient:
    """Base for clients of one remote API host.

    Subclasses pick paths and query parameters; this class owns the
    bearer header, the ``minorversion`` parameter, transport errors and
    body validation.
    """

    def __init__(
        self,
        *,
        base_url: str,
        provider_name: str,
        timeout: float = PROVIDER_TIMEOUT_DEFAULT,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._provider_name = provider_name
        self._timeout = timeout
        self._logger = structlog.get_logger(f"{provider_name}_api")

    def _event(self, suffix: str) -> str:
        return f"{self._provider_name}_api_{suffix}"

    async def _get_object(
        self,
        *,
        path: str,
        access_token: str,
        params: dict[str, str],
        step: FetchStep,
    ) -> Result[dict[str, Any], ReportFetchError]:
        """GET ``path`` and return its body as a JSON object.

        Args:
            path: Path below the base URL.
            access_token: Bearer token for the company.
            params: Query parameters; ``minorversion`` is appended.
            step: Bundle step, used in log events and errors.
        """
        headers = {
            "Authorization": f"{BEARER_PREFIX}{access_token}",
            "Accept": "application/json",
        }
        try:
            async with httpx.AsyncClient(timeout=self._timeout) as client:
                response = await client.get(
                    f"{self._base_url}{path}",
                    headers=headers,
                    params={**params, "minorversion": QBO_MINOR_VERSION},
                )
        except httpx.TimeoutException as e:
            self._logger.warning(self._event("timeout"), step=step.value, error=str(e))
            return _fetch_failure(step, "request timed out", is_transient=True)
        except httpx.RequestError as e:
            self._logger.warning(
                self._event("connection_error"), step=step.value, error=str(e)
            )
            return _fetch_failure(step, f"request failed: {e}", is_transient=True)

        if not response.is_success:
            status = response.status_code
            self._logger.warning(
                self._event("bad_status"),
                step=step.value,
                status_code=status,
                retry_after=response.headers.get("Retry-After"),
            )
            return _fetch_failure(
                step,
                f"request failed with status {status}",
                response=response,
                is_transient=_is_transient_status(status),
            )

        try:
            body = response.json()
        except ValueError:
            self._logger.error(self._event("invalid_json"), step=step.value)
            return _fetch_failure(step, "returned invalid JSON", response=response)

        if not isinstance(body, dict):
            self._logger.warning(
                self._event("unexpected_format"),
                step=step.value,
                data_type=type(body).__name__,
            )
            return _fetch_failure(step, "returned a non-object body", response=response)

        self._logger.debug(self._event("succeeded"), step=step.value)
        return Success(value=body)
