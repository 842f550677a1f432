"""Unit tests for ErrorResponseBuilder status mapping and bodies."""

import json

import pytest

from ledger_sync.core.enums import ErrorCode
from ledger_sync.domain.enums.fetch_step import FetchStep
from ledger_sync.domain.errors import (
    ConcurrentUpdateError,
    NotConnectedError,
    ReportFetchError,
)
from ledger_sync.presentation.routers.api.v1.errors import ErrorResponseBuilder


@pytest.mark.parametrize(
    ("code", "status"),
    [
        (ErrorCode.UNAUTHORIZED, 401),
        (ErrorCode.NOT_CONNECTED, 401),
        (ErrorCode.CONFIGURATION_ERROR, 500),
        (ErrorCode.REFRESH_FAILED, 502),
        (ErrorCode.FETCH_FAILED, 502),
        (ErrorCode.STORAGE_ERROR, 500),
        (ErrorCode.CONCURRENT_UPDATE, 409),
        (ErrorCode.NO_CACHED_DATA, 404),
    ],
)
def test_status_mapping(code, status):
    assert ErrorResponseBuilder.get_status_code(code) == status


def test_every_error_code_is_a_returned_kind():
    assert {code.value for code in ErrorCode} == {
        "unauthorized",
        "not_connected",
        "configuration_error",
        "refresh_failed",
        "fetch_failed",
        "already_synced",
        "storage_error",
        "concurrent_update",
        "no_cached_data",
    }


def test_fetch_error_body_names_failed_step():
    error = ReportFetchError(
        code=ErrorCode.FETCH_FAILED,
        message="balance_sheet request failed with status 500",
        step=FetchStep.BALANCE_SHEET,
        status_code=500,
        is_transient=True,
    )

    response = ErrorResponseBuilder.from_domain_error(error)

    assert response.status_code == 502
    body = json.loads(response.body)
    assert body == {
        "error": "fetch_failed",
        "message": "balance_sheet request failed with status 500",
        "details": {"step": "balance_sheet", "status_code": 500, "is_transient": True},
    }


def test_error_without_extra_fields_has_no_details():
    error = ConcurrentUpdateError(
        code=ErrorCode.CONCURRENT_UPDATE,
        message="Another sync committed this period first",
        resource_type="cache_entry",
    )

    body = json.loads(ErrorResponseBuilder.from_domain_error(error).body)

    assert body["details"] == {"resource_type": "cache_entry"}


def test_not_connected_is_401():
    error = NotConnectedError(
        code=ErrorCode.NOT_CONNECTED,
        message="Accounting service is not connected.",
        environment="production",
    )

    response = ErrorResponseBuilder.from_domain_error(error)

    assert response.status_code == 401
    assert json.loads(response.body)["error"] == "not_connected"
