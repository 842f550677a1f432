"""Integration tests for ConsoleAdapter with real structlog.

Tests cover:
- JSON output and structured context
- Error details attached from exceptions
- Bound context (sync handler binds period and caller)

Architecture:
- Real structlog (not mocked), stdout captured per test
- Fresh ConsoleAdapter instances per test (bypass the container singleton)
"""

import json
import sys
from io import StringIO
from unittest.mock import patch

import pytest

from ledger_sync.infrastructure.logging.console_adapter import ConsoleAdapter


def _lines(output: StringIO) -> list[dict]:
    return [json.loads(line) for line in output.getvalue().strip().splitlines()]


@pytest.mark.integration
class TestConsoleAdapterIntegration:
    def test_json_mode_produces_valid_json(self):
        captured_output = StringIO()

        with patch.object(sys, "stdout", captured_output):
            adapter = ConsoleAdapter(use_json=True)
            adapter.info("sync_committed", period=2024, tracked_account_count=2)

        log_data = _lines(captured_output)[0]
        assert log_data["event"] == "sync_committed"
        assert log_data["level"] == "info"
        assert log_data["period"] == 2024
        assert log_data["tracked_account_count"] == 2
        assert "timestamp" in log_data

    def test_level_filter_drops_debug(self):
        captured_output = StringIO()

        with patch.object(sys, "stdout", captured_output):
            adapter = ConsoleAdapter(use_json=True, level="INFO")
            adapter.debug("quickbooks_api_succeeded")
            adapter.warning("sync_gate_bypassed")

        events = [line["event"] for line in _lines(captured_output)]
        assert events == ["sync_gate_bypassed"]

    def test_error_with_exception_includes_error_details(self):
        captured_output = StringIO()

        with patch.object(sys, "stdout", captured_output):
            adapter = ConsoleAdapter(use_json=True)
            try:
                raise RuntimeError("database is gone")
            except RuntimeError as exc:
                adapter.error("unhandled_exception", error=exc, path="/api/v1/syncs")

        log_data = _lines(captured_output)[0]
        assert log_data["error_type"] == "RuntimeError"
        assert log_data["error_message"] == "database is gone"
        assert log_data["path"] == "/api/v1/syncs"

    def test_critical_without_exception(self):
        captured_output = StringIO()

        with patch.object(sys, "stdout", captured_output):
            adapter = ConsoleAdapter(use_json=True)
            adapter.critical("credential_refresh_not_persisted", error_message="boom")

        log_data = _lines(captured_output)[0]
        assert log_data["level"] == "critical"
        assert "error_type" not in log_data

    def test_bind_does_not_affect_original_logger(self):
        captured_output = StringIO()

        with patch.object(sys, "stdout", captured_output):
            adapter = ConsoleAdapter(use_json=True)
            bound = adapter.bind(period=2024, caller_id="scheduler")
            adapter.info("application_started")
            bound.info("sync_skipped", reason="already_synced")

        original, bound_line = _lines(captured_output)
        assert "period" not in original
        assert bound_line["period"] == 2024
        assert bound_line["caller_id"] == "scheduler"

    def test_nested_binding_accumulates_context(self):
        captured_output = StringIO()

        with patch.object(sys, "stdout", captured_output):
            adapter = ConsoleAdapter(use_json=True)
            adapter.bind(period=2024).with_context(environment="production").info(
                "credential_refreshed"
            )

        log_data = _lines(captured_output)[0]
        assert log_data["period"] == 2024
        assert log_data["environment"] == "production"

    def test_secrets_are_redacted(self):
        captured_output = StringIO()

        with patch.object(sys, "stdout", captured_output):
            adapter = ConsoleAdapter(use_json=True)
            adapter.bind(environment="production").info(
                "credential_refreshed",
                access_token="eyJ-secret",
                refresh_token="rt-secret",
            )

        log_data = _lines(captured_output)[0]
        assert log_data["access_token"] == "[REDACTED]"
        assert log_data["refresh_token"] == "[REDACTED]"
        assert "eyJ-secret" not in captured_output.getvalue()
