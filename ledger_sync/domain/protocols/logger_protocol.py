"""LoggerProtocol definition for structured logging.

Backend-agnostic structured logging port. Implementations MUST keep logs
structured (event name + key-value context) and MUST NOT log access or
refresh tokens, client secrets or the cron secret.

Usage:
    from ledger_sync.core.container import get_logger

    logger = get_logger()
    logger.info("sync_committed", period=2024, range_end="2024-06-10")

    sync_logger = logger.bind(period=2024, caller_id=caller.id)
    sync_logger.warning("sync_gate_bypassed", reason="already_synced")
"""

from __future__ import annotations

from typing import Any, Protocol


class LoggerProtocol(Protocol):
    """Protocol for structured logging adapters.

    Supports the five standard levels plus context binding.
    """

    def debug(self, message: str, /, **context: Any) -> None:
        """Log a debug-level message."""
        ...

    def info(self, message: str, /, **context: Any) -> None:
        """Log an info-level message."""
        ...

    def warning(self, message: str, /, **context: Any) -> None:
        """Log a warning-level message."""
        ...

    def error(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        """Log an error-level message with optional exception details.

        Args:
            message: Event name (snake_case; avoid f-strings, use context).
            error: Optional exception; adds error_type and error_message.
            **context: Structured key-value context fields.
        """
        ...

    def critical(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        """Log a critical-level message.

        Reserved for states that need a human: e.g. a remote token exchange
        succeeded but the new credential could not be persisted, so the old
        refresh token may already be revoked.
        """
        ...

    def bind(self, **context: Any) -> "LoggerProtocol":
        """Return new logger with permanently bound context.

        The original logger is unchanged.
        """
        ...

    def with_context(self, **context: Any) -> "LoggerProtocol":
        """Alias for bind()."""
        ...
