"""Error response mapping for the v1 API."""

from ledger_sync.presentation.routers.api.v1.errors.error_response_builder import (
    ErrorResponseBuilder,
)
from ledger_sync.presentation.routers.api.v1.errors.exception_handlers import (
    register_exception_handlers,
)

__all__ = ["ErrorResponseBuilder", "register_exception_handlers"]
