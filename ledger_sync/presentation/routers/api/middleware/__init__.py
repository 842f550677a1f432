"""Request dependencies shared by the v1 routers."""

from ledger_sync.presentation.routers.api.middleware.auth_dependencies import (
    CurrentCaller,
    OptionalCaller,
    PresentedToken,
    get_current_caller,
    get_optional_caller,
    get_presented_token,
)

__all__ = [
    "CurrentCaller",
    "OptionalCaller",
    "PresentedToken",
    "get_current_caller",
    "get_optional_caller",
    "get_presented_token",
]
