"""HTTP routers.

- system_router: unversioned root and health endpoints
- v1_router: versioned sync and report endpoints
"""

from ledger_sync.presentation.routers.api.v1 import v1_router
from ledger_sync.presentation.routers.system import system_router

__all__ = ["system_router", "v1_router"]
