"""Domain enums."""

from ledger_sync.domain.enums.audit_status import AuditStatus
from ledger_sync.domain.enums.fetch_step import FetchStep
from ledger_sync.domain.enums.gate_reason import GateReason
from ledger_sync.domain.enums.qbo_environment import QboEnvironment

__all__ = ["AuditStatus", "FetchStep", "GateReason", "QboEnvironment"]
