"""Domain value objects.

Usage:
    from ledger_sync.domain.value_objects import BusinessCalendar, GateDecision
"""

from ledger_sync.domain.value_objects.business_calendar import BusinessCalendar
from ledger_sync.domain.value_objects.gate_decision import GateDecision
from ledger_sync.domain.value_objects.report_bundle import ReportBundle, TrackedAccount

__all__ = [
    "BusinessCalendar",
    "GateDecision",
    "ReportBundle",
    "TrackedAccount",
]
