"""Queries (CQRS read operations)."""

from ledger_sync.application.queries.report_queries import GetCachedReports

__all__ = ["GetCachedReports"]
