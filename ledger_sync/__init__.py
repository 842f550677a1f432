"""Ledger report sync service."""
