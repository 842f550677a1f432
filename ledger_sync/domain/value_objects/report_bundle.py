"""Report bundle value objects.

Report payloads are opaque JSON objects owned by the remote service; only the
sub-account discovery result is interpreted (ids and names).
"""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True, kw_only=True)
class TrackedAccount:
    """Equity sub-account whose general ledger is fetched.

    Attributes:
        account_id: Remote account id.
        account_name: Fully qualified account name.
    """

    account_id: str
    account_name: str

    def to_dict(self) -> dict[str, str]:
        """Serialize for JSON storage."""
        return {"account_id": self.account_id, "account_name": self.account_name}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "TrackedAccount":
        """Deserialize from JSON storage."""
        return cls(account_id=str(data["account_id"]), account_name=str(data["account_name"]))


@dataclass(frozen=True, slots=True, kw_only=True)
class ReportBundle:
    """Everything fetched by one invocation, committed as one unit.

    Attributes:
        daily_report: Profit and loss summarized by day.
        class_report: Profit and loss summarized by class.
        balance_sheet_report: Cash-basis balance sheet.
        tracked_accounts: Owner -> tracked sub-account (None when tracking is off).
        auxiliary_ledger_data: Owner -> general ledger report (None when tracking is off).
    """

    daily_report: dict[str, Any]
    class_report: dict[str, Any]
    balance_sheet_report: dict[str, Any]
    tracked_accounts: dict[str, TrackedAccount] | None = None
    auxiliary_ledger_data: dict[str, dict[str, Any]] | None = None

    @property
    def tracked_account_count(self) -> int:
        """Number of tracked sub-accounts in the bundle."""
        return len(self.tracked_accounts) if self.tracked_accounts else 0
