"""Remote calls issued while building a report bundle, in request order."""

from enum import Enum


class FetchStep(str, Enum):
    """Identifies which remote call of a bundle fetch failed."""

    DAILY_PROFIT_AND_LOSS = "daily_profit_and_loss"
    CLASS_PROFIT_AND_LOSS = "class_profit_and_loss"
    BALANCE_SHEET = "balance_sheet"
    SUB_ACCOUNT_DISCOVERY = "sub_account_discovery"
    SUB_LEDGER = "sub_ledger"
