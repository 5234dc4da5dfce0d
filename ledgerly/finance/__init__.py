"""Mini README: Finance core for the Ledgerly widget.

This package holds the in-memory ledger and the pure aggregate functions
computed from it. Nothing here imports the web stack, so the core can be
exercised directly from tests or other front ends.
"""

from .aggregation import (
    BalanceState,
    GoalProgress,
    LedgerSummary,
    balance,
    classify_balance,
    current_month_key,
    goal_progress,
    month_key_for,
    monthly_expenses,
    monthly_income,
    monthly_net,
    summarise,
    total_expenses,
    total_income,
)
from .ledger import (
    MAX_AMOUNT,
    Category,
    Ledger,
    LedgerValidationError,
    Transaction,
    TransactionType,
    parse_amount,
)

__all__ = [
    "BalanceState",
    "Category",
    "GoalProgress",
    "Ledger",
    "LedgerSummary",
    "LedgerValidationError",
    "MAX_AMOUNT",
    "Transaction",
    "TransactionType",
    "balance",
    "classify_balance",
    "current_month_key",
    "goal_progress",
    "month_key_for",
    "monthly_expenses",
    "monthly_income",
    "monthly_net",
    "parse_amount",
    "summarise",
    "total_expenses",
    "total_income",
]
