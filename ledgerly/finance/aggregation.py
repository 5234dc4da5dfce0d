"""Mini README: Pure aggregate calculations over ledger snapshots.

Structure:
    * total_income / total_expenses / balance - whole-ledger reductions.
    * current_month_key / month_key_for - ``YYYY-MM`` keys for filtering.
    * monthly_income / monthly_expenses / monthly_net - month-restricted sums.
    * goal_progress - percentage towards the monthly income goal.
    * classify_balance - qualitative balance state for the dashboard.
    * summarise - bundles everything the view layer renders.

Nothing here keeps state. Every value is recomputed from the snapshot on
each call, which is plenty for a few hundred transactions.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from enum import Enum
from typing import Dict, Iterable, Sequence

from .ledger import Transaction, TransactionType
from ..utils.clock import Clock

ZERO = Decimal("0")
HUNDRED = Decimal("100")


class BalanceState(str, Enum):
    """How the overall balance should be presented."""

    EMPTY = "empty"
    POSITIVE = "positive"
    NEGATIVE = "negative"
    ZERO = "zero"


@dataclass(frozen=True, slots=True)
class GoalProgress:
    """Progress towards the monthly income goal."""

    percentage: Decimal
    remaining: Decimal
    has_goal: bool

    def as_dict(self) -> Dict[str, object]:
        return {
            "percentage": str(self.percentage),
            "remaining": str(self.remaining),
            "has_goal": self.has_goal,
        }


@dataclass(frozen=True, slots=True)
class LedgerSummary:
    """Every aggregate the dashboard displays, computed from one snapshot."""

    month_key: str
    transaction_count: int
    total_income: Decimal
    total_expenses: Decimal
    balance: Decimal
    monthly_income: Decimal
    monthly_expenses: Decimal
    monthly_net: Decimal
    goal: Decimal
    goal_progress: GoalProgress
    balance_state: BalanceState

    def as_dict(self) -> Dict[str, object]:
        return {
            "month_key": self.month_key,
            "transaction_count": self.transaction_count,
            "total_income": str(self.total_income),
            "total_expenses": str(self.total_expenses),
            "balance": str(self.balance),
            "monthly_income": str(self.monthly_income),
            "monthly_expenses": str(self.monthly_expenses),
            "monthly_net": str(self.monthly_net),
            "goal": str(self.goal),
            "goal_progress": self.goal_progress.as_dict(),
            "balance_state": self.balance_state.value,
        }


def _sum_of(transactions: Iterable[Transaction], transaction_type: TransactionType) -> Decimal:
    return sum(
        (t.amount for t in transactions if t.transaction_type is transaction_type),
        ZERO,
    )


def total_income(transactions: Iterable[Transaction]) -> Decimal:
    return _sum_of(transactions, TransactionType.INCOME)


def total_expenses(transactions: Iterable[Transaction]) -> Decimal:
    return _sum_of(transactions, TransactionType.EXPENSE)


def balance(transactions: Iterable[Transaction]) -> Decimal:
    """Income minus expenses. Negative when spending exceeds income."""

    snapshot = tuple(transactions)
    return total_income(snapshot) - total_expenses(snapshot)


def month_key_for(day: date) -> str:
    return f"{day.year:04d}-{day.month:02d}"


def current_month_key(clock: Clock) -> str:
    """Return the ``YYYY-MM`` key for the clock's current date."""

    return month_key_for(clock.today())


def in_month(transactions: Iterable[Transaction], month_key: str) -> Sequence[Transaction]:
    """Keep transactions whose ISO date starts with ``month_key``."""

    return tuple(t for t in transactions if t.occurred_on.isoformat().startswith(month_key))


def monthly_income(transactions: Iterable[Transaction], month_key: str) -> Decimal:
    return total_income(in_month(transactions, month_key))


def monthly_expenses(transactions: Iterable[Transaction], month_key: str) -> Decimal:
    return total_expenses(in_month(transactions, month_key))


def monthly_net(transactions: Iterable[Transaction], month_key: str) -> Decimal:
    return balance(in_month(transactions, month_key))


def goal_progress(income: Decimal, goal: Decimal) -> GoalProgress:
    """Percentage of ``goal`` covered by ``income``, capped at 100.

    A goal of zero or less means no goal has been set; callers should show a
    prompt instead of a percentage.
    """

    income = Decimal(income)
    goal = Decimal(goal)
    if goal <= 0:
        return GoalProgress(percentage=ZERO, remaining=ZERO, has_goal=False)
    percentage = min(income / goal * HUNDRED, HUNDRED)
    remaining = max(ZERO, goal - income)
    return GoalProgress(percentage=percentage, remaining=remaining, has_goal=True)


def classify_balance(value: Decimal, is_empty: bool) -> BalanceState:
    if is_empty:
        return BalanceState.EMPTY
    if value > 0:
        return BalanceState.POSITIVE
    if value < 0:
        return BalanceState.NEGATIVE
    return BalanceState.ZERO


def summarise(transactions: Iterable[Transaction], goal: Decimal, month_key: str) -> LedgerSummary:
    """Compute the full dashboard summary from one snapshot."""

    snapshot = tuple(transactions)
    month = in_month(snapshot, month_key)
    income = total_income(snapshot)
    expenses = total_expenses(snapshot)
    overall = income - expenses
    month_income = total_income(month)
    month_expenses = total_expenses(month)
    return LedgerSummary(
        month_key=month_key,
        transaction_count=len(snapshot),
        total_income=income,
        total_expenses=expenses,
        balance=overall,
        monthly_income=month_income,
        monthly_expenses=month_expenses,
        monthly_net=month_income - month_expenses,
        goal=Decimal(goal),
        goal_progress=goal_progress(month_income, goal),
        balance_state=classify_balance(overall, is_empty=not snapshot),
    )
