"""Mini README: Session controller tying the ledger to the dashboard.

Structure:
    * DEMO_TRANSACTIONS - sample entries offered by the "load demo" action.
    * DashboardController - owns one ledger, the income goal, and the clock.

Each browser session (or test) gets its own controller, so several ledgers
can coexist without sharing module-level state. The controller is the only
thing the web layer talks to: it forwards form submissions to the ledger,
keeps the goal scalar, and produces the summary for the current month.
"""

from __future__ import annotations

from decimal import Decimal, InvalidOperation
from threading import RLock
from typing import List, Optional, Tuple, Union

from ..configuration import LedgerlySettings
from ..finance import (
    MAX_AMOUNT,
    Ledger,
    LedgerSummary,
    LedgerValidationError,
    Transaction,
    current_month_key,
    summarise,
)
from ..logging_utils import get_logger
from ..utils.clock import Clock

LOGGER = get_logger(__name__)

DEMO_TRANSACTIONS: Tuple[Tuple[str, str, str, str], ...] = (
    ("Salary Payment", "3500", "income", "salary"),
    ("Grocery Store", "89.50", "expense", "food"),
    ("Gas Station", "45.00", "expense", "transport"),
    ("Freelance Project", "800", "income", "freelance"),
    ("Netflix Subscription", "15.99", "expense", "entertainment"),
)


def _parse_goal(value: Union[str, int, float, Decimal, None]) -> Decimal:
    """Blank or non-numeric goals mean "no goal"; negative or oversized ones are rejected."""

    if value is None or isinstance(value, bool):
        return Decimal("0")
    try:
        goal = Decimal(str(value).strip()) if not isinstance(value, Decimal) else value
    except InvalidOperation:
        return Decimal("0")
    if not goal.is_finite():
        return Decimal("0")
    if goal < 0:
        raise LedgerValidationError(f"Income goal cannot be negative, got {value!r}")
    if goal > MAX_AMOUNT:
        raise LedgerValidationError(
            f"Income goal exceeds the supported maximum of {MAX_AMOUNT}, got {value!r}"
        )
    return goal


class DashboardController:
    """Own a session's ledger and monthly income goal."""

    def __init__(
        self,
        ledger: Optional[Ledger] = None,
        *,
        goal: Union[str, int, float, Decimal, None] = None,
        clock: Optional[Clock] = None,
    ) -> None:
        if ledger is None:
            ledger = Ledger(clock=clock)
        self._ledger = ledger
        self._clock = clock or ledger.clock
        self._goal = _parse_goal(goal)
        self._lock = RLock()

    @classmethod
    def from_settings(
        cls, settings: LedgerlySettings, *, clock: Optional[Clock] = None
    ) -> "DashboardController":
        """Build a controller using the configured default goal and demo flag."""

        controller = cls(goal=settings.default_income_goal, clock=clock)
        if settings.load_demo_data:
            controller.load_demo_data()
        return controller

    @property
    def ledger(self) -> Ledger:
        return self._ledger

    @property
    def goal(self) -> Decimal:
        with self._lock:
            return self._goal

    def submit_transaction(
        self,
        description: str,
        amount: Union[str, int, float, Decimal],
        transaction_type: str,
        category: str,
    ) -> Transaction:
        """Handle an "add transaction" form submission."""

        try:
            return self._ledger.add(description, amount, transaction_type, category)
        except LedgerValidationError as error:
            LOGGER.warning("Rejected transaction submission: %s", error)
            raise

    def delete_transaction(self, transaction_id: str) -> None:
        self._ledger.delete_by_id(transaction_id)

    def clear_transactions(self, *, confirmed: bool = True) -> int:
        """Clear the ledger when confirmed. Returns how many entries were removed."""

        if not confirmed:
            LOGGER.debug("Clear skipped, not confirmed")
            return 0
        return self._ledger.clear()

    def set_goal(self, value: Union[str, int, float, Decimal, None]) -> Decimal:
        goal = _parse_goal(value)
        with self._lock:
            self._goal = goal
        LOGGER.info("Monthly income goal set to %s", goal)
        return goal

    def month_key(self) -> str:
        return current_month_key(self._clock)

    def transactions(self) -> List[Transaction]:
        return self._ledger.list_transactions()

    def summary(self) -> LedgerSummary:
        """Aggregate the current snapshot against this month and goal."""

        return summarise(self._ledger.snapshot(), self.goal, self.month_key())

    def load_demo_data(self) -> List[Transaction]:
        """Record the sample transactions, dated today."""

        added = [
            self._ledger.add(description, amount, transaction_type, category)
            for description, amount, transaction_type, category in DEMO_TRANSACTIONS
        ]
        LOGGER.info("Loaded %s demo transactions", len(added))
        return added
