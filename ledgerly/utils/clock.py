"""Mini README: Injectable clocks for date-dependent ledger behaviour.

Structure:
    * Clock - protocol exposing ``today``.
    * SystemClock - reads the local wall-clock date.
    * FixedClock - returns a pinned date; tests advance it explicitly.

The ledger stamps new transactions with ``today`` and the monthly
aggregates key off the current month, so both take a clock instead of
calling ``date.today`` directly.
"""

from __future__ import annotations

from datetime import date, timedelta
from typing import Protocol


class Clock(Protocol):
    """Anything that can report the current calendar date."""

    def today(self) -> date:
        ...


class SystemClock:
    """Clock backed by the host's local date."""

    def today(self) -> date:
        return date.today()


class FixedClock:
    """Clock pinned to a specific date."""

    def __init__(self, current: date) -> None:
        self._current = current

    def today(self) -> date:
        return self._current

    def set(self, current: date) -> None:
        """Move the clock to an arbitrary date."""

        self._current = current

    def advance(self, days: int = 1) -> date:
        """Shift the clock forward and return the new date."""

        self._current = self._current + timedelta(days=days)
        return self._current
