"""Mini README: Tests for dashboard formatting helpers."""

from __future__ import annotations

from datetime import date
from decimal import Decimal

import pytest

from ledgerly.dashboard.presentation import (
    balance_message,
    category_badge_class,
    category_emoji,
    dashboard_context,
    format_currency,
    goal_status,
    signed_amount,
)
from ledgerly.finance import BalanceState, Ledger, goal_progress, summarise
from ledgerly.utils.clock import FixedClock


@pytest.mark.parametrize(
    "amount, expected",
    [
        (Decimal("0"), "$0.00"),
        (Decimal("3410.5"), "$3,410.50"),
        (Decimal("-45"), "-$45.00"),
        (Decimal("1234567.891"), "$1,234,567.89"),
        (Decimal("0.005"), "$0.01"),
    ],
)
def test_format_currency(amount: Decimal, expected: str) -> None:
    assert format_currency(amount) == expected


def test_category_decoration_falls_back_to_other() -> None:
    assert category_emoji("food") == "🍔"
    assert category_emoji("pets") == "📦"
    assert category_badge_class("salary") == "category-badge category-salary"
    assert category_badge_class("pets") == "category-badge category-other"


def test_signed_amount_uses_type() -> None:
    ledger = Ledger(clock=FixedClock(date(2024, 2, 1)))
    income = ledger.add("Pay", 3500, "income", "salary")
    expense = ledger.add("Food", "89.5", "expense", "food")

    assert signed_amount(income) == "+$3,500.00"
    assert signed_amount(expense) == "-$89.50"


def test_balance_and_goal_messages() -> None:
    assert balance_message(BalanceState.EMPTY) == "Start by adding transactions"
    assert "Negative" in balance_message(BalanceState.NEGATIVE)
    assert goal_status(goal_progress(Decimal("0"), Decimal("0"))) == "Set your monthly income goal"
    assert (
        goal_status(goal_progress(Decimal("250"), Decimal("1000")))
        == "25.0% complete • $750.00 remaining"
    )


def test_dashboard_context_lists_rows() -> None:
    ledger = Ledger(clock=FixedClock(date(2024, 2, 1)))
    ledger.add("Pay", 100, "income", "salary")
    ledger.add("Vet", 40, "expense", "pets")

    context = dashboard_context(
        summarise(ledger.snapshot(), Decimal("0"), "2024-02"), ledger.list_transactions()
    )

    assert context["balance"] == "$60.00"
    assert context["monthly_breakdown"] == "$100.00 - $40.00"
    assert [row["description"] for row in context["transactions"]] == ["Vet", "Pay"]
    assert context["transactions"][0]["category"] == "pets"
    assert context["transactions"][0]["emoji"] == "📦"
