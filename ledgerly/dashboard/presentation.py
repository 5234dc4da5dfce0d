"""Mini README: Display helpers for the dashboard templates.

Formatting and decoration live here so the finance core only ever deals in
raw decimals and category strings.
"""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal
from typing import Dict, List

from ..finance import BalanceState, Category, GoalProgress, LedgerSummary, Transaction

CENT = Decimal("0.01")

CATEGORY_EMOJI: Dict[Category, str] = {
    Category.FOOD: "🍔",
    Category.TRANSPORT: "🚗",
    Category.ENTERTAINMENT: "🎬",
    Category.UTILITIES: "⚡",
    Category.SALARY: "💼",
    Category.FREELANCE: "💻",
    Category.OTHER: "📦",
}

BALANCE_MESSAGES: Dict[BalanceState, str] = {
    BalanceState.EMPTY: "Start by adding transactions",
    BalanceState.POSITIVE: "↗️ Positive balance",
    BalanceState.NEGATIVE: "↘️ Negative balance",
    BalanceState.ZERO: "➡️ Breaking even",
}


def format_currency(amount: Decimal, symbol: str = "$") -> str:
    """Format ``amount`` en-US style, e.g. ``$1,234.50`` or ``-$45.00``."""

    quantised = Decimal(amount).quantize(CENT, rounding=ROUND_HALF_UP)
    sign = "-" if quantised < 0 else ""
    return f"{sign}{symbol}{abs(quantised):,.2f}"


def category_emoji(category: str) -> str:
    return CATEGORY_EMOJI[Category.for_display(category)]


def category_badge_class(category: str) -> str:
    return f"category-badge category-{Category.for_display(category).value}"


def signed_amount(transaction: Transaction, symbol: str = "$") -> str:
    prefix = "+" if transaction.is_income else "-"
    return f"{prefix}{format_currency(transaction.amount, symbol)}"


def balance_message(state: BalanceState) -> str:
    return BALANCE_MESSAGES[state]


def goal_status(progress: GoalProgress, symbol: str = "$") -> str:
    if not progress.has_goal:
        return "Set your monthly income goal"
    return (
        f"{progress.percentage:.1f}% complete • "
        f"{format_currency(progress.remaining, symbol)} remaining"
    )


def monthly_breakdown(summary: LedgerSummary, symbol: str = "$") -> str:
    return (
        f"{format_currency(summary.monthly_income, symbol)} - "
        f"{format_currency(summary.monthly_expenses, symbol)}"
    )


def transaction_rows(transactions: List[Transaction], symbol: str = "$") -> List[Dict[str, str]]:
    """Flatten transactions into the strings the list template renders."""

    return [
        {
            "transaction_id": transaction.transaction_id,
            "description": transaction.description,
            "emoji": category_emoji(transaction.category),
            "category": transaction.category,
            "badge_class": category_badge_class(transaction.category),
            "occurred_on": transaction.occurred_on.isoformat(),
            "type": transaction.transaction_type.value,
            "amount": signed_amount(transaction, symbol),
        }
        for transaction in transactions
    ]


def dashboard_context(
    summary: LedgerSummary, transactions: List[Transaction], symbol: str = "$"
) -> Dict[str, object]:
    """Build the template context for the dashboard page."""

    return {
        "balance": format_currency(summary.balance, symbol),
        "net_worth": format_currency(summary.balance, symbol),
        "monthly_net": format_currency(summary.monthly_net, symbol),
        "total_income": format_currency(summary.total_income, symbol),
        "total_expenses": format_currency(summary.total_expenses, symbol),
        "balance_state": summary.balance_state.value,
        "balance_message": balance_message(summary.balance_state),
        "monthly_breakdown": monthly_breakdown(summary, symbol),
        "goal": summary.goal,
        "goal_width": f"{summary.goal_progress.percentage:.1f}",
        "goal_status": goal_status(summary.goal_progress, symbol),
        "transactions": transaction_rows(transactions, symbol),
    }
