"""Mini README: In-memory ledger of income and expense transactions.

Structure:
    * LedgerValidationError - raised when add requests carry bad input.
    * TransactionType - enum representing income versus expense entries.
    * Category - the known categories; unknown strings are still accepted.
    * Transaction - immutable dataclass storing one recorded entry.
    * Ledger - newest-first collection supporting add, delete and clear.

The ledger lives for a single session and is never persisted. Every add
is validated here even though the dashboard pre-validates form input, so
tests and other callers can use the ledger directly. Categories are stored
exactly as given, blank or unknown ones included; only display code maps
them onto ``Category.OTHER``. Mutations are
serialised behind a lock; readers take a tuple snapshot and aggregate it
without holding the lock.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal, InvalidOperation
from enum import Enum
from threading import RLock
from typing import Dict, Iterable, Iterator, List, Optional, Tuple, Union

from ..logging_utils import get_logger
from ..utils.clock import Clock, SystemClock

LOGGER = get_logger(__name__)

AmountInput = Union[str, int, float, Decimal]

# Largest amount or goal accepted. Keeps every sum quantisable to cents
# within the default 28-digit decimal context.
MAX_AMOUNT = Decimal("999999999999.99")


class LedgerValidationError(ValueError):
    """Input rejected before it could reach the ledger."""


class TransactionType(str, Enum):
    """Enumerate the supported transaction directions."""

    INCOME = "income"
    EXPENSE = "expense"

    @classmethod
    def from_str(cls, value: object) -> "TransactionType":
        """Coerce arbitrary casing into a valid transaction type."""

        if isinstance(value, cls):
            return value
        try:
            normalised = str(value).strip().lower()
            return cls(normalised)
        except ValueError as error:
            raise LedgerValidationError(f"Unsupported transaction type: {value}") from error


class Category(str, Enum):
    """Categories the dashboard knows how to decorate."""

    FOOD = "food"
    TRANSPORT = "transport"
    ENTERTAINMENT = "entertainment"
    UTILITIES = "utilities"
    SALARY = "salary"
    FREELANCE = "freelance"
    OTHER = "other"

    @classmethod
    def for_display(cls, value: str) -> "Category":
        """Map a stored category onto a known one, falling back to ``other``."""

        try:
            return cls(value.strip().lower())
        except ValueError:
            return cls.OTHER


@dataclass(frozen=True, slots=True)
class Transaction:
    """A single income or expense entry. Never mutated after creation."""

    transaction_id: str
    transaction_type: TransactionType
    description: str
    category: str
    amount: Decimal
    occurred_on: date

    @property
    def is_income(self) -> bool:
        return self.transaction_type is TransactionType.INCOME

    @property
    def display_category(self) -> Category:
        return Category.for_display(self.category)

    @property
    def month_key(self) -> str:
        """Year and month of the entry, e.g. ``2024-02``."""

        return self.occurred_on.isoformat()[:7]

    def as_dict(self) -> Dict[str, object]:
        """Export the transaction with serialisable values."""

        return {
            "transaction_id": self.transaction_id,
            "transaction_type": self.transaction_type.value,
            "description": self.description,
            "category": self.category,
            "display_category": self.display_category.value,
            "amount": str(self.amount),
            "occurred_on": self.occurred_on.isoformat(),
        }


def parse_amount(value: object) -> Decimal:
    """Parse numbers or decimal text into a strictly positive ``Decimal``."""

    if isinstance(value, bool) or value is None:
        raise LedgerValidationError(f"Amount must be a number, got {value!r}")
    if isinstance(value, Decimal):
        amount = value
    elif isinstance(value, (int, float)):
        amount = Decimal(str(value))
    else:
        text = str(value).strip()
        if not text:
            raise LedgerValidationError("Amount is required.")
        try:
            amount = Decimal(text)
        except InvalidOperation as error:
            raise LedgerValidationError(f"Amount is not numeric: {value!r}") from error
    if not amount.is_finite():
        raise LedgerValidationError(f"Amount must be finite, got {value!r}")
    if amount <= 0:
        raise LedgerValidationError(f"Amount must be greater than zero, got {value!r}")
    if amount > MAX_AMOUNT:
        raise LedgerValidationError(
            f"Amount exceeds the supported maximum of {MAX_AMOUNT}, got {value!r}"
        )
    return amount


def _parse_date(value: object) -> date:
    """Parse ISO formatted strings or date objects safely."""

    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        try:
            return date.fromisoformat(value.strip())
        except ValueError as error:
            raise LedgerValidationError(f"Invalid date: {value!r}") from error
    raise LedgerValidationError("Dates must be provided as ISO strings or date/datetime instances.")


def _clean_description(value: object) -> str:
    description = "" if value is None else str(value).strip()
    if not description:
        raise LedgerValidationError("Description must not be empty.")
    return description


class Ledger:
    """Manage the session's transactions, newest first."""

    def __init__(
        self,
        transactions: Optional[Iterable[Transaction]] = None,
        *,
        clock: Optional[Clock] = None,
    ) -> None:
        self._clock: Clock = clock or SystemClock()
        self._transactions: List[Transaction] = []
        self._ids: set[str] = set()
        self._sequence = 0
        self._lock = RLock()
        for transaction in transactions or ():
            self._register(transaction)
        LOGGER.debug("Ledger initialised with %s transactions", len(self._transactions))

    @property
    def clock(self) -> Clock:
        return self._clock

    def _next_id(self) -> str:
        """Generate the next sequential transaction identifier."""

        self._sequence += 1
        return f"txn_{self._sequence:04d}"

    def _register(self, transaction: Transaction) -> None:
        """Append a pre-built transaction, keeping identifiers unique."""

        if transaction.transaction_id in self._ids:
            raise ValueError(f"Transaction {transaction.transaction_id} already exists.")
        self._transactions.append(transaction)
        self._ids.add(transaction.transaction_id)
        suffix = transaction.transaction_id.rsplit("_", 1)[-1]
        if suffix.isdigit():
            self._sequence = max(self._sequence, int(suffix))

    def add(
        self,
        description: object,
        amount: AmountInput,
        transaction_type: Union[str, TransactionType],
        category: str = Category.OTHER.value,
        *,
        occurred_on: Optional[object] = None,
    ) -> Transaction:
        """Validate the input and insert a new transaction at the front."""

        cleaned_description = _clean_description(description)
        parsed_amount = parse_amount(amount)
        parsed_type = TransactionType.from_str(transaction_type)
        raw_category = Category.OTHER.value if category is None else str(category)
        when = self._clock.today() if occurred_on is None else _parse_date(occurred_on)

        with self._lock:
            transaction = Transaction(
                transaction_id=self._next_id(),
                transaction_type=parsed_type,
                description=cleaned_description,
                category=raw_category,
                amount=parsed_amount,
                occurred_on=when,
            )
            self._transactions.insert(0, transaction)
            self._ids.add(transaction.transaction_id)
        LOGGER.info(
            "Recorded %s %s (%s) as %s",
            parsed_type.value,
            parsed_amount,
            transaction.category,
            transaction.transaction_id,
        )
        return transaction

    def delete_by_id(self, transaction_id: str) -> None:
        """Remove the matching transaction. Unknown identifiers are ignored."""

        with self._lock:
            if transaction_id not in self._ids:
                LOGGER.debug("Delete ignored, no transaction %s", transaction_id)
                return
            self._transactions = [
                transaction
                for transaction in self._transactions
                if transaction.transaction_id != transaction_id
            ]
            self._ids.discard(transaction_id)
        LOGGER.info("Deleted transaction %s", transaction_id)

    def clear(self) -> int:
        """Drop every transaction and return how many were removed."""

        with self._lock:
            removed = len(self._transactions)
            self._transactions = []
            self._ids.clear()
        LOGGER.info("Cleared ledger (%s transactions removed)", removed)
        return removed

    def get_transaction(self, transaction_id: str) -> Transaction:
        """Retrieve a transaction, raising informative errors when missing."""

        with self._lock:
            for transaction in self._transactions:
                if transaction.transaction_id == transaction_id:
                    return transaction
        raise KeyError(f"Transaction {transaction_id} not found")

    def snapshot(self) -> Tuple[Transaction, ...]:
        """Return an immutable copy of the current entries, newest first."""

        with self._lock:
            return tuple(self._transactions)

    def list_transactions(self) -> List[Transaction]:
        """Return transactions in display order (most recently added first)."""

        return list(self.snapshot())

    @property
    def is_empty(self) -> bool:
        return len(self) == 0

    def __len__(self) -> int:
        with self._lock:
            return len(self._transactions)

    def __iter__(self) -> Iterator[Transaction]:
        return iter(self.snapshot())

    def __contains__(self, transaction_id: object) -> bool:
        with self._lock:
            return transaction_id in self._ids
