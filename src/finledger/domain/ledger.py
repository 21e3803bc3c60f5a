"""Ledger store: durable custody of transactions and budget configuration."""

import logging
import time
from datetime import date as date_type, datetime, UTC
from typing import Callable, Optional, TypeVar

from finledger.database.base import KeyValueStore
from finledger.database import mappers
from finledger.domain.entities import (
    BudgetConfig,
    DEFAULT_CURRENCY,
    Ledger,
    Transaction,
    TransactionKind,
    validate_currency,
)
from finledger.utils.amount_parser import parse_amount

logger = logging.getLogger(__name__)

T = TypeVar("T")


class LedgerStore:
    """Owns the transaction list, budget and display currency.

    Every mutation writes the affected key back to the store before
    returning. Readers get immutable snapshots via ``snapshot()``.
    """

    def __init__(self, store: KeyValueStore, clock: Callable[[], float] = time.time):
        """Initialize the ledger store.

        Args:
            store: Key-value store used for persistence
            clock: Source of wall-clock seconds, used for transaction ids
        """
        self.store = store
        self.clock = clock
        self._transactions: list[Transaction] = []
        self._budget = BudgetConfig.default()
        self._display_currency = DEFAULT_CURRENCY
        self.load()

    def _read(self, key: str, parse: Callable[[str], T], default: T) -> T:
        """Read and parse a key, falling back to default on absence or bad data."""
        raw = self.store.get(key)
        if raw is None:
            logger.debug("No stored value for %s, using default", key)
            return default
        try:
            return parse(raw)
        except ValueError as e:
            logger.warning("Ignoring unreadable value for %s: %s", key, e)
            return default

    def load(self) -> Ledger:
        """Reload state from the store and return the resulting snapshot.

        Missing or unparsable keys fall back to empty/default values; this
        never raises for bad stored data.
        """
        self._transactions = self._read(mappers.TRANSACTIONS_KEY, mappers.load_transactions, [])
        self._budget = self._read(mappers.BUDGET_KEY, mappers.load_budget, BudgetConfig.default())
        self._display_currency = self._read(
            mappers.DISPLAY_CURRENCY_KEY, mappers.load_currency, DEFAULT_CURRENCY
        )
        return self.snapshot()

    def snapshot(self) -> Ledger:
        """Return an immutable view of the current ledger state."""
        return Ledger(
            transactions=tuple(self._transactions),
            budget=self._budget,
            display_currency=self._display_currency,
        )

    @property
    def transactions(self) -> tuple[Transaction, ...]:
        return tuple(self._transactions)

    @property
    def budget(self) -> BudgetConfig:
        return self._budget

    @property
    def display_currency(self) -> str:
        return self._display_currency

    def _next_id(self) -> int:
        """Millisecond timestamp, bumped past any id already in use."""
        candidate = int(self.clock() * 1000)
        if self._transactions:
            candidate = max(candidate, max(txn.id for txn in self._transactions) + 1)
        return candidate

    def _save_transactions(self, transactions: list[Transaction]) -> None:
        """Persist transactions, then adopt them as the in-memory state."""
        self.store.set(mappers.TRANSACTIONS_KEY, mappers.dump_transactions(transactions))
        self._transactions = transactions

    def add(
        self,
        kind: "str | TransactionKind",
        amount,
        currency: str,
        category: str,
        description: str = "",
        date: Optional[date_type] = None,
    ) -> Transaction:
        """Record a transaction and persist the ledger.

        Args:
            kind: Transaction kind ("expense" or "investment")
            amount: Non-negative amount (string or number)
            currency: Currency code
            category: Category valid for the kind
            description: Free-text label
            date: Transaction date, defaults to today

        Returns:
            The created Transaction with its assigned id and creation time

        Raises:
            ValidationError: If amount, currency or category is invalid
        """
        transaction = Transaction(
            id=self._next_id(),
            kind=kind,
            amount=parse_amount(amount),
            currency=currency,
            category=category,
            description=description or "",
            date=date or date_type.today(),
            created_at=datetime.now(UTC),
        )
        self._save_transactions([*self._transactions, transaction])
        logger.debug("Added %s transaction %s", transaction.kind.value, transaction.id)
        return transaction

    def get(self, transaction_id: int) -> Optional[Transaction]:
        """Get transaction by ID, or None if not found."""
        for txn in self._transactions:
            if txn.id == transaction_id:
                return txn
        return None

    def remove(self, transaction_id: int) -> bool:
        """Remove the transaction with the given id.

        Returns:
            True if a transaction was removed, False if the id was absent
        """
        for index, txn in enumerate(self._transactions):
            if txn.id == transaction_id:
                self._save_transactions(
                    self._transactions[:index] + self._transactions[index + 1:]
                )
                logger.debug("Removed transaction %s", transaction_id)
                return True
        logger.debug("Transaction %s not present, nothing removed", transaction_id)
        return False

    def set_budget(self, amount, currency: str = DEFAULT_CURRENCY) -> BudgetConfig:
        """Replace the budget configuration and persist it."""
        budget = BudgetConfig(amount=parse_amount(amount), currency=currency)
        self.store.set(mappers.BUDGET_KEY, mappers.dump_budget(budget))
        self._budget = budget
        logger.debug("Budget set to %s %s", budget.amount, budget.currency)
        return budget

    def reset_budget(self) -> BudgetConfig:
        """Reset the budget configuration to its zero-value default."""
        return self.set_budget(BudgetConfig.default().amount, DEFAULT_CURRENCY)

    def set_display_currency(self, code: str) -> str:
        """Replace the display currency preference and persist it."""
        code = validate_currency(code)
        self.store.set(mappers.DISPLAY_CURRENCY_KEY, mappers.dump_currency(code))
        self._display_currency = code
        return code

    def recent(self, kind: "str | TransactionKind", limit: int = 5) -> list[Transaction]:
        """Return the latest transactions of a kind by date, newest first."""
        kind = TransactionKind.parse(kind)
        matching = [txn for txn in self._transactions if txn.kind is kind]
        return sorted(matching, key=lambda txn: txn.date, reverse=True)[:limit]
