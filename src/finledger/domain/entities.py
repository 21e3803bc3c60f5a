"""Domain model entities for finledger.

These are pure data classes representing the ledger, independent of how the
key-value store lays them out. Category enumerations are tied to the
transaction kind and checked when a Transaction is constructed, so an
expense can never carry an investment category and vice versa.
"""

from dataclasses import dataclass, field
from datetime import datetime, date
from decimal import Decimal
from enum import Enum

from finledger.domain.errors import (
    ValidationError,
    invalid_category,
    invalid_currency,
    invalid_kind,
    negative_amount,
)


class TransactionKind(str, Enum):
    """Kind of ledger transaction."""

    EXPENSE = "expense"
    INVESTMENT = "investment"

    @classmethod
    def parse(cls, value: "str | TransactionKind") -> "TransactionKind":
        """Resolve a kind from its value, case-insensitively."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            raise ValidationError(invalid_kind(str(value))) from None


class ExpenseCategory(str, Enum):
    """Categories available to expense transactions."""

    FOOD_AND_DINING = "Food & Dining"
    TRANSPORTATION = "Transportation"
    HOUSING = "Housing"
    UTILITIES = "Utilities"
    ENTERTAINMENT = "Entertainment"
    SHOPPING = "Shopping"
    HEALTHCARE = "Healthcare"
    EDUCATION = "Education"
    SUBSCRIPTIONS = "Subscriptions"
    INSURANCE = "Insurance"
    TAXES = "Taxes"
    OTHER = "Other"


class InvestmentCategory(str, Enum):
    """Categories available to investment transactions."""

    STOCKS = "Stocks"
    BONDS = "Bonds"
    REAL_ESTATE = "Real Estate"
    CRYPTOCURRENCY = "Cryptocurrency"
    MUTUAL_FUNDS = "Mutual Funds"
    ETFS = "ETFs"
    COMMODITIES = "Commodities"
    PRECIOUS_METALS = "Precious Metals"
    STARTUP_INVESTMENT = "Startup Investment"
    OTHER = "Other"


class Currency(str, Enum):
    """Supported currency codes."""

    USD = "USD"
    EUR = "EUR"
    GBP = "GBP"
    BTC = "BTC"
    ETH = "ETH"


DEFAULT_CURRENCY = Currency.USD.value

CATEGORIES_BY_KIND: dict[TransactionKind, type[Enum]] = {
    TransactionKind.EXPENSE: ExpenseCategory,
    TransactionKind.INVESTMENT: InvestmentCategory,
}


def categories_for(kind: "str | TransactionKind") -> list[str]:
    """Return the category names valid for a transaction kind."""
    kind = TransactionKind.parse(kind)
    return [member.value for member in CATEGORIES_BY_KIND[kind]]


def currency_codes() -> list[str]:
    """Return all supported currency codes."""
    return [member.value for member in Currency]


def validate_currency(code: str) -> str:
    """Return the normalized currency code or raise ValidationError."""
    if isinstance(code, Enum):
        code = code.value
    normalized = str(code).strip().upper()
    if normalized not in currency_codes():
        raise ValidationError(invalid_currency(str(code), currency_codes()))
    return normalized


def validate_category(kind: "str | TransactionKind", category: str) -> str:
    """Return the category if it belongs to the kind, else raise ValidationError."""
    kind = TransactionKind.parse(kind)
    value = category.value if isinstance(category, Enum) else str(category)
    allowed = categories_for(kind)
    if value not in allowed:
        raise ValidationError(invalid_category(value, kind.value, allowed))
    return value


@dataclass(frozen=True)
class Transaction:
    """Transaction domain entity.

    Construction normalizes ``kind``, ``currency`` and ``category`` and
    rejects any combination that breaks the ledger invariants.
    """

    id: int
    kind: TransactionKind
    amount: Decimal
    currency: str
    category: str
    description: str
    date: date
    created_at: datetime

    def __post_init__(self):
        kind = TransactionKind.parse(self.kind)
        object.__setattr__(self, "kind", kind)
        object.__setattr__(self, "category", validate_category(kind, self.category))
        object.__setattr__(self, "currency", validate_currency(self.currency))

        if not isinstance(self.amount, Decimal) or not self.amount.is_finite():
            raise ValidationError(f"Amount must be a finite decimal, got {self.amount!r}")
        if self.amount < 0:
            raise ValidationError(negative_amount(self.amount))

    @property
    def is_expense(self) -> bool:
        return self.kind is TransactionKind.EXPENSE

    @property
    def is_investment(self) -> bool:
        return self.kind is TransactionKind.INVESTMENT


@dataclass(frozen=True)
class BudgetConfig:
    """Spending ceiling and the currency it is expressed in."""

    amount: Decimal
    currency: str = DEFAULT_CURRENCY

    def __post_init__(self):
        object.__setattr__(self, "currency", validate_currency(self.currency))
        if not isinstance(self.amount, Decimal) or not self.amount.is_finite():
            raise ValidationError(f"Budget must be a finite decimal, got {self.amount!r}")
        if self.amount < 0:
            raise ValidationError(negative_amount(self.amount))

    @classmethod
    def default(cls) -> "BudgetConfig":
        """Zero-value budget used when nothing has been configured."""
        return cls(amount=Decimal("0"), currency=DEFAULT_CURRENCY)


@dataclass(frozen=True)
class Ledger:
    """Read-only snapshot of the ledger state."""

    transactions: tuple[Transaction, ...] = ()
    budget: BudgetConfig = field(default_factory=BudgetConfig.default)
    display_currency: str = DEFAULT_CURRENCY

    def of_kind(self, kind: "str | TransactionKind") -> tuple[Transaction, ...]:
        """Return transactions of one kind, in insertion order."""
        kind = TransactionKind.parse(kind)
        return tuple(txn for txn in self.transactions if txn.kind is kind)

    def expenses(self) -> tuple[Transaction, ...]:
        return self.of_kind(TransactionKind.EXPENSE)

    def investments(self) -> tuple[Transaction, ...]:
        return self.of_kind(TransactionKind.INVESTMENT)
