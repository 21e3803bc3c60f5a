"""Metrics engine: pure derivations over a ledger snapshot.

Every function here is read-only and depends only on the Ledger passed in.
Division by a zero budget is defined as a zero result rather than an error.
"""

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum

from finledger.domain.entities import Ledger, TransactionKind

ZERO = Decimal("0")
HUNDRED = Decimal("100")

NEAR_LIMIT_RATIO = Decimal("0.9")
TOP_CATEGORY_SHARE = Decimal("0.4")
INVESTMENT_TARGET_RATIO = Decimal("0.2")
BUDGET_WARNING_PERCENT = Decimal("80")


class SuggestionLevel(str, Enum):
    """Severity of an advisory message."""

    WARNING = "warning"
    INFO = "info"
    SUCCESS = "success"


@dataclass(frozen=True)
class Suggestion:
    """Advisory message derived from the ledger."""

    level: SuggestionLevel
    message: str


class BudgetLevel(str, Enum):
    """Budget health bands."""

    OK = "ok"
    WARNING = "warning"
    OVER = "over"


@dataclass(frozen=True)
class BudgetStatus:
    """Budget health: band, percentage used and remaining (or excess) amount."""

    level: BudgetLevel
    percentage: Decimal
    remaining: Decimal


@dataclass(frozen=True)
class LedgerSummary:
    """Headline figures for a ledger."""

    total_budget: Decimal
    total_spent: Decimal
    total_invested: Decimal
    remaining: Decimal
    budget_percentage: Decimal


NEAR_LIMIT_MESSAGE = (
    "You're approaching your budget limit. Consider reducing non-essential expenses."
)
TOP_CATEGORY_MESSAGE = (
    "{category} is your highest expense category. "
    "Consider if this aligns with your financial goals."
)
INCREASE_INVESTMENT_MESSAGE = (
    "Consider increasing your investment allocation. "
    "Aim for at least 20% of your spending to go towards investments."
)
START_INVESTING_MESSAGE = (
    "Start investing! Even small amounts can grow significantly over time "
    "through compound interest."
)


def _total(ledger: Ledger, kind: TransactionKind) -> Decimal:
    return sum((txn.amount for txn in ledger.of_kind(kind)), ZERO)


def total_spent(ledger: Ledger) -> Decimal:
    """Sum of expense amounts."""
    return _total(ledger, TransactionKind.EXPENSE)


def total_invested(ledger: Ledger) -> Decimal:
    """Sum of investment amounts."""
    return _total(ledger, TransactionKind.INVESTMENT)


def remaining(ledger: Ledger) -> Decimal:
    """Budget minus total spent. Negative when over budget."""
    return ledger.budget.amount - total_spent(ledger)


def by_category(ledger: Ledger, kind: "str | TransactionKind") -> dict[str, Decimal]:
    """Sum amounts per category for transactions of one kind.

    Keys appear in first-encountered order.
    """
    totals: dict[str, Decimal] = {}
    for txn in ledger.of_kind(kind):
        totals[txn.category] = totals.get(txn.category, ZERO) + txn.amount
    return totals


def expenses_by_category(ledger: Ledger) -> dict[str, Decimal]:
    return by_category(ledger, TransactionKind.EXPENSE)


def investments_by_type(ledger: Ledger) -> dict[str, Decimal]:
    return by_category(ledger, TransactionKind.INVESTMENT)


def budget_percentage(ledger: Ledger) -> Decimal:
    """Percentage of the budget spent; 0 when no budget is set. Not capped."""
    if ledger.budget.amount == 0:
        return ZERO
    return HUNDRED * total_spent(ledger) / ledger.budget.amount


def budget_status(ledger: Ledger) -> BudgetStatus:
    """Classify budget usage into OK, WARNING (>= 80%) or OVER (>= 100%)."""
    percentage = budget_percentage(ledger)
    if percentage >= HUNDRED:
        level = BudgetLevel.OVER
    elif percentage >= BUDGET_WARNING_PERCENT:
        level = BudgetLevel.WARNING
    else:
        level = BudgetLevel.OK
    return BudgetStatus(level=level, percentage=percentage, remaining=remaining(ledger))


def top_category(ledger: Ledger) -> tuple[str, Decimal] | None:
    """Expense category with the largest total; ties go to the first seen."""
    best = None
    for category, amount in expenses_by_category(ledger).items():
        if best is None or amount > best[1]:
            best = (category, amount)
    return best


def suggestions(ledger: Ledger) -> list[Suggestion]:
    """Evaluate the spending heuristics in order.

    Each rule fires independently:

    1. Spending above 90% of a non-zero budget.
    2. One expense category above 40% of total spending.
    3. Investments below 20% of spending.
    4. Spending without any investment at all.
    """
    spent = total_spent(ledger)
    invested = total_invested(ledger)
    budget = ledger.budget.amount
    result: list[Suggestion] = []

    if budget > 0 and spent / budget > NEAR_LIMIT_RATIO:
        result.append(Suggestion(SuggestionLevel.WARNING, NEAR_LIMIT_MESSAGE))

    top = top_category(ledger)
    if top is not None and top[1] > spent * TOP_CATEGORY_SHARE:
        result.append(
            Suggestion(SuggestionLevel.INFO, TOP_CATEGORY_MESSAGE.format(category=top[0]))
        )

    if invested < spent * INVESTMENT_TARGET_RATIO:
        result.append(Suggestion(SuggestionLevel.SUCCESS, INCREASE_INVESTMENT_MESSAGE))

    if spent > 0 and invested == 0:
        result.append(Suggestion(SuggestionLevel.INFO, START_INVESTING_MESSAGE))

    return result


def summarize(ledger: Ledger) -> LedgerSummary:
    """Collect the headline figures shown on the dashboard."""
    return LedgerSummary(
        total_budget=ledger.budget.amount,
        total_spent=total_spent(ledger),
        total_invested=total_invested(ledger),
        remaining=remaining(ledger),
        budget_percentage=budget_percentage(ledger),
    )
