"""Mapper functions to convert between domain entities and stored JSON.

Stored layout (one JSON document per key):

- ``financeTransactions``: array of transaction objects
- ``financeBudgetThreshold``: ``{"amount": number, "currency": string}``
- ``financeMainCurrency``: currency code string
"""

import json
import logging
from datetime import date, datetime
from decimal import Decimal
from typing import Any

from finledger.domain import entities as domain
from finledger.utils.amount_parser import parse_amount

TRANSACTIONS_KEY = "financeTransactions"
BUDGET_KEY = "financeBudgetThreshold"
DISPLAY_CURRENCY_KEY = "financeMainCurrency"

logger = logging.getLogger(__name__)


def _number(amount: Decimal) -> int | float:
    """Return a JSON number for a Decimal amount.

    Exact for anything parse_amount accepts: integers below 1e15 stay ints and
    values of at most 15 significant digits round-trip through a float.
    """
    if amount == amount.to_integral_value():
        return int(amount)
    return float(amount)


def transaction_to_dict(transaction: domain.Transaction) -> dict[str, Any]:
    """Convert a domain Transaction to its stored object."""
    return {
        "id": transaction.id,
        "type": transaction.kind.value,
        "amount": _number(transaction.amount),
        "currency": transaction.currency,
        "category": transaction.category,
        "description": transaction.description,
        "date": transaction.date.isoformat(),
        "timestamp": transaction.created_at.isoformat(),
    }


def transaction_from_dict(data: dict[str, Any]) -> domain.Transaction:
    """Convert a stored object to a domain Transaction.

    Raises:
        KeyError, TypeError, ValueError: If the object is malformed
    """
    return domain.Transaction(
        id=int(data["id"]),
        kind=domain.TransactionKind.parse(data["type"]),
        amount=parse_amount(data["amount"]),
        currency=data.get("currency") or domain.DEFAULT_CURRENCY,
        category=data["category"],
        description=data.get("description") or "",
        date=date.fromisoformat(data["date"]),
        created_at=datetime.fromisoformat(data["timestamp"]),
    )


def budget_to_dict(budget: domain.BudgetConfig) -> dict[str, Any]:
    """Convert a BudgetConfig to its stored object."""
    return {"amount": _number(budget.amount), "currency": budget.currency}


def budget_from_dict(data: dict[str, Any]) -> domain.BudgetConfig:
    """Convert a stored object to a BudgetConfig.

    Raises:
        KeyError, TypeError, ValueError: If the object is malformed
    """
    return domain.BudgetConfig(
        amount=parse_amount(data["amount"]),
        currency=data.get("currency") or domain.DEFAULT_CURRENCY,
    )


def dump_transactions(transactions) -> str:
    """Serialize transactions to the stored JSON array."""
    return json.dumps([transaction_to_dict(txn) for txn in transactions])


def load_transactions(raw: str) -> list[domain.Transaction]:
    """Parse the stored JSON array into transactions.

    Malformed records are logged and skipped so the rest of the ledger
    survives them.

    Raises:
        ValueError: If the document is not valid JSON or not an array
    """
    data = json.loads(raw, parse_float=Decimal)
    if not isinstance(data, list):
        raise ValueError("Stored transactions must be a JSON array")

    transactions = []
    for index, item in enumerate(data):
        try:
            transactions.append(transaction_from_dict(item))
        except (KeyError, TypeError, AttributeError, ValueError) as e:
            logger.warning("Skipping malformed stored transaction at index %d: %s", index, e)
    return transactions


def dump_budget(budget: domain.BudgetConfig) -> str:
    """Serialize a BudgetConfig to the stored JSON object."""
    return json.dumps(budget_to_dict(budget))


def load_budget(raw: str) -> domain.BudgetConfig:
    """Parse the stored JSON object into a BudgetConfig.

    Raises:
        ValueError: If the document is not a well-formed budget object
    """
    data = json.loads(raw, parse_float=Decimal)
    if not isinstance(data, dict):
        raise ValueError("Stored budget must be a JSON object")
    try:
        return budget_from_dict(data)
    except (KeyError, TypeError) as e:
        raise ValueError(f"Malformed stored budget: {e}") from e


def dump_currency(code: str) -> str:
    """Serialize a currency code to a JSON string."""
    return json.dumps(code)


def load_currency(raw: str) -> str:
    """Parse the stored JSON string into a currency code.

    Raises:
        ValueError: If the document is not a supported currency string
    """
    data = json.loads(raw)
    if not isinstance(data, str):
        raise ValueError("Stored currency must be a JSON string")
    return domain.validate_currency(data)
