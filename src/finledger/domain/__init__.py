"""Domain layer for finledger application."""

from finledger.domain.ledger import LedgerStore
from finledger.domain import metrics

__all__ = [
    "LedgerStore",
    "metrics",
]
