"""Shared pytest fixtures for finledger tests."""

import tempfile
import os
from datetime import date, datetime, UTC
from decimal import Decimal
import pytest

from finledger.database.factories import create_sqlite_store
from finledger.domain.entities import BudgetConfig, Ledger, Transaction
from finledger.domain.ledger import LedgerStore


@pytest.fixture
def temp_store():
    """Create a temporary SQLite-backed store for testing."""
    fd, db_path = tempfile.mkstemp(suffix=".db")
    os.close(fd)

    store = create_sqlite_store(database_path=db_path)
    # Store the path for tests that need it
    store.database_path = db_path
    store.connect()
    store.initialize_schema()

    yield store

    store.disconnect()
    if os.path.exists(db_path):
        os.unlink(db_path)


@pytest.fixture
def ledger_store(temp_store):
    """Create a LedgerStore over a temporary store."""
    return LedgerStore(temp_store)


@pytest.fixture
def cli_runner():
    """Create a Click CLI test runner."""
    from click.testing import CliRunner

    return CliRunner()


def make_transaction(
    id=1,
    kind="expense",
    amount="10",
    category="Food & Dining",
    currency="USD",
    description="",
    on=date(2024, 1, 15),
) -> Transaction:
    """Build a Transaction with sensible defaults."""
    return Transaction(
        id=id,
        kind=kind,
        amount=Decimal(amount),
        currency=currency,
        category=category,
        description=description,
        date=on,
        created_at=datetime(2024, 1, 15, 12, 0, tzinfo=UTC),
    )


def make_ledger(*transactions, budget="0", currency="USD") -> Ledger:
    """Build a Ledger snapshot from transactions and a budget amount."""
    return Ledger(
        transactions=tuple(transactions),
        budget=BudgetConfig(amount=Decimal(budget), currency=currency),
    )
