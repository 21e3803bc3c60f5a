"""Tests for JSON mappers between entities and the stored layout."""

import json
import pytest
from datetime import date, datetime, UTC
from decimal import Decimal

from finledger.database import mappers
from finledger.domain.entities import BudgetConfig, TransactionKind

from conftest import make_transaction


class TestTransactionMapper:
    """Tests for transaction mapping."""

    def test_transaction_to_dict(self):
        txn = make_transaction(id=1700000000000, amount="12.5", description="Lunch")
        data = mappers.transaction_to_dict(txn)
        assert data == {
            "id": 1700000000000,
            "type": "expense",
            "amount": 12.5,
            "currency": "USD",
            "category": "Food & Dining",
            "description": "Lunch",
            "date": "2024-01-15",
            "timestamp": "2024-01-15T12:00:00+00:00",
        }

    def test_whole_amounts_are_written_as_integers(self):
        data = mappers.transaction_to_dict(make_transaction(amount="950.00"))
        assert data["amount"] == 950
        assert isinstance(data["amount"], int)

    def test_transaction_from_browser_layout(self):
        """Test reading a record as written by the browser version."""
        raw = json.dumps(
            [
                {
                    "id": 1700000000000,
                    "type": "investment",
                    "amount": 250.75,
                    "currency": "EUR",
                    "category": "Stocks",
                    "description": "Index fund",
                    "date": "2024-03-01",
                    "timestamp": "2024-03-01T09:30:00.000Z",
                }
            ]
        )
        [txn] = mappers.load_transactions(raw)
        assert txn.id == 1700000000000
        assert txn.kind is TransactionKind.INVESTMENT
        assert txn.amount == Decimal("250.75")
        assert txn.currency == "EUR"
        assert txn.date == date(2024, 3, 1)
        assert txn.created_at == datetime(2024, 3, 1, 9, 30, tzinfo=UTC)

    def test_dump_and_load_transactions(self):
        txns = [
            make_transaction(id=1, amount="0.1"),
            make_transaction(id=2, kind="investment", category="ETFs", amount="300"),
        ]
        assert mappers.load_transactions(mappers.dump_transactions(txns)) == txns

    def test_dump_and_load_keeps_fifteen_significant_digits(self):
        txns = [
            make_transaction(id=1, amount="1234567890.12345"),
            make_transaction(id=2, amount="999999999999999"),
            make_transaction(id=3, kind="investment", category="Cryptocurrency",
                             amount="0.000000000000000001"),
        ]
        loaded = mappers.load_transactions(mappers.dump_transactions(txns))
        assert [txn.amount for txn in loaded] == [txn.amount for txn in txns]

    @pytest.mark.parametrize("raw", ["not json", '{"id": 1}', '"[]"'])
    def test_load_transactions_rejects_non_array_documents(self, raw):
        with pytest.raises(ValueError):
            mappers.load_transactions(raw)

    def test_load_transactions_skips_malformed_records(self, caplog):
        """Test that bad records are dropped while good ones are kept."""
        good = mappers.transaction_to_dict(make_transaction(id=1, amount="50"))
        raw = json.dumps(
            [
                good,
                {**good, "id": 2, "amount": None},
                {"id": 3},
                7,
                {**good, "id": 4, "amount": "abc"},
                {**good, "id": 5, "category": "Stocks"},
                {**good, "id": 6, "amount": 1e300},
            ]
        )
        with caplog.at_level("WARNING", logger="finledger"):
            loaded = mappers.load_transactions(raw)

        assert [txn.id for txn in loaded] == [1]
        assert caplog.text.count("Skipping malformed stored transaction") == 6


class TestBudgetMapper:
    """Tests for budget mapping."""

    def test_dump_and_load_budget(self):
        budget = BudgetConfig(amount=Decimal("1000"), currency="GBP")
        raw = mappers.dump_budget(budget)
        assert json.loads(raw) == {"amount": 1000, "currency": "GBP"}
        assert mappers.load_budget(raw) == budget

    @pytest.mark.parametrize("raw", ["[]", '{"currency": "USD"}', '{"amount": -5}', "{"])
    def test_load_budget_rejects_malformed(self, raw):
        with pytest.raises(ValueError):
            mappers.load_budget(raw)


class TestCurrencyMapper:
    """Tests for display currency mapping."""

    def test_dump_and_load_currency(self):
        assert mappers.dump_currency("BTC") == '"BTC"'
        assert mappers.load_currency('"btc"') == "BTC"

    @pytest.mark.parametrize("raw", ["42", '"XYZ"', "nope"])
    def test_load_currency_rejects_malformed(self, raw):
        with pytest.raises(ValueError):
            mappers.load_currency(raw)
