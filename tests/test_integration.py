"""Integration tests for end-to-end workflows."""

from decimal import Decimal

from finledger.cli.main import cli
from finledger.domain import metrics
from finledger.domain.ledger import LedgerStore


def test_full_workflow(cli_runner, temp_store):
    """Test complete workflow: budget → add → list → delete → summary."""
    db = ["--db-path", temp_store.database_path]

    result = cli_runner.invoke(cli, [*db, "budget", "set", "2000"])
    assert result.exit_code == 0

    entries = [
        ["add", "--amount", "800", "--category", "Housing", "--description", "Rent"],
        ["add", "--amount", "120.40", "--category", "Food & Dining", "--date", "yesterday"],
        ["add", "--type", "investment", "--amount", "300", "--category", "ETFs"],
        ["add", "--amount", "60", "--category", "Entertainment", "--description", "Concert"],
    ]
    for args in entries:
        result = cli_runner.invoke(cli, [*db, *args])
        assert result.exit_code == 0, result.output

    ledger = LedgerStore(temp_store)
    concert = next(txn for txn in ledger.transactions if txn.description == "Concert")

    result = cli_runner.invoke(cli, [*db, "list"])
    assert result.exit_code == 0
    assert "Rent" in result.output
    assert "Concert" in result.output

    result = cli_runner.invoke(cli, [*db, "delete", str(concert.id)])
    assert result.exit_code == 0

    snapshot = LedgerStore(temp_store).snapshot()
    assert metrics.total_spent(snapshot) == Decimal("920.40")
    assert "Entertainment" not in metrics.expenses_by_category(snapshot)

    result = cli_runner.invoke(cli, [*db, "summary"])
    assert result.exit_code == 0
    assert "Total Budget:   $2,000.00" in result.output
    assert "Total Spent:    $920.40" in result.output
    assert "Total Invested: $300.00" in result.output
    assert "Remaining:      $1,079.60" in result.output
    assert "Housing is your highest expense category." in result.output
    assert "Great job" not in result.output
