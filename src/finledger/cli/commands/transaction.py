"""Transaction listing and removal commands."""

import click
from finledger.domain.entities import TransactionKind
from finledger.utils.formatting import format_amount


@click.command("delete")
@click.argument("transaction_id", type=int)
@click.pass_context
def delete_transaction(ctx, transaction_id: int) -> None:
    """Delete a transaction by ID.

    Deleting an ID that does not exist changes nothing.
    """
    ledger = ctx.obj["ledger"]
    if ledger.remove(transaction_id):
        click.echo(f"Deleted transaction {transaction_id}")
    else:
        click.echo(f"Transaction {transaction_id} not found, nothing deleted")


@click.command("list")
@click.option(
    "--type",
    "kind",
    type=click.Choice(["expense", "investment"], case_sensitive=False),
    help="Only show one transaction type",
)
@click.option("--limit", type=int, default=5, show_default=True, help="Transactions per type")
@click.pass_context
def list_transactions(ctx, kind: str | None, limit: int) -> None:
    """Show the most recent transactions, newest first."""
    ledger = ctx.obj["ledger"]
    kinds = [TransactionKind.parse(kind)] if kind else list(TransactionKind)

    for index, current in enumerate(kinds):
        if index > 0:
            click.echo()
        label = "Expenses" if current is TransactionKind.EXPENSE else "Investments"
        click.echo(f"Recent {label}:")
        transactions = ledger.recent(current, limit=limit)
        if not transactions:
            click.echo(f"  No {current.value}s recorded yet.")
            continue
        for txn in transactions:
            amount_str = format_amount(txn.amount, txn.currency)
            click.echo(
                f"  {txn.id:<14} {txn.date}  {txn.category:<20} "
                f"{amount_str:>16}  {txn.description}"
            )


def register_commands(cli):
    """Register transaction commands with main CLI."""
    cli.add_command(delete_transaction)
    cli.add_command(list_transactions)
