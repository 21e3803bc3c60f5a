"""Add transaction command."""

import click
from finledger.cli.error_handling import handle_domain_error
from finledger.domain.entities import currency_codes
from finledger.utils.date_parser import parse_date
from finledger.utils.formatting import format_amount


@click.command("add")
@click.option(
    "--type",
    "kind",
    type=click.Choice(["expense", "investment"], case_sensitive=False),
    default="expense",
    show_default=True,
    help="Transaction type",
)
@click.option("--amount", required=True, help="Transaction amount (e.g., 123.45 or $1,234.56)")
@click.option(
    "--category",
    required=True,
    help="Category (e.g., 'Food & Dining' or 'Stocks'); see 'finledger categories'",
)
@click.option(
    "--currency",
    type=click.Choice(currency_codes(), case_sensitive=False),
    default="USD",
    show_default=True,
    help="Currency code",
)
@click.option("--description", default="", help="Transaction description")
@click.option(
    "--date",
    help="Transaction date (YYYY-MM-DD or relative like 'today', 'yesterday'); defaults to today",
)
@click.pass_context
def add_transaction(
    ctx,
    kind: str,
    amount: str,
    category: str,
    currency: str,
    description: str,
    date: str | None,
):
    """Add an expense or investment.

    Examples:
        finledger add --amount 42.50 --category "Food & Dining" --description "Groceries"
        finledger add --type investment --amount 500 --category Stocks --date yesterday
    """
    ledger = ctx.obj["ledger"]

    txn_date = None
    if date:
        try:
            txn_date = parse_date(date)
        except ValueError as e:
            click.echo(f"Error: Invalid date format: {e}", err=True)
            ctx.exit(1)

    try:
        transaction = ledger.add(
            kind=kind,
            amount=amount,
            currency=currency,
            category=category,
            description=description,
            date=txn_date,
        )
    except ValueError as e:
        handle_domain_error(ctx, e)
        return

    click.echo(f"Created {transaction.kind.value} {transaction.id}")
    click.echo(f"  Date: {transaction.date}")
    click.echo(f"  Amount: {format_amount(transaction.amount, transaction.currency)}")
    click.echo(f"  Category: {transaction.category}")
    if transaction.description:
        click.echo(f"  Description: {transaction.description}")


def register_commands(cli):
    """Register add command with main CLI."""
    cli.add_command(add_transaction)
