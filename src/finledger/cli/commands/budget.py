"""Budget threshold commands."""

import click
from finledger.cli.error_handling import handle_domain_error
from finledger.domain import metrics
from finledger.domain.entities import currency_codes
from finledger.utils.formatting import format_amount, format_percentage


@click.group()
def budget_group():
    """Manage the budget threshold."""
    pass


@budget_group.command("show")
@click.pass_context
def show_budget(ctx) -> None:
    """Show the budget threshold and how much of it is used."""
    ledger = ctx.obj["ledger"].snapshot()
    status = metrics.budget_status(ledger)
    # Same labelling as the summary command
    currency = ledger.display_currency

    click.echo(f"Budget: {format_amount(ledger.budget.amount, currency)}")
    click.echo(f"Spent: {format_amount(metrics.total_spent(ledger), currency)}")
    click.echo(f"Used: {format_percentage(status.percentage)}")


@budget_group.command("set")
@click.argument("amount")
@click.option(
    "--currency",
    type=click.Choice(currency_codes(), case_sensitive=False),
    default="USD",
    show_default=True,
    help="Currency code",
)
@click.pass_context
def set_budget(ctx, amount: str, currency: str) -> None:
    """Set the budget threshold."""
    ledger = ctx.obj["ledger"]
    try:
        budget = ledger.set_budget(amount, currency)
    except ValueError as e:
        handle_domain_error(ctx, e)
        return
    click.echo(f"Budget set to {format_amount(budget.amount, budget.currency)}")


@budget_group.command("reset")
@click.pass_context
def reset_budget(ctx) -> None:
    """Reset the budget threshold to zero."""
    ctx.obj["ledger"].reset_budget()
    click.echo("Budget reset")


def register_commands(cli):
    """Register budget commands with main CLI."""
    cli.add_command(budget_group, name="budget")
