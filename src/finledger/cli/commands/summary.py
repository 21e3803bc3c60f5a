"""Summary command."""

import click
from finledger.domain import metrics
from finledger.domain.entities import Ledger, TransactionKind
from finledger.utils.formatting import format_amount, format_percentage

HEALTHY_MESSAGE = "Great job! Your finances look healthy."

SUGGESTION_PREFIX = {
    metrics.SuggestionLevel.WARNING: "[!]",
    metrics.SuggestionLevel.INFO: "[i]",
    metrics.SuggestionLevel.SUCCESS: "[+]",
}


def _budget_line(ledger: Ledger) -> str:
    """Describe budget health the way the progress bar does."""
    status = metrics.budget_status(ledger)
    currency = ledger.display_currency
    if status.level is metrics.BudgetLevel.OVER:
        return f"Over budget by {format_amount(-status.remaining, currency)}"
    if status.level is metrics.BudgetLevel.WARNING:
        return f"Warning: {format_amount(status.remaining, currency)} remaining"
    return f"{format_amount(status.remaining, currency)} remaining"


def _display_breakdown(title: str, totals: dict, currency: str) -> None:
    """Print category totals, largest first, with their share of the whole."""
    click.echo(title)
    if not totals:
        click.echo("  (none)")
        return
    grand_total = sum(totals.values())
    for category, amount in sorted(totals.items(), key=lambda item: (-item[1], item[0])):
        share = amount * 100 / grand_total if grand_total else 0
        click.echo(
            f"  {category:<25} {format_amount(amount, currency):>16} "
            f"{format_percentage(share):>7}"
        )


@click.command("summary")
@click.pass_context
def summary(ctx) -> None:
    """Show totals, budget status, category breakdowns and suggestions."""
    ledger = ctx.obj["ledger"].snapshot()
    figures = metrics.summarize(ledger)
    currency = ledger.display_currency

    click.echo(f"Total Budget:   {format_amount(figures.total_budget, currency)}")
    click.echo(f"Total Spent:    {format_amount(figures.total_spent, currency)}")
    click.echo(f"Total Invested: {format_amount(figures.total_invested, currency)}")
    click.echo(f"Remaining:      {format_amount(figures.remaining, currency)}")
    click.echo()

    if figures.total_budget > 0:
        percentage = min(figures.budget_percentage, metrics.HUNDRED)
        click.echo(f"Budget used: {format_percentage(percentage)} - {_budget_line(ledger)}")
        click.echo()

    _display_breakdown(
        "Expenses by category:",
        metrics.by_category(ledger, TransactionKind.EXPENSE),
        currency,
    )
    click.echo()
    _display_breakdown(
        "Investments by type:",
        metrics.by_category(ledger, TransactionKind.INVESTMENT),
        currency,
    )
    click.echo()

    click.echo("Suggestions:")
    advice = metrics.suggestions(ledger)
    if not advice:
        click.echo(f"  {HEALTHY_MESSAGE}")
    for suggestion in advice:
        click.echo(f"  {SUGGESTION_PREFIX[suggestion.level]} {suggestion.message}")


def register_commands(cli):
    """Register summary command with main CLI."""
    cli.add_command(summary)
