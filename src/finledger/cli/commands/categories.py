"""Category listing command."""

import click
from finledger.domain.entities import TransactionKind, categories_for


@click.command("categories")
@click.option(
    "--type",
    "kind",
    type=click.Choice(["expense", "investment"], case_sensitive=False),
    help="Only show categories for one transaction type",
)
def list_categories(kind: str | None) -> None:
    """List the categories available for each transaction type."""
    kinds = [TransactionKind.parse(kind)] if kind else list(TransactionKind)
    for index, current in enumerate(kinds):
        if index > 0:
            click.echo()
        click.echo(f"{current.value.capitalize()} categories:")
        for name in categories_for(current):
            click.echo(f"  {name}")


def register_commands(cli):
    """Register categories command with main CLI."""
    cli.add_command(list_categories)
