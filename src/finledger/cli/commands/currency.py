"""Display currency command."""

import click
from finledger.domain.entities import currency_codes


@click.command("currency")
@click.argument(
    "code",
    required=False,
    type=click.Choice(currency_codes(), case_sensitive=False),
)
@click.pass_context
def display_currency(ctx, code: str | None) -> None:
    """Show or set the display currency."""
    ledger = ctx.obj["ledger"]
    if code is None:
        click.echo(f"Display currency: {ledger.display_currency}")
        return
    click.echo(f"Display currency set to {ledger.set_display_currency(code)}")


def register_commands(cli):
    """Register currency command with main CLI."""
    cli.add_command(display_currency)
