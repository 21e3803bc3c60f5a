"""Main CLI entry point."""

import logging
import os

import click
from finledger.database.factories import create_sqlite_store
from finledger.domain.ledger import LedgerStore

# Import and register all commands at module level
from finledger.cli.commands import (
    add,
    transaction,
    budget,
    currency,
    summary,
    categories,
)


def configure_logging(verbose: bool) -> None:
    """Send log records to stderr at the requested level."""
    if verbose:
        level = logging.DEBUG
    else:
        level_name = os.environ.get("FINLEDGER_LOG_LEVEL", "WARNING").upper()
        level = logging.getLevelName(level_name)
        if not isinstance(level, int):
            level = logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logging.getLogger("finledger").setLevel(level)


@click.group()
@click.option(
    "--db-path",
    type=click.Path(),
    help="Path to database file (overrides FINLEDGER_DB_PATH environment variable)",
    envvar="FINLEDGER_DB_PATH",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx, db_path: str | None, verbose: bool):
    """Finledger - Personal expense and investment tracker.

    Log expenses and investments, set a budget and get totals, category
    breakdowns and spending suggestions.
    """
    ctx.ensure_object(dict)
    configure_logging(verbose)

    # Open the store only when actually running a command (not when showing help)
    if ctx.invoked_subcommand is not None:
        store = create_sqlite_store(database_path=db_path)
        store.connect()
        store.initialize_schema()
        ctx.call_on_close(store.disconnect)
        ctx.obj["store"] = store
        ctx.obj["ledger"] = LedgerStore(store)


# Register all commands
add.register_commands(cli)
transaction.register_commands(cli)
budget.register_commands(cli)
currency.register_commands(cli)
summary.register_commands(cli)
categories.register_commands(cli)


def main():
    """Main entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
