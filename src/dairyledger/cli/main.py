"""Main CLI entry point."""

import logging

import click
from dairyledger.database.factories import create_sqlite_database

# Import and register all commands at module level
from dairyledger.cli.commands import (
    account,
    entry,
    ledger,
    report,
    deleted,
    settings,
    sms,
)


@click.group()
@click.option(
    "--db-path",
    type=click.Path(),
    help="Path to database file (overrides DAIRYLEDGER_DB_PATH environment variable)",
    envvar="DAIRYLEDGER_DB_PATH",
)
@click.option(
    "--user",
    help="Name recorded as the author of changes (or DAIRYLEDGER_USER)",
    envvar="DAIRYLEDGER_USER",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx, db_path: str | None, user: str | None, verbose: bool):
    """Dairyledger - Milk dairy ledger.

    Record milk bought from suppliers and sold to customers, track payments,
    and view period-wise ledgers and balances.
    """
    ctx.ensure_object(dict)
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        )
    ctx.obj["user"] = user

    # Initialize database connection only when actually running a command
    # (not when showing help)
    if ctx.invoked_subcommand is not None:
        db = create_sqlite_database(database_path=db_path)
        db.connect()
        db.initialize_schema()
        ctx.obj["db"] = db
        ctx.call_on_close(db.disconnect)


# Register all commands
account.register_commands(cli)
entry.register_commands(cli)
ledger.register_commands(cli)
report.register_commands(cli)
deleted.register_commands(cli)
settings.register_commands(cli)
sms.register_commands(cli)


def main():
    """Main entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
