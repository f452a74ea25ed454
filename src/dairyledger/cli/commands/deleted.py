"""Commands for browsing audit copies of deleted records."""

import json

import click
from dairyledger.domain.entry import EntryService


@click.group()
def deleted_group():
    """View deleted records."""
    pass


@deleted_group.command("list")
@click.option(
    "--table",
    "table_name",
    type=click.Choice(["accounts", "entries"]),
    help="Only records deleted from this table",
)
@click.option("--verbose", "-v", is_flag=True, help="Show the saved copy of each record")
@click.pass_context
def list_deleted(ctx, table_name: str | None, verbose: bool):
    """List deleted entries and accounts, newest first."""
    records = EntryService(ctx.obj["db"]).list_deleted_records(table_name=table_name)
    if not records:
        click.echo("No deleted records found.")
        return

    click.echo(f"\nFound {len(records)} deleted record(s):")
    click.echo("-" * 90)
    for record in records:
        by = f" by {record.deleted_by}" if record.deleted_by else ""
        click.echo(
            f"{record.deleted_at:%Y-%m-%d %H:%M} | {record.table_name:8s} | "
            f"ID: {record.record_id:4d} | Reason: {record.deletion_reason}{by}"
        )
        if verbose:
            click.echo(f"      {json.dumps(record.record_data, sort_keys=True)}")


def register_commands(cli):
    """Register deleted-record commands with main CLI."""
    cli.add_command(deleted_group, name="deleted")
