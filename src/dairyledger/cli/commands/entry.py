"""Purchase, sale, credit and debit entry commands."""

from datetime import date, datetime

import click
from dairyledger.cli.account_resolution import resolve_account_or_exit
from dairyledger.cli.error_handling import handle_domain_error
from dairyledger.domain.account import AccountService
from dairyledger.domain.entities import AccountKind, EntryKind
from dairyledger.domain.entry import EntryService
from dairyledger.utils.amount_parser import parse_amount
from dairyledger.utils.currency import format_inr, format_quantity
from dairyledger.utils.date_parser import get_day_bounds, parse_date


def _entry_time(ctx: click.Context, date_str: str | None) -> datetime | None:
    """Turn a --date option into an entry timestamp (None means now)."""
    if date_str is None:
        return None
    try:
        day = parse_date(date_str)
    except ValueError as e:
        click.echo(f"Error: Invalid date format: {e}", err=True)
        ctx.exit(1)
    if day == date.today():
        return None
    return datetime.combine(day, datetime.now().time())


def _record_milk(ctx, kind: EntryKind, account: str, quantity: str, rate, note, date_str):
    db = ctx.obj["db"]
    account_service = AccountService(db)
    entry_service = EntryService(db)

    account_kind = AccountKind.SUPPLIER if kind == EntryKind.PURCHASE else AccountKind.CUSTOMER
    account_id = resolve_account_or_exit(ctx, account_service, account, kind=account_kind)
    created_at = _entry_time(ctx, date_str)

    try:
        entry_id = entry_service.record_entry(
            account_id,
            kind,
            quantity=parse_amount(quantity),
            rate=parse_amount(rate) if rate is not None else None,
            note=note,
            created_at=created_at,
            created_by=ctx.obj.get("user"),
        )
    except ValueError as e:
        handle_domain_error(ctx, e)
        return

    entry = entry_service.get_entry(entry_id)
    account_obj = account_service.get_account(account_id)
    click.echo(
        f"Recorded {kind.value} {entry_id}: {format_quantity(entry.quantity)} x "
        f"{format_inr(entry.rate)} = {format_inr(entry.amount)} ({account_obj.name})"
    )


def _record_payment(ctx, kind: EntryKind, account: str, amount: str, note, date_str):
    db = ctx.obj["db"]
    account_service = AccountService(db)
    entry_service = EntryService(db)

    account_id = resolve_account_or_exit(ctx, account_service, account)
    created_at = _entry_time(ctx, date_str)

    try:
        entry_id = entry_service.record_entry(
            account_id,
            kind,
            amount=parse_amount(amount),
            note=note,
            created_at=created_at,
            created_by=ctx.obj.get("user"),
        )
    except ValueError as e:
        handle_domain_error(ctx, e)
        return

    entry = entry_service.get_entry(entry_id)
    account_obj = account_service.get_account(account_id)
    click.echo(f"Recorded {kind.value} {entry_id}: {format_inr(entry.amount)} ({account_obj.name})")


@click.command("purchase")
@click.argument("supplier", metavar="SUPPLIER")
@click.argument("quantity")
@click.option("--rate", help="Rate per litre (defaults to the supplier's rate)")
@click.option("--note", help="Optional note")
@click.option("--date", "date_str", help="Entry date (YYYY-MM-DD or 'yesterday'); defaults to now")
@click.pass_context
def purchase(ctx, supplier: str, quantity: str, rate: str | None, note: str | None, date_str: str | None):
    """Record milk bought from a supplier.

    SUPPLIER can be a supplier code, name or ID. QUANTITY is in litres.

    Examples:
        dairyledger purchase SUP001 12.5
        dairyledger purchase "Ramesh" 10 --rate 48
    """
    _record_milk(ctx, EntryKind.PURCHASE, supplier, quantity, rate, note, date_str)


@click.command("sale")
@click.argument("customer", metavar="CUSTOMER")
@click.argument("quantity")
@click.option("--rate", help="Rate per litre (defaults to the customer's rate)")
@click.option("--note", help="Optional note")
@click.option("--date", "date_str", help="Entry date (YYYY-MM-DD or 'yesterday'); defaults to now")
@click.pass_context
def sale(ctx, customer: str, quantity: str, rate: str | None, note: str | None, date_str: str | None):
    """Record milk sold to a customer.

    CUSTOMER can be a customer code, name or ID. QUANTITY is in litres.
    """
    _record_milk(ctx, EntryKind.SALE, customer, quantity, rate, note, date_str)


@click.command("credit")
@click.argument("account", metavar="ACCOUNT")
@click.argument("amount")
@click.option("--note", help="Optional note")
@click.option("--date", "date_str", help="Entry date; defaults to now")
@click.pass_context
def credit(ctx, account: str, amount: str, note: str | None, date_str: str | None):
    """Record a payment received from a customer or supplier."""
    _record_payment(ctx, EntryKind.CREDIT, account, amount, note, date_str)


@click.command("debit")
@click.argument("account", metavar="ACCOUNT")
@click.argument("amount")
@click.option("--note", help="Optional note")
@click.option("--date", "date_str", help="Entry date; defaults to now")
@click.pass_context
def debit(ctx, account: str, amount: str, note: str | None, date_str: str | None):
    """Record a payment or advance paid to a customer or supplier."""
    _record_payment(ctx, EntryKind.DEBIT, account, amount, note, date_str)


@click.group()
def entry_group():
    """View and delete entries."""
    pass


@entry_group.command("list")
@click.option("--date", "date_str", help="Day to list (defaults to today)")
@click.option(
    "--kind",
    type=click.Choice([k.value for k in EntryKind if k != EntryKind.UNKNOWN]),
    help="Only entries of this kind",
)
@click.option("--account", help="Only entries of this account (code, name or ID)")
@click.pass_context
def list_entries(ctx, date_str: str | None, kind: str | None, account: str | None):
    """List the entries recorded on a day."""
    db = ctx.obj["db"]
    entry_service = EntryService(db)
    account_service = AccountService(db)

    day = date.today()
    if date_str:
        try:
            day = parse_date(date_str)
        except ValueError as e:
            click.echo(f"Error: Invalid date format: {e}", err=True)
            ctx.exit(1)

    if account:
        account_id = resolve_account_or_exit(ctx, account_service, account)
        start, end = get_day_bounds(day)
        entries = entry_service.list_account_entries(account_id, start=start, end=end)
        if kind:
            entries = [e for e in entries if e.kind == EntryKind.parse(kind)]
    else:
        entries = entry_service.list_entries_for_day(day, kind=kind)

    if not entries:
        click.echo(f"No entries found for {day.isoformat()}.")
        return

    accounts = {acc.id: acc for acc in account_service.list_accounts()}

    click.echo(f"\nEntries for {day.isoformat()}:")
    click.echo("-" * 90)
    for entry in entries:
        acc = accounts.get(entry.account_id)
        who = f"{acc.code} {acc.name}" if acc else f"Account {entry.account_id}"
        if entry.kind.is_milk:
            detail = f"{format_quantity(entry.quantity)} @ {format_inr(entry.rate)}"
        else:
            detail = ""
        click.echo(
            f"ID: {entry.id:4d} | {entry.created_at:%H:%M} | {who:24s} | "
            f"{entry.kind.value:8s} | {detail:18s} | {format_inr(entry.amount):>10s}"
        )
        if entry.note:
            click.echo(f"      Note: {entry.note}")


@entry_group.command("delete")
@click.argument("entry_id", type=int)
@click.option("--reason", required=True, help="Why the entry is being deleted")
@click.option("--yes", "-y", is_flag=True, help="Do not ask for confirmation")
@click.pass_context
def delete_entry(ctx, entry_id: int, reason: str, yes: bool):
    """Delete an entry and reverse its effect on the account balance.

    A copy of the entry is kept in the deleted records.
    """
    entry_service = EntryService(ctx.obj["db"])
    entry = entry_service.get_entry(entry_id)
    if entry is None:
        click.echo(f"Error: Entry {entry_id} not found", err=True)
        ctx.exit(1)

    if not yes and not click.confirm(
        f"Delete {entry.kind.value} {entry_id} of {format_inr(entry.amount)}?"
    ):
        click.echo("Deletion cancelled.")
        return

    try:
        entry_service.delete_entry(entry_id, reason=reason, deleted_by=ctx.obj.get("user"))
    except ValueError as e:
        handle_domain_error(ctx, e)
        return
    click.echo(f"Deleted entry {entry_id}")


def register_commands(cli):
    """Register entry commands with main CLI."""
    cli.add_command(purchase)
    cli.add_command(sale)
    cli.add_command(credit)
    cli.add_command(debit)
    cli.add_command(entry_group, name="entry")
