"""Ledger command: period-wise statement of one account."""

import click
from dairyledger.cli.account_resolution import resolve_account_or_exit
from dairyledger.cli.commands.account import format_balance
from dairyledger.cli.error_handling import handle_domain_error
from dairyledger.domain.account import AccountService
from dairyledger.domain.entities import PeriodStatement
from dairyledger.domain.ledger import LedgerService
from dairyledger.utils.currency import format_inr, format_quantity
from dairyledger.utils.date_parser import parse_month, recent_months

ROW_FORMAT = "{:>5} {:<10} {:>5} {:<9} {:>9} {:>7} {:>11} {:>10} {:>10} {:>12}"


def _display_period(statement: PeriodStatement) -> None:
    summary = statement.summary
    click.echo(f"\n{summary.period.label}")
    click.echo("=" * 97)
    if not statement.rows:
        click.echo("No entries.")
        return

    click.echo(
        ROW_FORMAT.format(
            "S.No", "Date", "ID", "Type", "Qty", "Rate", "Amount", "Credit", "Debit", "Total"
        )
    )
    click.echo("-" * 97)
    for row in statement.rows:
        entry = row.entry
        milk = entry.kind.is_milk
        click.echo(
            ROW_FORMAT.format(
                row.sequence,
                entry.created_at.strftime("%d-%m-%Y"),
                entry.id,
                entry.kind.value,
                format_quantity(row.quantity) if milk else "",
                format_inr(row.rate) if milk else "",
                format_inr(entry.amount) if milk else "",
                format_inr(row.credit) if row.credit else "",
                format_inr(row.debit) if row.debit else "",
                format_inr(row.running_total, signed=row.running_total < 0),
            )
        )

    click.echo("-" * 97)
    click.echo(
        f"Milk: {format_quantity(summary.total_quantity)} for {format_inr(summary.total_amount)} | "
        f"Credit: {format_inr(summary.credit_amount)} | Debit: {format_inr(summary.debit_amount)}"
    )


@click.command("ledger")
@click.argument("account", metavar="ACCOUNT", required=False)
@click.option("--month", help="Month to show (e.g. 2025-03, 'March 2025', 'last month'); defaults to this month")
@click.option("--list-months", is_flag=True, help="List the recent months that can be shown")
@click.pass_context
def ledger(ctx, account: str | None, month: str | None, list_months: bool):
    """Show the ledger of a customer or supplier for a month.

    Customers get one period for the whole month. Suppliers get three:
    1st-10th, 11th-20th and 21st to month end. The Total column is a
    running total that starts at zero within each period; the current
    balance is shown at the end.

    ACCOUNT can be an account code, name or ID.

    Examples:
        dairyledger ledger CUST001
        dairyledger ledger SUP002 --month 2025-02
    """
    if list_months:
        for first_day in recent_months():
            click.echo(f"{first_day:%Y-%m}  {first_day:%B %Y}")
        return

    if account is None:
        click.echo("Error: Missing argument 'ACCOUNT'.", err=True)
        ctx.exit(2)

    db = ctx.obj["db"]
    account_id = resolve_account_or_exit(ctx, AccountService(db), account)

    month_date = None
    if month:
        try:
            month_date = parse_month(month)
        except ValueError as e:
            click.echo(f"Error: Invalid month: {e}", err=True)
            ctx.exit(1)

    try:
        statement = LedgerService(db).monthly_statement(account_id, month_date)
    except ValueError as e:
        handle_domain_error(ctx, e)
        return

    acc = statement.account
    click.echo(
        f"Ledger for {acc.name} ({acc.code}, {acc.kind.value}): "
        f"{statement.month_start:%d %b %Y} to {statement.month_end:%d %b %Y}"
    )
    for period in statement.periods:
        _display_period(period)

    click.echo(f"\nCurrent balance: {format_balance(acc.balance)}")


def register_commands(cli):
    """Register ledger command with main CLI."""
    cli.add_command(ledger)
