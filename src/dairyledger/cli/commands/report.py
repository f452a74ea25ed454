"""Daily and balance report commands."""

import click
from datetime import date
from dairyledger.domain.ledger import LedgerService
from dairyledger.utils.currency import format_inr
from dairyledger.utils.date_parser import parse_date


@click.group()
def report_group():
    """Show summary reports."""
    pass


@report_group.command("daily")
@click.option("--date", "date_str", help="Day to summarize (defaults to today)")
@click.pass_context
def daily_report(ctx, date_str: str | None):
    """Total purchases, sales, credits and debits of a day."""
    day = date.today()
    if date_str:
        try:
            day = parse_date(date_str)
        except ValueError as e:
            click.echo(f"Error: Invalid date format: {e}", err=True)
            ctx.exit(1)

    summary = LedgerService(ctx.obj["db"]).daily_summary(day)

    click.echo(f"\nSummary for {day.isoformat()} ({summary.entry_count} entries)")
    click.echo("-" * 40)
    click.echo(f"{'Purchases':<20} {format_inr(summary.total_purchase):>18}")
    click.echo(f"{'Sales':<20} {format_inr(summary.total_sales):>18}")
    click.echo(f"{'Credits':<20} {format_inr(summary.total_credit):>18}")
    click.echo(f"{'Debits':<20} {format_inr(summary.total_debit):>18}")
    click.echo("-" * 40)
    net = summary.net_amount
    click.echo(f"{'Net':<20} {format_inr(net, signed=net != 0):>18}")


@report_group.command("balances")
@click.pass_context
def balance_report(ctx):
    """Total outstanding receivables and payables."""
    report = LedgerService(ctx.obj["db"]).balance_report()

    click.echo("\nOutstanding balances")
    click.echo("-" * 50)
    click.echo(
        f"{'To receive from customers':<28} {format_inr(report.total_receivable):>12} "
        f"({report.receivable_count})"
    )
    click.echo(
        f"{'To pay to suppliers':<28} {format_inr(report.total_payable):>12} "
        f"({report.payable_count})"
    )


def register_commands(cli):
    """Register report commands with main CLI."""
    cli.add_command(report_group, name="report")
