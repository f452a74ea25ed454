"""Customer and supplier management commands."""

import click
from dairyledger.cli.account_resolution import resolve_account_or_exit
from dairyledger.cli.error_handling import handle_domain_error
from dairyledger.domain.account import AccountService
from dairyledger.domain.entities import AccountKind
from dairyledger.utils.amount_parser import parse_amount
from dairyledger.utils.currency import format_inr


def format_balance(balance) -> str:
    """Show a balance as rupees, marking advances with a minus sign."""
    return format_inr(balance, signed=balance < 0)


def _build_account_group(kind: AccountKind) -> click.Group:
    """Build the add/list/rate/edit/delete group for customers or suppliers."""
    label = kind.value

    @click.group(help=f"Manage {label}s.")
    def group():
        pass

    @group.command("add")
    @click.argument("name")
    @click.option("--rate", help="Milk rate per litre (e.g. 55 or 55.50)")
    @click.option("--phone", help="Phone number used for SMS")
    @click.option("--address", help="Address")
    @click.pass_context
    def add_account(ctx, name: str, rate: str | None, phone: str | None, address: str | None):
        """Add a new account.

        A code such as CUST001 or SUP001 is assigned automatically.
        """
        service = AccountService(ctx.obj["db"])
        try:
            milk_rate = parse_amount(rate) if rate is not None else parse_amount("0")
            account_id = service.create_account(
                kind=kind,
                name=name,
                milk_rate=milk_rate,
                phone=phone,
                address=address,
                created_by=ctx.obj.get("user"),
            )
        except ValueError as e:
            handle_domain_error(ctx, e)
            return
        account = service.get_account(account_id)
        click.echo(f"Created {label} '{account.name}' ({account.code}, ID: {account_id})")

    @group.command("list")
    @click.pass_context
    def list_accounts(ctx):
        """List accounts with their rates and balances."""
        service = AccountService(ctx.obj["db"])
        accounts = service.list_accounts(kind=kind)
        if not accounts:
            click.echo(f"No {label}s found.")
            return

        click.echo(f"\n{label.capitalize()}s:")
        click.echo("-" * 80)
        for acc in accounts:
            phone = acc.phone or "-"
            click.echo(
                f"ID: {acc.id:3d} | {acc.code:8s} | {acc.name:20s} | {phone:14s} | "
                f"Rate: {format_inr(acc.milk_rate):>8s} | Balance: {format_balance(acc.balance):>12s}"
            )

    @group.command("rate")
    @click.argument("account", metavar="ACCOUNT")
    @click.argument("rate")
    @click.pass_context
    def update_rate(ctx, account: str, rate: str):
        """Change the milk rate of an account.

        ACCOUNT can be an account code, name or ID.
        """
        service = AccountService(ctx.obj["db"])
        account_id = resolve_account_or_exit(ctx, service, account, kind=kind)
        try:
            milk_rate = parse_amount(rate)
            service.update_rate(account_id, milk_rate)
        except ValueError as e:
            handle_domain_error(ctx, e)
            return
        account_obj = service.get_account(account_id)
        click.echo(f"Updated rate for '{account_obj.name}' to {format_inr(milk_rate)}")

    @group.command("edit")
    @click.argument("account", metavar="ACCOUNT")
    @click.option("--name", help="New name")
    @click.option("--phone", help="New phone number")
    @click.option("--address", help="New address")
    @click.pass_context
    def edit_account(ctx, account: str, name: str | None, phone: str | None, address: str | None):
        """Update name, phone or address of an account."""
        service = AccountService(ctx.obj["db"])
        account_id = resolve_account_or_exit(ctx, service, account, kind=kind)
        if name is None and phone is None and address is None:
            click.echo("Error: Nothing to update. Use --name, --phone or --address.", err=True)
            ctx.exit(1)
        try:
            service.update_contact(account_id, name=name, phone=phone, address=address)
        except ValueError as e:
            handle_domain_error(ctx, e)
            return
        click.echo(f"Updated {label} {account_id}")

    @group.command("delete")
    @click.argument("account", metavar="ACCOUNT")
    @click.option("--reason", required=True, help="Why the account is being deleted")
    @click.option("--yes", "-y", is_flag=True, help="Do not ask for confirmation")
    @click.pass_context
    def delete_account(ctx, account: str, reason: str, yes: bool):
        """Delete an account.

        The account can only be deleted if it has no entries. A copy is kept
        in the deleted records.
        """
        service = AccountService(ctx.obj["db"])
        account_id = resolve_account_or_exit(ctx, service, account, kind=kind)
        account_obj = service.get_account(account_id)

        if not yes and not click.confirm(
            f"Are you sure you want to delete {label} '{account_obj.name}' ({account_obj.code})?"
        ):
            click.echo("Deletion cancelled.")
            return

        try:
            service.delete_account(account_id, reason=reason, deleted_by=ctx.obj.get("user"))
        except ValueError as e:
            handle_domain_error(ctx, e)
            return
        click.echo(f"Deleted {label} '{account_obj.name}'")

    return group


customer_group = _build_account_group(AccountKind.CUSTOMER)
supplier_group = _build_account_group(AccountKind.SUPPLIER)


def register_commands(cli):
    """Register customer and supplier commands with main CLI."""
    cli.add_command(customer_group, name="customer")
    cli.add_command(supplier_group, name="supplier")
