"""SMS commands: notify customers and suppliers, manage templates."""

import click
from dairyledger.cli.account_resolution import resolve_account_or_exit
from dairyledger.cli.error_handling import handle_domain_error
from dairyledger.domain.account import AccountService
from dairyledger.domain.entities import AccountKind, TemplateType
from dairyledger.domain.messaging import MessagingService
from dairyledger.messaging.factories import create_sms_gateway

AUDIENCES = {
    "customers": AccountKind.CUSTOMER,
    "suppliers": AccountKind.SUPPLIER,
}


@click.group()
def sms_group():
    """Send SMS messages and manage message templates."""
    pass


@sms_group.command("send")
@click.option("--to", "audience", type=click.Choice(list(AUDIENCES)), required=True, help="Who to message")
@click.option(
    "--account",
    "accounts",
    multiple=True,
    help="Only these accounts (code, name or ID); repeat for several. Defaults to all.",
)
@click.option("--message", help="Message text; {name} and {balance} are filled in per account")
@click.option("--template", "template_id", type=int, help="ID of a saved template to send")
@click.pass_context
def send_sms(ctx, audience: str, accounts: tuple[str, ...], message: str | None, template_id: int | None):
    """Send an SMS to customers or suppliers.

    Accounts without a phone number are skipped. The gateway is configured
    with DAIRYLEDGER_SMS_API_KEY and DAIRYLEDGER_SMS_URL.

    Examples:
        dairyledger sms send --to customers --message "Dear {name}, your due is {balance}"
        dairyledger sms send --to suppliers --account SUP001 --template 2
    """
    if (message is None) == (template_id is None):
        click.echo("Error: Provide exactly one of --message or --template", err=True)
        ctx.exit(1)

    db = ctx.obj["db"]
    kind = AUDIENCES[audience]
    account_service = AccountService(db)

    if accounts:
        account_ids = [
            resolve_account_or_exit(ctx, account_service, account, kind=kind) for account in accounts
        ]
    else:
        account_ids = [acc.id for acc in account_service.list_accounts(kind=kind)]

    if not account_ids:
        click.echo(f"No {audience} to message.")
        return

    gateway = create_sms_gateway()
    service = MessagingService(db, gateway)
    try:
        if template_id is not None:
            message = service.get_template(template_id).message
        report = service.send_to_accounts(account_ids, message)
    except ValueError as e:
        handle_domain_error(ctx, e)
        return
    finally:
        gateway.close()

    click.echo(
        f"Sent: {len(report.sent)} | Failed: {len(report.failed)} | "
        f"Skipped (no phone): {len(report.skipped)}"
    )
    for account, error in report.failed:
        click.echo(f"  Failed {account.code} {account.name}: {error}", err=True)
    for account in report.skipped:
        click.echo(f"  Skipped {account.code} {account.name}: no phone number")
    if report.failed:
        ctx.exit(1)


@sms_group.group("template")
def template_group():
    """Manage saved SMS templates."""
    pass


@template_group.command("add")
@click.argument("name")
@click.argument("message")
@click.option(
    "--type",
    "template_type",
    type=click.Choice([t.value for t in TemplateType]),
    default=TemplateType.GENERAL.value,
    show_default=True,
    help="Who the template is meant for",
)
@click.pass_context
def add_template(ctx, name: str, message: str, template_type: str):
    """Save a message template.

    Use {name} and {balance} as placeholders.
    """
    service = MessagingService(ctx.obj["db"])
    try:
        template_id = service.create_template(
            name=name,
            message=message,
            template_type=template_type,
            created_by=ctx.obj.get("user"),
        )
    except ValueError as e:
        handle_domain_error(ctx, e)
        return
    click.echo(f"Created template '{name.strip()}' (ID: {template_id})")


@template_group.command("list")
@click.option("--for", "audience", type=click.Choice(list(AUDIENCES)), help="Templates usable for this audience")
@click.pass_context
def list_templates(ctx, audience: str | None):
    """List saved templates."""
    service = MessagingService(ctx.obj["db"])
    templates = service.list_templates(AUDIENCES[audience] if audience else None)
    if not templates:
        click.echo("No templates found.")
        return

    click.echo("\nTemplates:")
    click.echo("-" * 70)
    for template in templates:
        click.echo(f"ID: {template.id:3d} | {template.name:20s} | {template.template_type.value:8s}")
        click.echo(f"      {template.message}")


@template_group.command("delete")
@click.argument("template_id", type=int)
@click.pass_context
def delete_template(ctx, template_id: int):
    """Delete a saved template."""
    service = MessagingService(ctx.obj["db"])
    try:
        service.delete_template(template_id)
    except ValueError as e:
        handle_domain_error(ctx, e)
        return
    click.echo(f"Deleted template {template_id}")


def register_commands(cli):
    """Register SMS commands with main CLI."""
    cli.add_command(sms_group, name="sms")
