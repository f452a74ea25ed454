"""Settings commands."""

import click
from dairyledger.cli.error_handling import handle_domain_error
from dairyledger.domain.settings import RATE_KEYS, SettingsService


@click.group()
def settings_group():
    """View and change settings such as default milk rates."""
    pass


@settings_group.command("show")
@click.pass_context
def show_settings(ctx):
    """Show all settings, including unset default rates."""
    service = SettingsService(ctx.obj["db"])
    stored = {setting.key: setting for setting in service.list_settings()}

    click.echo("\nSettings:")
    click.echo("-" * 70)
    for key, description in RATE_KEYS.items():
        if key not in stored:
            click.echo(f"{key:24s} = {'(not set)':12s} {description}")
    for key, setting in stored.items():
        description = setting.description or ""
        click.echo(f"{key:24s} = {setting.value:12s} {description}")


@settings_group.command("set")
@click.argument("key")
@click.argument("value")
@click.pass_context
def set_setting(ctx, key: str, value: str):
    """Set a setting.

    Examples:
        dairyledger settings set default_purchase_rate 48
        dairyledger settings set default_sale_rate 56.50
    """
    service = SettingsService(ctx.obj["db"])
    try:
        service.set(key, value, updated_by=ctx.obj.get("user"))
    except ValueError as e:
        handle_domain_error(ctx, e)
        return
    click.echo(f"Set {key} = {service.get(key.strip())}")


def register_commands(cli):
    """Register settings commands with main CLI."""
    cli.add_command(settings_group, name="settings")
