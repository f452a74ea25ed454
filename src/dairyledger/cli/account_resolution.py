"""CLI helpers for account resolution."""

from __future__ import annotations

from typing import Optional

import click
from dairyledger.domain.account import AccountService
from dairyledger.domain.entities import AccountKind
from dairyledger.utils.account_resolver import resolve_account


def resolve_account_or_exit(
    ctx: click.Context,
    account_service: AccountService,
    account: str | int,
    kind: Optional[AccountKind] = None,
) -> int:
    """Resolve account code, name or ID, or exit with a CLI error.

    This keeps error messaging and exit behavior consistent across commands.
    """
    try:
        return resolve_account(account_service, account, kind=kind)
    except ValueError as exc:
        click.echo(f"Error: {exc}", err=True)
        ctx.exit(1)
