"""Utility for resolving account codes and names to IDs."""

from typing import Optional

from dairyledger.domain.account import AccountService
from dairyledger.domain.entities import AccountKind
from dairyledger.domain.errors import NotFoundError


def resolve_account(
    account_service: AccountService,
    account: str | int,
    kind: Optional[AccountKind] = None,
) -> int:
    """Resolve an account code, name or ID to an account ID.

    Lookup order is: numeric ID, account code (e.g. "CUST001", case
    insensitive), then exact account name.

    Args:
        account_service: AccountService instance
        account: Account code, name or ID
        kind: Restrict matches to customers or suppliers

    Returns:
        Account ID

    Raises:
        NotFoundError: If no matching account exists
    """
    label = "Customer" if kind == AccountKind.CUSTOMER else "Supplier" if kind else "Account"

    if isinstance(account, int):
        account_obj = account_service.get_account(account)
        if account_obj is None or (kind is not None and account_obj.kind != kind):
            raise NotFoundError(f"{label} ID {account} not found")
        return account

    try:
        account_id = int(account)
    except (ValueError, TypeError):
        account_id = None

    if account_id is not None:
        account_obj = account_service.get_account(account_id)
        if account_obj is None or (kind is not None and account_obj.kind != kind):
            raise NotFoundError(f"{label} ID {account_id} not found")
        return account_id

    accounts = account_service.list_accounts(kind=kind)
    for acc in accounts:
        if acc.code.lower() == str(account).strip().lower():
            return acc.id
    for acc in accounts:
        if acc.name == account:
            return acc.id

    raise NotFoundError(f"{label} '{account}' not found")
