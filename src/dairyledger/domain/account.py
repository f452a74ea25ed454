"""Account domain service."""

import logging
from decimal import Decimal
from typing import Optional

from dairyledger.database.base import Database
from dairyledger.domain.balance import to_cents
from dairyledger.domain.entities import Account as AccountEntity, AccountKind
from dairyledger.domain.errors import (
    NotFoundError,
    ValidationError,
    account_not_found,
    deletion_reason_required,
)

logger = logging.getLogger(__name__)


class AccountService:
    """Service for managing customer and supplier accounts."""

    def __init__(self, db: Database):
        """Initialize account service.

        Args:
            db: Database instance
        """
        self.db = db

    def create_account(
        self,
        kind: AccountKind | str,
        name: str,
        milk_rate: Decimal = Decimal("0"),
        phone: Optional[str] = None,
        address: Optional[str] = None,
        created_by: Optional[str] = None,
    ) -> int:
        """Create a new customer or supplier.

        The account code (e.g. "CUST001", "SUP001") is generated from the
        existing codes of the same kind.

        Args:
            kind: "customer" or "supplier"
            name: Display name
            milk_rate: Rate per litre
            phone: Optional phone number used for SMS
            address: Optional address
            created_by: Acting user

        Returns:
            Account ID

        Raises:
            ValidationError: If kind, name or rate is invalid
        """
        kind = AccountKind.parse(kind)
        name = (name or "").strip()
        if not name:
            raise ValidationError("Account name is required")
        if milk_rate < 0:
            raise ValidationError("Milk rate cannot be negative")
        milk_rate = to_cents(milk_rate)

        code = self.db.next_account_code(kind)
        account_id = self.db.create_account(
            kind=kind,
            code=code,
            name=name,
            milk_rate=milk_rate,
            phone=phone.strip() if phone else None,
            address=address.strip() if address else None,
            created_by=created_by,
        )
        logger.info("Created %s %s '%s'", kind.value, code, name)
        return account_id

    def get_account(self, account_id: int) -> Optional[AccountEntity]:
        """Get account by ID.

        Args:
            account_id: Account ID

        Returns:
            Account entity or None if not found
        """
        return self.db.get_account(account_id)

    def require_account(self, account_id: int) -> AccountEntity:
        """Get account by ID or raise NotFoundError."""
        account = self.db.get_account(account_id)
        if account is None:
            raise NotFoundError(account_not_found(account_id))
        return account

    def list_accounts(self, kind: Optional[AccountKind | str] = None) -> list[AccountEntity]:
        """List accounts, optionally only customers or suppliers."""
        if kind is not None:
            kind = AccountKind.parse(kind)
        return self.db.list_accounts(kind=kind)

    def update_rate(self, account_id: int, milk_rate: Decimal) -> None:
        """Change the per-litre rate of an account.

        Raises:
            NotFoundError: If account not found
            ValidationError: If the rate is negative
        """
        self.require_account(account_id)
        if milk_rate < 0:
            raise ValidationError("Milk rate cannot be negative")
        self.db.update_account(account_id, milk_rate=to_cents(milk_rate))

    def update_contact(
        self,
        account_id: int,
        name: Optional[str] = None,
        phone: Optional[str] = None,
        address: Optional[str] = None,
    ) -> None:
        """Update name, phone or address of an account."""
        self.require_account(account_id)
        if name is not None and not name.strip():
            raise ValidationError("Account name is required")
        self.db.update_account(
            account_id,
            name=name.strip() if name is not None else None,
            phone=phone,
            address=address,
        )

    def delete_account(
        self, account_id: int, reason: str, deleted_by: Optional[str] = None
    ) -> int:
        """Delete an account, keeping an audit copy.

        Args:
            account_id: Account ID to delete
            reason: Why the account is being deleted
            deleted_by: Acting user

        Returns:
            Deleted-record ID

        Raises:
            ValidationError: If no reason is given
            NotFoundError: If account not found
            DependencyError: If the account still has entries
        """
        if not reason or not reason.strip():
            raise ValidationError(deletion_reason_required())
        self.require_account(account_id)
        return self.db.delete_account_with_audit(account_id, reason.strip(), deleted_by)
