"""Ledger entry domain service."""

import logging
from datetime import date, datetime
from decimal import Decimal
from typing import Optional

from dairyledger.database.base import Database
from dairyledger.domain.balance import to_cents
from dairyledger.domain.entities import AccountKind, Entry as EntryEntity, EntryKind
from dairyledger.domain.errors import (
    NotFoundError,
    ValidationError,
    account_not_found,
    deletion_reason_required,
    entry_not_found,
)
from dairyledger.domain.settings import SettingsService
from dairyledger.utils.date_parser import get_day_bounds

logger = logging.getLogger(__name__)

# Milk kinds can only be recorded against one kind of account
MILK_ACCOUNT_KINDS = {
    EntryKind.PURCHASE: AccountKind.SUPPLIER,
    EntryKind.SALE: AccountKind.CUSTOMER,
}


class EntryService:
    """Service for recording and removing ledger entries."""

    def __init__(self, db: Database):
        """Initialize entry service.

        Args:
            db: Database instance
        """
        self.db = db
        self.settings = SettingsService(db)

    def record_entry(
        self,
        account_id: int,
        kind: EntryKind | str,
        quantity: Optional[Decimal] = None,
        rate: Optional[Decimal] = None,
        amount: Optional[Decimal] = None,
        note: Optional[str] = None,
        created_at: Optional[datetime] = None,
        created_by: Optional[str] = None,
    ) -> int:
        """Record a purchase, sale, credit or debit.

        Quantity, rate and amount are rounded half up to two decimals, the
        precision the ledger stores. Purchases and sales are priced as
        quantity x rate. The rate falls back to the account's milk rate,
        then to the configured default rate. Credits and debits take an
        explicit amount.

        Args:
            account_id: Account ID
            kind: Entry kind
            quantity: Litres (purchase/sale only)
            rate: Rate per litre (purchase/sale only)
            amount: Amount (credit/debit only)
            note: Optional free-text note
            created_at: Entry time (defaults to now)
            created_by: Acting user

        Returns:
            Entry ID

        Raises:
            NotFoundError: If account doesn't exist
            ValidationError: If the kind, account kind or numbers are invalid
        """
        entry_kind = EntryKind.parse(kind)
        if entry_kind == EntryKind.UNKNOWN:
            raise ValidationError(
                f"Invalid entry kind '{kind}': expected purchase, sale, credit or debit"
            )

        account = self.db.get_account(account_id)
        if account is None:
            raise NotFoundError(account_not_found(account_id))

        if entry_kind.is_milk:
            required_kind = MILK_ACCOUNT_KINDS[entry_kind]
            if account.kind != required_kind:
                raise ValidationError(
                    f"{entry_kind.value.capitalize()} entries can only be recorded "
                    f"for {required_kind.value} accounts"
                )
            if quantity is None or to_cents(quantity) <= 0:
                raise ValidationError("Quantity must be greater than zero")
            quantity = to_cents(quantity)
            if rate is None:
                rate = account.milk_rate if account.milk_rate > 0 else self.settings.default_rate(entry_kind)
            rate = to_cents(rate)
            if rate <= 0:
                raise ValidationError("Rate must be greater than zero")
            amount = to_cents(quantity * rate)
        else:
            if amount is None or to_cents(amount) <= 0:
                raise ValidationError("Amount must be greater than zero")
            amount = to_cents(amount)
            quantity = Decimal("0")
            rate = Decimal("0")

        entry_id = self.db.create_entry(
            account_id=account_id,
            kind=entry_kind,
            quantity=quantity,
            rate=rate,
            amount=amount,
            note=note.strip() if note and note.strip() else None,
            created_by=created_by,
            created_at=created_at,
        )
        logger.info(
            "Recorded %s of %s for %s (entry %s)", entry_kind.value, amount, account.code, entry_id
        )
        return entry_id

    def record_purchase(self, supplier_id: int, quantity: Decimal, rate: Optional[Decimal] = None, **kwargs) -> int:
        """Record milk bought from a supplier."""
        return self.record_entry(supplier_id, EntryKind.PURCHASE, quantity=quantity, rate=rate, **kwargs)

    def record_sale(self, customer_id: int, quantity: Decimal, rate: Optional[Decimal] = None, **kwargs) -> int:
        """Record milk sold to a customer."""
        return self.record_entry(customer_id, EntryKind.SALE, quantity=quantity, rate=rate, **kwargs)

    def record_credit(self, account_id: int, amount: Decimal, **kwargs) -> int:
        """Record a payment received."""
        return self.record_entry(account_id, EntryKind.CREDIT, amount=amount, **kwargs)

    def record_debit(self, account_id: int, amount: Decimal, **kwargs) -> int:
        """Record a payment or advance paid out."""
        return self.record_entry(account_id, EntryKind.DEBIT, amount=amount, **kwargs)

    def get_entry(self, entry_id: int) -> Optional[EntryEntity]:
        return self.db.get_entry(entry_id)

    def list_entries_for_day(
        self, day: Optional[date] = None, kind: Optional[EntryKind | str] = None
    ) -> list[EntryEntity]:
        """List entries recorded on a day across all accounts, newest first."""
        start, end = get_day_bounds(day or date.today())
        entry_kind = EntryKind.parse(kind) if kind is not None else None
        return self.db.list_entries_between(start=start, end=end, kind=entry_kind)

    def list_account_entries(
        self,
        account_id: int,
        start: Optional[datetime] = None,
        end: Optional[datetime] = None,
    ) -> list[EntryEntity]:
        """List an account's entries in a range, oldest first."""
        if self.db.get_account(account_id) is None:
            raise NotFoundError(account_not_found(account_id))
        entries = self.db.list_entries(account_id=account_id, start=start, end=end)
        return sorted(entries, key=lambda entry: (entry.created_at, entry.id))

    def delete_entry(
        self, entry_id: int, reason: str, deleted_by: Optional[str] = None
    ) -> int:
        """Delete an entry, keeping an audit copy and reversing its balance effect.

        Returns:
            Deleted-record ID

        Raises:
            ValidationError: If no reason is given
            NotFoundError: If entry doesn't exist
        """
        if not reason or not reason.strip():
            raise ValidationError(deletion_reason_required())
        if self.db.get_entry(entry_id) is None:
            raise NotFoundError(entry_not_found(entry_id))
        return self.db.delete_entry_with_audit(entry_id, reason.strip(), deleted_by)

    def list_deleted_records(self, table_name: Optional[str] = None):
        """List audit copies of deleted rows, newest first."""
        return self.db.list_deleted_records(table_name=table_name)
