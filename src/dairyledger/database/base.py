"""Abstract database interface (the Record Store)."""

from abc import ABC, abstractmethod
from datetime import datetime
from decimal import Decimal
from typing import Optional

# Import entities directly to avoid circular import through domain/__init__.py
from dairyledger.domain.entities import (
    Account,
    AccountKind,
    DeletedRecord,
    Entry,
    EntryKind,
    Setting,
    SmsTemplate,
    TemplateType,
)


class Database(ABC):
    """Abstract database interface for dairyledger."""

    @abstractmethod
    def connect(self) -> None:
        """Connect to the database."""
        pass

    @abstractmethod
    def disconnect(self) -> None:
        """Disconnect from the database."""
        pass

    @abstractmethod
    def initialize_schema(self) -> None:
        """Initialize database schema (create tables)."""
        pass

    # Account operations
    @abstractmethod
    def create_account(
        self,
        kind: AccountKind,
        code: str,
        name: str,
        milk_rate: Decimal,
        phone: Optional[str] = None,
        address: Optional[str] = None,
        created_by: Optional[str] = None,
    ) -> int:
        """Create a new account with a zero balance. Returns account ID."""
        pass

    @abstractmethod
    def get_account(self, account_id: int) -> Optional[Account]:
        """Get account by ID."""
        pass

    @abstractmethod
    def list_accounts(self, kind: Optional[AccountKind] = None) -> list[Account]:
        """List accounts ordered by code, optionally filtered by kind."""
        pass

    @abstractmethod
    def next_account_code(self, kind: AccountKind) -> str:
        """Return the next free account code for a kind (e.g. 'SUP004')."""
        pass

    @abstractmethod
    def update_account(
        self,
        account_id: int,
        name: Optional[str] = None,
        milk_rate: Optional[Decimal] = None,
        phone: Optional[str] = None,
        address: Optional[str] = None,
    ) -> None:
        """Update the provided account fields."""
        pass

    @abstractmethod
    def get_account_entry_count(self, account_id: int) -> int:
        """Count entries belonging to an account."""
        pass

    @abstractmethod
    def delete_account_with_audit(
        self, account_id: int, reason: str, deleted_by: Optional[str] = None
    ) -> int:
        """Copy the account to the deleted-records log and remove it atomically.

        Returns the deleted-record ID.
        """
        pass

    # Entry operations
    @abstractmethod
    def create_entry(
        self,
        account_id: int,
        kind: EntryKind,
        quantity: Decimal,
        rate: Decimal,
        amount: Decimal,
        note: Optional[str] = None,
        created_by: Optional[str] = None,
        created_at: Optional[datetime] = None,
    ) -> int:
        """Insert an entry and apply its balance delta in one transaction.

        Returns entry ID.
        """
        pass

    @abstractmethod
    def get_entry(self, entry_id: int) -> Optional[Entry]:
        """Get entry by ID."""
        pass

    @abstractmethod
    def list_entries(
        self,
        account_id: int,
        start: Optional[datetime] = None,
        end: Optional[datetime] = None,
        kind: Optional[EntryKind] = None,
    ) -> list[Entry]:
        """List entries of one account created within ``[start, end]``.

        Callers must not rely on the returned order.
        """
        pass

    @abstractmethod
    def list_entries_between(
        self,
        start: Optional[datetime] = None,
        end: Optional[datetime] = None,
        kind: Optional[EntryKind] = None,
    ) -> list[Entry]:
        """List entries of every account created within ``[start, end]``."""
        pass

    @abstractmethod
    def delete_entry_with_audit(
        self, entry_id: int, reason: str, deleted_by: Optional[str] = None
    ) -> int:
        """Copy the entry to the deleted-records log, remove it and reverse
        its balance delta, all in one transaction.

        Returns the deleted-record ID.
        """
        pass

    # Deleted records
    @abstractmethod
    def list_deleted_records(self, table_name: Optional[str] = None) -> list[DeletedRecord]:
        """List audit records, newest first."""
        pass

    # Settings
    @abstractmethod
    def get_setting(self, key: str) -> Optional[Setting]:
        """Get setting by key."""
        pass

    @abstractmethod
    def set_setting(
        self,
        key: str,
        value: str,
        description: Optional[str] = None,
        updated_by: Optional[str] = None,
    ) -> None:
        """Insert or update a setting."""
        pass

    @abstractmethod
    def list_settings(self) -> list[Setting]:
        """List all settings ordered by key."""
        pass

    # SMS templates
    @abstractmethod
    def create_sms_template(
        self,
        name: str,
        message: str,
        template_type: TemplateType,
        created_by: Optional[str] = None,
    ) -> int:
        """Create an SMS template. Returns template ID."""
        pass

    @abstractmethod
    def get_sms_template(self, template_id: int) -> Optional[SmsTemplate]:
        """Get SMS template by ID."""
        pass

    @abstractmethod
    def list_sms_templates(self) -> list[SmsTemplate]:
        """List SMS templates ordered by name."""
        pass

    @abstractmethod
    def delete_sms_template(self, template_id: int) -> None:
        """Delete an SMS template."""
        pass
