"""Domain model entities for dairyledger.

These are pure data classes representing business concepts, independent of
database schema. The Record Store maps its rows onto them, and the ledger
aggregator only ever sees these types.
"""

from dataclasses import dataclass
from datetime import datetime, date
from decimal import Decimal
from enum import Enum
from typing import Any, Optional

from dairyledger.domain.errors import ValidationError, invalid_account_kind


class AccountKind(str, Enum):
    """Discriminator for the two kinds of ledger owners."""

    CUSTOMER = "customer"
    SUPPLIER = "supplier"

    @classmethod
    def parse(cls, value: "AccountKind | str") -> "AccountKind":
        """Return the matching kind or raise ValidationError."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            raise ValidationError(invalid_account_kind(value)) from None


class EntryKind(str, Enum):
    """Kind of a ledger entry.

    UNKNOWN stands in for any stored value that is not one of the four
    recognised kinds, so reporting can list such rows without failing.
    """

    PURCHASE = "purchase"
    SALE = "sale"
    CREDIT = "credit"
    DEBIT = "debit"
    UNKNOWN = "unknown"

    @classmethod
    def parse(cls, value: "EntryKind | str | None") -> "EntryKind":
        """Return the matching kind, or UNKNOWN for anything unrecognised."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            return cls.UNKNOWN

    @property
    def is_milk(self) -> bool:
        """True for kinds that carry a quantity and rate."""
        return self in (EntryKind.PURCHASE, EntryKind.SALE)


class TemplateType(str, Enum):
    """Audience of an SMS template."""

    CUSTOMER = "customer"
    SUPPLIER = "supplier"
    GENERAL = "general"


@dataclass(frozen=True)
class Account:
    """Customer or supplier account."""

    id: int
    code: str
    kind: AccountKind
    name: str
    milk_rate: Decimal
    balance: Decimal
    created_at: datetime
    phone: Optional[str] = None
    address: Optional[str] = None
    created_by: Optional[str] = None


@dataclass(frozen=True)
class Entry:
    """Immutable ledger entry belonging to one account."""

    id: int
    account_id: int
    kind: EntryKind
    quantity: Decimal
    rate: Decimal
    amount: Decimal
    created_at: datetime
    note: Optional[str] = None
    created_by: Optional[str] = None


@dataclass(frozen=True)
class Period:
    """Inclusive date sub-range of a reporting month."""

    label: str
    start_date: date
    end_date: date

    def contains(self, day: date) -> bool:
        return self.start_date <= day <= self.end_date


@dataclass(frozen=True)
class PeriodSummary:
    """Entries of one period with their per-kind totals."""

    period: Period
    entries: tuple[Entry, ...] = ()
    total_quantity: Decimal = Decimal("0")
    total_amount: Decimal = Decimal("0")
    credit_amount: Decimal = Decimal("0")
    debit_amount: Decimal = Decimal("0")


@dataclass(frozen=True)
class RunningTotalRow:
    """An entry paired with the window-local running total after it.

    The running total starts at zero at the start of the window; it is not
    the account's stored balance.
    """

    sequence: int
    entry: Entry
    running_total: Decimal

    @property
    def quantity(self) -> Decimal:
        return self.entry.quantity if EntryKind.parse(self.entry.kind).is_milk else Decimal("0")

    @property
    def rate(self) -> Decimal:
        return self.entry.rate if EntryKind.parse(self.entry.kind).is_milk else Decimal("0")

    @property
    def credit(self) -> Decimal:
        return self.entry.amount if EntryKind.parse(self.entry.kind) == EntryKind.CREDIT else Decimal("0")

    @property
    def debit(self) -> Decimal:
        return self.entry.amount if EntryKind.parse(self.entry.kind) == EntryKind.DEBIT else Decimal("0")


@dataclass(frozen=True)
class PeriodStatement:
    """Period summary together with its running-total rows."""

    summary: PeriodSummary
    rows: tuple[RunningTotalRow, ...]


@dataclass(frozen=True)
class LedgerStatement:
    """Monthly statement for one account."""

    account: Account
    month_start: date
    month_end: date
    periods: tuple[PeriodStatement, ...]


@dataclass(frozen=True)
class DailySummary:
    """Totals of all entries recorded on one day."""

    day: date
    total_purchase: Decimal = Decimal("0")
    total_sales: Decimal = Decimal("0")
    total_credit: Decimal = Decimal("0")
    total_debit: Decimal = Decimal("0")
    entry_count: int = 0

    @property
    def net_amount(self) -> Decimal:
        return self.total_sales + self.total_credit - self.total_purchase - self.total_debit


@dataclass(frozen=True)
class BalanceReport:
    """Outstanding receivables and payables across all accounts."""

    total_receivable: Decimal
    receivable_count: int
    total_payable: Decimal
    payable_count: int


@dataclass(frozen=True)
class DeletedRecord:
    """Audit copy of a removed row."""

    id: int
    table_name: str
    record_id: int
    record_data: dict[str, Any]
    deletion_reason: str
    deleted_at: datetime
    deleted_by: Optional[str] = None


@dataclass(frozen=True)
class Setting:
    """Persisted key/value setting."""

    key: str
    value: str
    updated_at: datetime
    description: Optional[str] = None
    updated_by: Optional[str] = None


@dataclass(frozen=True)
class SmsTemplate:
    """Reusable SMS message with {name}/{balance} placeholders."""

    id: int
    name: str
    message: str
    template_type: TemplateType
    created_at: datetime
    created_by: Optional[str] = None


@dataclass(frozen=True)
class SendResult:
    """Outcome of one outbound message."""

    success: bool
    error: Optional[str] = None
    response: Any = None


@dataclass(frozen=True)
class BulkSendReport:
    """Outcome of sending one message to many accounts."""

    sent: tuple[Account, ...] = ()
    failed: tuple[tuple[Account, str], ...] = ()
    skipped: tuple[Account, ...] = ()
