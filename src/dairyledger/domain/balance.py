"""Balance arithmetic shared by the ledger aggregator and the Record Store."""

from decimal import Decimal, ROUND_HALF_UP
from typing import Any

from dairyledger.domain.entities import AccountKind, EntryKind

ZERO = Decimal("0")
CENT = Decimal("0.01")


def as_decimal(value: Any) -> Decimal:
    """Convert a stored numeric value to Decimal without float drift."""
    if value is None:
        return ZERO
    if isinstance(value, Decimal):
        return value
    if isinstance(value, float):
        return Decimal(str(value))
    return Decimal(value)


def to_cents(value: Any) -> Decimal:
    """Round to the two decimal places the ledger stores, half up."""
    return as_decimal(value).quantize(CENT, rounding=ROUND_HALF_UP)


def balance_delta(account_kind: AccountKind | str, entry_kind: EntryKind | str, amount: Any) -> Decimal:
    """Signed effect of one entry on an account's balance.

    Customers owe more with each sale and less with each credit received.
    Suppliers are owed more with each purchase and less with each debit
    paid out. Every other combination contributes zero.
    """
    kind = AccountKind.parse(account_kind)
    entry_kind = EntryKind.parse(entry_kind)
    value = as_decimal(amount)

    if kind == AccountKind.CUSTOMER:
        if entry_kind == EntryKind.SALE:
            return value
        if entry_kind == EntryKind.CREDIT:
            return -value
        return ZERO

    if entry_kind == EntryKind.PURCHASE:
        return value
    if entry_kind == EntryKind.DEBIT:
        return -value
    return ZERO
