"""Tests for balance arithmetic."""

import pytest
from decimal import Decimal

from dairyledger.domain.balance import as_decimal, balance_delta, to_cents
from dairyledger.domain.errors import ValidationError


@pytest.mark.parametrize(
    "account_kind,entry_kind,expected",
    [
        ("customer", "sale", Decimal("100")),
        ("customer", "credit", Decimal("-100")),
        ("customer", "purchase", Decimal("0")),
        ("customer", "debit", Decimal("0")),
        ("supplier", "purchase", Decimal("100")),
        ("supplier", "debit", Decimal("-100")),
        ("supplier", "sale", Decimal("0")),
        ("supplier", "credit", Decimal("0")),
        ("supplier", "bonus", Decimal("0")),
    ],
)
def test_balance_delta(account_kind, entry_kind, expected):
    assert balance_delta(account_kind, entry_kind, Decimal("100")) == expected


def test_balance_delta_invalid_account_kind():
    with pytest.raises(ValidationError):
        balance_delta("vendor", "sale", Decimal("1"))


def test_as_decimal():
    assert as_decimal(None) == Decimal("0")
    assert as_decimal(0.1) == Decimal("0.1")
    assert as_decimal("12.50") == Decimal("12.50")
    assert as_decimal(3) == Decimal("3")


@pytest.mark.parametrize(
    "value,expected",
    [
        (Decimal("10.005"), Decimal("10.01")),
        (Decimal("10.004"), Decimal("10.00")),
        (Decimal("-2.345"), Decimal("-2.35")),
        ("45", Decimal("45.00")),
    ],
)
def test_to_cents(value, expected):
    assert str(to_cents(value)) == str(expected)
