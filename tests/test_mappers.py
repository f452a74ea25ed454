"""Tests for database mappers."""

import pytest
from datetime import datetime, UTC
from decimal import Decimal

from dairyledger.database.models import (
    Account as ORMAccount,
    Entry as ORMEntry,
    DeletedRecord as ORMDeletedRecord,
    SmsTemplate as ORMSmsTemplate,
)
from dairyledger.database.mappers import (
    account_snapshot,
    account_to_domain,
    deleted_record_to_domain,
    entry_snapshot,
    entry_to_domain,
    sms_template_to_domain,
)
from dairyledger.domain.entities import (
    Account,
    AccountKind,
    Entry,
    EntryKind,
    TemplateType,
)


def _orm_account():
    return ORMAccount(
        id=1,
        code="SUP001",
        kind="supplier",
        name="Ramesh Dairy Farm",
        phone="9123456789",
        milk_rate=Decimal("45.00"),
        balance=Decimal("1250.50"),
        created_at=datetime(2025, 3, 1, 9, 0, tzinfo=UTC),
    )


class TestAccountMapper:
    """Tests for Account mapper."""

    def test_account_to_domain(self):
        orm_account = _orm_account()
        domain_account = account_to_domain(orm_account)

        assert isinstance(domain_account, Account)
        assert domain_account.kind == AccountKind.SUPPLIER
        assert domain_account.code == "SUP001"
        assert domain_account.balance == Decimal("1250.50")
        assert domain_account.created_at == orm_account.created_at

    def test_account_snapshot_is_json_safe(self):
        snapshot = account_snapshot(_orm_account())

        assert snapshot["balance"] == "1250.50"
        assert snapshot["milk_rate"] == "45.00"
        assert snapshot["created_at"] == "2025-03-01T09:00:00+00:00"


class TestEntryMapper:
    """Tests for Entry mapper."""

    def test_entry_to_domain(self):
        orm_entry = ORMEntry(
            id=5,
            account_id=1,
            kind="purchase",
            quantity=Decimal("10.5"),
            rate=Decimal("45"),
            amount=Decimal("472.50"),
            note="morning",
            created_at=datetime(2025, 3, 5, 6, 30),
        )
        entry = entry_to_domain(orm_entry)

        assert isinstance(entry, Entry)
        assert entry.kind == EntryKind.PURCHASE
        assert entry.amount == Decimal("472.50")
        assert entry.note == "morning"

    def test_unrecognised_kind_maps_to_unknown(self):
        orm_entry = ORMEntry(
            id=6,
            account_id=1,
            kind="adjustment",
            quantity=None,
            rate=None,
            amount=Decimal("10"),
            created_at=datetime(2025, 3, 5, 6, 30),
        )
        entry = entry_to_domain(orm_entry)

        assert entry.kind == EntryKind.UNKNOWN
        assert entry.quantity == Decimal("0")

    def test_entry_snapshot(self):
        orm_entry = ORMEntry(
            id=5,
            account_id=1,
            kind="credit",
            quantity=Decimal("0"),
            rate=Decimal("0"),
            amount=Decimal("300"),
            created_at=datetime(2025, 3, 5, 18, 0),
        )
        snapshot = entry_snapshot(orm_entry)

        assert snapshot["kind"] == "credit"
        assert snapshot["amount"] == "300"
        assert snapshot["created_at"] == "2025-03-05T18:00:00"


class TestOtherMappers:
    """Tests for deleted-record and template mappers."""

    def test_deleted_record_to_domain(self):
        orm_record = ORMDeletedRecord(
            id=1,
            table_name="entries",
            record_id=5,
            record_data={"id": 5, "amount": "300"},
            deletion_reason="Entered twice",
            deleted_by="meena",
            deleted_at=datetime(2025, 3, 6, tzinfo=UTC),
        )
        record = deleted_record_to_domain(orm_record)

        assert record.record_data == {"id": 5, "amount": "300"}
        assert record.deletion_reason == "Entered twice"
        assert record.deleted_by == "meena"

    def test_sms_template_to_domain(self):
        orm_template = ORMSmsTemplate(
            id=2,
            name="Due reminder",
            message="Dear {name}, your due is {balance}",
            template_type="customer",
            created_at=datetime(2025, 3, 6, tzinfo=UTC),
        )
        template = sms_template_to_domain(orm_template)

        assert template.template_type == TemplateType.CUSTOMER
        assert template.message.startswith("Dear {name}")
