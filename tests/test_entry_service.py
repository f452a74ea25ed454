"""Tests for EntryService."""

import pytest
from datetime import date, datetime, timedelta
from decimal import Decimal

from dairyledger.domain.entities import EntryKind
from dairyledger.domain.errors import NotFoundError, ValidationError
from dairyledger.domain.settings import DEFAULT_PURCHASE_RATE


class TestRecordEntry:
    """Tests for recording purchases, sales, credits and debits."""

    def test_purchase_priced_at_supplier_rate(self, entry_service, sample_supplier):
        entry_id = entry_service.record_purchase(sample_supplier.id, Decimal("12.5"))

        entry = entry_service.get_entry(entry_id)
        assert entry.kind == EntryKind.PURCHASE
        assert entry.rate == Decimal("45")
        assert entry.amount == Decimal("562.50")

    def test_explicit_rate_overrides_account_rate(self, entry_service, sample_customer):
        entry_id = entry_service.record_sale(sample_customer.id, Decimal("2"), rate=Decimal("65"))

        assert entry_service.get_entry(entry_id).amount == Decimal("130")

    def test_amount_rounded_to_paise(self, entry_service, sample_customer):
        entry_id = entry_service.record_sale(sample_customer.id, Decimal("1.333"), rate=Decimal("60"))

        entry = entry_service.get_entry(entry_id)
        assert entry.quantity == Decimal("1.33")
        assert entry.amount == Decimal("79.80")

    def test_quantity_and_rate_rounded_before_pricing(self, entry_service, sample_supplier):
        entry_id = entry_service.record_purchase(
            sample_supplier.id, Decimal("1.255"), rate=Decimal("45.125")
        )

        entry = entry_service.get_entry(entry_id)
        assert entry.quantity == Decimal("1.26")
        assert entry.rate == Decimal("45.13")
        assert entry.amount == Decimal("56.86")
        assert (entry.quantity * entry.rate).quantize(Decimal("0.01")) == entry.amount

    def test_quantity_rounding_to_zero_rejected(self, entry_service, sample_customer):
        with pytest.raises(ValidationError, match="Quantity"):
            entry_service.record_sale(sample_customer.id, Decimal("0.004"))

    def test_credit_amount_rounded_to_paise(self, entry_service, sample_customer):
        entry_id = entry_service.record_credit(sample_customer.id, Decimal("10.005"))

        assert entry_service.get_entry(entry_id).amount == Decimal("10.01")

    def test_amount_rounding_to_zero_rejected(self, entry_service, sample_customer):
        with pytest.raises(ValidationError, match="Amount"):
            entry_service.record_debit(sample_customer.id, Decimal("0.004"))

    def test_default_rate_used_when_account_has_none(
        self, entry_service, account_service, settings_service
    ):
        supplier_id = account_service.create_account("supplier", "New Farm")
        settings_service.set(DEFAULT_PURCHASE_RATE, "48")

        entry_id = entry_service.record_purchase(supplier_id, Decimal("10"))

        assert entry_service.get_entry(entry_id).amount == Decimal("480")

    def test_fallback_rate_when_nothing_configured(self, entry_service, account_service):
        customer_id = account_service.create_account("customer", "Walk-in")

        entry_id = entry_service.record_sale(customer_id, Decimal("1"))

        assert entry_service.get_entry(entry_id).rate == Decimal("50")

    def test_sale_to_supplier_rejected(self, entry_service, sample_supplier):
        with pytest.raises(ValidationError, match="customer accounts"):
            entry_service.record_sale(sample_supplier.id, Decimal("1"))

    def test_purchase_from_customer_rejected(self, entry_service, sample_customer):
        with pytest.raises(ValidationError, match="supplier accounts"):
            entry_service.record_purchase(sample_customer.id, Decimal("1"))

    @pytest.mark.parametrize("quantity", [Decimal("0"), Decimal("-2")])
    def test_quantity_must_be_positive(self, entry_service, sample_customer, quantity):
        with pytest.raises(ValidationError, match="Quantity"):
            entry_service.record_sale(sample_customer.id, quantity)

    def test_credit_and_debit_need_positive_amount(self, entry_service, sample_customer):
        with pytest.raises(ValidationError, match="Amount"):
            entry_service.record_credit(sample_customer.id, Decimal("0"))
        with pytest.raises(ValidationError, match="Amount"):
            entry_service.record_debit(sample_customer.id, Decimal("-5"))

    def test_credit_on_any_account(self, entry_service, sample_supplier):
        entry_id = entry_service.record_credit(sample_supplier.id, Decimal("100"), note="returned cans")

        entry = entry_service.get_entry(entry_id)
        assert entry.quantity == Decimal("0")
        assert entry.note == "returned cans"

    def test_unknown_kind_rejected(self, entry_service, sample_customer):
        with pytest.raises(ValidationError, match="Invalid entry kind"):
            entry_service.record_entry(sample_customer.id, "refund", amount=Decimal("10"))

    def test_missing_account(self, entry_service):
        with pytest.raises(NotFoundError):
            entry_service.record_credit(404, Decimal("10"))

    def test_balance_follows_entries(self, entry_service, account_service, sample_customer):
        entry_service.record_sale(sample_customer.id, Decimal("2"))
        entry_service.record_credit(sample_customer.id, Decimal("40"))

        assert account_service.get_account(sample_customer.id).balance == Decimal("80")


class TestListing:
    """Tests for entry listing."""

    def test_list_entries_for_day(self, entry_service, sample_customer, sample_supplier):
        yesterday = datetime.combine(date.today() - timedelta(days=1), datetime.min.time())
        entry_service.record_sale(sample_customer.id, Decimal("1"))
        entry_service.record_purchase(sample_supplier.id, Decimal("5"))
        entry_service.record_credit(sample_customer.id, Decimal("10"), created_at=yesterday)

        today_entries = entry_service.list_entries_for_day()
        purchases = entry_service.list_entries_for_day(kind="purchase")

        assert len(today_entries) == 2
        assert [e.account_id for e in purchases] == [sample_supplier.id]

    def test_list_account_entries_sorted(self, entry_service, sample_customer):
        late = entry_service.record_credit(
            sample_customer.id, Decimal("10"), created_at=datetime(2025, 3, 9, 8, 0)
        )
        early = entry_service.record_credit(
            sample_customer.id, Decimal("20"), created_at=datetime(2025, 3, 2, 8, 0)
        )

        entries = entry_service.list_account_entries(sample_customer.id)

        assert [e.id for e in entries] == [early, late]

    def test_list_account_entries_missing_account(self, entry_service):
        with pytest.raises(NotFoundError):
            entry_service.list_account_entries(404)


class TestDeleteEntry:
    """Tests for audited entry deletion."""

    def test_delete_reverses_balance(self, entry_service, account_service, sample_supplier):
        entry_id = entry_service.record_purchase(sample_supplier.id, Decimal("10"))
        entry_service.record_debit(sample_supplier.id, Decimal("100"))

        entry_service.delete_entry(entry_id, reason="Wrong supplier", deleted_by="meena")

        assert entry_service.get_entry(entry_id) is None
        assert account_service.get_account(sample_supplier.id).balance == Decimal("-100")
        [record] = entry_service.list_deleted_records()
        assert record.table_name == "entries"
        assert record.deleted_by == "meena"

    @pytest.mark.parametrize("reason", ["", "   ", None])
    def test_delete_requires_reason(self, entry_service, sample_customer, reason):
        entry_id = entry_service.record_credit(sample_customer.id, Decimal("10"))

        with pytest.raises(ValidationError, match="reason"):
            entry_service.delete_entry(entry_id, reason=reason)

        assert entry_service.get_entry(entry_id) is not None

    def test_sub_paisa_credits_reverse_to_zero(self, entry_service, account_service, sample_customer):
        entry_ids = [
            entry_service.record_credit(sample_customer.id, Decimal("10.005")) for _ in range(4)
        ]

        stored = sum(entry_service.get_entry(entry_id).amount for entry_id in entry_ids)
        assert stored == Decimal("40.04")
        assert account_service.get_account(sample_customer.id).balance == -stored

        for entry_id in entry_ids:
            entry_service.delete_entry(entry_id, reason="Entered twice")

        assert account_service.get_account(sample_customer.id).balance == Decimal("0")

    def test_delete_missing_entry(self, entry_service):
        with pytest.raises(NotFoundError):
            entry_service.delete_entry(404, reason="typo")
