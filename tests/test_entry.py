"""Tests for purchase, sale, credit, debit and entry commands."""

import pytest
from datetime import date, timedelta
from decimal import Decimal
from dairyledger.cli.main import cli


def _invoke(cli_runner, temp_db, *args, **kwargs):
    return cli_runner.invoke(cli, ["--db-path", temp_db.database_path, *args], **kwargs)


def test_purchase_uses_supplier_rate(cli_runner, temp_db, sample_supplier):
    result = _invoke(cli_runner, temp_db, "purchase", "SUP001", "12.5")

    assert result.exit_code == 0
    assert "12.5 L x ₹45 = ₹562.50 (Ramesh Dairy Farm)" in result.output
    temp_db.disconnect()
    assert temp_db.get_account(sample_supplier.id).balance == Decimal("562.50")


def test_sale_with_rate_and_note(cli_runner, temp_db, sample_customer):
    result = _invoke(
        cli_runner, temp_db, "sale", "Asha Patel", "2", "--rate", "65", "--note", "extra for guests"
    )

    assert result.exit_code == 0
    assert "₹130" in result.output
    [entry] = temp_db.list_entries(sample_customer.id)
    assert entry.note == "extra for guests"


def test_sale_to_supplier_not_found(cli_runner, temp_db, sample_supplier):
    result = _invoke(cli_runner, temp_db, "sale", "SUP001", "2")

    assert result.exit_code == 1
    assert "Customer 'SUP001' not found" in result.output


def test_purchase_invalid_quantity(cli_runner, temp_db, sample_supplier):
    result = _invoke(cli_runner, temp_db, "purchase", "SUP001", "0")

    assert result.exit_code == 1
    assert "Quantity must be greater than zero" in result.output


def test_backdated_credit(cli_runner, temp_db, sample_customer):
    yesterday = date.today() - timedelta(days=1)

    result = _invoke(cli_runner, temp_db, "credit", "CUST001", "Rs. 200", "--date", "yesterday")

    assert result.exit_code == 0
    assert "Recorded credit" in result.output
    [entry] = temp_db.list_entries(sample_customer.id)
    assert entry.created_at.date() == yesterday
    assert entry.amount == Decimal("200")


def test_debit_invalid_date(cli_runner, temp_db, sample_supplier):
    result = _invoke(cli_runner, temp_db, "debit", "SUP001", "100", "--date", "someday")

    assert result.exit_code == 1
    assert "Invalid date format" in result.output


def test_entry_list_for_today(cli_runner, temp_db, entry_service, sample_customer, sample_supplier):
    entry_service.record_sale(sample_customer.id, Decimal("2"), note="morning round")
    entry_service.record_purchase(sample_supplier.id, Decimal("10"))

    result = _invoke(cli_runner, temp_db, "entry", "list", "--kind", "sale")

    assert result.exit_code == 0
    assert "CUST001 Asha Patel" in result.output
    assert "morning round" in result.output
    assert "Ramesh" not in result.output


def test_entry_list_by_account(cli_runner, temp_db, entry_service, sample_customer, sample_supplier):
    entry_service.record_sale(sample_customer.id, Decimal("2"))
    entry_service.record_purchase(sample_supplier.id, Decimal("10"))

    result = _invoke(cli_runner, temp_db, "entry", "list", "--account", "SUP001")

    assert result.exit_code == 0
    assert "purchase" in result.output
    assert "Asha" not in result.output


def test_entry_list_empty(cli_runner, temp_db):
    result = _invoke(cli_runner, temp_db, "entry", "list", "--date", "2020-01-01")

    assert result.exit_code == 0
    assert "No entries found for 2020-01-01" in result.output


def test_entry_delete(cli_runner, temp_db, entry_service, sample_customer):
    entry_id = entry_service.record_sale(sample_customer.id, Decimal("2"))

    result = cli_runner.invoke(
        cli,
        ["--db-path", temp_db.database_path, "--user", "meena", "entry", "delete", str(entry_id),
         "--reason", "Entered twice", "--yes"],
    )

    assert result.exit_code == 0
    assert f"Deleted entry {entry_id}" in result.output
    temp_db.disconnect()
    assert temp_db.get_entry(entry_id) is None
    assert temp_db.get_account(sample_customer.id).balance == Decimal("0")
    [record] = temp_db.list_deleted_records()
    assert record.deleted_by == "meena"


def test_entry_delete_missing(cli_runner, temp_db):
    result = _invoke(cli_runner, temp_db, "entry", "delete", "42", "--reason", "typo", "--yes")

    assert result.exit_code == 1
    assert "Entry 42 not found" in result.output


def test_entry_delete_blank_reason(cli_runner, temp_db, entry_service, sample_customer):
    entry_id = entry_service.record_credit(sample_customer.id, Decimal("10"))

    result = _invoke(cli_runner, temp_db, "entry", "delete", str(entry_id), "--reason", "  ", "--yes")

    assert result.exit_code == 1
    assert "reason is required" in result.output
