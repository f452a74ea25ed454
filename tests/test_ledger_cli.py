"""Tests for the ledger command."""

import pytest
from datetime import date, datetime
from decimal import Decimal
from dairyledger.cli.main import cli


def test_supplier_ledger_shows_three_periods(cli_runner, temp_db, entry_service, sample_supplier):
    entry_service.record_purchase(sample_supplier.id, Decimal("10"), created_at=datetime(2024, 2, 3, 6, 0))
    entry_service.record_debit(sample_supplier.id, Decimal("100"), created_at=datetime(2024, 2, 12, 19, 0))

    result = cli_runner.invoke(
        cli, ["--db-path", temp_db.database_path, "ledger", "SUP001", "--month", "2024-02"]
    )

    assert result.exit_code == 0
    assert "Ledger for Ramesh Dairy Farm (SUP001, supplier)" in result.output
    assert "1st - 10th" in result.output
    assert "11th - 20th" in result.output
    assert "21st - 29th" in result.output
    assert "03-02-2024" in result.output
    assert "Current balance: ₹350" in result.output


def test_customer_ledger_running_totals(cli_runner, temp_db, entry_service, sample_customer):
    entry_service.record_sale(sample_customer.id, Decimal("2"), created_at=datetime(2025, 3, 2, 7, 0))
    entry_service.record_credit(sample_customer.id, Decimal("150"), created_at=datetime(2025, 3, 9, 19, 0))

    result = cli_runner.invoke(
        cli, ["--db-path", temp_db.database_path, "ledger", "Asha Patel", "--month", "March 2025"]
    )

    assert result.exit_code == 0
    assert "March 2025" in result.output
    assert "₹120" in result.output
    assert "-₹30" in result.output
    assert "Credit: ₹150" in result.output


def test_ledger_empty_month(cli_runner, temp_db, sample_customer):
    result = cli_runner.invoke(
        cli, ["--db-path", temp_db.database_path, "ledger", "CUST001", "--month", "2020-01"]
    )

    assert result.exit_code == 0
    assert "January 2020" in result.output
    assert "No entries." in result.output


def test_ledger_unknown_account(cli_runner, temp_db):
    result = cli_runner.invoke(cli, ["--db-path", temp_db.database_path, "ledger", "CUST404"])

    assert result.exit_code == 1
    assert "Account 'CUST404' not found" in result.output


def test_ledger_invalid_month(cli_runner, temp_db, sample_customer):
    result = cli_runner.invoke(
        cli, ["--db-path", temp_db.database_path, "ledger", "CUST001", "--month", "someday"]
    )

    assert result.exit_code == 1
    assert "Invalid month" in result.output


def test_ledger_list_months(cli_runner, temp_db):
    result = cli_runner.invoke(cli, ["--db-path", temp_db.database_path, "ledger", "--list-months"])

    assert result.exit_code == 0
    assert date.today().strftime("%Y-%m") in result.output
    assert len(result.output.strip().splitlines()) == 6


def test_ledger_requires_account(cli_runner, temp_db):
    result = cli_runner.invoke(cli, ["--db-path", temp_db.database_path, "ledger"])

    assert result.exit_code == 2
    assert "Missing argument 'ACCOUNT'" in result.output
