"""Shared pytest fixtures for dairyledger tests."""

import tempfile
import os
from datetime import datetime
from decimal import Decimal
import pytest

from dairyledger.database.factories import create_sqlite_database
from dairyledger.domain.account import AccountService
from dairyledger.domain.entities import AccountKind, Entry, EntryKind
from dairyledger.domain.entry import EntryService
from dairyledger.domain.ledger import LedgerService
from dairyledger.domain.settings import SettingsService


@pytest.fixture
def temp_db():
    """Create a temporary database for testing."""
    # Create a temporary file for the database
    fd, db_path = tempfile.mkstemp(suffix=".db")
    os.close(fd)

    # Create database
    db = create_sqlite_database(database_path=db_path)
    # Store the path for tests that need it
    db.database_path = db_path
    db.connect()
    db.initialize_schema()

    yield db

    # Cleanup
    db.disconnect()
    if os.path.exists(db_path):
        os.unlink(db_path)


@pytest.fixture
def account_service(temp_db):
    """Create an AccountService with a temporary database."""
    return AccountService(temp_db)


@pytest.fixture
def entry_service(temp_db):
    """Create an EntryService with a temporary database."""
    return EntryService(temp_db)


@pytest.fixture
def ledger_service(temp_db):
    """Create a LedgerService with a temporary database."""
    return LedgerService(temp_db)


@pytest.fixture
def settings_service(temp_db):
    """Create a SettingsService with a temporary database."""
    return SettingsService(temp_db)


@pytest.fixture
def sample_customer(account_service):
    """Create a customer buying milk at 60 per litre."""
    account_id = account_service.create_account(
        kind=AccountKind.CUSTOMER,
        name="Asha Patel",
        milk_rate=Decimal("60"),
        phone="98765 43210",
    )
    return account_service.get_account(account_id)


@pytest.fixture
def sample_supplier(account_service):
    """Create a supplier selling milk at 45 per litre."""
    account_id = account_service.create_account(
        kind=AccountKind.SUPPLIER,
        name="Ramesh Dairy Farm",
        milk_rate=Decimal("45"),
        phone="+91 91234-56789",
    )
    return account_service.get_account(account_id)


@pytest.fixture
def make_entry():
    """Build in-memory Entry entities for pure aggregator tests."""
    counter = {"id": 0}

    def _make(kind, created_at, amount="0", quantity="0", rate="0", account_id=1):
        counter["id"] += 1
        return Entry(
            id=counter["id"],
            account_id=account_id,
            kind=EntryKind.parse(kind),
            quantity=Decimal(quantity),
            rate=Decimal(rate),
            amount=Decimal(amount),
            created_at=created_at if isinstance(created_at, datetime) else datetime.fromisoformat(created_at),
        )

    return _make


@pytest.fixture
def cli_runner():
    """Create a Click CLI test runner."""
    from click.testing import CliRunner

    return CliRunner()
