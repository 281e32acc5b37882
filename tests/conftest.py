"""Shared pytest fixtures for erpledger tests."""

import tempfile
import os
from datetime import datetime, UTC
from decimal import Decimal
import pytest

from erpledger.database.factories import create_sqlite_database
from erpledger.domain.account import AccountService
from erpledger.domain.category import CategoryService
from erpledger.domain.entities import (
    AccountClass,
    CategoryType,
    OperationKind,
    TransactionDraft,
)
from erpledger.domain.transaction import TransactionService
from erpledger.logging_config import reset_logging


@pytest.fixture(autouse=True)
def _reset_logging():
    """Each test starts with unconfigured logging."""
    reset_logging()
    yield
    reset_logging()


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
def category_service(temp_db):
    """Create a CategoryService with a temporary database."""
    return CategoryService(temp_db)


@pytest.fixture
def transaction_service(temp_db):
    """Create a TransactionService with a temporary database."""
    return TransactionService(temp_db)


@pytest.fixture
def sample_accounts(account_service):
    """Create one account of every class, keyed by a short role name."""
    specs = [
        ("cashbox", "Main cashbox", AccountClass.CASHBOX),
        ("bank", "Operating bank", AccountClass.BANK),
        ("supplier", "Steel Supplies LLC", AccountClass.SUPPLIER),
        ("dealer", "North Dealer", AccountClass.DEALER),
        ("employee", "Ivan Petrov", AccountClass.EMPLOYEE),
        ("owner", "Owner", AccountClass.OWNER),
    ]
    accounts = {}
    for key, name, account_class in specs:
        account_id = account_service.create_account(name=name, account_class=account_class)
        accounts[key] = account_service.get_account(account_id)
    return accounts


@pytest.fixture
def sample_categories(category_service):
    """Create an expense and an income category, each with a subcategory."""
    rent_id = category_service.create_category(name="Rent", category_type=CategoryType.EXPENSE)
    office_id = category_service.add_subcategory(rent_id, "Office")
    sales_id = category_service.create_category(name="Sales", category_type=CategoryType.INCOME)
    retail_id = category_service.add_subcategory(sales_id, "Retail")
    return {
        "Rent": rent_id,
        "Rent > Office": office_id,
        "Sales": sales_id,
        "Sales > Retail": retail_id,
    }


@pytest.fixture
def make_draft():
    """Build drafts with a fixed timestamp."""

    def _make(kind=OperationKind.EXPENSE, amount="100000", **fields):
        draft = TransactionDraft.empty(kind, now=datetime(2024, 2, 10, 9, 30, tzinfo=UTC))
        draft.amount = Decimal(amount) if amount is not None else None
        for name, value in fields.items():
            setattr(draft, name, value)
        return draft

    return _make


@pytest.fixture
def cli_runner():
    """Create a Click CLI test runner."""
    from click.testing import CliRunner

    return CliRunner()
