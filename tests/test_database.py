"""Tests for the SQLAlchemy database implementation and factories."""

from datetime import datetime, UTC
from decimal import Decimal

import pytest

from erpledger.database.base import Database
from erpledger.database.factories import DB_PATH_ENVVAR, create_sqlite_database
from erpledger.domain.entities import (
    AccountClass,
    CategoryType,
    OperationKind,
    TransactionStatus,
)


def test_database_implements_interface(temp_db):
    assert isinstance(temp_db, Database)


def test_factory_reads_environment(tmp_path, monkeypatch):
    db_path = tmp_path / "env.db"
    monkeypatch.setenv(DB_PATH_ENVVAR, str(db_path))

    db = create_sqlite_database()

    assert db.database_url == f"sqlite:///{db_path}"


def test_accounts_are_listed_by_name(temp_db):
    temp_db.create_account("Zeta bank", AccountClass.BANK)
    temp_db.create_account("Alpha cashbox", AccountClass.CASHBOX)

    assert [acc.name for acc in temp_db.list_accounts()] == ["Alpha cashbox", "Zeta bank"]


def test_set_account_active_unknown_account(temp_db):
    with pytest.raises(ValueError, match="Account 5 not found"):
        temp_db.set_account_active(5, False)


def test_post_and_read_transaction(temp_db):
    source = temp_db.create_account("Cashbox", AccountClass.CASHBOX)
    category = temp_db.create_category("Rent", CategoryType.EXPENSE)
    subcategory = temp_db.create_subcategory(category, "Office")

    transaction_id = temp_db.post_transaction(
        operation_kind=OperationKind.EXPENSE,
        amount=Decimal("99.90"),
        occurred_at=datetime(2024, 2, 10, 12, 0, tzinfo=UTC),
        source_account_id=source,
        category_id=category,
        subcategory_id=subcategory,
        description="February rent",
    )

    txn = temp_db.get_transaction(transaction_id)
    assert txn.operation_kind is OperationKind.EXPENSE
    assert txn.amount == Decimal("99.90")
    assert txn.occurred_at.date() == datetime(2024, 2, 10).date()
    assert txn.destination_account_id is None
    assert txn.status is TransactionStatus.ACTIVE
    assert txn.description == "February rent"
    assert temp_db.get_account(source).balance == Decimal("-99.90")
    assert temp_db.get_subcategory(subcategory).category_id == category


def test_post_to_unknown_account_rolls_back(temp_db):
    source = temp_db.create_account("Cashbox", AccountClass.CASHBOX)

    with pytest.raises(ValueError, match="Account 77 not found"):
        temp_db.post_transaction(
            operation_kind=OperationKind.TRANSFER,
            amount=Decimal("10"),
            occurred_at=datetime(2024, 2, 10, tzinfo=UTC),
            source_account_id=source,
            destination_account_id=77,
        )

    assert temp_db.list_transactions() == []
    assert temp_db.get_account(source).balance == Decimal("0")


def test_cancel_unknown_transaction(temp_db):
    with pytest.raises(ValueError, match="Transaction 3 not found"):
        temp_db.cancel_transaction(3, "Missing")


def test_missing_entities_return_none(temp_db):
    assert temp_db.get_account(1) is None
    assert temp_db.get_category(1) is None
    assert temp_db.get_subcategory(1) is None
    assert temp_db.get_transaction(1) is None
