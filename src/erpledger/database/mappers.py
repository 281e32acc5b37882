"""Mapper functions to convert SQLAlchemy models into domain entities.

Enumerations are stored as their string values and rebuilt here, so the
rest of the application only ever sees typed domain values.
"""

from erpledger.domain import entities as domain
from erpledger.database.models import (
    FinanceAccount as ORMAccount,
    FinanceCategory as ORMCategory,
    FinanceSubcategory as ORMSubcategory,
    FinanceTransaction as ORMTransaction,
)


def account_to_domain(orm_account: ORMAccount) -> domain.FinanceAccount:
    """Convert SQLAlchemy FinanceAccount model to domain FinanceAccount entity."""
    return domain.FinanceAccount(
        id=orm_account.id,
        name=orm_account.name,
        account_class=domain.AccountClass(orm_account.account_class),
        balance=orm_account.balance,
        is_active=orm_account.is_active,
        description=orm_account.description,
        created_at=orm_account.created_at,
    )


def subcategory_to_domain(orm_subcategory: ORMSubcategory) -> domain.FinanceSubcategory:
    """Convert SQLAlchemy FinanceSubcategory model to domain entity."""
    return domain.FinanceSubcategory(
        id=orm_subcategory.id,
        category_id=orm_subcategory.category_id,
        name=orm_subcategory.name,
        is_active=orm_subcategory.is_active,
    )


def category_to_domain(orm_category: ORMCategory) -> domain.FinanceCategory:
    """Convert SQLAlchemy FinanceCategory model, with subcategories, to domain entity."""
    return domain.FinanceCategory(
        id=orm_category.id,
        name=orm_category.name,
        category_type=domain.CategoryType(orm_category.category_type),
        is_active=orm_category.is_active,
        description=orm_category.description,
        subcategories=tuple(subcategory_to_domain(sub) for sub in orm_category.subcategories),
    )


def transaction_to_domain(orm_transaction: ORMTransaction) -> domain.Transaction:
    """Convert SQLAlchemy FinanceTransaction model to domain Transaction entity."""
    return domain.Transaction(
        id=orm_transaction.id,
        operation_kind=domain.OperationKind(orm_transaction.operation_kind),
        amount=orm_transaction.amount,
        occurred_at=orm_transaction.occurred_at,
        source_account_id=orm_transaction.source_account_id,
        destination_account_id=orm_transaction.destination_account_id,
        category_id=orm_transaction.category_id,
        subcategory_id=orm_transaction.subcategory_id,
        description=orm_transaction.description,
        status=domain.TransactionStatus(orm_transaction.status),
        cancellation_reason=orm_transaction.cancellation_reason,
        created_at=orm_transaction.created_at,
    )
