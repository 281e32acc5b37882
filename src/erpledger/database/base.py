"""Abstract database interface."""

from abc import ABC, abstractmethod
from typing import Optional
from datetime import date, datetime
from decimal import Decimal

# Import entities directly to avoid circular import through domain/__init__.py
from erpledger.domain.entities import (
    AccountClass,
    CategoryType,
    FinanceAccount,
    FinanceCategory,
    FinanceSubcategory,
    OperationKind,
    Transaction,
)


class Database(ABC):
    """Abstract database interface for erpledger."""

    @abstractmethod
    def connect(self) -> None:
        """Connect to the database."""
        pass

    @abstractmethod
    def disconnect(self) -> None:
        """Disconnect from the database."""
        pass

    @abstractmethod
    def initialize_schema(self) -> None:
        """Initialize database schema (create tables)."""
        pass

    # Account operations
    @abstractmethod
    def create_account(
        self, name: str, account_class: AccountClass, description: Optional[str] = None
    ) -> int:
        """Create a new finance account with zero balance. Returns account ID."""
        pass

    @abstractmethod
    def get_account(self, account_id: int) -> Optional[FinanceAccount]:
        """Get account by ID."""
        pass

    @abstractmethod
    def list_accounts(
        self, account_class: Optional[AccountClass] = None, active_only: bool = False
    ) -> list[FinanceAccount]:
        """List accounts, optionally filtered by class and active flag."""
        pass

    @abstractmethod
    def set_account_active(self, account_id: int, is_active: bool) -> None:
        """Activate or deactivate an account."""
        pass

    # Category operations
    @abstractmethod
    def create_category(
        self, name: str, category_type: CategoryType, description: Optional[str] = None
    ) -> int:
        """Create a finance category. Returns category ID."""
        pass

    @abstractmethod
    def get_category(self, category_id: int) -> Optional[FinanceCategory]:
        """Get category by ID, with its subcategories."""
        pass

    @abstractmethod
    def list_categories(self, category_type: Optional[CategoryType] = None) -> list[FinanceCategory]:
        """List categories with their subcategories."""
        pass

    @abstractmethod
    def create_subcategory(self, category_id: int, name: str) -> int:
        """Create a subcategory under a category. Returns subcategory ID."""
        pass

    @abstractmethod
    def get_subcategory(self, subcategory_id: int) -> Optional[FinanceSubcategory]:
        """Get subcategory by ID."""
        pass

    # Transaction operations
    @abstractmethod
    def post_transaction(
        self,
        operation_kind: OperationKind,
        amount: Decimal,
        occurred_at: datetime,
        source_account_id: Optional[int] = None,
        destination_account_id: Optional[int] = None,
        category_id: Optional[int] = None,
        subcategory_id: Optional[int] = None,
        description: Optional[str] = None,
    ) -> int:
        """Record an active transaction and move its amount between accounts.

        The source balance decreases and the destination balance increases by
        ``amount`` in the same commit as the insert. Returns transaction ID.
        """
        pass

    @abstractmethod
    def cancel_transaction(self, transaction_id: int, reason: str) -> None:
        """Mark a transaction cancelled and reverse its balance movement atomically."""
        pass

    @abstractmethod
    def get_transaction(self, transaction_id: int) -> Optional[Transaction]:
        """Get transaction by ID."""
        pass

    @abstractmethod
    def list_transactions(
        self,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
        account_id: Optional[int] = None,
    ) -> list[Transaction]:
        """List transactions, newest first.

        Args:
            start_date: Optional inclusive start date filter
            end_date: Optional inclusive end date filter
            account_id: Optional account filter (matches either side)
        """
        pass
