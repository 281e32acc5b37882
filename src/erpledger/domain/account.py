"""Finance account domain service."""

from typing import Optional
from erpledger.database.base import Database
from erpledger.domain.entities import (
    AccountClass,
    FinanceAccount,
    OperationKind,
)
from erpledger.domain.errors import (
    ConflictError,
    NotFoundError,
    ValidationError,
    account_not_found,
    duplicate_account_name,
)
from erpledger.domain.operation_rules import AccountSide, selectable_accounts
from erpledger.logging_config import get_logger

logger = get_logger(__name__)


class AccountService:
    """Service for managing finance accounts."""

    def __init__(self, db: Database):
        """Initialize account service.

        Args:
            db: Database instance
        """
        self.db = db

    def create_account(
        self, name: str, account_class: AccountClass, description: Optional[str] = None
    ) -> int:
        """Create a new account.

        Args:
            name: Account name
            account_class: Role of the account (cashbox, bank, supplier, ...)
            description: Optional description

        Returns:
            Account ID

        Raises:
            ValidationError: If the name is blank
            ConflictError: If account name already exists
        """
        name = name.strip()
        if not name:
            raise ValidationError("Account name cannot be empty")

        for acc in self.db.list_accounts():
            if acc.name == name:
                raise ConflictError(duplicate_account_name(name))

        account_id = self.db.create_account(
            name=name, account_class=account_class, description=description
        )
        logger.info(
            "account_created",
            extra={"account_id": account_id, "account_class": account_class.value},
        )
        return account_id

    def get_account(self, account_id: int) -> Optional[FinanceAccount]:
        """Get account by ID.

        Args:
            account_id: Account ID

        Returns:
            Account entity or None if not found
        """
        return self.db.get_account(account_id)

    def require_account(self, account_id: int) -> FinanceAccount:
        """Get account by ID or raise NotFoundError."""
        account = self.db.get_account(account_id)
        if account is None:
            raise NotFoundError(account_not_found(account_id))
        return account

    def list_accounts(
        self, account_class: Optional[AccountClass] = None, active_only: bool = False
    ) -> list[FinanceAccount]:
        """List accounts.

        Args:
            account_class: Optional class filter
            active_only: If True, skip deactivated accounts

        Returns:
            List of account entities ordered by name
        """
        return self.db.list_accounts(account_class=account_class, active_only=active_only)

    def deactivate_account(self, account_id: int) -> None:
        """Deactivate an account so it is no longer offered for new transactions.

        Raises:
            NotFoundError: If account not found
        """
        self.require_account(account_id)
        self.db.set_account_active(account_id, False)
        logger.info("account_deactivated", extra={"account_id": account_id})

    def account_classes(self) -> dict[int, AccountClass]:
        """Map every known account ID to its class, for draft validation."""
        return {acc.id: acc.account_class for acc in self.db.list_accounts()}

    def selectable_accounts(self, kind: OperationKind, side: AccountSide) -> list[FinanceAccount]:
        """List the accounts a form offers for one side of an operation."""
        return selectable_accounts(kind, side, self.db.list_accounts(active_only=True))
