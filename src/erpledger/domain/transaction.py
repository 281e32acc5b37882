"""Transaction domain service.

Drafts are validated against the operation rule table, with account classes
checked against the stored accounts, before they are posted. Posting moves
the amount out of the source account and into the destination account;
cancelling reverses that movement.
"""

from decimal import Decimal
from typing import Optional
from erpledger.database.base import Database
from erpledger.domain.entities import (
    ResolvedPeriod,
    Transaction,
    TransactionDraft,
    TransactionStatus,
)
from erpledger.domain.errors import (
    ConflictError,
    DraftValidationError,
    NotFoundError,
    ValidationError,
    category_not_found,
    subcategory_not_found,
    subcategory_outside_category,
    transaction_not_found,
)
from erpledger.domain.operation_rules import rule_for
from erpledger.domain.validation import ValidationResult, validate
from erpledger.logging_config import get_logger

logger = get_logger(__name__)

# Scale of the stored amount and balance columns
AMOUNT_QUANTUM = Decimal("0.01")


class TransactionService:
    """Service for posting, cancelling and listing finance transactions."""

    def __init__(self, db: Database):
        """Initialize transaction service.

        Args:
            db: Database instance
        """
        self.db = db

    def check_draft(self, draft: TransactionDraft) -> ValidationResult:
        """Validate a draft against the rule table and the stored account classes."""
        # Deactivated accounts are treated like unknown ones
        accounts = {
            acc.id: acc.account_class for acc in self.db.list_accounts(active_only=True)
        }
        return validate(draft, accounts=accounts)

    def _check_references(self, draft: TransactionDraft) -> None:
        """Check the amount scale, that unused sides are empty and that categories exist."""
        if draft.amount != draft.amount.quantize(AMOUNT_QUANTUM):
            raise ValidationError(
                f"Amount {draft.amount} has more than 2 decimal places"
            )

        rule = rule_for(draft.operation_kind)
        kind = draft.operation_kind.value
        if not rule.requires_source and draft.source_account_id is not None:
            raise ValidationError(f"Operation {kind} does not take a source account")
        if not rule.requires_destination and draft.destination_account_id is not None:
            raise ValidationError(f"Operation {kind} does not take a destination account")

        if draft.subcategory_id is not None and draft.category_id is None:
            raise ValidationError("A subcategory requires its category to be selected")

        if draft.category_id is not None:
            if self.db.get_category(draft.category_id) is None:
                raise NotFoundError(category_not_found(draft.category_id))

        if draft.subcategory_id is not None:
            subcategory = self.db.get_subcategory(draft.subcategory_id)
            if subcategory is None:
                raise NotFoundError(subcategory_not_found(draft.subcategory_id))
            if subcategory.category_id != draft.category_id:
                raise ValidationError(
                    subcategory_outside_category(draft.subcategory_id, draft.category_id)
                )

    def create_transaction(self, draft: TransactionDraft) -> int:
        """Validate a draft and post it.

        Args:
            draft: Transaction draft to submit

        Returns:
            Transaction ID

        Raises:
            DraftValidationError: If the draft has field violations
            ValidationError: If the amount has more than 2 decimal places, an
                unused side carries an account or the subcategory does not
                refine the category
            NotFoundError: If the category or subcategory doesn't exist
        """
        result = self.check_draft(draft)
        if not result.is_valid:
            logger.warning(
                "transaction_draft_rejected",
                extra={
                    "operation_kind": draft.operation_kind.value,
                    "violations": [f"{v.field}:{v.kind.value}" for v in result.violations],
                },
            )
            raise DraftValidationError(result)

        self._check_references(draft)

        transaction_id = self.db.post_transaction(
            operation_kind=draft.operation_kind,
            amount=draft.amount,
            occurred_at=draft.occurred_at,
            source_account_id=draft.source_account_id,
            destination_account_id=draft.destination_account_id,
            category_id=draft.category_id,
            subcategory_id=draft.subcategory_id,
            description=draft.description,
        )
        logger.info(
            "transaction_posted",
            extra={
                "transaction_id": transaction_id,
                "operation_kind": draft.operation_kind.value,
                "amount": str(draft.amount),
            },
        )
        return transaction_id

    def cancel_transaction(self, transaction_id: int, reason: str) -> None:
        """Cancel an active transaction and reverse its balance movement.

        Args:
            transaction_id: Transaction ID
            reason: Why the transaction is cancelled

        Raises:
            ValidationError: If the reason is blank
            NotFoundError: If the transaction doesn't exist
            ConflictError: If the transaction is already cancelled
        """
        reason = (reason or "").strip()
        if not reason:
            raise ValidationError("A cancellation reason is required")

        txn = self.require_transaction(transaction_id)
        if txn.status is TransactionStatus.CANCELLED:
            raise ConflictError(f"Transaction {transaction_id} is already cancelled")

        self.db.cancel_transaction(transaction_id, reason)
        logger.info(
            "transaction_cancelled",
            extra={"transaction_id": transaction_id, "reason": reason},
        )

    def get_transaction(self, transaction_id: int) -> Optional[Transaction]:
        """Get transaction by ID.

        Args:
            transaction_id: Transaction ID

        Returns:
            Transaction entity or None if not found
        """
        return self.db.get_transaction(transaction_id)

    def require_transaction(self, transaction_id: int) -> Transaction:
        """Get transaction by ID or raise NotFoundError."""
        txn = self.db.get_transaction(transaction_id)
        if txn is None:
            raise NotFoundError(transaction_not_found(transaction_id))
        return txn

    def list_transactions(
        self,
        account_id: Optional[int] = None,
        period: Optional[ResolvedPeriod] = None,
    ) -> list[Transaction]:
        """List transactions, newest first.

        Args:
            account_id: Optional account filter (either side)
            period: Optional inclusive date range

        Returns:
            List of transaction entities
        """
        start_date = period.date_from if period is not None else None
        end_date = period.date_to if period is not None else None
        return self.db.list_transactions(
            start_date=start_date, end_date=end_date, account_id=account_id
        )
