"""Transaction draft validation.

Every check runs on every call so that all simultaneous problems are
reported together, each attached to the field it concerns. The validator
never raises for a well-typed draft; it returns a ValidationResult.
"""

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Mapping, Optional

from erpledger.domain.entities import AccountClass, TransactionDraft
from erpledger.domain.operation_rules import rule_for

AMOUNT = "amount"
SOURCE_ACCOUNT = "source_account_id"
DESTINATION_ACCOUNT = "destination_account_id"
CATEGORY = "category_id"


class ViolationKind(str, Enum):
    """Reasons a draft field is rejected."""

    NON_POSITIVE_AMOUNT = "NonPositiveAmount"
    MISSING_REQUIRED_ACCOUNT = "MissingRequiredAccount"
    SOURCE_EQUALS_DESTINATION = "SourceEqualsDestination"
    MISSING_REQUIRED_CATEGORY = "MissingRequiredCategory"
    ACCOUNT_CLASS_NOT_ALLOWED = "AccountClassNotAllowed"


_MESSAGES = {
    (AMOUNT, ViolationKind.NON_POSITIVE_AMOUNT): "Amount must be greater than 0",
    (SOURCE_ACCOUNT, ViolationKind.MISSING_REQUIRED_ACCOUNT): "Select the account to pay from",
    (DESTINATION_ACCOUNT, ViolationKind.MISSING_REQUIRED_ACCOUNT): "Select the account to deposit to",
    (DESTINATION_ACCOUNT, ViolationKind.SOURCE_EQUALS_DESTINATION): (
        "Source and destination accounts must differ"
    ),
    (CATEGORY, ViolationKind.MISSING_REQUIRED_CATEGORY): "Select a category",
    (SOURCE_ACCOUNT, ViolationKind.ACCOUNT_CLASS_NOT_ALLOWED): (
        "This account cannot be used as the source of this operation"
    ),
    (DESTINATION_ACCOUNT, ViolationKind.ACCOUNT_CLASS_NOT_ALLOWED): (
        "This account cannot be used as the destination of this operation"
    ),
}


@dataclass(frozen=True)
class Violation:
    """One rejected field and the reason."""

    field: str
    kind: ViolationKind


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of validating a draft: valid when there are no violations."""

    violations: tuple[Violation, ...] = ()

    @property
    def is_valid(self) -> bool:
        return not self.violations

    def __bool__(self) -> bool:
        return self.is_valid

    def errors_by_field(self) -> dict[str, list[ViolationKind]]:
        """Group violation kinds by field, keeping their order."""
        grouped: dict[str, list[ViolationKind]] = {}
        for violation in self.violations:
            grouped.setdefault(violation.field, []).append(violation.kind)
        return grouped


Valid = ValidationResult()


def message_for(violation: Violation) -> str:
    """Return a user-facing message for a violation."""
    return _MESSAGES.get((violation.field, violation.kind), violation.kind.value)


def _class_violation(
    field: str,
    account_id: Optional[int],
    allowed: frozenset[AccountClass],
    accounts: Mapping[int, AccountClass],
) -> Optional[Violation]:
    if account_id is None:
        return None
    if accounts.get(account_id) not in allowed:
        return Violation(field, ViolationKind.ACCOUNT_CLASS_NOT_ALLOWED)
    return None


def validate(
    draft: TransactionDraft, accounts: Optional[Mapping[int, AccountClass]] = None
) -> ValidationResult:
    """Validate a transaction draft against the operation rule table.

    Args:
        draft: Draft to check
        accounts: Optional map of account ID to account class. When given,
            required accounts must belong to a class the rule allows; unknown
            IDs are rejected the same way.

    Returns:
        ValidationResult listing every violation found, in field order
    """
    violations: list[Violation] = []

    amount = None if draft.amount is None else Decimal(draft.amount)
    if amount is None or not amount.is_finite() or amount <= 0:
        violations.append(Violation(AMOUNT, ViolationKind.NON_POSITIVE_AMOUNT))

    rule = rule_for(draft.operation_kind)
    source = draft.source_account_id
    destination = draft.destination_account_id

    if rule.requires_source and source is None:
        violations.append(Violation(SOURCE_ACCOUNT, ViolationKind.MISSING_REQUIRED_ACCOUNT))

    if rule.requires_destination and destination is None:
        violations.append(Violation(DESTINATION_ACCOUNT, ViolationKind.MISSING_REQUIRED_ACCOUNT))

    # Only operations that move money between two mandated accounts can collide
    if (
        rule.requires_source
        and rule.requires_destination
        and source is not None
        and source == destination
    ):
        violations.append(Violation(DESTINATION_ACCOUNT, ViolationKind.SOURCE_EQUALS_DESTINATION))

    if rule.requires_category and draft.category_id is None:
        violations.append(Violation(CATEGORY, ViolationKind.MISSING_REQUIRED_CATEGORY))

    if accounts is not None:
        checks = []
        if rule.requires_source:
            checks.append((SOURCE_ACCOUNT, source, rule.allowed_source_classes))
        if rule.requires_destination:
            checks.append((DESTINATION_ACCOUNT, destination, rule.allowed_destination_classes))
        for field, account_id, allowed in checks:
            violation = _class_violation(field, account_id, allowed, accounts)
            if violation is not None:
                violations.append(violation)

    return ValidationResult(tuple(violations))
