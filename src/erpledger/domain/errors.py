"""Shared domain error messages and error types."""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from erpledger.domain.validation import ValidationResult


class DomainError(ValueError):
    """Base class for domain-level errors.

    Subclasses provide semantic categories while preserving ValueError
    compatibility for existing error handling.
    """


class ValidationError(DomainError):
    """Invalid input or failed validation in domain logic."""


class NotFoundError(DomainError):
    """Requested domain entity does not exist."""


class ConflictError(DomainError):
    """Domain conflict, such as uniqueness violations or illegal state changes."""


class ConfigurationError(DomainError):
    """Static configuration is inconsistent (a programming error, not user input)."""


class DraftValidationError(ValidationError):
    """A transaction draft failed validation.

    The full ValidationResult is kept so callers can render every violation
    next to the field it concerns.
    """

    def __init__(self, result: "ValidationResult"):
        self.result = result
        fields = ", ".join(f"{v.field} ({v.kind.value})" for v in result.violations)
        super().__init__(f"Transaction draft is invalid: {fields}")


def account_not_found(account_id: int) -> str:
    """Return message for missing account."""
    return f"Account {account_id} not found"


def category_not_found(category_id: int) -> str:
    """Return message for missing category by ID."""
    return f"Category {category_id} not found"


def subcategory_not_found(subcategory_id: int) -> str:
    """Return message for missing subcategory by ID."""
    return f"Subcategory {subcategory_id} not found"


def subcategory_outside_category(subcategory_id: int, category_id: int) -> str:
    """Return message when a subcategory does not refine the chosen category."""
    return f"Subcategory {subcategory_id} does not belong to category {category_id}"


def transaction_not_found(transaction_id: int) -> str:
    """Return message for missing transaction."""
    return f"Transaction {transaction_id} not found"


def duplicate_account_name(name: str) -> str:
    """Return message for duplicate account name."""
    return f"Account with name '{name}' already exists"


def missing_operation_rules(kinds: list[str]) -> str:
    """Return message when operation kinds have no rule."""
    return f"No operation rule configured for: {', '.join(kinds)}"
