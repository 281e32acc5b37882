"""Domain model entities for erpledger.

These are pure data classes and enumerations representing finance concepts,
independent of database schema. Persisted records are frozen; the
transaction draft is the one mutable value, edited field by field before it
is submitted.
"""

from dataclasses import dataclass
from datetime import datetime, date, UTC
from decimal import Decimal
from enum import Enum
from typing import Any, Optional

from dateutil.relativedelta import relativedelta

from erpledger.domain.errors import ConfigurationError, ValidationError


class OperationKind(str, Enum):
    """Kinds of finance operations a transaction can record."""

    INCOME = "INCOME"
    EXPENSE = "EXPENSE"
    TRANSFER = "TRANSFER"
    SUPPLIER_INVOICE = "SUPPLIER_INVOICE"
    PAYMENT_TO_SUPP = "PAYMENT_TO_SUPP"
    DEALER_INVOICE = "DEALER_INVOICE"
    PAYMENT_FROM_DLR = "PAYMENT_FROM_DLR"
    SALARY_PAYOUT = "SALARY_PAYOUT"
    OWNER_WITHDRAW = "OWNER_WITHDRAW"


class AccountClass(str, Enum):
    """Role of a finance account in the ledger."""

    CASHBOX = "CASHBOX"
    BANK = "BANK"
    SUPPLIER = "SUPPLIER"
    DEALER = "DEALER"
    EMPLOYEE = "EMPLOYEE"
    OWNER = "OWNER"


class CategoryType(str, Enum):
    """Direction of money a finance category describes."""

    INCOME = "INCOME"
    EXPENSE = "EXPENSE"


class TransactionStatus(str, Enum):
    """Lifecycle state of a posted transaction."""

    ACTIVE = "ACTIVE"
    CANCELLED = "CANCELLED"


@dataclass(frozen=True)
class OperationRule:
    """Which accounts and category an operation kind requires.

    Labels are for presentation only and take no part in validation.
    """

    requires_source: bool
    requires_destination: bool
    requires_category: bool
    allowed_source_classes: frozenset[AccountClass] = frozenset()
    allowed_destination_classes: frozenset[AccountClass] = frozenset()
    source_label: str = ""
    destination_label: str = ""

    def __post_init__(self):
        if not self.requires_source and self.allowed_source_classes:
            raise ConfigurationError("Source classes given for an operation without a source")
        if not self.requires_destination and self.allowed_destination_classes:
            raise ConfigurationError(
                "Destination classes given for an operation without a destination"
            )


@dataclass(frozen=True)
class FinanceAccount:
    """Finance account domain entity."""

    id: int
    name: str
    account_class: AccountClass
    balance: Decimal
    is_active: bool
    description: Optional[str]
    created_at: datetime


@dataclass(frozen=True)
class FinanceSubcategory:
    """Subcategory refining a finance category."""

    id: int
    category_id: int
    name: str
    is_active: bool


@dataclass(frozen=True)
class FinanceCategory:
    """Finance category domain entity with its subcategories."""

    id: int
    name: str
    category_type: CategoryType
    is_active: bool
    description: Optional[str]
    subcategories: tuple[FinanceSubcategory, ...] = ()


@dataclass(frozen=True)
class Transaction:
    """Posted transaction domain entity."""

    id: int
    operation_kind: OperationKind
    amount: Decimal
    occurred_at: datetime
    source_account_id: Optional[int]
    destination_account_id: Optional[int]
    category_id: Optional[int]
    subcategory_id: Optional[int]
    description: Optional[str]
    status: TransactionStatus
    cancellation_reason: Optional[str]
    created_at: datetime


@dataclass
class TransactionDraft:
    """A transaction being composed, before it is validated and submitted."""

    amount: Decimal
    operation_kind: OperationKind
    occurred_at: datetime
    source_account_id: Optional[int] = None
    destination_account_id: Optional[int] = None
    category_id: Optional[int] = None
    subcategory_id: Optional[int] = None
    description: Optional[str] = None

    @classmethod
    def empty(
        cls,
        initial_kind: OperationKind = OperationKind.EXPENSE,
        now: Optional[datetime] = None,
    ) -> "TransactionDraft":
        """Create a blank draft as a creation dialog opens."""
        return cls(
            amount=Decimal("0"),
            operation_kind=initial_kind,
            occurred_at=now or datetime.now(UTC),
        )

    def change_operation_kind(self, kind: OperationKind) -> None:
        """Switch the operation kind, clearing account and category choices."""
        self.operation_kind = kind
        self.source_account_id = None
        self.destination_account_id = None
        self.category_id = None
        self.subcategory_id = None

    def to_request(self) -> dict[str, Any]:
        """Build the submission payload, omitting absent optional fields."""
        payload: dict[str, Any] = {
            "amount": str(self.amount),
            "operationType": self.operation_kind.value,
            "transactionDate": self.occurred_at.isoformat(),
        }
        optional = {
            "description": self.description,
            "fromAccountId": self.source_account_id,
            "toAccountId": self.destination_account_id,
            "categoryId": self.category_id,
            "subcategoryId": self.subcategory_id,
        }
        payload.update({key: value for key, value in optional.items() if value is not None})
        return payload


@dataclass(frozen=True)
class ResolvedPeriod:
    """Concrete inclusive date range."""

    date_from: date
    date_to: date

    @property
    def days(self) -> int:
        return (self.date_to - self.date_from).days + 1

    def contains(self, day: date) -> bool:
        return self.date_from <= day <= self.date_to

    def as_query_params(self) -> dict[str, str]:
        """Return the range as ``dateFrom``/``dateTo`` ISO calendar dates."""
        return {"dateFrom": self.date_from.isoformat(), "dateTo": self.date_to.isoformat()}


@dataclass(frozen=True)
class ReferenceMonth:
    """A calendar month identified by year and month number."""

    year: int
    month: int

    def __post_init__(self):
        if not 1 <= self.month <= 12:
            raise ValidationError(f"Month must be between 1 and 12, got {self.month}")

    @classmethod
    def of(cls, day: date) -> "ReferenceMonth":
        return cls(year=day.year, month=day.month)

    def first_day(self) -> date:
        return date(self.year, self.month, 1)

    def next(self) -> "ReferenceMonth":
        return ReferenceMonth.of(self.first_day() + relativedelta(months=1))

    def previous(self) -> "ReferenceMonth":
        return ReferenceMonth.of(self.first_day() - relativedelta(months=1))

    def __str__(self) -> str:
        return f"{self.year:04d}-{self.month:02d}"
