"""Domain layer for erpledger.

Only the pure rule, validation and period modules are re-exported here; the
services import the database layer and are imported from their own modules.
"""

from erpledger.domain.entities import (
    AccountClass,
    OperationKind,
    OperationRule,
    ReferenceMonth,
    ResolvedPeriod,
    TransactionDraft,
)
from erpledger.domain.operation_rules import OPERATION_RULES, AccountSide, rule_for
from erpledger.domain.period import PeriodType, default_period_type, resolve_period
from erpledger.domain.validation import Valid, ValidationResult, Violation, ViolationKind, validate

__all__ = [
    "AccountClass",
    "AccountSide",
    "OperationKind",
    "OperationRule",
    "OPERATION_RULES",
    "PeriodType",
    "ReferenceMonth",
    "ResolvedPeriod",
    "TransactionDraft",
    "Valid",
    "ValidationResult",
    "Violation",
    "ViolationKind",
    "default_period_type",
    "resolve_period",
    "rule_for",
    "validate",
]
