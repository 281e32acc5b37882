"""Operation rule table.

Each operation kind maps to one OperationRule describing which accounts and
whether a category the transaction needs, and which account classes may sit
on each side. The table is plain data: validation and option filtering read
it, nothing branches on operation kinds directly.
"""

from enum import Enum
from types import MappingProxyType
from typing import Iterable, Mapping

from erpledger.domain.entities import (
    AccountClass,
    FinanceAccount,
    OperationKind,
    OperationRule,
)
from erpledger.domain.errors import ConfigurationError, missing_operation_rules


class AccountSide(str, Enum):
    """Side of a transaction an account is chosen for."""

    SOURCE = "source"
    DESTINATION = "destination"


INTERNAL_MONEY = frozenset({AccountClass.CASHBOX, AccountClass.BANK})

OPERATION_RULES: Mapping[OperationKind, OperationRule] = MappingProxyType(
    {
        OperationKind.INCOME: OperationRule(
            requires_source=False,
            requires_destination=True,
            requires_category=True,
            allowed_destination_classes=INTERNAL_MONEY,
            destination_label="Deposit to (cashbox/bank)",
        ),
        OperationKind.EXPENSE: OperationRule(
            requires_source=True,
            requires_destination=False,
            requires_category=True,
            allowed_source_classes=INTERNAL_MONEY,
            source_label="Pay from (cashbox/bank)",
        ),
        OperationKind.TRANSFER: OperationRule(
            requires_source=True,
            requires_destination=True,
            requires_category=False,
            allowed_source_classes=INTERNAL_MONEY,
            allowed_destination_classes=INTERNAL_MONEY,
            source_label="From (cashbox/bank)",
            destination_label="To (cashbox/bank)",
        ),
        OperationKind.SUPPLIER_INVOICE: OperationRule(
            requires_source=False,
            requires_destination=True,
            requires_category=False,
            allowed_destination_classes=frozenset({AccountClass.SUPPLIER}),
            destination_label="Supplier (debt accrual)",
        ),
        OperationKind.PAYMENT_TO_SUPP: OperationRule(
            requires_source=True,
            requires_destination=True,
            requires_category=False,
            allowed_source_classes=INTERNAL_MONEY,
            allowed_destination_classes=frozenset({AccountClass.SUPPLIER}),
            source_label="Pay from (cashbox/bank)",
            destination_label="Recipient (supplier)",
        ),
        OperationKind.DEALER_INVOICE: OperationRule(
            requires_source=True,
            requires_destination=False,
            requires_category=False,
            allowed_source_classes=frozenset({AccountClass.DEALER}),
            source_label="Dealer (debt accrual)",
        ),
        OperationKind.PAYMENT_FROM_DLR: OperationRule(
            requires_source=True,
            requires_destination=True,
            requires_category=False,
            allowed_source_classes=frozenset({AccountClass.DEALER}),
            allowed_destination_classes=INTERNAL_MONEY,
            source_label="Payer (dealer)",
            destination_label="Deposit to (cashbox/bank)",
        ),
        OperationKind.SALARY_PAYOUT: OperationRule(
            requires_source=True,
            requires_destination=True,
            requires_category=False,
            allowed_source_classes=INTERNAL_MONEY,
            allowed_destination_classes=frozenset({AccountClass.EMPLOYEE}),
            source_label="Pay from (cashbox/bank)",
            destination_label="Employee",
        ),
        OperationKind.OWNER_WITHDRAW: OperationRule(
            requires_source=True,
            requires_destination=True,
            requires_category=False,
            allowed_source_classes=INTERNAL_MONEY,
            allowed_destination_classes=frozenset({AccountClass.OWNER}),
            source_label="Pay from (cashbox/bank)",
            destination_label="Owner account",
        ),
    }
)

# Kinds offered by the manual transaction form. Invoices and salary payouts
# are raised by their own workflows but validate through the same table.
FORM_OPERATION_KINDS: tuple[OperationKind, ...] = (
    OperationKind.INCOME,
    OperationKind.EXPENSE,
    OperationKind.TRANSFER,
    OperationKind.PAYMENT_TO_SUPP,
    OperationKind.PAYMENT_FROM_DLR,
    OperationKind.OWNER_WITHDRAW,
)


def check_rule_table(rules: Mapping[OperationKind, OperationRule] = OPERATION_RULES) -> None:
    """Ensure every operation kind has a rule.

    Raises:
        ConfigurationError: If any operation kind is unmapped
    """
    missing = [kind.value for kind in OperationKind if kind not in rules]
    if missing:
        raise ConfigurationError(missing_operation_rules(missing))


def rule_for(
    kind: OperationKind, rules: Mapping[OperationKind, OperationRule] = OPERATION_RULES
) -> OperationRule:
    """Return the rule for an operation kind.

    Args:
        kind: Operation kind
        rules: Rule table to read (defaults to the built-in table)

    Returns:
        OperationRule for the kind

    Raises:
        ConfigurationError: If the kind has no rule
    """
    try:
        return rules[kind]
    except KeyError:
        raise ConfigurationError(
            missing_operation_rules([str(getattr(kind, "value", kind))])
        ) from None


def allowed_classes(rule: OperationRule, side: AccountSide) -> frozenset[AccountClass]:
    """Return the account classes a rule allows on one side."""
    if side is AccountSide.SOURCE:
        return rule.allowed_source_classes
    return rule.allowed_destination_classes


def selectable_accounts(
    kind: OperationKind, side: AccountSide, accounts: Iterable[FinanceAccount]
) -> list[FinanceAccount]:
    """Filter accounts down to the options offered for one side of an operation.

    Args:
        kind: Operation kind being composed
        side: Source or destination
        accounts: Candidate accounts

    Returns:
        Active accounts whose class the rule allows on that side, in input order
    """
    classes = allowed_classes(rule_for(kind), side)
    return [acc for acc in accounts if acc.is_active and acc.account_class in classes]


check_rule_table()
