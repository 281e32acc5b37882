"""Period resolution for attendance and payroll screens.

A period is either a fixed slice of a reference month (first half, second
half, the whole month) or explicit custom bounds. Resolution is pure date
arithmetic; callers refetch their data keyed on the resulting range.
"""

from datetime import date
from enum import Enum
from typing import Optional

from dateutil.relativedelta import relativedelta

from erpledger.domain.entities import ReferenceMonth, ResolvedPeriod
from erpledger.domain.errors import ValidationError

FIRST_HALF_LAST_DAY = 15


class PeriodType(str, Enum):
    """How a period is derived from its inputs."""

    FIRST_HALF = "FIRST_HALF"
    SECOND_HALF = "SECOND_HALF"
    FULL_MONTH = "FULL_MONTH"
    CUSTOM = "CUSTOM"


_LABELS = {
    PeriodType.FIRST_HALF: "Advance (1-15)",
    PeriodType.SECOND_HALF: "Salary (16-end)",
    PeriodType.FULL_MONTH: "Full month",
    PeriodType.CUSTOM: "Custom period",
}


def last_day_of_month(month: ReferenceMonth) -> date:
    """Return the last calendar day of a month, leap years included."""
    # relativedelta clamps day=31 to the month length
    return month.first_day() + relativedelta(day=31)


def resolve_period(
    period_type: PeriodType,
    reference_month: Optional[ReferenceMonth],
    custom_from: Optional[date] = None,
    custom_to: Optional[date] = None,
) -> ResolvedPeriod:
    """Turn a period type and its inputs into an inclusive date range.

    Args:
        period_type: Period type
        reference_month: Month the fixed period types slice (ignored for CUSTOM)
        custom_from: Start date, required for CUSTOM
        custom_to: End date, required for CUSTOM

    Returns:
        ResolvedPeriod with both bounds inclusive

    Raises:
        ValidationError: If CUSTOM bounds are missing or reversed, or a fixed
            period type has no reference month
    """
    if period_type is PeriodType.CUSTOM:
        if custom_from is None or custom_to is None:
            raise ValidationError("Custom period requires both a start and an end date")
        if custom_from > custom_to:
            raise ValidationError(
                f"Custom period start ({custom_from}) cannot be after its end ({custom_to})"
            )
        return ResolvedPeriod(date_from=custom_from, date_to=custom_to)

    if reference_month is None:
        raise ValidationError(f"Period type {period_type.value} requires a reference month")

    first = reference_month.first_day()
    last = last_day_of_month(reference_month)

    if period_type is PeriodType.FIRST_HALF:
        return ResolvedPeriod(date_from=first, date_to=first.replace(day=FIRST_HALF_LAST_DAY))
    if period_type is PeriodType.SECOND_HALF:
        return ResolvedPeriod(date_from=first.replace(day=FIRST_HALF_LAST_DAY + 1), date_to=last)
    return ResolvedPeriod(date_from=first, date_to=last)


def default_period_type(today: Optional[date] = None) -> PeriodType:
    """Pick the half of the month that contains today."""
    today = today or date.today()
    if today.day <= FIRST_HALF_LAST_DAY:
        return PeriodType.FIRST_HALF
    return PeriodType.SECOND_HALF


def default_custom_bounds(today: Optional[date] = None) -> tuple[date, date]:
    """Initial custom bounds: the first of the current month through today."""
    today = today or date.today()
    return today.replace(day=1), today


def period_label(period_type: PeriodType) -> str:
    """Return the display label for a period type."""
    return _LABELS[period_type]
