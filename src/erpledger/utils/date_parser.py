"""Date and month parsing utilities."""

import re
from datetime import date, timedelta
from dateutil import parser as date_parser
from dateutil.relativedelta import relativedelta

from erpledger.domain.entities import ReferenceMonth

_MONTH_PATTERN = re.compile(r"^(\d{4})-(\d{1,2})$")


def parse_date(date_str: str) -> date:
    """Parse a date string into a date object.

    Supports various formats including relative dates:
    - Absolute dates: "2024-01-15", "January 15, 2024", etc.
    - Relative dates: "today", "yesterday", "tomorrow"

    Args:
        date_str: Date string in various formats

    Returns:
        Date object

    Raises:
        ValueError: If date string cannot be parsed
    """
    date_str = date_str.strip().lower()
    today = date.today()

    relative_dates = {
        "today": today,
        "yesterday": today - timedelta(days=1),
        "tomorrow": today + timedelta(days=1),
    }

    if date_str in relative_dates:
        return relative_dates[date_str]

    try:
        dt = date_parser.parse(date_str)
        return dt.date()
    except (ValueError, TypeError, OverflowError) as e:
        raise ValueError(f"Could not parse date '{date_str}': {e}")


def parse_month(month_str: str) -> ReferenceMonth:
    """Parse a month reference.

    Supports:
    - "YYYY-MM" (e.g., "2024-02")
    - "this month", "last month", "next month"

    Args:
        month_str: Month string

    Returns:
        ReferenceMonth

    Raises:
        ValueError: If month string cannot be parsed
    """
    month_str = month_str.strip().lower()
    this_month = date.today().replace(day=1)

    relative_months = {
        "this month": this_month,
        "last month": this_month - relativedelta(months=1),
        "next month": this_month + relativedelta(months=1),
    }
    if month_str in relative_months:
        return ReferenceMonth.of(relative_months[month_str])

    match = _MONTH_PATTERN.match(month_str)
    if match is None:
        raise ValueError(f"Could not parse month '{month_str}': expected YYYY-MM")

    return ReferenceMonth(year=int(match.group(1)), month=int(match.group(2)))
