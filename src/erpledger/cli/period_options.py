"""CLI helpers for period resolution."""

from datetime import date
from typing import Optional

import click

from erpledger.domain.entities import ReferenceMonth, ResolvedPeriod
from erpledger.domain.period import (
    PeriodType,
    default_custom_bounds,
    default_period_type,
    resolve_period,
)
from erpledger.utils.date_parser import parse_date, parse_month

PERIOD_TYPE_CHOICE = click.Choice([p.value for p in PeriodType], case_sensitive=False)


def period_options(func):
    """Attach the shared --period/--month/--from/--to options to a command."""
    func = click.option("--to", "custom_to", help="Custom period end date (with --period custom)")(func)
    func = click.option(
        "--from", "custom_from", help="Custom period start date (with --period custom)"
    )(func)
    func = click.option(
        "--month", help="Reference month (YYYY-MM, 'this month', 'last month'); default: this month"
    )(func)
    func = click.option(
        "--period",
        "period_type",
        type=PERIOD_TYPE_CHOICE,
        help="Period type (default: the half of the month containing today)",
    )(func)
    return func


def resolve_cli_period(
    ctx: click.Context,
    *,
    period_type: Optional[str],
    month: Optional[str],
    custom_from: Optional[str],
    custom_to: Optional[str],
    today: Optional[date] = None,
) -> ResolvedPeriod:
    """Resolve CLI period options into a ResolvedPeriod, or exit with an error."""
    today = today or date.today()
    kind = PeriodType(period_type.upper()) if period_type else default_period_type(today)

    if kind is not PeriodType.CUSTOM and (custom_from or custom_to):
        click.echo("Error: --from/--to can only be used with --period custom.", err=True)
        ctx.exit(1)

    reference = ReferenceMonth.of(today)
    if month:
        try:
            reference = parse_month(month)
        except ValueError as e:
            click.echo(f"Error: Invalid month: {e}", err=True)
            ctx.exit(1)

    start = end = None
    if kind is PeriodType.CUSTOM:
        start, end = default_custom_bounds(today)
        try:
            if custom_from:
                start = parse_date(custom_from)
            if custom_to:
                end = parse_date(custom_to)
        except ValueError as e:
            click.echo(f"Error: Invalid date: {e}", err=True)
            ctx.exit(1)

    try:
        return resolve_period(kind, reference, start, end)
    except ValueError as e:
        click.echo(f"Error: {e}", err=True)
        ctx.exit(1)
