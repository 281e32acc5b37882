"""Payroll commands."""

import json

import click
from erpledger.cli.error_handling import handle_domain_error
from erpledger.cli.period_options import period_options, resolve_cli_period
from erpledger.domain.payroll import PayrollTarget, build_payroll_request


@click.group()
def payroll_group():
    """Payroll helpers."""
    pass


@payroll_group.command("request")
@period_options
@click.option(
    "--target",
    type=click.Choice([t.value for t in PayrollTarget], case_sensitive=False),
    default=PayrollTarget.ALL.value,
    show_default=True,
    help="Who the calculation covers",
)
@click.option("--department", "department_id", type=int, help="Department ID (with --target DEPARTMENT)")
@click.option("--employee", "employee_id", type=int, help="Employee ID (with --target EMPLOYEE)")
@click.pass_context
def payroll_request(
    ctx,
    period_type: str | None,
    month: str | None,
    custom_from: str | None,
    custom_to: str | None,
    target: str,
    department_id: int | None,
    employee_id: int | None,
):
    """Build the payroll calculation request for a period.

    Examples:
        erpledger payroll request --period FIRST_HALF --month 2024-02
        erpledger payroll request --period FULL_MONTH --target DEPARTMENT --department 3
    """
    period = resolve_cli_period(
        ctx,
        period_type=period_type,
        month=month,
        custom_from=custom_from,
        custom_to=custom_to,
    )
    try:
        request = build_payroll_request(
            period,
            PayrollTarget(target.upper()),
            department_id=department_id,
            employee_id=employee_id,
        )
    except ValueError as e:
        handle_domain_error(ctx, e)

    click.echo(json.dumps(request))


def register_commands(cli):
    """Register payroll commands with main CLI."""
    cli.add_command(payroll_group, name="payroll")
