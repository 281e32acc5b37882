"""Period resolution command."""

import json

import click
from erpledger.cli.period_options import period_options, resolve_cli_period
from erpledger.domain.period import PeriodType, default_period_type, period_label


@click.command("period")
@period_options
@click.option("--json", "as_json", is_flag=True, help="Print dateFrom/dateTo query parameters as JSON")
@click.pass_context
def show_period(
    ctx,
    period_type: str | None,
    month: str | None,
    custom_from: str | None,
    custom_to: str | None,
    as_json: bool,
):
    """Resolve a period into concrete dates.

    Examples:
        erpledger period --period FIRST_HALF --month 2024-02
        erpledger period --period CUSTOM --from 2024-01-03 --to 2024-01-20 --json
    """
    period = resolve_cli_period(
        ctx,
        period_type=period_type,
        month=month,
        custom_from=custom_from,
        custom_to=custom_to,
    )
    if as_json:
        click.echo(json.dumps(period.as_query_params()))
        return
    kind = PeriodType(period_type.upper()) if period_type else default_period_type()
    click.echo(f"Period: {period_label(kind)}")
    click.echo(f"From: {period.date_from.isoformat()}")
    click.echo(f"To:   {period.date_to.isoformat()}")
    click.echo(f"Days: {period.days}")


def register_commands(cli):
    """Register period command with main CLI."""
    cli.add_command(show_period)
