"""CLI error handling helpers."""

import click

from erpledger.domain.errors import DomainError
from erpledger.domain.validation import ValidationResult, message_for


def handle_domain_error(ctx: click.Context, error: DomainError | ValueError) -> None:
    """Render a domain error and exit with failure."""
    click.echo(f"Error: {error}", err=True)
    ctx.exit(1)


def echo_violations(result: ValidationResult) -> None:
    """Print every violation under the field it concerns."""
    click.echo("Error: Transaction is not valid:", err=True)
    for violation in result.violations:
        click.echo(f"  {violation.field}: {message_for(violation)}", err=True)
