"""CLI helpers for account resolution and error handling."""

from __future__ import annotations

import click
from erpledger.domain.account import AccountService
from erpledger.utils.account_resolver import resolve_account


def resolve_account_or_exit(
    ctx: click.Context, account_service: AccountService, account: str | int
) -> int:
    """Resolve account name or ID, or exit with a CLI error.

    This keeps error messaging and exit behavior consistent across commands.
    """
    try:
        return resolve_account(account_service, account)
    except ValueError as exc:
        click.echo(f"Error: {exc}", err=True)
        ctx.exit(1)


def resolve_optional_account_or_exit(
    ctx: click.Context, account_service: AccountService, account: str | None
) -> int | None:
    """Resolve an optional account option; None stays None."""
    if account is None:
        return None
    return resolve_account_or_exit(ctx, account_service, account)
