"""Finance account management commands."""

import click
from erpledger.cli.account_resolution import resolve_account_or_exit
from erpledger.cli.error_handling import handle_domain_error
from erpledger.domain.account import AccountService
from erpledger.domain.entities import AccountClass, OperationKind
from erpledger.domain.operation_rules import AccountSide, rule_for

ACCOUNT_CLASS_CHOICE = click.Choice([c.value for c in AccountClass], case_sensitive=False)
OPERATION_CHOICE = click.Choice([k.value for k in OperationKind], case_sensitive=False)


def echo_accounts(accounts) -> None:
    """Print accounts as a table."""
    click.echo("-" * 72)
    for acc in accounts:
        status = "" if acc.is_active else " (inactive)"
        click.echo(
            f"ID: {acc.id:3d} | {acc.name:24s} | {acc.account_class.value:9s} | "
            f"Balance: {acc.balance:>14,.2f}{status}"
        )


@click.group()
def account_group():
    """Manage finance accounts."""
    pass


@account_group.command("create")
@click.argument("name", metavar="ACCOUNT_NAME")
@click.option(
    "--class", "account_class", type=ACCOUNT_CLASS_CHOICE, required=True, help="Account class"
)
@click.option("--description", help="Account description")
@click.pass_context
def create_account(ctx, name: str, account_class: str, description: str | None):
    """Create a new finance account.

    Examples:
        erpledger account create "Main cashbox" --class CASHBOX
        erpledger account create "Steel Supplies LLC" --class SUPPLIER
    """
    service = AccountService(ctx.obj["db"])

    try:
        account_id = service.create_account(
            name=name, account_class=AccountClass(account_class.upper()), description=description
        )
        click.echo(f"Created account '{name.strip()}' (ID: {account_id})")
    except ValueError as e:
        handle_domain_error(ctx, e)


@account_group.command("list")
@click.option("--class", "account_class", type=ACCOUNT_CLASS_CHOICE, help="Only this class")
@click.option("--active-only", is_flag=True, help="Hide deactivated accounts")
@click.pass_context
def list_accounts(ctx, account_class: str | None, active_only: bool):
    """List finance accounts with balances."""
    service = AccountService(ctx.obj["db"])

    accounts = service.list_accounts(
        account_class=AccountClass(account_class.upper()) if account_class else None,
        active_only=active_only,
    )
    if not accounts:
        click.echo("No accounts found.")
        return

    click.echo("\nAccounts:")
    echo_accounts(accounts)


@account_group.command("deactivate")
@click.argument("account", metavar="ACCOUNT")
@click.pass_context
def deactivate_account(ctx, account: str) -> None:
    """Deactivate an account so new transactions cannot use it.

    ACCOUNT can be an account name or ID.
    """
    service = AccountService(ctx.obj["db"])
    account_id = resolve_account_or_exit(ctx, service, account)

    try:
        service.deactivate_account(account_id)
        click.echo(f"Deactivated account {account_id}")
    except ValueError as e:
        handle_domain_error(ctx, e)


@account_group.command("options")
@click.option("--operation", type=OPERATION_CHOICE, required=True, help="Operation kind")
@click.pass_context
def account_options(ctx, operation: str) -> None:
    """Show which accounts can be chosen on each side of an operation.

    Examples:
        erpledger account options --operation PAYMENT_TO_SUPP
    """
    service = AccountService(ctx.obj["db"])
    kind = OperationKind(operation.upper())
    rule = rule_for(kind)

    sides = [
        (AccountSide.SOURCE, rule.requires_source, rule.source_label),
        (AccountSide.DESTINATION, rule.requires_destination, rule.destination_label),
    ]
    for side, required, label in sides:
        if not required:
            continue
        click.echo(f"\n{label}:")
        options = service.selectable_accounts(kind, side)
        if not options:
            click.echo("  No matching accounts.")
            continue
        for acc in options:
            click.echo(f"  ID: {acc.id:3d} | {acc.name}")


def register_commands(cli):
    """Register account commands with main CLI."""
    cli.add_command(account_group, name="account")
