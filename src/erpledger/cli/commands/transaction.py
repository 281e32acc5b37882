"""Transaction management commands."""

import click
from erpledger.cli.account_resolution import resolve_optional_account_or_exit
from erpledger.cli.error_handling import handle_domain_error
from erpledger.cli.period_options import period_options, resolve_cli_period
from erpledger.domain.account import AccountService
from erpledger.domain.category import CategoryService
from erpledger.domain.entities import TransactionStatus
from erpledger.domain.transaction import TransactionService


@click.group()
def transaction_group():
    """Manage transactions."""
    pass


@transaction_group.command("list")
@click.option("--account", help="Account name or ID (matches either side)")
@click.option("--all", "all_dates", is_flag=True, help="Ignore the period and list everything")
@period_options
@click.pass_context
def list_transactions(
    ctx,
    account: str | None,
    all_dates: bool,
    period_type: str | None,
    month: str | None,
    custom_from: str | None,
    custom_to: str | None,
):
    """List transactions for a period, newest first.

    Without period options, the current half of this month is shown.

    Examples:
        erpledger transaction list --period FULL_MONTH --month 2024-02
        erpledger transaction list --period CUSTOM --from 2024-01-01 --to 2024-03-31
        erpledger transaction list --account "Main cashbox" --all
    """
    db = ctx.obj["db"]
    service = TransactionService(db)
    account_service = AccountService(db)

    account_id = resolve_optional_account_or_exit(ctx, account_service, account)
    period = None
    if not all_dates:
        period = resolve_cli_period(
            ctx,
            period_type=period_type,
            month=month,
            custom_from=custom_from,
            custom_to=custom_to,
        )

    transactions = service.list_transactions(account_id=account_id, period=period)
    if period is not None:
        click.echo(f"Period: {period.date_from} .. {period.date_to}")
    if not transactions:
        click.echo("No transactions found.")
        return

    accounts = {acc.id: acc.name for acc in account_service.list_accounts()}

    click.echo(f"\nFound {len(transactions)} transaction(s):")
    click.echo("-" * 110)
    click.echo(
        f"{'ID':<6} {'Date':<12} {'Operation':<18} {'Amount':>14} {'From':<20} {'To':<20} {'Status':<10}"
    )
    click.echo("-" * 110)

    for txn in transactions:
        source = accounts.get(txn.source_account_id, "") if txn.source_account_id else ""
        destination = (
            accounts.get(txn.destination_account_id, "") if txn.destination_account_id else ""
        )
        click.echo(
            f"{txn.id:<6} {txn.occurred_at.date().isoformat():<12} {txn.operation_kind.value:<18} "
            f"{txn.amount:>14,.2f} {source[:20]:<20} {destination[:20]:<20} {txn.status.value:<10}"
        )

    active_total = sum(txn.amount for txn in transactions if txn.status is TransactionStatus.ACTIVE)
    click.echo("-" * 110)
    click.echo(f"{'TOTAL':<6} Active amount: {active_total:,.2f} | Count: {len(transactions)}")


@transaction_group.command("show")
@click.argument("transaction_id", type=int)
@click.pass_context
def show_transaction(ctx, transaction_id: int) -> None:
    """Show one transaction in detail."""
    db = ctx.obj["db"]
    service = TransactionService(db)
    account_service = AccountService(db)
    category_service = CategoryService(db)

    try:
        txn = service.require_transaction(transaction_id)
    except ValueError as e:
        handle_domain_error(ctx, e)

    click.echo(f"Transaction ID: {txn.id}")
    click.echo(f"  Operation: {txn.operation_kind.value}")
    click.echo(f"  Date: {txn.occurred_at}")
    click.echo(f"  Amount: {txn.amount:,.2f}")
    for label, account_id in (("From", txn.source_account_id), ("To", txn.destination_account_id)):
        if account_id is not None:
            acc = account_service.get_account(account_id)
            click.echo(f"  {label}: {acc.name if acc else 'Unknown'} (ID: {account_id})")
    if txn.category_id is not None:
        category = category_service.get_category(txn.category_id)
        name = category.name if category else "Unknown"
        sub = next(
            (s for s in (category.subcategories if category else ()) if s.id == txn.subcategory_id),
            None,
        )
        click.echo(f"  Category: {name}" + (f" > {sub.name}" if sub else ""))
    if txn.description:
        click.echo(f"  Description: {txn.description}")
    click.echo(f"  Status: {txn.status.value}")
    if txn.cancellation_reason:
        click.echo(f"  Cancellation reason: {txn.cancellation_reason}")


@transaction_group.command("cancel")
@click.argument("transaction_id", type=int)
@click.option("--reason", required=True, help="Why the transaction is cancelled")
@click.option("--yes", is_flag=True, help="Do not ask for confirmation")
@click.pass_context
def cancel_transaction(ctx, transaction_id: int, reason: str, yes: bool) -> None:
    """Cancel a transaction and reverse its effect on account balances.

    Examples:
        erpledger transaction cancel 12 --reason "Entered twice"
    """
    service = TransactionService(ctx.obj["db"])

    try:
        service.require_transaction(transaction_id)
    except ValueError as e:
        handle_domain_error(ctx, e)

    if not yes and not click.confirm(f"Are you sure you want to cancel transaction {transaction_id}?"):
        click.echo("Cancellation aborted.")
        return

    try:
        service.cancel_transaction(transaction_id, reason)
        click.echo(f"Cancelled transaction {transaction_id}")
    except ValueError as e:
        handle_domain_error(ctx, e)


def register_commands(cli: click.Group) -> None:
    """Register transaction commands with main CLI."""
    cli.add_command(transaction_group, name="transaction")
