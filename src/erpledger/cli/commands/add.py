"""Add transaction command."""

import click
from datetime import datetime, time, UTC
from erpledger.cli.account_resolution import resolve_optional_account_or_exit
from erpledger.cli.error_handling import echo_violations, handle_domain_error
from erpledger.domain.account import AccountService
from erpledger.domain.entities import OperationKind, TransactionDraft
from erpledger.domain.errors import DraftValidationError
from erpledger.domain.transaction import TransactionService
from erpledger.utils.amount_parser import parse_amount
from erpledger.utils.date_parser import parse_date

OPERATION_CHOICE = click.Choice([k.value for k in OperationKind], case_sensitive=False)


@click.command("add")
@click.option(
    "--operation",
    type=OPERATION_CHOICE,
    default=OperationKind.EXPENSE.value,
    show_default=True,
    help="Operation kind",
)
@click.option("--amount", required=True, help="Amount (e.g., 100000 or 1,250.50)")
@click.option("--from", "source", help="Source account name or ID")
@click.option("--to", "destination", help="Destination account name or ID")
@click.option("--category", "category_id", type=int, help="Category ID")
@click.option("--subcategory", "subcategory_id", type=int, help="Subcategory ID")
@click.option("--description", help="Transaction description")
@click.option("--date", help="Transaction date (YYYY-MM-DD or 'today'); default: now")
@click.pass_context
def add_transaction(
    ctx,
    operation: str,
    amount: str,
    source: str | None,
    destination: str | None,
    category_id: int | None,
    subcategory_id: int | None,
    description: str | None,
    date: str | None,
):
    """Record a finance transaction.

    Which of --from, --to and --category are required depends on the
    operation; run 'erpledger rules' to see the table.

    Examples:
        erpledger add --operation EXPENSE --amount 100000 --from "Main cashbox" --category 1
        erpledger add --operation TRANSFER --amount 500 --from Cashbox --to Bank
    """
    db = ctx.obj["db"]
    transaction_service = TransactionService(db)
    account_service = AccountService(db)

    draft = TransactionDraft.empty(OperationKind(operation.upper()))

    try:
        draft.amount = parse_amount(amount)
    except ValueError as e:
        click.echo(f"Error: Invalid amount format: {e}", err=True)
        ctx.exit(1)

    if date is not None:
        try:
            draft.occurred_at = datetime.combine(parse_date(date), time.min, tzinfo=UTC)
        except ValueError as e:
            click.echo(f"Error: Invalid date format: {e}", err=True)
            ctx.exit(1)

    draft.source_account_id = resolve_optional_account_or_exit(ctx, account_service, source)
    draft.destination_account_id = resolve_optional_account_or_exit(
        ctx, account_service, destination
    )
    draft.category_id = category_id
    draft.subcategory_id = subcategory_id
    draft.description = description

    try:
        transaction_id = transaction_service.create_transaction(draft)
    except DraftValidationError as e:
        echo_violations(e.result)
        ctx.exit(1)
    except ValueError as e:
        handle_domain_error(ctx, e)

    click.echo(f"Created transaction {transaction_id}")
    click.echo(f"  Operation: {draft.operation_kind.value}")
    click.echo(f"  Amount: {draft.amount:,.2f}")
    for label, account_id in (("From", draft.source_account_id), ("To", draft.destination_account_id)):
        if account_id is not None:
            acc = account_service.get_account(account_id)
            click.echo(f"  {label}: {acc.name} (balance {acc.balance:,.2f})")
    if description:
        click.echo(f"  Description: {description}")


def register_commands(cli):
    """Register add command with main CLI."""
    cli.add_command(add_transaction)
