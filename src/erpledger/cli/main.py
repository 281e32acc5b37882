"""Main CLI entry point."""

import logging

import click
from erpledger.database.factories import DB_PATH_ENVVAR, create_sqlite_database
from erpledger.logging_config import configure_logging

# Import and register all commands at module level
from erpledger.cli.commands import (
    account,
    add,
    category,
    payroll,
    period,
    rules,
    transaction,
)


@click.group()
@click.option(
    "--db-path",
    type=click.Path(),
    help=f"Path to database file (overrides {DB_PATH_ENVVAR} environment variable)",
    envvar=DB_PATH_ENVVAR,
)
@click.option("--verbose", "-v", is_flag=True, help="Log domain events to stderr")
@click.pass_context
def cli(ctx, db_path: str | None, verbose: bool):
    """erpledger - Finance ledger for the ERP back office.

    Record cash, bank and counterparty operations with per-operation rules
    on which accounts and categories are required, and resolve the
    attendance and payroll periods used by HR.
    """
    ctx.ensure_object(dict)
    configure_logging(level=logging.INFO if verbose else logging.WARNING)

    # Initialize database connection only when actually running a command
    # (not when showing help)
    if ctx.invoked_subcommand is not None and "db" not in ctx.obj:
        db = create_sqlite_database(database_path=db_path)
        db.connect()
        db.initialize_schema()
        ctx.obj["db"] = db
        ctx.call_on_close(db.disconnect)


# Register all commands
account.register_commands(cli)
category.register_commands(cli)
add.register_commands(cli)
transaction.register_commands(cli)
rules.register_commands(cli)
period.register_commands(cli)
payroll.register_commands(cli)


def main():
    """Main entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
