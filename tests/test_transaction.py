"""Tests for transaction commands."""

import pytest
from erpledger.cli.main import cli


def _add(cli_runner, temp_db, *args):
    return cli_runner.invoke(cli, ["--db-path", temp_db.database_path, "add", *args])


def test_add_expense(cli_runner, temp_db, sample_accounts, sample_categories):
    """Test recording an expense paid from the cashbox."""
    result = _add(
        cli_runner,
        temp_db,
        "--operation",
        "EXPENSE",
        "--amount",
        "100 000",
        "--from",
        "Main cashbox",
        "--category",
        str(sample_categories["Rent"]),
        "--date",
        "2024-02-10",
    )

    assert result.exit_code == 0
    assert "Created transaction 1" in result.output
    assert "Amount: 100,000.00" in result.output
    assert "From: Main cashbox (balance -100,000.00)" in result.output


def test_add_transfer_by_account_id(cli_runner, temp_db, sample_accounts):
    """Test a transfer using account IDs."""
    result = _add(
        cli_runner,
        temp_db,
        "--operation",
        "transfer",
        "--amount",
        "1,250.50",
        "--from",
        str(sample_accounts["bank"].id),
        "--to",
        str(sample_accounts["cashbox"].id),
    )

    assert result.exit_code == 0
    assert "From: Operating bank (balance -1,250.50)" in result.output
    assert "To: Main cashbox (balance 1,250.50)" in result.output


def test_add_reports_every_violation(cli_runner, temp_db, sample_accounts):
    """Test that all field problems are reported at once."""
    result = _add(cli_runner, temp_db, "--operation", "EXPENSE", "--amount", "0")

    assert result.exit_code == 1
    assert "Transaction is not valid" in result.output
    assert "amount: Amount must be greater than 0" in result.output
    assert "source_account_id: Select the account to pay from" in result.output
    assert "category_id: Select a category" in result.output


def test_add_same_account_twice(cli_runner, temp_db, sample_accounts):
    """Test that a transfer to the same account is rejected."""
    result = _add(
        cli_runner,
        temp_db,
        "--operation",
        "TRANSFER",
        "--amount",
        "10",
        "--from",
        "Main cashbox",
        "--to",
        "Main cashbox",
    )

    assert result.exit_code == 1
    assert "destination_account_id: Source and destination accounts must differ" in result.output


def test_add_wrong_account_class(cli_runner, temp_db, sample_accounts):
    """Test that a supplier cannot receive an owner withdrawal."""
    result = _add(
        cli_runner,
        temp_db,
        "--operation",
        "OWNER_WITHDRAW",
        "--amount",
        "10",
        "--from",
        "Main cashbox",
        "--to",
        "Steel Supplies LLC",
    )

    assert result.exit_code == 1
    assert "cannot be used as the destination" in result.output


def test_add_invalid_amount(cli_runner, temp_db, sample_accounts):
    """Test that an unparseable amount is rejected."""
    result = _add(cli_runner, temp_db, "--amount", "abc", "--from", "Main cashbox")

    assert result.exit_code == 1
    assert "Invalid amount format" in result.output


def test_add_unknown_account(cli_runner, temp_db, sample_accounts):
    """Test that an unknown account name is rejected."""
    result = _add(cli_runner, temp_db, "--amount", "10", "--from", "Petty cash")

    assert result.exit_code == 1
    assert "Account 'Petty cash' not found" in result.output


def test_add_unknown_category(cli_runner, temp_db, sample_accounts):
    """Test that an unknown category is rejected."""
    result = _add(
        cli_runner, temp_db, "--amount", "10", "--from", "Main cashbox", "--category", "99"
    )

    assert result.exit_code == 1
    assert "Category 99 not found" in result.output


@pytest.fixture
def posted(cli_runner, temp_db, sample_accounts):
    """Post transfers on Feb 3 and Feb 20, 2024."""
    for day, amount in (("2024-02-03", "100"), ("2024-02-20", "250")):
        result = _add(
            cli_runner,
            temp_db,
            "--operation",
            "TRANSFER",
            "--amount",
            amount,
            "--from",
            "Main cashbox",
            "--to",
            "Operating bank",
            "--date",
            day,
        )
        assert result.exit_code == 0


def test_list_first_half(cli_runner, temp_db, posted):
    """Test listing the first half of a month."""
    result = cli_runner.invoke(
        cli,
        [
            "--db-path",
            temp_db.database_path,
            "transaction",
            "list",
            "--period",
            "FIRST_HALF",
            "--month",
            "2024-02",
        ],
    )

    assert result.exit_code == 0
    assert "Period: 2024-02-01 .. 2024-02-15" in result.output
    assert "Found 1 transaction(s)" in result.output
    assert "2024-02-03" in result.output
    assert "2024-02-20" not in result.output


def test_list_custom_period(cli_runner, temp_db, posted):
    """Test listing a custom range."""
    result = cli_runner.invoke(
        cli,
        [
            "--db-path",
            temp_db.database_path,
            "transaction",
            "list",
            "--period",
            "custom",
            "--from",
            "2024-02-01",
            "--to",
            "2024-02-29",
        ],
    )

    assert result.exit_code == 0
    assert "Found 2 transaction(s)" in result.output
    assert "Active amount: 350.00" in result.output


def test_list_rejects_reversed_custom_period(cli_runner, temp_db, posted):
    """Test that a custom period must not end before it starts."""
    result = cli_runner.invoke(
        cli,
        [
            "--db-path",
            temp_db.database_path,
            "transaction",
            "list",
            "--period",
            "CUSTOM",
            "--from",
            "2024-02-29",
            "--to",
            "2024-02-01",
        ],
    )

    assert result.exit_code == 1
    assert "cannot be after" in result.output


def test_list_all_for_account(cli_runner, temp_db, posted):
    """Test listing every transaction of an account."""
    result = cli_runner.invoke(
        cli,
        ["--db-path", temp_db.database_path, "transaction", "list", "--all", "--account", "Owner"],
    )

    assert result.exit_code == 0
    assert "No transactions found" in result.output


def test_show_transaction(cli_runner, temp_db, posted):
    """Test showing one transaction."""
    result = cli_runner.invoke(
        cli, ["--db-path", temp_db.database_path, "transaction", "show", "2"]
    )

    assert result.exit_code == 0
    assert "Transaction ID: 2" in result.output
    assert "Operation: TRANSFER" in result.output
    assert "From: Main cashbox" in result.output
    assert "To: Operating bank" in result.output
    assert "Status: ACTIVE" in result.output


def test_show_missing_transaction(cli_runner, temp_db):
    """Test showing a transaction that does not exist."""
    result = cli_runner.invoke(
        cli, ["--db-path", temp_db.database_path, "transaction", "show", "7"]
    )

    assert result.exit_code == 1
    assert "Transaction 7 not found" in result.output


def test_cancel_transaction(cli_runner, temp_db, posted):
    """Test cancelling a transaction restores balances."""
    result = cli_runner.invoke(
        cli,
        [
            "--db-path",
            temp_db.database_path,
            "transaction",
            "cancel",
            "1",
            "--reason",
            "Entered twice",
            "--yes",
        ],
    )
    assert result.exit_code == 0
    assert "Cancelled transaction 1" in result.output

    result = cli_runner.invoke(
        cli, ["--db-path", temp_db.database_path, "transaction", "show", "1"]
    )
    assert "Status: CANCELLED" in result.output
    assert "Cancellation reason: Entered twice" in result.output

    result = cli_runner.invoke(
        cli, ["--db-path", temp_db.database_path, "account", "list", "--class", "CASHBOX"]
    )
    assert "-250.00" in result.output


def test_cancel_aborted(cli_runner, temp_db, posted):
    """Test declining the confirmation prompt."""
    result = cli_runner.invoke(
        cli,
        ["--db-path", temp_db.database_path, "transaction", "cancel", "1", "--reason", "x"],
        input="n\n",
    )

    assert result.exit_code == 0
    assert "Cancellation aborted" in result.output


def test_cancel_requires_reason(cli_runner, temp_db, posted):
    """Test that a blank reason is rejected."""
    result = cli_runner.invoke(
        cli,
        ["--db-path", temp_db.database_path, "transaction", "cancel", "1", "--reason", " ", "--yes"],
    )

    assert result.exit_code == 1
    assert "cancellation reason is required" in result.output
