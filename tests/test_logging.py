"""Tests for logging setup."""

import io
import logging
from decimal import Decimal

import pytest

from erpledger.domain.entities import AccountClass
from erpledger.domain.errors import DraftValidationError
from erpledger.logging_config import configure_logging, get_logger


def test_get_logger_prefixes_names():
    assert get_logger("tests").name == "erpledger.tests"
    assert get_logger("erpledger.domain.account").name == "erpledger.domain.account"


def test_configure_logging_is_idempotent():
    configure_logging(level=logging.INFO)
    configure_logging(level=logging.DEBUG)

    root = logging.getLogger("erpledger")
    assert len(root.handlers) == 1
    assert root.level == logging.INFO


def test_extra_fields_are_rendered():
    stream = io.StringIO()
    configure_logging(level=logging.INFO, stream=stream)

    get_logger("tests").info("something_happened", extra={"account_id": 3, "amount": "10"})

    line = stream.getvalue()
    assert "something_happened" in line
    assert "account_id=3" in line
    assert "amount=10" in line


def test_services_log_events(account_service):
    stream = io.StringIO()
    configure_logging(level=logging.INFO, stream=stream)

    account_service.create_account(name="Main cashbox", account_class=AccountClass.CASHBOX)

    assert "account_created" in stream.getvalue()
    assert "account_class=CASHBOX" in stream.getvalue()


def test_rejected_draft_is_logged(transaction_service, sample_accounts, make_draft):
    stream = io.StringIO()
    configure_logging(level=logging.WARNING, stream=stream)
    draft = make_draft(source_account_id=sample_accounts["cashbox"].id)
    draft.amount = Decimal("0")

    with pytest.raises(DraftValidationError):
        transaction_service.create_transaction(draft)

    output = stream.getvalue()
    assert "transaction_draft_rejected" in output
    assert "amount:NonPositiveAmount" in output
