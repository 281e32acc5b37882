"""Tests for payroll request building."""

from datetime import date

import pytest

from erpledger.domain.entities import ReferenceMonth
from erpledger.domain.errors import ValidationError
from erpledger.domain.payroll import PayrollTarget, build_payroll_request
from erpledger.domain.period import PeriodType, resolve_period


@pytest.fixture
def advance_period():
    return resolve_period(PeriodType.FIRST_HALF, ReferenceMonth(2024, 2))


def test_request_for_everyone(advance_period):
    assert build_payroll_request(advance_period) == {
        "periodStart": "2024-02-01",
        "periodEnd": "2024-02-15",
    }


def test_request_for_employee_drops_department(advance_period):
    request = build_payroll_request(
        advance_period, PayrollTarget.EMPLOYEE, department_id=2, employee_id=11
    )

    assert request["employeeId"] == 11
    assert "departmentId" not in request


def test_request_for_all_ignores_ids(advance_period):
    request = build_payroll_request(advance_period, department_id=2, employee_id=11)

    assert set(request) == {"periodStart", "periodEnd"}


@pytest.mark.parametrize("target", [PayrollTarget.DEPARTMENT, PayrollTarget.EMPLOYEE])
def test_request_requires_target_id(advance_period, target):
    with pytest.raises(ValidationError):
        build_payroll_request(advance_period, target)


def test_custom_period_request():
    period = resolve_period(
        PeriodType.CUSTOM, None, custom_from=date(2024, 1, 3), custom_to=date(2024, 1, 20)
    )

    assert build_payroll_request(period)["periodEnd"] == "2024-01-20"
