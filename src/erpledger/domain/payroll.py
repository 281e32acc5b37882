"""Payroll calculation request building."""

from enum import Enum
from typing import Any, Optional

from erpledger.domain.entities import ResolvedPeriod
from erpledger.domain.errors import ValidationError


class PayrollTarget(str, Enum):
    """Who a payroll calculation covers."""

    ALL = "ALL"
    DEPARTMENT = "DEPARTMENT"
    EMPLOYEE = "EMPLOYEE"


def build_payroll_request(
    period: ResolvedPeriod,
    target: PayrollTarget = PayrollTarget.ALL,
    department_id: Optional[int] = None,
    employee_id: Optional[int] = None,
) -> dict[str, Any]:
    """Build the payroll calculation payload for a period and target.

    Only the ID matching the target is sent; the other is dropped.

    Args:
        period: Resolved payroll period
        target: Everyone, one department or one employee
        department_id: Department ID, required for DEPARTMENT
        employee_id: Employee ID, required for EMPLOYEE

    Returns:
        Dict with periodStart, periodEnd and the optional target ID

    Raises:
        ValidationError: If the target's ID is missing
    """
    if target is PayrollTarget.DEPARTMENT and department_id is None:
        raise ValidationError("Select a department for a department payroll")
    if target is PayrollTarget.EMPLOYEE and employee_id is None:
        raise ValidationError("Select an employee for an individual payroll")

    request: dict[str, Any] = {
        "periodStart": period.date_from.isoformat(),
        "periodEnd": period.date_to.isoformat(),
    }
    if target is PayrollTarget.DEPARTMENT:
        request["departmentId"] = department_id
    elif target is PayrollTarget.EMPLOYEE:
        request["employeeId"] = employee_id
    return request
