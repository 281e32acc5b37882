"""Tests for attendance day classification."""

import pytest

from erpledger.domain.attendance import (
    AttendanceSeverity,
    AttendanceStatus,
    classify_attendance,
)


@pytest.mark.parametrize(
    "minutes,expected",
    [
        (0, AttendanceSeverity.OK),
        (9, AttendanceSeverity.OK),
        (10, AttendanceSeverity.WARNING),
        (29, AttendanceSeverity.WARNING),
        (30, AttendanceSeverity.CRITICAL),
        (240, AttendanceSeverity.CRITICAL),
    ],
)
def test_present_day_thresholds(minutes, expected):
    assert classify_attendance(AttendanceStatus.PRESENT, minutes) is expected


@pytest.mark.parametrize("status", [AttendanceStatus.ABSENT, AttendanceStatus.FUTURE])
def test_non_present_days_are_neutral(status):
    assert classify_attendance(status, 120) is AttendanceSeverity.NEUTRAL
