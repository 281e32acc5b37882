"""Attendance day classification for the attendance grid."""

from enum import Enum

WARNING_SHORTCOMING_MINUTES = 10
CRITICAL_SHORTCOMING_MINUTES = 30


class AttendanceStatus(str, Enum):
    PRESENT = "PRESENT"
    ABSENT = "ABSENT"
    FUTURE = "FUTURE"


class AttendanceSeverity(str, Enum):
    """How a grid cell is highlighted."""

    NEUTRAL = "NEUTRAL"
    OK = "OK"
    WARNING = "WARNING"
    CRITICAL = "CRITICAL"


def classify_attendance(status: AttendanceStatus, shortcoming_minutes: int = 0) -> AttendanceSeverity:
    """Classify one attendance day by status and minutes short of the shift.

    Absent and future days are neutral. A present day is critical from 30
    minutes short, a warning from 10, otherwise ok.
    """
    if status is not AttendanceStatus.PRESENT:
        return AttendanceSeverity.NEUTRAL
    if shortcoming_minutes >= CRITICAL_SHORTCOMING_MINUTES:
        return AttendanceSeverity.CRITICAL
    if shortcoming_minutes >= WARNING_SHORTCOMING_MINUTES:
        return AttendanceSeverity.WARNING
    return AttendanceSeverity.OK
