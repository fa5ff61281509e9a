from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """Role returned by the backend on login."""

    HR = "hr"
    EMPLOYEE = "employee"


class ReconcileMode(str, Enum):
    """How CTC and salary components are kept consistent while editing."""

    AUTO = "auto"
    LOCK_CTC = "lock-ctc"
    LOCK_COMPONENTS = "lock-components"


class ComponentGroup(str, Enum):
    """Salary component lists, valued by their backend JSON key."""

    EARNINGS = "earnings"
    DEDUCTIONS = "deductions"
    EMPLOYER_CONTRIBUTIONS = "employerContributions"


class ComponentField(str, Enum):
    NAME = "name"
    AMOUNT = "amount"
    IS_PERCENT = "isPercent"
    PERCENT_OF = "percentOf"


class NoticeLevel(str, Enum):
    """Toast category; values double as Flask flash categories."""

    INFO = "info"
    SUCCESS = "success"
    ERROR = "error"


class AttendanceStatus(str, Enum):
    """Day-level attendance codes used by the backend."""

    PRESENT = "P"
    ABSENT = "A"
    LEAVE_WITHOUT_PAY = "LOP"
    PAID_LEAVE = "PL"
    HOLIDAY = "H"
    WEEK_OFF = "WO"

    @property
    def label(self) -> str:
        return _ATTENDANCE_LABELS[self]


_ATTENDANCE_LABELS = {
    AttendanceStatus.PRESENT: "Present",
    AttendanceStatus.ABSENT: "Absent",
    AttendanceStatus.LEAVE_WITHOUT_PAY: "Leave Without Pay",
    AttendanceStatus.PAID_LEAVE: "Paid Leave",
    AttendanceStatus.HOLIDAY: "Holiday",
    AttendanceStatus.WEEK_OFF: "Week Off",
}


class UploadMode(str, Enum):
    DAILY = "daily"
    MONTHLY = "monthly"


class UploadAction(str, Enum):
    """``preview`` validates only; ``overwrite`` replaces existing records."""

    PREVIEW = "preview"
    APPEND = "append"
    OVERWRITE = "overwrite"


class DedupeStrategy(str, Enum):
    SKIP = "skip"
    UPDATE = "update"
    ERROR = "error"
