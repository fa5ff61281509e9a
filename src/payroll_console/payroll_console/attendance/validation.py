from __future__ import annotations

from typing import Iterable

from ..common.datetime_utils import parse_iso_date
from ..common.validators import matches
from ..core.enums import AttendanceStatus
from .model import DayEntry

# Statuses an employee may record for themselves; holidays and week-offs are HR's.
SELF_SERVICE_STATUSES = (
    AttendanceStatus.PRESENT,
    AttendanceStatus.ABSENT,
    AttendanceStatus.LEAVE_WITHOUT_PAY,
    AttendanceStatus.PAID_LEAVE,
)


def _is_number(value: str) -> bool:
    try:
        return float(value) >= 0
    except ValueError:
        return False


def validate_day_entry(entry: DayEntry, allowed: Iterable[AttendanceStatus] = tuple(AttendanceStatus)) -> dict[str, str]:
    errors: dict[str, str] = {}

    if not entry.date:
        errors["date"] = "Date is required"
    else:
        try:
            parse_iso_date(entry.date)
        except ValueError:
            errors["date"] = "Date must be in YYYY-MM-DD format"

    if entry.status not in {s.value for s in allowed}:
        errors["status"] = "Please choose a valid attendance status"

    for name in ("check_in", "check_out"):
        value = getattr(entry, name)
        if value and not matches("time", value):
            errors[name] = "Time must be in HH:mm format"

    if entry.check_in and entry.check_out and "check_in" not in errors and "check_out" not in errors:
        if entry.check_out <= entry.check_in:
            errors["check_out"] = "Check-out must be after check-in"

    for name in ("hours_worked", "overtime_hours"):
        value = getattr(entry, name)
        if value and not _is_number(value):
            errors[name] = "Hours must be a non-negative number"

    return errors
