from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any, Mapping, Optional

from ..core.enums import AttendanceStatus


def _optional_float(value: Any) -> Optional[float]:
    if value is None or value == "":
        return None
    return float(value)


@dataclass(frozen=True)
class DailyAttendance:
    """One day of an employee's attendance (``date`` as ``YYYY-MM-DD``)."""

    id: str
    date: str
    status: AttendanceStatus
    check_in: str = ""
    check_out: str = ""
    hours_worked: Optional[float] = None
    overtime_hours: Optional[float] = None
    notes: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "DailyAttendance":
        return cls(
            id=str(data.get("_id") or ""),
            date=str(data.get("date") or "")[:10],
            status=AttendanceStatus(data.get("status") or AttendanceStatus.PRESENT.value),
            check_in=str(data.get("checkIn") or ""),
            check_out=str(data.get("checkOut") or ""),
            hours_worked=_optional_float(data.get("hoursWorked")),
            overtime_hours=_optional_float(data.get("overtimeHours")),
            notes=str(data.get("notes") or ""),
        )


@dataclass(frozen=True)
class MonthlyAttendance:
    """Monthly aggregate the backend keeps per employee and uses for payroll."""

    id: str
    month: int
    year: int
    total_working_days: int
    days_present: float
    leave_without_pay: float
    overtime_hours: float = 0
    employee_code: str = ""
    employee_name: str = ""
    department: str = ""

    @property
    def attendance_percent(self) -> float:
        if not self.total_working_days:
            return 0.0
        return round(self.days_present / self.total_working_days * 100, 1)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "MonthlyAttendance":
        employee = data.get("employee")
        if not isinstance(employee, dict):
            employee = {}
        name = f"{employee.get('firstName') or ''} {employee.get('lastName') or ''}".strip()
        return cls(
            id=str(data.get("_id") or ""),
            month=int(data.get("month") or 0),
            year=int(data.get("year") or 0),
            total_working_days=int(data.get("totalWorkingDays") or 0),
            days_present=float(data.get("daysPresent") or 0),
            leave_without_pay=float(data.get("leaveWithoutPay") or 0),
            overtime_hours=float(data.get("overtimeHours") or 0),
            employee_code=str(employee.get("employeeId") or ""),
            employee_name=name,
            department=str(employee.get("department") or ""),
        )


@dataclass(frozen=True)
class DayEntry:
    """Attendance form input for a single day (raw strings)."""

    date: str = ""
    status: str = ""
    check_in: str = ""
    check_out: str = ""
    hours_worked: str = ""
    overtime_hours: str = ""
    notes: str = ""

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "DayEntry":
        return cls(**{f.name: str(data.get(f.name) or "").strip() for f in fields(cls)})

    def to_payload(self) -> dict[str, Any]:
        """Backend JSON; empty optional fields are left out."""
        out: dict[str, Any] = {"date": self.date, "status": self.status}
        if self.check_in:
            out["checkIn"] = self.check_in
        if self.check_out:
            out["checkOut"] = self.check_out
        if self.hours_worked:
            out["hoursWorked"] = float(self.hours_worked)
        if self.overtime_hours:
            out["overtimeHours"] = float(self.overtime_hours)
        if self.notes:
            out["notes"] = self.notes
        return out


@dataclass(frozen=True)
class UploadResult:
    message: str
    mode: str
    action: str
    processed: int
    success: int
    failed: int
    skipped: int = 0
    errors: tuple[str, ...] = ()

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "UploadResult":
        return cls(
            message=str(data.get("message") or ""),
            mode=str(data.get("mode") or ""),
            action=str(data.get("action") or ""),
            processed=int(data.get("processed") or 0),
            success=int(data.get("success") or 0),
            failed=int(data.get("failed") or 0),
            skipped=int(data.get("skipped") or 0),
            errors=tuple(str(e) for e in data.get("errors") or []),
        )
