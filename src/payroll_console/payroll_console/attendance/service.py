from __future__ import annotations

import logging
from typing import IO, Any, Iterable, Optional

from ..client.http_client import BackendClient
from ..common.validators import require_non_empty, validate_period
from ..core.constants import ATTENDANCE_UPLOAD_FIELD, DEFAULT_CSV_DELIMITER
from ..core.enums import AttendanceStatus, DedupeStrategy, UploadAction, UploadMode
from ..core.exceptions import ValidationError
from .model import DailyAttendance, DayEntry, MonthlyAttendance, UploadResult
from .validation import SELF_SERVICE_STATUSES, validate_day_entry

logger = logging.getLogger(__name__)


def _rows(data: Any) -> list[dict]:
    """Attendance lists come back either bare or wrapped in ``{"data": [...]}``."""
    if isinstance(data, dict):
        data = data.get("data")
    return list(data or [])


def _record(data: Any) -> dict:
    if isinstance(data, dict) and isinstance(data.get("data"), dict):
        return data["data"]
    return data or {}


def _check(entry: DayEntry, allowed: Iterable[AttendanceStatus] = tuple(AttendanceStatus)) -> None:
    errors = validate_day_entry(entry, allowed)
    if errors:
        raise ValidationError("Please fix the validation errors below", errors=errors)


class AttendanceService:
    """Use case: bulk upload, day-level edits and monthly summaries of attendance.

    HR works on any employee; the ``my_*`` methods act on the logged-in
    employee and only accept the self-service statuses.
    """

    def __init__(self, client: BackendClient):
        self._client = client

    def upload(
        self,
        stream: IO[bytes],
        filename: str,
        *,
        token: str,
        mode: Optional[UploadMode] = None,
        action: UploadAction = UploadAction.PREVIEW,
        dedupe_strategy: DedupeStrategy = DedupeStrategy.SKIP,
        delimiter: str = DEFAULT_CSV_DELIMITER,
        year: Optional[int] = None,
        month: Optional[int] = None,
    ) -> UploadResult:
        """Send a CSV to the backend; without ``mode`` the backend detects it from the headers."""
        if stream is None or not filename:
            raise ValidationError("File is required")
        if not filename.lower().endswith(".csv"):
            raise ValidationError("Only CSV files can be uploaded")

        params: dict[str, Any] = {"action": action.value, "dedupeStrategy": dedupe_strategy.value}
        if mode is not None:
            params["mode"] = mode.value
        if delimiter and delimiter != DEFAULT_CSV_DELIMITER:
            params["delimiter"] = delimiter
        params["year"] = year
        params["month"] = month

        data = self._client.post(
            "/api/hr/attendance/upload",
            token=token,
            params=params,
            files={ATTENDANCE_UPLOAD_FIELD: (filename, stream, "text/csv")},
        )
        result = UploadResult.from_dict(data or {})
        logger.info(
            "Attendance upload %s (%s): processed=%s success=%s failed=%s",
            filename, result.action or action.value, result.processed, result.success, result.failed,
        )
        return result

    def list_daily(
        self, employee_id: str, *, token: str, year: Optional[int] = None, month: Optional[int] = None
    ) -> list[DailyAttendance]:
        employee_id = require_non_empty(employee_id or "", "employee_id")
        data = self._client.get(
            f"/api/hr/employees/{employee_id}/attendance/daily", token=token, params={"year": year, "month": month}
        )
        return [DailyAttendance.from_dict(row) for row in _rows(data)]

    def list_monthly(
        self, employee_id: str, *, token: str, year: Optional[int] = None, month: Optional[int] = None
    ) -> list[MonthlyAttendance]:
        employee_id = require_non_empty(employee_id or "", "employee_id")
        data = self._client.get(
            f"/api/hr/employees/{employee_id}/attendance", token=token, params={"year": year, "month": month}
        )
        return [MonthlyAttendance.from_dict(row) for row in _rows(data)]

    def set_day(self, employee_id: str, entry: DayEntry, *, token: str) -> DailyAttendance:
        """Create or replace the record for ``entry.date``."""
        employee_id = require_non_empty(employee_id or "", "employee_id")
        _check(entry)
        data = self._client.post(
            "/api/hr/attendance/daily", token=token, json={"employee": employee_id, **entry.to_payload()}
        )
        return DailyAttendance.from_dict(_record(data))

    def update_day(self, record_id: str, entry: DayEntry, *, token: str) -> DailyAttendance:
        record_id = require_non_empty(record_id or "", "record_id")
        _check(entry)
        payload = entry.to_payload()
        payload.pop("date")
        data = self._client.put(f"/api/hr/attendance/daily/{record_id}", token=token, json=payload)
        return DailyAttendance.from_dict(_record(data))

    def delete_day(self, record_id: str, *, token: str) -> None:
        record_id = require_non_empty(record_id or "", "record_id")
        self._client.delete(f"/api/hr/attendance/daily/{record_id}", token=token)

    def summary(self, *, month: int, year: int, token: str) -> list[MonthlyAttendance]:
        month, year = validate_period(month, year)
        data = self._client.get("/api/hr/attendance/summary", token=token, params={"month": month, "year": year})
        return [MonthlyAttendance.from_dict(row) for row in _rows(data)]

    def my_daily(self, *, token: str, year: Optional[int] = None, month: Optional[int] = None) -> list[DailyAttendance]:
        data = self._client.get("/api/employee/attendance/daily", token=token, params={"year": year, "month": month})
        return [DailyAttendance.from_dict(row) for row in _rows(data)]

    def my_monthly(
        self, *, token: str, year: Optional[int] = None, month: Optional[int] = None
    ) -> list[MonthlyAttendance]:
        data = self._client.get("/api/employee/attendance", token=token, params={"year": year, "month": month})
        return [MonthlyAttendance.from_dict(row) for row in _rows(data)]

    def mark_my_day(self, entry: DayEntry, *, token: str) -> DailyAttendance:
        _check(entry, SELF_SERVICE_STATUSES)
        data = self._client.post("/api/employee/attendance/daily", token=token, json=entry.to_payload())
        return DailyAttendance.from_dict(_record(data))

    def delete_my_day(self, record_id: str, *, token: str) -> None:
        record_id = require_non_empty(record_id or "", "record_id")
        self._client.delete(f"/api/employee/attendance/daily/{record_id}", token=token)
