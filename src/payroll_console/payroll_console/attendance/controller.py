from __future__ import annotations

import logging
from typing import Optional

from flask import Flask, flash, redirect, render_template, request, url_for

from ..common.datetime_utils import today
from ..container import Container
from ..core.enums import AttendanceStatus, DedupeStrategy, UploadAction, UploadMode
from ..core.exceptions import BackendError, ValidationError
from ..users.guards import current_token, hr_required, login_required
from .model import DayEntry
from .validation import SELF_SERVICE_STATUSES

logger = logging.getLogger(__name__)


def _int_arg(value: Optional[str]) -> Optional[int]:
    return int(value) if value and value.isdigit() else None


def _period_args() -> tuple[int, int]:
    now = today()
    return _int_arg(request.args.get("month")) or now.month, _int_arg(request.args.get("year")) or now.year


def register(app: Flask, container: Container) -> None:
    @app.route("/hr/attendance/upload", methods=["GET", "POST"], endpoint="upload_attendance")
    @hr_required
    def upload_attendance():
        result = None
        if request.method == "POST":
            upload = request.files.get("payroll_file")
            try:
                mode = request.form.get("mode") or None
                result = container.attendance_service.upload(
                    upload.stream if upload else None,
                    upload.filename if upload else "",
                    token=current_token(),
                    mode=UploadMode(mode) if mode else None,
                    action=UploadAction(request.form.get("action") or UploadAction.PREVIEW.value),
                    dedupe_strategy=DedupeStrategy(request.form.get("dedupe_strategy") or DedupeStrategy.SKIP.value),
                    delimiter=request.form.get("delimiter") or ",",
                    year=_int_arg(request.form.get("year")),
                    month=_int_arg(request.form.get("month")),
                )
                flash(result.message or "Upload processed", "success" if not result.failed else "warning")
            except ValueError:
                flash("Unknown upload option", "danger")
            except (ValidationError, BackendError) as e:
                flash(str(e), "danger")
            except Exception:
                logger.exception("Attendance upload failed")
                flash("System error while uploading attendance", "danger")

        return render_template(
            "attendance/upload.html",
            result=result,
            modes=[m.value for m in UploadMode],
            actions=[a.value for a in UploadAction],
            strategies=[s.value for s in DedupeStrategy],
            active_page="upload_attendance",
        )

    @app.route("/hr/attendance/summary", endpoint="attendance_summary")
    @hr_required
    def attendance_summary():
        month, year = _period_args()
        rows = []
        try:
            rows = container.attendance_service.summary(month=month, year=year, token=current_token())
        except (ValidationError, BackendError) as e:
            flash(str(e), "danger")
        return render_template(
            "attendance/summary.html", rows=rows, month=month, year=year, active_page="attendance_summary"
        )

    @app.route("/hr/employees/<employee_id>/attendance", methods=["GET", "POST"], endpoint="employee_attendance")
    @hr_required
    def employee_attendance(employee_id: str):
        token = current_token()
        month, year = _period_args()
        errors: dict[str, str] = {}

        if request.method == "POST":
            entry = DayEntry.from_mapping(request.form)
            try:
                container.attendance_service.set_day(employee_id, entry, token=token)
                flash(f"Attendance saved for {entry.date}", "success")
                return redirect(url_for("employee_attendance", employee_id=employee_id, month=month, year=year))
            except ValidationError as e:
                errors = e.errors
                flash(str(e), "danger")
            except BackendError as e:
                flash(str(e), "danger")

        days, monthly = [], []
        try:
            days = container.attendance_service.list_daily(employee_id, token=token, year=year, month=month)
            monthly = container.attendance_service.list_monthly(employee_id, token=token, year=year, month=month)
        except (ValidationError, BackendError) as e:
            flash(str(e), "danger")

        return render_template(
            "attendance/daily.html",
            days=days,
            monthly=monthly,
            month=month,
            year=year,
            errors=errors,
            statuses=list(AttendanceStatus),
            employee_id=employee_id,
            active_page="employees",
        )

    @app.route("/hr/attendance/daily/<record_id>/delete", methods=["POST"], endpoint="delete_attendance")
    @hr_required
    def delete_attendance(record_id: str):
        employee_id = request.form.get("employee_id", "")
        try:
            container.attendance_service.delete_day(record_id, token=current_token())
            flash("Attendance record deleted", "success")
        except (ValidationError, BackendError) as e:
            flash(str(e), "danger")
        if employee_id:
            return redirect(url_for("employee_attendance", employee_id=employee_id))
        return redirect(url_for("attendance_summary"))

    @app.route("/attendance", methods=["GET", "POST"], endpoint="my_attendance")
    @login_required
    def my_attendance():
        token = current_token()
        month, year = _period_args()
        errors: dict[str, str] = {}

        if request.method == "POST":
            entry = DayEntry.from_mapping(request.form)
            try:
                container.attendance_service.mark_my_day(entry, token=token)
                flash(f"Attendance marked for {entry.date}", "success")
                return redirect(url_for("my_attendance", month=month, year=year))
            except ValidationError as e:
                errors = e.errors
                flash(str(e), "danger")
            except BackendError as e:
                flash(str(e), "danger")

        days, monthly = [], []
        try:
            days = container.attendance_service.my_daily(token=token, year=year, month=month)
            monthly = container.attendance_service.my_monthly(token=token, year=year, month=month)
        except BackendError as e:
            flash(str(e), "danger")

        return render_template(
            "attendance/daily.html",
            days=days,
            monthly=monthly,
            month=month,
            year=year,
            errors=errors,
            statuses=list(SELF_SERVICE_STATUSES),
            employee_id=None,
            active_page="my_attendance",
        )

    @app.route("/attendance/<record_id>/delete", methods=["POST"], endpoint="delete_my_attendance")
    @login_required
    def delete_my_attendance(record_id: str):
        try:
            container.attendance_service.delete_my_day(record_id, token=current_token())
            flash("Attendance record deleted", "success")
        except (ValidationError, BackendError) as e:
            flash(str(e), "danger")
        return redirect(url_for("my_attendance"))
