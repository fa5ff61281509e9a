from __future__ import annotations

import logging
from typing import Optional

from flask import Flask, flash, redirect, render_template, request, session, url_for

from ..common.datetime_utils import today
from ..container import Container
from ..core.enums import Role
from ..core.exceptions import BackendError, ValidationError
from ..users.guards import current_token, hr_required, login_required

logger = logging.getLogger(__name__)


def _parse_year(value: Optional[str]) -> Optional[int]:
    return int(value) if value and value.isdigit() else None


def register(app: Flask, container: Container) -> None:
    @app.route("/hr/payroll/generate", methods=["GET", "POST"], endpoint="generate_payslips")
    @hr_required
    def generate_payslips():
        summary = None
        now = today()
        month = now.month
        year = now.year

        if request.method == "POST":
            try:
                month = int(request.form.get("month") or 0)
                year = int(request.form.get("year") or 0)
                force = request.form.get("force") in {"1", "on", "true"}

                summary = container.payslip_service.generate(month=month, year=year, force=force, token=current_token())
                flash(summary.message or "Payslip generation finished", "success" if not summary.failed else "warning")
            except ValueError:
                flash("Month and year must be numbers", "danger")
            except (ValidationError, BackendError) as e:
                flash(str(e), "danger")
            except Exception:
                logger.exception("Payslip generation failed")
                flash("System error while generating payslips", "danger")

        return render_template(
            "payslips/generate.html",
            summary=summary,
            month=month,
            year=year,
            active_page="generate_payslips",
        )

    @app.route("/payslips", endpoint="my_payslips")
    @login_required
    def my_payslips():
        year = _parse_year(request.args.get("year"))
        payslips = []
        try:
            payslips = container.payslip_service.list_my_payslips(token=current_token(), year=year)
        except BackendError as e:
            flash(str(e), "danger")
        return render_template("payslips/index.html", payslips=payslips, year=year, employee=None, active_page="my_payslips")

    @app.route("/hr/employees/<employee_id>/payslips", endpoint="employee_payslips")
    @hr_required
    def employee_payslips(employee_id: str):
        year = _parse_year(request.args.get("year"))
        try:
            payslips = container.payslip_service.list_employee_payslips(employee_id, token=current_token(), year=year)
        except (ValidationError, BackendError) as e:
            flash(str(e), "danger")
            return redirect(url_for("employees"))
        return render_template(
            "payslips/index.html",
            payslips=payslips,
            year=year,
            employee=employee_id,
            active_page="employees",
        )

    @app.route("/payslips/<payslip_id>", endpoint="payslip_detail")
    @login_required
    def payslip_detail(payslip_id: str):
        as_hr = session.get("role") == Role.HR.value
        try:
            payslip = container.payslip_service.get_payslip(payslip_id, token=current_token(), as_hr=as_hr)
        except (ValidationError, BackendError) as e:
            flash(str(e), "danger")
            return redirect(url_for("employees" if as_hr else "my_payslips"))
        return render_template("payslips/detail.html", payslip=payslip, active_page="my_payslips")
