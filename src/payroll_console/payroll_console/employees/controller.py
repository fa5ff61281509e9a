from __future__ import annotations

import logging

from flask import Flask, flash, jsonify, redirect, render_template, request, session, url_for

from ..container import Container
from ..core.enums import ComponentGroup, ReconcileMode
from ..core.exceptions import BackendError, ValidationError
from ..salary.notices import ctc_mismatch
from ..salary.reconciler import ROW_ACTIONS, parse_edit, parse_mode
from ..salary.session import SalaryEditSession
from ..users.guards import current_token, hr_required
from .model import EDITABLE_FIELDS

logger = logging.getLogger(__name__)


# One salary edit per browser session; opening another employee replaces it.
SALARY_EDIT_KEY = "salary_edit"


def _load_edit(employee_id: str) -> SalaryEditSession:
    data = session.get(SALARY_EDIT_KEY)
    if not data or data.get("employee_id") != employee_id:
        raise ValidationError("No salary edit in progress")
    return SalaryEditSession.from_dict(data)


def _store_edit(employee_id: str, edit_session: SalaryEditSession) -> None:
    session[SALARY_EDIT_KEY] = {"employee_id": employee_id, **edit_session.to_dict()}


def register(app: Flask, container: Container) -> None:
    @app.route("/hr/employees", endpoint="employees")
    @hr_required
    def employees():
        search = request.args.get("q", "")
        rows = []
        try:
            rows = container.employee_service.list_employees(token=current_token(), search=search)
        except BackendError as e:
            flash(str(e), "danger")
        return render_template("employees/index.html", employees=rows, search=search, active_page="employees")

    @app.route("/hr/employees/<employee_id>", endpoint="employee_detail")
    @hr_required
    def employee_detail(employee_id: str):
        token = current_token()
        try:
            employee = container.employee_service.get_employee(employee_id, token=token)
            mode = parse_mode(request.args.get("mode"))
            edit_session = container.employee_service.begin_salary_edit(employee_id, token=token, mode=mode)
        except (ValidationError, BackendError) as e:
            flash(str(e), "danger")
            return redirect(url_for("employees"))

        _store_edit(employee_id, edit_session)
        return render_template(
            "employees/edit.html",
            employee=employee,
            structure=edit_session.working,
            mismatch=ctc_mismatch(edit_session.working),
            mode=edit_session.mode.value,
            modes=[m.value for m in ReconcileMode],
            groups=[g.value for g in ComponentGroup],
            active_page="employees",
        )

    @app.route("/hr/employees/<employee_id>/salary/edit", methods=["POST"], endpoint="employee_salary_edit")
    @hr_required
    def employee_salary_edit(employee_id: str):
        data = request.get_json(silent=True) or {}
        try:
            edit_session = _load_edit(employee_id)
            action = data.get("action", "edit")
            if "mode" in data:
                edit_session.mode = parse_mode(data.get("mode"))

            if action in ROW_ACTIONS:
                result = edit_session.change_rows(action, data)
            else:
                result = edit_session.apply(parse_edit(data.get("edit")), adjusting=bool(data.get("adjusting", False)))
        except ValidationError as e:
            return jsonify({"message": str(e)}), 400

        _store_edit(employee_id, edit_session)
        return jsonify(result.to_dict())

    @app.route("/hr/employees/<employee_id>/save", methods=["POST"], endpoint="employee_save")
    @hr_required
    def employee_save(employee_id: str):
        updates = {k: request.form.get(k, "") for k in EDITABLE_FIELDS if k in request.form}
        try:
            edit_session = _load_edit(employee_id)
            saved = container.employee_service.save(employee_id, updates, edit_session, token=current_token())
            session.pop(SALARY_EDIT_KEY, None)
            flash("Employee details and salary structure updated successfully!", "success")
            logger.debug("Saved %s", saved.employee.employee_id)
        except (ValidationError, BackendError) as e:
            flash(str(e), "danger")
        except Exception:
            logger.exception("Saving employee %s failed", employee_id)
            flash("Failed to update employee", "danger")
        return redirect(url_for("employee_detail", employee_id=employee_id))

    @app.route("/hr/employees/<employee_id>/cancel", methods=["POST"], endpoint="employee_cancel")
    @hr_required
    def employee_cancel(employee_id: str):
        try:
            edit_session = _load_edit(employee_id)
        except ValidationError as e:
            return jsonify({"message": str(e)}), 400

        edit_session.discard()
        _store_edit(employee_id, edit_session)
        return jsonify(
            {
                "structure": edit_session.working.to_dict(),
                "mismatch": ctc_mismatch(edit_session.working).to_dict(),
            }
        )
