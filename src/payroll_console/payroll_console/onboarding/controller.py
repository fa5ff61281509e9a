from __future__ import annotations

import json
import logging

from flask import Flask, flash, jsonify, redirect, render_template, request, url_for

from ..container import Container
from ..core.enums import ReconcileMode
from ..core.exceptions import BackendError, ValidationError
from ..salary.model import SalaryStructure
from ..salary.notices import ctc_mismatch
from ..salary.reconciler import ROW_ACTIONS, change_rows, parse_edit, parse_mode, reconcile
from ..users.guards import current_token, hr_required
from .model import OnboardingForm

logger = logging.getLogger(__name__)


def _structure_from_form(raw: str) -> SalaryStructure:
    if not raw:
        return SalaryStructure.seeded()
    try:
        return SalaryStructure.from_dict(json.loads(raw))
    except (TypeError, ValueError):
        raise ValidationError("Salary structure could not be read")


def register(app: Flask, container: Container) -> None:
    @app.route("/hr/onboard", methods=["GET", "POST"], endpoint="onboard_employee")
    @hr_required
    def onboard_employee():
        form = OnboardingForm()
        structure = SalaryStructure.seeded()
        mode = ReconcileMode.AUTO
        errors: dict[str, str] = {}

        if request.method == "POST":
            form = OnboardingForm.from_mapping(request.form)
            try:
                mode = parse_mode(request.form.get("mode"))
                structure = _structure_from_form(request.form.get("salary_structure", ""))

                result = container.onboarding_service.onboard(form, structure, token=current_token())

                for notice in result.notices:
                    flash(notice.message, notice.level.value)
                flash(result.message, "success")
                return redirect(url_for("dashboard"))
            except ValidationError as e:
                errors = e.errors
                flash(str(e), "danger")
            except BackendError as e:
                flash(str(e), "danger")
            except Exception:
                logger.exception("Onboarding failed")
                flash("Failed to onboard employee. Please try again.", "danger")

        return render_template(
            "onboarding/onboard.html",
            form=form,
            structure=structure,
            structure_json=json.dumps(structure.to_dict()),
            mismatch=ctc_mismatch(structure),
            mode=mode.value,
            modes=[m.value for m in ReconcileMode],
            errors=errors,
            active_page="onboard_employee",
        )

    @app.route("/api/salary/reconcile", methods=["POST"], endpoint="reconcile_salary")
    @hr_required
    def reconcile_salary():
        data = request.get_json(silent=True) or {}
        try:
            structure = SalaryStructure.from_dict(data.get("structure"))
            action = data.get("action", "edit")
            if action in ROW_ACTIONS:
                result = change_rows(structure, action, data)
            else:
                result = reconcile(
                    structure,
                    parse_mode(data.get("mode")),
                    parse_edit(data.get("edit")),
                    adjusting=bool(data.get("adjusting", False)),
                )
        except ValidationError as e:
            return jsonify({"message": str(e)}), 400
        return jsonify(result.to_dict())
