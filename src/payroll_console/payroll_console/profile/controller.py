from __future__ import annotations

import logging

from flask import Flask, flash, redirect, render_template, request, url_for

from ..container import Container
from ..core.exceptions import BackendError, ValidationError
from ..users.guards import current_token, login_required
from .model import ProfileForm

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    @app.route("/profile", methods=["GET", "POST"], endpoint="my_profile")
    @login_required
    def my_profile():
        token = current_token()
        errors: dict[str, str] = {}
        form = None

        if request.method == "POST":
            form = ProfileForm.from_mapping(request.form)
            try:
                container.profile_service.update_my_profile(form, token=token)
                flash("Profile updated", "success")
                return redirect(url_for("my_profile"))
            except ValidationError as e:
                errors = e.errors
                flash(str(e), "danger")
            except BackendError as e:
                flash(str(e), "danger")
            except Exception:
                logger.exception("Profile update failed")
                flash("System error while updating profile", "danger")

        try:
            profile = container.profile_service.get_my_profile(token=token)
        except BackendError as e:
            flash(str(e), "danger")
            return redirect(url_for("dashboard"))

        return render_template(
            "profile/index.html",
            profile=profile,
            form=form or ProfileForm.from_employee(profile.employee),
            errors=errors,
            active_page="my_profile",
        )
