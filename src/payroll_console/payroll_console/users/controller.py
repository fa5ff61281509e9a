from __future__ import annotations

import logging

from flask import Flask, flash, redirect, render_template, request, session, url_for

from ..container import Container
from ..core.enums import Role
from ..core.exceptions import AuthenticationError, BackendError, ValidationError
from .guards import login_required

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    @app.route("/", methods=["GET", "POST"], endpoint="login")
    def login():
        if "token" in session:
            return redirect(url_for("dashboard"))

        if request.method == "POST":
            email = request.form.get("email", "")
            password = request.form.get("password", "")

            try:
                s_user = container.auth_service.authenticate(email, password)

                session["token"] = s_user.token
                session["role"] = s_user.role.value
                session["email"] = s_user.email

                flash("Logged in successfully!", "success")
                return redirect(url_for("dashboard"))
            except (AuthenticationError, ValidationError, BackendError) as e:
                flash(str(e), "danger")
            except Exception as e:
                logger.exception("Login failed")
                if bool(app.config.get("DEBUG", False)):
                    flash(f"System error during login: {e}", "danger")
                else:
                    flash("System error during login", "danger")

        return render_template("login.html")

    @app.route("/logout", endpoint="logout")
    def logout():
        session.clear()
        flash("You have been logged out.", "info")
        return redirect(url_for("login"))

    @app.route("/dashboard", endpoint="dashboard")
    @login_required
    def dashboard():
        is_hr = session.get("role") == Role.HR.value
        return render_template("dashboard.html", is_hr=is_hr, email=session.get("email"), active_page="dashboard")
