from __future__ import annotations

from functools import wraps

from flask import flash, redirect, render_template, session, url_for

from ..core.enums import Role


def login_required(view):
    @wraps(view)
    def wrapper(*args, **kwargs):
        if "token" not in session:
            flash("Please log in to continue.", "warning")
            return redirect(url_for("login"))
        return view(*args, **kwargs)

    return wrapper


def hr_required(view):
    @wraps(view)
    def wrapper(*args, **kwargs):
        if "token" not in session:
            return redirect(url_for("login"))

        if session.get("role") != Role.HR.value:
            current_user = {"email": session.get("email"), "role": session.get("role")}
            return render_template("403.html", current_user=current_user), 403

        return view(*args, **kwargs)

    return wrapper


def current_token() -> str:
    return str(session.get("token") or "")
