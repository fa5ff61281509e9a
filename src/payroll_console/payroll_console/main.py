from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from flask import Flask

from config import load_settings

from .attendance.controller import register as register_attendance
from .container import Container, build_container
from .employees.controller import register as register_employees
from .onboarding.controller import register as register_onboarding
from .payslips.controller import register as register_payslips
from .profile.controller import register as register_profile
from .users.controller import register as register_users

logger = logging.getLogger(__name__)

_ROOT = Path(__file__).resolve().parents[3]


def create_app(container: Optional[Container] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__, template_folder=str(_ROOT / "templates"), static_folder=str(_ROOT / "static"))

    settings = load_settings()
    app.secret_key = getattr(settings, "SECRET_KEY")
    api_config = getattr(settings, "API_CONFIG")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))

    logging.basicConfig(
        level=getattr(settings, "LOG_LEVEL", "DEBUG" if app.config["DEBUG"] else "INFO"),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    logger.info("[payroll-console] settings=%s api=%s", settings.__name__, api_config.get("base_url"))

    container = container or build_container(api_config=api_config)

    register_users(app, container)
    register_onboarding(app, container)
    register_employees(app, container)
    register_payslips(app, container)
    register_attendance(app, container)
    register_profile(app, container)

    return app
