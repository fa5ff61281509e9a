from __future__ import annotations

import importlib
import logging
import os
from types import ModuleType
from typing import Optional

logger = logging.getLogger(__name__)

DEFAULT_ENV = "development"

# APP_ENV value -> settings module
ENVIRONMENTS = {
    "development": "config.development",
    "dev": "config.development",
    "testing": "config.testing",
    "test": "config.testing",
    "production": "config.production",
    "prod": "config.production",
}


def get_settings_module(env: Optional[str] = None) -> str:
    """Settings module for ``env`` (``APP_ENV`` when not given); unknown names fall back to development."""
    name = (env or os.getenv("APP_ENV") or DEFAULT_ENV).strip().lower()
    module = ENVIRONMENTS.get(name)
    if module is None:
        logger.warning("Unknown APP_ENV %r, using %s settings", name, DEFAULT_ENV)
        module = ENVIRONMENTS[DEFAULT_ENV]
    return module


def load_settings(env: Optional[str] = None) -> ModuleType:
    return importlib.import_module(get_settings_module(env))
