from __future__ import annotations

import logging

from ..client.http_client import BackendClient
from ..common.validators import require_non_empty
from ..core.enums import Role
from ..core.exceptions import AuthenticationError, BackendError
from .model import SessionUser

logger = logging.getLogger(__name__)


class AuthService:
    """Use case: authenticate user (login) against the backend."""

    def __init__(self, client: BackendClient):
        self._client = client

    def authenticate(self, email: str, password: str) -> SessionUser:
        email = require_non_empty(email, "email")
        password = require_non_empty(password, "password")

        try:
            data = self._client.post("/api/auth/login", json={"email": email, "password": password})
        except BackendError as e:
            if e.status_code is not None and 400 <= e.status_code < 500:
                raise AuthenticationError("Invalid email or password") from e
            raise

        token = (data or {}).get("token")
        if not token:
            raise AuthenticationError("Invalid email or password")

        try:
            role = Role(data.get("role") or Role.EMPLOYEE.value)
        except ValueError:
            raise AuthenticationError("Unsupported account role")

        logger.info("User %s logged in as %s", email, role.value)
        return SessionUser(token=token, role=role, email=email)
