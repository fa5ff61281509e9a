from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Optional

import requests

from ..core.constants import DEFAULT_API_TIMEOUT
from ..core.exceptions import BackendError

logger = logging.getLogger(__name__)


@dataclass
class ApiConfig:
    base_url: str
    timeout: float = DEFAULT_API_TIMEOUT


class BackendClient:
    """Client to communicate with the payroll backend REST API.

    The bearer token is opaque to us: it is whatever the backend returned on
    login and is replayed as-is.
    """

    def __init__(self, config: ApiConfig, *, session: Optional[requests.Session] = None):
        self._base_url = config.base_url.rstrip("/")
        self._timeout = config.timeout
        self._session = session or requests.Session()

    def request(
        self,
        method: str,
        path: str,
        *,
        token: Optional[str] = None,
        json: Any = None,
        params: Optional[dict[str, Any]] = None,
        files: Optional[dict[str, Any]] = None,
    ) -> Any:
        # requests sets the multipart boundary itself when files are sent.
        headers = {} if files else {"Content-Type": "application/json"}
        if token:
            headers["Authorization"] = f"Bearer {token}"

        url = f"{self._base_url}{path}"
        try:
            response = self._session.request(
                method,
                url,
                headers=headers,
                json=json,
                files=files,
                params={k: v for k, v in (params or {}).items() if v is not None} or None,
                timeout=self._timeout,
            )
        except requests.RequestException as e:
            logger.error("Backend call %s %s failed: %s", method, path, e)
            raise BackendError("Payroll service is unreachable. Please try again.") from e

        try:
            data = response.json() if response.content else {}
        except ValueError:
            data = {}

        if not response.ok:
            message = data.get("message") if isinstance(data, dict) else None
            logger.warning("Backend call %s %s returned %s", method, path, response.status_code)
            raise BackendError(message or f"HTTP error! status: {response.status_code}", status_code=response.status_code)

        return data

    def get(self, path: str, *, token: Optional[str] = None, params: Optional[dict[str, Any]] = None) -> Any:
        return self.request("GET", path, token=token, params=params)

    def post(
        self,
        path: str,
        *,
        token: Optional[str] = None,
        json: Any = None,
        params: Optional[dict[str, Any]] = None,
        files: Optional[dict[str, Any]] = None,
    ) -> Any:
        return self.request("POST", path, token=token, json=json, params=params, files=files)

    def put(self, path: str, *, token: Optional[str] = None, json: Any = None) -> Any:
        return self.request("PUT", path, token=token, json=json)

    def delete(self, path: str, *, token: Optional[str] = None) -> Any:
        return self.request("DELETE", path, token=token)
