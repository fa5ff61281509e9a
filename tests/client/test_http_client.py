import pytest
import requests

from src.payroll_console.payroll_console.client.http_client import ApiConfig, BackendClient
from src.payroll_console.payroll_console.core.exceptions import BackendError


class FakeResponse:
    def __init__(self, status_code=200, body=None, raw=None):
        self.status_code = status_code
        self._body = body
        if raw is not None:
            self.content = raw
        else:
            self.content = b"" if body is None else b"{...}"

    @property
    def ok(self):
        return self.status_code < 400

    def json(self):
        if self._body is None:
            raise ValueError("No JSON")
        return self._body


class FakeSession:
    def __init__(self, response=None, error=None):
        self.response = response or FakeResponse(body={})
        self.error = error
        self.calls = []

    def request(self, method, url, **kwargs):
        self.calls.append((method, url, kwargs))
        if self.error:
            raise self.error
        return self.response


def _client(session):
    return BackendClient(ApiConfig(base_url="http://backend.test/", timeout=3), session=session)


def test_request_sends_bearer_token_and_json():
    session = FakeSession(FakeResponse(body={"ok": True}))

    data = _client(session).post("/api/hr/onboard", token="abc", json={"x": 1})

    method, url, kwargs = session.calls[0]
    assert data == {"ok": True}
    assert (method, url) == ("POST", "http://backend.test/api/hr/onboard")
    assert kwargs["headers"]["Authorization"] == "Bearer abc"
    assert kwargs["json"] == {"x": 1}
    assert kwargs["timeout"] == 3


def test_get_without_token_drops_empty_params():
    session = FakeSession(FakeResponse(body=[]))

    _client(session).get("/api/employee/payslips", params={"year": None})

    _, _, kwargs = session.calls[0]
    assert "Authorization" not in kwargs["headers"]
    assert kwargs["params"] is None


def test_error_uses_backend_message():
    session = FakeSession(FakeResponse(status_code=409, body={"message": "Payroll already generated"}))

    with pytest.raises(BackendError) as exc:
        _client(session).post("/api/hr/payroll/generate", token="t", json={})

    assert str(exc.value) == "Payroll already generated"
    assert exc.value.status_code == 409


def test_error_without_body_falls_back_to_status():
    session = FakeSession(FakeResponse(status_code=500, raw=b"<html>"))

    with pytest.raises(BackendError) as exc:
        _client(session).get("/api/hr/employees", token="t")

    assert str(exc.value) == "HTTP error! status: 500"


def test_empty_success_body_is_empty_dict():
    assert _client(FakeSession(FakeResponse(status_code=204))).put("/api/hr/employees/1", token="t") == {}


def test_connection_failure():
    session = FakeSession(error=requests.ConnectionError("refused"))

    with pytest.raises(BackendError) as exc:
        _client(session).get("/api/hr/employees", token="t")

    assert exc.value.status_code is None
    assert "unreachable" in str(exc.value)


def test_upload_sends_multipart_without_json_content_type():
    session = FakeSession(FakeResponse(body={"processed": 1}))
    stream = object()

    _client(session).post(
        "/api/hr/attendance/upload",
        token="abc",
        params={"action": "preview", "year": None},
        files={"payrollFile": ("a.csv", stream, "text/csv")},
    )

    _, _, kwargs = session.calls[0]
    assert kwargs["headers"] == {"Authorization": "Bearer abc"}
    assert kwargs["files"]["payrollFile"][1] is stream
    assert kwargs["params"] == {"action": "preview"}


def test_delete():
    session = FakeSession(FakeResponse(body={"message": "Deleted"}))

    data = _client(session).delete("/api/hr/attendance/daily/d1", token="abc")

    method, url, _ = session.calls[0]
    assert (method, url) == ("DELETE", "http://backend.test/api/hr/attendance/daily/d1")
    assert data == {"message": "Deleted"}
