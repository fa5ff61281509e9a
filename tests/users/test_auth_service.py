import pytest

from src.payroll_console.payroll_console.core.enums import Role
from src.payroll_console.payroll_console.core.exceptions import AuthenticationError, BackendError, ValidationError
from src.payroll_console.payroll_console.users.service import AuthService


class FakeClient:
    def __init__(self, response=None, error=None):
        self.response = response
        self.error = error
        self.calls = []

    def post(self, path, *, token=None, json=None):
        self.calls.append((path, json))
        if self.error:
            raise self.error
        return self.response


def test_login_success():
    client = FakeClient(response={"token": "jwt", "role": "hr"})

    user = AuthService(client).authenticate(" hr@employee.com ", "secret")

    assert user.token == "jwt"
    assert user.role == Role.HR
    assert user.is_hr
    assert client.calls == [("/api/auth/login", {"email": "hr@employee.com", "password": "secret"})]


def test_login_requires_fields():
    with pytest.raises(ValidationError):
        AuthService(FakeClient()).authenticate("", "x")


def test_rejected_credentials():
    client = FakeClient(error=BackendError("Invalid credentials", status_code=401))

    with pytest.raises(AuthenticationError, match="Invalid email or password"):
        AuthService(client).authenticate("a@b.com", "nope")


def test_server_error_is_not_hidden():
    client = FakeClient(error=BackendError("HTTP error! status: 502", status_code=502))

    with pytest.raises(BackendError):
        AuthService(client).authenticate("a@b.com", "pw")


def test_missing_token_or_unknown_role():
    with pytest.raises(AuthenticationError):
        AuthService(FakeClient(response={})).authenticate("a@b.com", "pw")

    with pytest.raises(AuthenticationError, match="Unsupported account role"):
        AuthService(FakeClient(response={"token": "t", "role": "admin"})).authenticate("a@b.com", "pw")
