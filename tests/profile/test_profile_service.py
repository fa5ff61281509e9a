import pytest

from src.payroll_console.payroll_console.core.exceptions import ValidationError
from src.payroll_console.payroll_console.profile.model import ProfileForm
from src.payroll_console.payroll_console.profile.service import ProfileService


class FakeClient:
    def __init__(self, response):
        self.calls = []
        self.response = response

    def get(self, path, *, token=None, params=None):
        self.calls.append(("GET", path, None))
        return self.response

    def put(self, path, *, token=None, json=None):
        self.calls.append(("PUT", path, json))
        return self.response


PROFILE = {
    "_id": "a1",
    "employeeId": "EMP001",
    "firstName": "Asha",
    "lastName": "Rao",
    "personalEmail": "asha@mail.com",
    "dob": "1994-02-11T00:00:00.000Z",
    "address": {"city": "Pune"},
    "bankDetails": {"bankName": "HDFC", "accountNumber": "123456789012", "ifscCode": "HDFC0001234"},
    "taxInfo": {"pan": "ABCDE1234F"},
    "salary": {
        "annualCTC": 600000,
        "earnings": [{"name": "Basic Salary", "amount": 25000}],
        "deductions": [],
        "employerContributions": [{"name": "Employer PF", "amount": 25000}],
    },
}


def test_get_my_profile_includes_salary():
    client = FakeClient(PROFILE)

    profile = ProfileService(client).get_my_profile(token="t")

    assert client.calls == [("GET", "/api/employee/profile", None)]
    assert profile.employee.full_name == "Asha Rao"
    assert profile.employee.dob == "1994-02-11"
    assert profile.salary.annual_from_components == 600000

    form = ProfileForm.from_employee(profile.employee)
    assert (form.city, form.ifsc_code, form.pan) == ("Pune", "HDFC0001234", "ABCDE1234F")


def test_profile_without_salary():
    profile = ProfileService(FakeClient({"_id": "a1", "firstName": "Asha"})).get_my_profile(token="t")

    assert profile.salary is None


def test_update_sends_only_editable_fields():
    client = FakeClient(PROFILE)
    form = ProfileForm(personal_email="asha@mail.com", phone="98765 43210", ifsc_code="hdfc0001234", pan="abcde1234f")

    ProfileService(client).update_my_profile(form, token="t")

    method, path, payload = client.calls[0]
    assert (method, path) == ("PUT", "/api/employee/profile")
    assert set(payload) == {"personalEmail", "phone", "address", "bankDetails", "taxInfo"}
    assert payload["phone"] == "9876543210"
    assert payload["bankDetails"]["ifscCode"] == "HDFC0001234"
    assert payload["taxInfo"]["pan"] == "ABCDE1234F"


def test_update_rejects_invalid_fields():
    client = FakeClient(PROFILE)
    form = ProfileForm(personal_email="", phone="123", dob="11-02-1994", ifsc_code="XYZ", pan="123")

    with pytest.raises(ValidationError) as exc:
        ProfileService(client).update_my_profile(form, token="t")

    assert set(exc.value.errors) == {"personal_email", "phone", "dob", "ifsc_code", "pan"}
    assert client.calls == []
