import pytest

from src.payroll_console.payroll_console.core.enums import NoticeLevel
from src.payroll_console.payroll_console.core.exceptions import BackendError, ValidationError
from src.payroll_console.payroll_console.onboarding.model import OnboardingForm
from src.payroll_console.payroll_console.onboarding.service import (
    OnboardingService,
    build_onboard_payload,
    generate_company_email,
)
from src.payroll_console.payroll_console.salary.distribution import distribute_ctc
from src.payroll_console.payroll_console.salary.model import SalaryStructure


class FakeClient:
    def __init__(self, response=None):
        self.calls = []
        self.response = response if response is not None else {"data": {"employee": {"employeeId": "EMP007"}}}

    def post(self, path, *, token=None, json=None):
        self.calls.append((path, token, json))
        return self.response


FORM = OnboardingForm(
    first_name="Asha ",
    last_name="Van Rao",
    personal_email="asha.rao@gmail.com",
    designation="Engineer",
    department="R&D",
    joining_date="2024-04-01",
    annual_ctc="1200000",
    phone="9876543210",
    bank_name="HDFC Bank",
    account_number="123456789012",
    ifsc_code="HDFC0001234",
    pan="ABCDE1234F",
)


def test_generate_company_email():
    assert generate_company_email(" Asha", "Van Rao") == "ashavanrao@employee.com"
    assert generate_company_email("Asha", "") == ""


def test_onboard_posts_payload_and_reports_employee_id():
    client = FakeClient()
    svc = OnboardingService(client)

    result = svc.onboard(FORM, distribute_ctc(1_200_000), token="tok")

    assert result.employee_id == "EMP007"
    assert result.message == "Employee EMP007 onboarded successfully!"
    assert result.notices == ()

    path, token, body = client.calls[0]
    assert path == "/api/hr/onboard"
    assert token == "tok"
    assert body["email"] == "ashavanrao@employee.com"
    assert body["joiningDate"] == "2024-04-01T00:00:00.000Z"
    assert body["annualCTC"] == 1_200_000
    assert body["taxInfo"] == {"pan": "ABCDE1234F"}
    assert body["bankDetails"]["ifscCode"] == "HDFC0001234"
    assert [c["amount"] for c in body["earnings"]] == [50000, 20000, 18000]
    assert body["employerContributions"] == [
        {"name": "Employer PF", "amount": 12000, "isPercent": False, "percentOf": "Basic"}
    ]


def test_onboard_warns_but_submits_when_ctc_differs():
    client = FakeClient()
    form = OnboardingForm(**{**FORM.__dict__, "annual_ctc": "1000000"})

    result = OnboardingService(client).onboard(form, distribute_ctc(1_200_000), token="tok")

    assert len(client.calls) == 1
    assert client.calls[0][2]["annualCTC"] == 1_000_000
    assert result.notices[0].level == NoticeLevel.INFO
    assert "20.00%" in result.notices[0].message


def test_onboard_rejects_invalid_form_without_calling_backend():
    client = FakeClient()
    form = OnboardingForm(**{**FORM.__dict__, "pan": "bad"})

    with pytest.raises(ValidationError) as exc:
        OnboardingService(client).onboard(form, distribute_ctc(1_200_000), token="tok")

    assert "pan" in exc.value.errors
    assert client.calls == []


def test_onboard_requires_positive_earnings_and_deductions():
    client = FakeClient()

    with pytest.raises(ValidationError) as exc:
        OnboardingService(client).onboard(FORM, SalaryStructure.seeded(), token="tok")

    assert set(exc.value.errors) == {"earnings", "deductions"}
    assert client.calls == []


def test_onboard_requires_token():
    with pytest.raises(ValidationError):
        OnboardingService(FakeClient()).onboard(FORM, distribute_ctc(1_200_000), token="")


def test_onboard_unexpected_response():
    with pytest.raises(BackendError):
        OnboardingService(FakeClient(response={"data": {}})).onboard(FORM, distribute_ctc(1_200_000), token="tok")


def test_payload_includes_uan_only_when_given():
    form = OnboardingForm(**{**FORM.__dict__, "uan": "100200300400"})

    body = build_onboard_payload(form, distribute_ctc(600_000))

    assert body["taxInfo"] == {"pan": "ABCDE1234F", "uan": "100200300400"}


def test_payload_rejects_bad_joining_date():
    form = OnboardingForm(**{**FORM.__dict__, "joining_date": "01/04/2024"})

    with pytest.raises(ValidationError) as exc:
        build_onboard_payload(form, distribute_ctc(600_000))

    assert "joining_date" in exc.value.errors
