from __future__ import annotations

import logging
import re
from dataclasses import replace
from typing import Any

from ..client.http_client import BackendClient
from ..common.datetime_utils import parse_iso_date, to_utc_midnight_iso
from ..common.validators import coerce_int
from ..core.constants import COMPANY_EMAIL_DOMAIN
from ..core.exceptions import BackendError, ValidationError
from ..salary.model import SalaryStructure
from ..salary.notices import ctc_mismatch
from ..salary.validation import prepare_submission
from .model import OnboardingForm, OnboardResult
from .validation import validate_onboarding_form

logger = logging.getLogger(__name__)


def generate_company_email(first_name: str, last_name: str) -> str:
    """``firstnamelastname@employee.com``; empty until both names are given."""
    first = re.sub(r"\s+", "", (first_name or "").lower().strip())
    last = re.sub(r"\s+", "", (last_name or "").lower().strip())
    if first and last:
        return f"{first}{last}@{COMPANY_EMAIL_DOMAIN}"
    return ""


def build_onboard_payload(form: OnboardingForm, salary: SalaryStructure) -> dict[str, Any]:
    try:
        joining_date = to_utc_midnight_iso(parse_iso_date(form.joining_date.strip()))
    except ValueError:
        raise ValidationError("Please fix the validation errors below", errors={"joining_date": "Joining Date is invalid"})

    tax_info: dict[str, str] = {"pan": form.pan}
    if form.uan:
        tax_info["uan"] = form.uan

    return {
        "email": form.email,
        "firstName": form.first_name,
        "lastName": form.last_name,
        "designation": form.designation,
        "joiningDate": joining_date,
        "annualCTC": salary.annual_ctc,
        "personalEmail": form.personal_email,
        "department": form.department,
        "phone": form.phone,
        "bankDetails": {
            "bankName": form.bank_name,
            "accountNumber": form.account_number,
            "ifscCode": form.ifsc_code,
        },
        "taxInfo": tax_info,
        "earnings": [c.to_dict() for c in salary.earnings],
        "deductions": [c.to_dict() for c in salary.deductions],
        "employerContributions": [c.to_dict() for c in salary.employer_contributions],
    }


class OnboardingService:
    """Use case: create an employee together with the initial salary structure."""

    def __init__(self, client: BackendClient):
        self._client = client

    def onboard(self, form: OnboardingForm, structure: SalaryStructure, *, token: str) -> OnboardResult:
        if not token:
            raise ValidationError("Authentication token not found. Please login again.")

        generated = generate_company_email(form.first_name, form.last_name)
        if generated:
            form = replace(form, email=generated)

        errors = validate_onboarding_form(form)
        if errors:
            raise ValidationError("Please fix the validation errors below", errors=errors)

        # The CTC field and the structure's CTC are the same form value.
        structure = structure.with_ctc(coerce_int(form.annual_ctc))
        salary = prepare_submission(structure)

        notices = ()
        mismatch = ctc_mismatch(structure)
        if mismatch.significant:
            notices = (mismatch.notice(),)

        payload = build_onboard_payload(form, salary)
        logger.debug("Onboarding payload for %s: %s", form.email, payload)

        response = self._client.post("/api/hr/onboard", token=token, json=payload)
        try:
            employee = response["data"]["employee"]
            employee_id = str(employee["employeeId"])
        except (KeyError, TypeError):
            raise BackendError("Unexpected onboarding response from payroll service")

        logger.info("Onboarded employee %s", employee_id)
        return OnboardResult(
            employee_id=employee_id,
            message=f"Employee {employee_id} onboarded successfully!",
            notices=notices,
            employee=employee,
        )
