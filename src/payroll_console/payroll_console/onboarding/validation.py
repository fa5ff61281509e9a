from __future__ import annotations

import re

from ..common.validators import matches
from .model import OnboardingForm


def _blank(value: str) -> bool:
    return not value or not value.strip()


def _no_spaces(value: str) -> str:
    return re.sub(r"\s", "", value)


def validate_onboarding_form(form: OnboardingForm) -> dict[str, str]:
    """Field-level checks on the onboarding form; returns field -> message."""
    errors: dict[str, str] = {}

    if _blank(form.email):
        errors["email"] = "Email is required"
    elif not matches("email", form.email):
        errors["email"] = "Please enter a valid email address"

    if _blank(form.first_name):
        errors["first_name"] = "First Name is required"
    if _blank(form.last_name):
        errors["last_name"] = "Last Name is required"

    if _blank(form.personal_email):
        errors["personal_email"] = "Personal Email is required"
    elif not matches("email", form.personal_email):
        errors["personal_email"] = "Please enter a valid email address"

    if _blank(form.designation):
        errors["designation"] = "Designation is required"

    # department is optional

    if not form.joining_date:
        errors["joining_date"] = "Joining Date is required"

    if not form.annual_ctc:
        errors["annual_ctc"] = "Annual CTC is required"
    else:
        match = re.match(r"^\s*[+-]?\d+", form.annual_ctc)
        if not match or int(match.group()) <= 0:
            errors["annual_ctc"] = "Annual CTC must be a positive number"

    if _blank(form.phone):
        errors["phone"] = "Phone number is required"
    elif not matches("phone", _no_spaces(form.phone)):
        errors["phone"] = "Phone number must be 10 digits"

    if _blank(form.bank_name):
        errors["bank_name"] = "Bank Name is required"

    if _blank(form.account_number):
        errors["account_number"] = "Account Number is required"
    elif not matches("account_number", _no_spaces(form.account_number)):
        errors["account_number"] = "Account Number must be 9-18 digits"

    if _blank(form.ifsc_code):
        errors["ifsc_code"] = "IFSC Code is required"
    elif not matches("ifsc", form.ifsc_code.upper()):
        errors["ifsc_code"] = "Please enter a valid IFSC Code (e.g., EXAM0001234)"

    if _blank(form.pan):
        errors["pan"] = "PAN is required"
    elif not matches("pan", form.pan.upper()):
        errors["pan"] = "Please enter a valid PAN (e.g., ABCDE1234F)"

    return errors
