from __future__ import annotations

import logging

from ..client.http_client import BackendClient
from ..common.datetime_utils import parse_iso_date
from ..common.validators import matches
from ..core.exceptions import ValidationError
from .model import Profile, ProfileForm

logger = logging.getLogger(__name__)


def validate_profile_form(form: ProfileForm) -> dict[str, str]:
    """Optional fields are only checked when filled in; the personal e-mail is required."""
    errors: dict[str, str] = {}

    if not form.personal_email:
        errors["personal_email"] = "Personal Email is required"
    elif not matches("email", form.personal_email):
        errors["personal_email"] = "Please enter a valid email address"

    if form.phone and not matches("phone", form.phone.replace(" ", "")):
        errors["phone"] = "Phone number must be 10 digits"

    if form.dob:
        try:
            parse_iso_date(form.dob)
        except ValueError:
            errors["dob"] = "Date must be in YYYY-MM-DD format"

    if form.account_number and not matches("account_number", form.account_number.replace(" ", "")):
        errors["account_number"] = "Account Number must be 9-18 digits"
    if form.ifsc_code and not matches("ifsc", form.ifsc_code.upper()):
        errors["ifsc_code"] = "Please enter a valid IFSC Code (e.g., EXAM0001234)"
    if form.pan and not matches("pan", form.pan.upper()):
        errors["pan"] = "Please enter a valid PAN (e.g., ABCDE1234F)"

    return errors


class ProfileService:
    def __init__(self, client: BackendClient):
        self._client = client

    def get_my_profile(self, *, token: str) -> Profile:
        return Profile.from_dict(self._client.get("/api/employee/profile", token=token) or {})

    def update_my_profile(self, form: ProfileForm, *, token: str) -> Profile:
        errors = validate_profile_form(form)
        if errors:
            raise ValidationError("Please fix the validation errors below", errors=errors)

        data = self._client.put("/api/employee/profile", token=token, json=form.to_payload())
        profile = Profile.from_dict(data or {})
        logger.info("Profile updated for employee %s", profile.employee.employee_id or "?")
        return profile
