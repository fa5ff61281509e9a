from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any, Mapping, Optional

from ..salary.notices import Notice


@dataclass(frozen=True)
class OnboardingForm:
    """Raw onboarding form values (strings as typed by the HR user)."""

    first_name: str = ""
    last_name: str = ""
    email: str = ""
    personal_email: str = ""
    designation: str = ""
    department: str = ""
    joining_date: str = ""
    annual_ctc: str = ""
    phone: str = ""
    bank_name: str = ""
    account_number: str = ""
    ifsc_code: str = ""
    pan: str = ""
    uan: str = ""

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "OnboardingForm":
        return cls(**{f.name: str(data.get(f.name) or "") for f in fields(cls)})


@dataclass(frozen=True)
class OnboardResult:
    employee_id: str
    message: str
    notices: tuple[Notice, ...] = ()
    employee: Optional[dict] = None
