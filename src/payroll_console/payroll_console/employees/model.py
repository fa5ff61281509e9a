from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional


@dataclass(frozen=True)
class Employee:
    """Employee as returned by the backend (``_id`` is the record id used in URLs)."""

    id: str
    employee_id: str
    first_name: str
    last_name: str
    personal_email: str = ""
    designation: str = ""
    department: str = ""
    joining_date: str = ""
    dob: str = ""
    phone: str = ""
    is_active: bool = True
    address: dict = field(default_factory=dict)
    bank_details: dict = field(default_factory=dict)
    tax_info: dict = field(default_factory=dict)

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Employee":
        return cls(
            id=str(data.get("_id") or ""),
            employee_id=str(data.get("employeeId") or ""),
            first_name=str(data.get("firstName") or ""),
            last_name=str(data.get("lastName") or ""),
            personal_email=str(data.get("personalEmail") or ""),
            designation=str(data.get("designation") or ""),
            department=str(data.get("department") or ""),
            joining_date=str(data.get("joiningDate") or ""),
            dob=str(data.get("dob") or "")[:10],
            phone=str(data.get("phone") or ""),
            is_active=bool(data.get("isActive", True)),
            address=dict(data.get("address") or {}),
            bank_details=dict(data.get("bankDetails") or {}),
            tax_info=dict(data.get("taxInfo") or {}),
        )

    def matches(self, search: Optional[str]) -> bool:
        if not search:
            return True
        needle = search.strip().lower()
        haystack = (self.full_name, self.employee_id, self.personal_email, self.department, self.designation)
        return any(needle in (v or "").lower() for v in haystack)


# Fields HR may change from the edit screen (backend JSON keys).
EDITABLE_FIELDS = ("firstName", "lastName", "personalEmail", "designation", "department", "phone")
