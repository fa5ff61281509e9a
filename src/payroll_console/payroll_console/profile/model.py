from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any, Mapping, Optional

from ..employees.model import Employee
from ..salary.model import SalaryStructure


@dataclass(frozen=True)
class Profile:
    """The logged-in employee's record with the salary structure attached when the backend has one."""

    employee: Employee
    salary: Optional[SalaryStructure] = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Profile":
        salary = data.get("salary")
        return cls(
            employee=Employee.from_dict(data),
            salary=SalaryStructure.from_dict(salary) if isinstance(salary, dict) else None,
        )


@dataclass(frozen=True)
class ProfileForm:
    """Fields an employee may change on their own profile (raw form strings)."""

    personal_email: str = ""
    phone: str = ""
    dob: str = ""
    street: str = ""
    city: str = ""
    state: str = ""
    zip: str = ""
    bank_name: str = ""
    account_number: str = ""
    ifsc_code: str = ""
    pan: str = ""
    uan: str = ""

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "ProfileForm":
        return cls(**{f.name: str(data.get(f.name) or "").strip() for f in fields(cls)})

    @classmethod
    def from_employee(cls, employee: Employee) -> "ProfileForm":
        address, bank, tax = employee.address, employee.bank_details, employee.tax_info
        return cls(
            personal_email=employee.personal_email,
            phone=employee.phone,
            dob=employee.dob,
            street=str(address.get("street") or ""),
            city=str(address.get("city") or ""),
            state=str(address.get("state") or ""),
            zip=str(address.get("zip") or ""),
            bank_name=str(bank.get("bankName") or ""),
            account_number=str(bank.get("accountNumber") or ""),
            ifsc_code=str(bank.get("ifscCode") or ""),
            pan=str(tax.get("pan") or ""),
            uan=str(tax.get("uan") or ""),
        )

    def to_payload(self) -> dict[str, Any]:
        payload: dict[str, Any] = {
            "personalEmail": self.personal_email,
            "phone": self.phone.replace(" ", ""),
            "address": {"street": self.street, "city": self.city, "state": self.state, "zip": self.zip},
            "bankDetails": {
                "bankName": self.bank_name,
                "accountNumber": self.account_number.replace(" ", ""),
                "ifscCode": self.ifsc_code.upper(),
            },
            "taxInfo": {"pan": self.pan.upper(), "uan": self.uan},
        }
        if self.dob:
            payload["dob"] = self.dob
        return payload
