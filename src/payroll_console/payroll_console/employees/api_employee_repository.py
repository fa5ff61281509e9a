from __future__ import annotations

from typing import Any, Sequence

from ..client.http_client import BackendClient
from ..salary.model import SalaryStructure
from .model import Employee


class ApiEmployeeRepository:
    """EmployeeRepository backed by the HR endpoints of the payroll backend."""

    def __init__(self, client: BackendClient):
        self._client = client

    def list_all(self, *, token: str) -> Sequence[Employee]:
        data = self._client.get("/api/hr/employees", token=token)
        return [Employee.from_dict(row) for row in data or []]

    def get_by_id(self, employee_id: str, *, token: str) -> Employee:
        return Employee.from_dict(self._client.get(f"/api/hr/employees/{employee_id}", token=token))

    def update(self, employee_id: str, updates: dict[str, Any], *, token: str) -> Employee:
        data = self._client.put(f"/api/hr/employees/{employee_id}", token=token, json=updates)
        return Employee.from_dict(data)

    def get_salary(self, employee_id: str, *, token: str) -> SalaryStructure:
        return SalaryStructure.from_dict(self._client.get(f"/api/hr/employees/{employee_id}/salary", token=token))

    def update_salary(self, employee_id: str, salary: SalaryStructure, *, token: str) -> SalaryStructure:
        data = self._client.put(f"/api/hr/employees/{employee_id}/salary", token=token, json=salary.to_dict())
        return SalaryStructure.from_dict(data) if data else salary
