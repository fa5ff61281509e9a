from __future__ import annotations

from typing import Any, Protocol, Sequence

from ..salary.model import SalaryStructure
from .model import Employee


class EmployeeRepository(Protocol):
    """Employee gateway interface.

    Note (DIP): the service depends on this interface, not on the REST client.
    """

    def list_all(self, *, token: str) -> Sequence[Employee]:
        raise NotImplementedError

    def get_by_id(self, employee_id: str, *, token: str) -> Employee:
        raise NotImplementedError

    def update(self, employee_id: str, updates: dict[str, Any], *, token: str) -> Employee:
        raise NotImplementedError

    def get_salary(self, employee_id: str, *, token: str) -> SalaryStructure:
        raise NotImplementedError

    def update_salary(self, employee_id: str, salary: SalaryStructure, *, token: str) -> SalaryStructure:
        raise NotImplementedError
