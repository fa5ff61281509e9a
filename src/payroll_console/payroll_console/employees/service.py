from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Optional

from ..common.validators import require_non_empty
from ..core.enums import ReconcileMode
from ..core.exceptions import BackendError
from ..salary.model import SalaryStructure
from ..salary.session import SalaryEditSession
from ..salary.strategies.base import sync_ctc_from_components
from ..salary.validation import prepare_submission
from .model import EDITABLE_FIELDS, Employee
from .repository import EmployeeRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SavedEmployee:
    employee: Employee
    salary: SalaryStructure


class EmployeeService:
    """Use case: browse employees and edit their details and salary structure."""

    def __init__(self, employees: EmployeeRepository):
        self._employees = employees

    def list_employees(self, *, token: str, search: Optional[str] = None) -> list[Employee]:
        rows = self._employees.list_all(token=token)
        return [e for e in rows if e.matches(search)]

    def get_employee(self, employee_id: str, *, token: str) -> Employee:
        employee_id = require_non_empty(employee_id, "employee_id")
        return self._employees.get_by_id(employee_id, token=token)

    def begin_salary_edit(
        self,
        employee_id: str,
        *,
        token: str,
        mode: ReconcileMode = ReconcileMode.AUTO,
    ) -> SalaryEditSession:
        """Fetch the salary structure into a working copy with a backup.

        Employees without a salary record start from an empty structure.
        """
        try:
            structure = self._employees.get_salary(employee_id, token=token)
        except BackendError as e:
            logger.warning("No salary structure for employee %s: %s", employee_id, e)
            structure = SalaryStructure()
        return SalaryEditSession.start(structure, mode=mode)

    def save(
        self,
        employee_id: str,
        updates: dict[str, Any],
        edit_session: SalaryEditSession,
        *,
        token: str,
    ) -> SavedEmployee:
        """Persist employee fields, then the salary structure.

        The saved CTC is recomputed from the components. On success the edit
        session is committed so the backup matches what was stored.
        """
        salary = sync_ctc_from_components(prepare_submission(edit_session.working))

        clean_updates = {k: v for k, v in updates.items() if k in EDITABLE_FIELDS}
        employee = self._employees.update(employee_id, clean_updates, token=token)
        saved_salary = self._employees.update_salary(employee_id, salary, token=token)

        edit_session.commit(saved_salary)
        logger.info("Saved employee %s (annual CTC %s)", employee_id, saved_salary.annual_ctc)
        return SavedEmployee(employee=employee, salary=saved_salary)
