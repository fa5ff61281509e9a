from __future__ import annotations

import logging
from typing import Optional

from ..client.http_client import BackendClient
from ..common.validators import require_non_empty, validate_period
from .model import GenerationSummary, Payslip

logger = logging.getLogger(__name__)


class PayslipService:
    """Use case: trigger payroll runs and browse generated payslips.

    Payslip amounts are computed by the backend; this service only forwards
    requests and shapes the responses.
    """

    def __init__(self, client: BackendClient):
        self._client = client

    def generate(self, *, month: int, year: int, force: bool = False, token: str) -> GenerationSummary:
        month, year = validate_period(month, year)

        body = {"month": month, "year": year}
        if force:
            body["force"] = True

        summary = GenerationSummary.from_dict(self._client.post("/api/hr/payroll/generate", token=token, json=body))
        logger.info(
            "Payroll %s-%02d: processed=%s success=%s skipped=%s failed=%s",
            year, month, summary.processed, summary.success, summary.skipped, summary.failed,
        )
        return summary

    def list_my_payslips(self, *, token: str, year: Optional[int] = None) -> list[Payslip]:
        data = self._client.get("/api/employee/payslips", token=token, params={"year": year})
        return [Payslip.from_dict(row) for row in data or []]

    def list_employee_payslips(self, employee_id: str, *, token: str, year: Optional[int] = None) -> list[Payslip]:
        employee_id = require_non_empty(employee_id or "", "employee_id")
        data = self._client.get(f"/api/hr/employees/{employee_id}/payslips", token=token, params={"year": year})
        return [Payslip.from_dict(row) for row in data or []]

    def get_payslip(self, payslip_id: str, *, token: str, as_hr: bool = False) -> Payslip:
        """Full payslip (earnings and deduction lines) as served for download."""
        payslip_id = require_non_empty(payslip_id or "", "payslip_id")
        scope = "hr" if as_hr else "employee"
        return Payslip.from_dict(self._client.get(f"/api/{scope}/payslips/{payslip_id}/download", token=token))
