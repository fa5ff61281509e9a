from __future__ import annotations

import calendar
from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class GenerationSummary:
    """Outcome of a payroll run as reported by the backend."""

    message: str
    processed: int
    success: int
    skipped: int
    failed: int
    errors: tuple[str, ...] = ()
    warnings: tuple[str, ...] = ()

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "GenerationSummary":
        return cls(
            message=str(data.get("message") or ""),
            processed=int(data.get("processed") or 0),
            success=int(data.get("success") or 0),
            skipped=int(data.get("skipped") or 0),
            failed=int(data.get("failed") or 0),
            errors=tuple(str(e) for e in data.get("errors") or []),
            warnings=tuple(str(w) for w in data.get("warnings") or []),
        )


@dataclass(frozen=True)
class Payslip:
    id: str
    month: int
    year: int
    gross_earnings: float
    total_deductions: float
    net_pay: float
    status: str
    total_working_days: int = 0
    days_paid: float = 0
    lop_days: float = 0
    earnings: tuple[dict, ...] = field(default_factory=tuple)
    deductions: tuple[dict, ...] = field(default_factory=tuple)
    generated_on: str = ""

    @property
    def period(self) -> str:
        return f"{self.year}-{self.month:02d}"

    @property
    def month_name(self) -> str:
        return calendar.month_name[self.month] if 1 <= self.month <= 12 else ""

    @property
    def attendance_percent(self) -> float:
        if not self.total_working_days:
            return 0.0
        return round(self.days_paid / self.total_working_days * 100, 1)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Payslip":
        info = data.get("payrollInfo") or {}
        return cls(
            id=str(data.get("_id") or ""),
            month=int(data.get("month") or 0),
            year=int(data.get("year") or 0),
            gross_earnings=float(data.get("grossEarnings") or 0),
            total_deductions=float(data.get("totalDeductions") or 0),
            net_pay=float(data.get("netPay") or 0),
            status=str(data.get("status") or ""),
            total_working_days=int(info.get("totalWorkingDays") or 0),
            days_paid=float(info.get("daysPaid") or 0),
            lop_days=float(info.get("lopDays") or 0),
            earnings=tuple(data.get("earnings") or []),
            deductions=tuple(data.get("deductions") or []),
            generated_on=str(data.get("generatedOn") or ""),
        )
