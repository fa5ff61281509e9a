from __future__ import annotations

from typing import Any, Optional

from ..core.enums import ReconcileMode
from .model import SalaryStructure
from .reconciler import Edit, ReconcileResult, change_rows, reconcile


class SalaryEditSession:
    """Working copy of an employee's salary structure plus the backup to restore on cancel."""

    def __init__(self, working: SalaryStructure, backup: SalaryStructure, mode: ReconcileMode = ReconcileMode.AUTO):
        self.working = working
        self.backup = backup
        self.mode = mode

    @classmethod
    def start(cls, structure: SalaryStructure, *, mode: ReconcileMode = ReconcileMode.AUTO) -> "SalaryEditSession":
        return cls(working=structure, backup=structure, mode=mode)

    def apply(self, edit: Edit, *, adjusting: bool = False) -> ReconcileResult:
        result = reconcile(self.working, self.mode, edit, adjusting=adjusting)
        self.working = result.structure
        return result

    def change_rows(self, action: str, data: dict[str, Any]) -> ReconcileResult:
        result = change_rows(self.working, action, data)
        self.working = result.structure
        return result

    def discard(self) -> None:
        self.working = self.backup

    def commit(self, saved: SalaryStructure) -> None:
        self.working = saved
        self.backup = saved

    @property
    def dirty(self) -> bool:
        return self.working != self.backup

    def to_dict(self) -> dict[str, Any]:
        return {"working": self.working.to_dict(), "backup": self.backup.to_dict(), "mode": self.mode.value}

    @classmethod
    def from_dict(cls, data: Optional[dict[str, Any]]) -> "SalaryEditSession":
        data = data or {}
        return cls(
            working=SalaryStructure.from_dict(data.get("working")),
            backup=SalaryStructure.from_dict(data.get("backup")),
            mode=ReconcileMode(data.get("mode") or ReconcileMode.AUTO.value),
        )
