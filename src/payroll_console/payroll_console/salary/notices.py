from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Union

from ..core.constants import CTC_MISMATCH_THRESHOLD
from ..core.enums import NoticeLevel
from .model import SalaryStructure

Number = Union[int, float]


@dataclass(frozen=True)
class Notice:
    """Non-blocking message for the user (rendered as a toast/flash)."""

    level: NoticeLevel
    message: str

    def to_dict(self) -> dict[str, str]:
        return {"level": self.level.value, "message": self.message}


@dataclass(frozen=True)
class CtcMismatch:
    target: int
    from_components: Number
    difference: Number
    percent: float
    significant: bool

    @property
    def synced(self) -> bool:
        return not self.significant

    @property
    def message(self) -> str:
        if self.significant:
            return f"CTC differs by {self.percent:.2f}% from component total. Please verify amounts."
        return "CTC and salary components are in sync."

    def notice(self) -> Notice:
        return Notice(level=NoticeLevel.INFO if self.significant else NoticeLevel.SUCCESS, message=self.message)

    def to_dict(self) -> dict[str, Any]:
        return {
            "target": self.target,
            "fromComponents": self.from_components,
            "difference": self.difference,
            "percent": round(self.percent, 2),
            "synced": self.synced,
            "message": self.message,
        }


def ctc_mismatch(structure: SalaryStructure) -> CtcMismatch:
    """Compare the declared CTC with the components-derived annual figure."""
    target = structure.annual_ctc
    from_components = structure.annual_from_components
    if target <= 0:
        return CtcMismatch(target=target, from_components=from_components, difference=0, percent=0.0, significant=False)

    difference = abs(target - from_components)
    return CtcMismatch(
        target=target,
        from_components=from_components,
        difference=difference,
        percent=difference / target * 100,
        significant=difference > target * CTC_MISMATCH_THRESHOLD,
    )


def format_rupees(amount: Number) -> str:
    return f"₹{amount:,}"
