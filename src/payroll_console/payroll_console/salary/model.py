from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any, Iterable, Optional, Union

from ..common.validators import coerce_amount, coerce_int
from ..core.constants import (
    DEFAULT_DEDUCTIONS,
    DEFAULT_EARNINGS,
    DEFAULT_EMPLOYER_CONTRIBUTIONS,
    DEFAULT_PERCENT_OF,
    MONTHS_PER_YEAR,
)
from ..core.enums import ComponentGroup
from ..core.exceptions import ValidationError

Number = Union[int, float]


@dataclass(frozen=True)
class SalaryComponent:
    """One named monthly amount (earning, deduction or employer contribution).

    ``is_percent``/``percent_of`` are carried for the backend only; the amount
    is always used as an absolute monthly value.
    """

    name: str
    amount: Number = 0
    is_percent: Optional[bool] = None
    percent_of: Optional[str] = None

    @classmethod
    def blank(cls, group: ComponentGroup) -> "SalaryComponent":
        if group == ComponentGroup.EARNINGS:
            return cls(name="")
        return cls(name="", is_percent=False, percent_of=DEFAULT_PERCENT_OF)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "SalaryComponent":
        is_percent = data.get("isPercent")
        return cls(
            name=str(data.get("name") or ""),
            amount=coerce_amount(data.get("amount")),
            is_percent=None if is_percent is None else bool(is_percent),
            percent_of=data.get("percentOf"),
        )

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {"name": self.name, "amount": self.amount}
        if self.is_percent is not None:
            out["isPercent"] = self.is_percent
        if self.percent_of is not None:
            out["percentOf"] = self.percent_of
        return out

    @property
    def is_complete(self) -> bool:
        return bool(self.name.strip()) and self.amount > 0


def _total(components: Iterable[SalaryComponent]) -> Number:
    return sum((c.amount or 0) for c in components)


@dataclass(frozen=True)
class SalaryStructure:
    """Salary structure as edited in the onboarding and employee forms.

    ``annual_ctc`` is the CTC shown in the form (0 when empty). It may drift
    from ``annual_from_components`` depending on the reconcile mode.
    """

    earnings: tuple[SalaryComponent, ...] = field(default_factory=tuple)
    deductions: tuple[SalaryComponent, ...] = field(default_factory=tuple)
    employer_contributions: tuple[SalaryComponent, ...] = field(default_factory=tuple)
    annual_ctc: int = 0

    @classmethod
    def seeded(cls) -> "SalaryStructure":
        """Default rows with zero amounts, as shown when the onboarding form opens."""
        return cls(
            earnings=tuple(SalaryComponent(name=n) for n in DEFAULT_EARNINGS),
            deductions=tuple(
                SalaryComponent(name=n, is_percent=False, percent_of=DEFAULT_PERCENT_OF) for n in DEFAULT_DEDUCTIONS
            ),
            employer_contributions=tuple(
                SalaryComponent(name=n, is_percent=False, percent_of=DEFAULT_PERCENT_OF)
                for n in DEFAULT_EMPLOYER_CONTRIBUTIONS
            ),
        )

    @classmethod
    def from_dict(cls, data: Optional[dict[str, Any]]) -> "SalaryStructure":
        data = data or {}
        return cls(
            earnings=tuple(SalaryComponent.from_dict(c) for c in data.get("earnings") or []),
            deductions=tuple(SalaryComponent.from_dict(c) for c in data.get("deductions") or []),
            employer_contributions=tuple(
                SalaryComponent.from_dict(c) for c in data.get("employerContributions") or []
            ),
            annual_ctc=coerce_int(data.get("annualCTC") or 0),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "annualCTC": self.annual_ctc,
            "earnings": [c.to_dict() for c in self.earnings],
            "deductions": [c.to_dict() for c in self.deductions],
            "employerContributions": [c.to_dict() for c in self.employer_contributions],
        }

    def group(self, group: ComponentGroup) -> tuple[SalaryComponent, ...]:
        if group == ComponentGroup.EARNINGS:
            return self.earnings
        if group == ComponentGroup.DEDUCTIONS:
            return self.deductions
        return self.employer_contributions

    def with_group(self, group: ComponentGroup, components: Iterable[SalaryComponent]) -> "SalaryStructure":
        components = tuple(components)
        if group == ComponentGroup.EARNINGS:
            return replace(self, earnings=components)
        if group == ComponentGroup.DEDUCTIONS:
            return replace(self, deductions=components)
        return replace(self, employer_contributions=components)

    def with_ctc(self, annual_ctc: int) -> "SalaryStructure":
        return replace(self, annual_ctc=int(annual_ctc))

    def with_added_row(self, group: ComponentGroup) -> "SalaryStructure":
        return self.with_group(group, self.group(group) + (SalaryComponent.blank(group),))

    def without_row(self, group: ComponentGroup, index: int) -> "SalaryStructure":
        components = self.group(group)
        if not 0 <= index < len(components):
            raise ValidationError("Salary component does not exist")
        return self.with_group(group, components[:index] + components[index + 1 :])

    @property
    def is_empty(self) -> bool:
        """No component carries an amount yet (fresh or seeded form)."""
        return not any(
            c.amount for c in (*self.earnings, *self.deductions, *self.employer_contributions)
        )

    @property
    def monthly_earnings(self) -> Number:
        return _total(self.earnings)

    @property
    def monthly_deductions(self) -> Number:
        return _total(self.deductions)

    @property
    def monthly_employer(self) -> Number:
        return _total(self.employer_contributions)

    @property
    def monthly_ctc(self) -> Number:
        # Deductions reduce take-home pay but are not part of CTC.
        return self.monthly_earnings + self.monthly_employer

    @property
    def annual_from_components(self) -> Number:
        return self.monthly_ctc * MONTHS_PER_YEAR
