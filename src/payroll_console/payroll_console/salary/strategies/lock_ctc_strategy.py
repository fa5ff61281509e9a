from __future__ import annotations

from dataclasses import replace

from ...common.validators import round_half_up
from ...core.constants import LOCK_CTC_TOLERANCE, MONTHS_PER_YEAR
from ...core.enums import ComponentGroup, NoticeLevel
from ..model import SalaryStructure
from ..notices import Notice, format_rupees
from .base import Outcome, ReconcileStrategy, fan_out, sync_ctc_from_components


class LockCtcStrategy(ReconcileStrategy):
    """CTC is fixed: the other earnings absorb a component change proportionally."""

    def on_amount_edit(self, structure: SalaryStructure, *, group: ComponentGroup, index: int) -> Outcome:
        target = structure.annual_ctc
        if target <= 0:
            return Outcome(structure=sync_ctc_from_components(structure), derived_write=True)

        difference = target - structure.annual_from_components
        if abs(difference) < LOCK_CTC_TOLERANCE:
            return Outcome(structure=structure)

        pool = [
            (i, c)
            for i, c in enumerate(structure.earnings)
            if not (group == ComponentGroup.EARNINGS and i == index) and c.amount > 0
        ]
        if not pool:
            return Outcome(
                structure=sync_ctc_from_components(structure),
                notices=(Notice(NoticeLevel.INFO, "Cannot adjust components to match CTC. Updating CTC instead."),),
                derived_write=True,
            )

        pool_total = sum(c.amount for _, c in pool)
        monthly_difference = difference / MONTHS_PER_YEAR

        earnings = list(structure.earnings)
        for i, c in pool:
            adjustment = round_half_up(monthly_difference * (c.amount / pool_total))
            earnings[i] = replace(c, amount=max(0, c.amount + adjustment))

        return Outcome(
            structure=structure.with_group(ComponentGroup.EARNINGS, earnings),
            notices=(Notice(NoticeLevel.INFO, f"Adjusted other components to maintain CTC of {format_rupees(target)}"),),
            derived_write=True,
        )

    def on_ctc_edit(self, structure: SalaryStructure, *, previous_ctc: int) -> Outcome:
        return fan_out(structure)
