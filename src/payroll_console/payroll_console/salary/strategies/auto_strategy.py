from __future__ import annotations

from ...core.enums import ComponentGroup
from ..model import SalaryStructure
from .base import Outcome, ReconcileStrategy, fan_out, sync_ctc_from_components


class AutoStrategy(ReconcileStrategy):
    """Unlocked: components drive CTC, a CTC entry drives components."""

    def on_amount_edit(self, structure: SalaryStructure, *, group: ComponentGroup, index: int) -> Outcome:
        return Outcome(structure=sync_ctc_from_components(structure), derived_write=True)

    def on_ctc_edit(self, structure: SalaryStructure, *, previous_ctc: int) -> Outcome:
        return fan_out(structure)
