from __future__ import annotations

from ...core.enums import ComponentGroup
from ..model import SalaryStructure
from .base import Outcome, ReconcileStrategy, fan_out


class LockComponentsStrategy(ReconcileStrategy):
    """No automatic adjustment once components exist; the user reconciles by hand.

    A CTC entered into an empty form still seeds the initial distribution.
    """

    def on_amount_edit(self, structure: SalaryStructure, *, group: ComponentGroup, index: int) -> Outcome:
        return Outcome(structure=structure)

    def on_ctc_edit(self, structure: SalaryStructure, *, previous_ctc: int) -> Outcome:
        if previous_ctc <= 0 or structure.is_empty:
            return fan_out(structure)
        return Outcome(structure=structure)
