from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

from ...common.validators import round_half_up
from ...core.enums import ComponentGroup
from ..distribution import distribute_ctc
from ..model import SalaryStructure
from ..notices import Notice


@dataclass(frozen=True)
class Outcome:
    structure: SalaryStructure
    notices: tuple[Notice, ...] = ()
    derived_write: bool = False


class ReconcileStrategy(ABC):
    """Strategy Pattern: how one reconcile mode reacts to an edit."""

    @abstractmethod
    def on_amount_edit(self, structure: SalaryStructure, *, group: ComponentGroup, index: int) -> Outcome:
        """React to a component amount that has already been applied."""
        raise NotImplementedError

    @abstractmethod
    def on_ctc_edit(self, structure: SalaryStructure, *, previous_ctc: int) -> Outcome:
        """React to a CTC value that has already been applied; ``previous_ctc`` is the value it replaced."""
        raise NotImplementedError


def sync_ctc_from_components(structure: SalaryStructure) -> SalaryStructure:
    return structure.with_ctc(round_half_up(structure.annual_from_components))


def fan_out(structure: SalaryStructure) -> Outcome:
    """Replace all components with the initial distribution of the current CTC."""
    if structure.annual_ctc <= 0:
        return Outcome(structure=structure)
    return Outcome(structure=distribute_ctc(structure.annual_ctc), derived_write=True)
