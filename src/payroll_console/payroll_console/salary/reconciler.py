"""Keep a target annual CTC and the monthly salary components consistent.

Every form change goes through :func:`reconcile`. It is pure: it takes the
structure currently shown, the active mode and one edit, and returns the new
structure with any notices for the user.

Writes the reconciler makes to the other side of the form (the CTC field after
a component edit, or all components after a CTC entry) come back from the UI
as change events of their own. The caller marks those with ``adjusting=True``:
the value is applied so the form stays in step, but nothing is recomputed.
``ReconcileResult.derived_write`` tells the caller when to expect such echoes.
"""
from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any, Optional, Union

from ..common.validators import coerce_amount, coerce_int
from ..core.enums import ComponentField, ComponentGroup, ReconcileMode
from ..core.exceptions import ValidationError
from .factory import ReconcileStrategyFactory
from .model import SalaryComponent, SalaryStructure
from .notices import CtcMismatch, Notice, ctc_mismatch
from .strategies.base import Outcome


@dataclass(frozen=True)
class ComponentEdit:
    group: ComponentGroup
    index: int
    field: ComponentField
    value: Any


@dataclass(frozen=True)
class CtcEdit:
    value: Any


Edit = Union[ComponentEdit, CtcEdit]


@dataclass(frozen=True)
class ReconcileResult:
    structure: SalaryStructure
    notices: tuple[Notice, ...]
    mismatch: CtcMismatch
    derived_write: bool = False

    def to_dict(self) -> dict[str, Any]:
        return {
            "structure": self.structure.to_dict(),
            "notices": [n.to_dict() for n in self.notices],
            "mismatch": self.mismatch.to_dict(),
            "derivedWrite": self.derived_write,
        }


_factory = ReconcileStrategyFactory()


def _apply_component_edit(structure: SalaryStructure, edit: ComponentEdit) -> SalaryStructure:
    components = list(structure.group(edit.group))
    if not 0 <= edit.index < len(components):
        raise ValidationError("Salary component does not exist")

    component: SalaryComponent = components[edit.index]
    if edit.field == ComponentField.AMOUNT:
        component = replace(component, amount=coerce_amount(edit.value))
    elif edit.field == ComponentField.NAME:
        component = replace(component, name=str(edit.value or ""))
    elif edit.field == ComponentField.IS_PERCENT:
        component = replace(component, is_percent=bool(edit.value))
    else:
        component = replace(component, percent_of=(str(edit.value) if edit.value is not None else None))

    components[edit.index] = component
    return structure.with_group(edit.group, components)


def reconcile(
    structure: SalaryStructure,
    mode: ReconcileMode,
    edit: Edit,
    *,
    adjusting: bool = False,
) -> ReconcileResult:
    """Apply one edit and run the mode's recomputation.

    Raises ``ValidationError`` only for an edit addressing a row that does not
    exist; every other condition is reported through notices.
    """
    if isinstance(edit, CtcEdit):
        updated = structure.with_ctc(coerce_int(edit.value))
        if adjusting:
            outcome = Outcome(structure=updated)
        else:
            outcome = _factory.for_mode(mode).on_ctc_edit(updated, previous_ctc=structure.annual_ctc)
    else:
        updated = _apply_component_edit(structure, edit)
        if adjusting or edit.field != ComponentField.AMOUNT:
            outcome = Outcome(structure=updated)
        else:
            outcome = _factory.for_mode(mode).on_amount_edit(updated, group=edit.group, index=edit.index)

    return ReconcileResult(
        structure=outcome.structure,
        notices=outcome.notices,
        mismatch=ctc_mismatch(outcome.structure),
        derived_write=outcome.derived_write,
    )


def parse_group(value: Any) -> ComponentGroup:
    try:
        return ComponentGroup(value)
    except ValueError:
        raise ValidationError("Unknown salary component group")


def parse_index(value: Any) -> int:
    try:
        return int(value)
    except (TypeError, ValueError):
        raise ValidationError("Invalid salary component row")


def parse_edit(data: Optional[dict[str, Any]]) -> Edit:
    """Build an edit from its JSON form.

    ``{"target": "annualCTC", "value": ...}`` edits the CTC field;
    ``{"group": "earnings", "index": 0, "field": "amount", "value": ...}``
    edits a component.
    """
    data = data or {}
    if data.get("target") == "annualCTC":
        return CtcEdit(value=data.get("value"))

    group = parse_group(data.get("group"))
    index = parse_index(data.get("index"))
    try:
        field = ComponentField(data.get("field"))
    except ValueError:
        raise ValidationError("Invalid salary edit")
    return ComponentEdit(group=group, index=index, field=field, value=data.get("value"))


def parse_mode(value: Optional[str]) -> ReconcileMode:
    if not value or value == "unlocked":
        return ReconcileMode.AUTO
    try:
        return ReconcileMode(value)
    except ValueError:
        raise ValidationError("Invalid reconcile mode")


ROW_ACTIONS = ("add", "remove")


def change_rows(structure: SalaryStructure, action: str, data: dict[str, Any]) -> ReconcileResult:
    """Add a blank row to, or remove one row from, a component group.

    Row changes never trigger recomputation in any mode.
    """
    group = parse_group(data.get("group"))
    if action == "add":
        updated = structure.with_added_row(group)
    elif action == "remove":
        updated = structure.without_row(group, parse_index(data.get("index")))
    else:
        raise ValidationError("Unknown salary row action")
    return ReconcileResult(structure=updated, notices=(), mismatch=ctc_mismatch(updated))
