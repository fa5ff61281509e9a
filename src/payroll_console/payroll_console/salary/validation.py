from __future__ import annotations

from ..core.enums import ComponentGroup
from ..core.exceptions import ValidationError
from .model import SalaryStructure

EARNINGS_REQUIRED = "Add at least one earning component (>0)."
DEDUCTIONS_REQUIRED = "Add at least one deduction component (>0)."


def complete_components(structure: SalaryStructure) -> SalaryStructure:
    """Drop rows with a blank name or a non-positive amount."""
    out = structure
    for group in ComponentGroup:
        out = out.with_group(group, (c for c in structure.group(group) if c.is_complete))
    return out


def submission_errors(structure: SalaryStructure) -> dict[str, str]:
    filtered = complete_components(structure)
    errors: dict[str, str] = {}
    if not filtered.earnings:
        errors[ComponentGroup.EARNINGS.value] = EARNINGS_REQUIRED
    if not filtered.deductions:
        errors[ComponentGroup.DEDUCTIONS.value] = DEDUCTIONS_REQUIRED
    return errors


def prepare_submission(structure: SalaryStructure) -> SalaryStructure:
    """Return the structure to submit, or raise with field-level errors.

    Employer contributions are optional. The declared CTC is passed through
    even when it drifts from the components.
    """
    errors = submission_errors(structure)
    if errors:
        raise ValidationError(next(iter(errors.values())), errors=errors)
    return complete_components(structure)
