from dataclasses import replace

import pytest

from src.payroll_console.payroll_console.core.enums import ComponentField, ComponentGroup, NoticeLevel, ReconcileMode
from src.payroll_console.payroll_console.core.exceptions import ValidationError
from src.payroll_console.payroll_console.salary.distribution import distribute_ctc
from src.payroll_console.payroll_console.salary.model import SalaryComponent, SalaryStructure
from src.payroll_console.payroll_console.salary.reconciler import (
    ComponentEdit,
    CtcEdit,
    parse_edit,
    parse_mode,
    reconcile,
)


def _amount_edit(index, value, group=ComponentGroup.EARNINGS):
    return ComponentEdit(group=group, index=index, field=ComponentField.AMOUNT, value=value)


def test_auto_ctc_entry_fans_out_to_components():
    result = reconcile(SalaryStructure.seeded(), ReconcileMode.AUTO, CtcEdit(value="1200000"))

    s = result.structure
    assert [c.amount for c in s.earnings] == [50000, 20000, 18000]
    assert [c.amount for c in s.employer_contributions] == [12000]
    assert [c.amount for c in s.deductions] == [6000, 500, 200]
    assert s.annual_ctc == 1_200_000
    assert result.derived_write is True
    assert result.mismatch.synced


@pytest.mark.parametrize("ctc", [450_000, 812_345, 2_500_001])
def test_auto_fan_out_then_recompute_stays_within_rounding(ctc):
    fanned = reconcile(SalaryStructure.seeded(), ReconcileMode.AUTO, CtcEdit(value=ctc)).structure
    # re-entering the Basic amount unchanged recomputes CTC from components
    again = reconcile(fanned, ReconcileMode.AUTO, _amount_edit(0, fanned.earnings[0].amount)).structure

    assert abs(again.annual_ctc - ctc) < 12 * 4


def test_auto_component_edit_recomputes_ctc():
    s = distribute_ctc(1_200_000)

    result = reconcile(s, ReconcileMode.AUTO, _amount_edit(1, "25000"))

    assert result.structure.earnings[1].amount == 25000
    assert result.structure.annual_ctc == (50000 + 25000 + 18000 + 12000) * 12
    assert result.derived_write is True


def test_deductions_do_not_change_ctc():
    s = distribute_ctc(1_200_000)

    result = reconcile(s, ReconcileMode.AUTO, _amount_edit(0, 9000, group=ComponentGroup.DEDUCTIONS))

    assert result.structure.deductions[0].amount == 9000
    assert result.structure.annual_ctc == 1_200_000


def test_lock_ctc_adjusts_other_earnings_proportionally():
    s = distribute_ctc(1_200_000)

    result = reconcile(s, ReconcileMode.LOCK_CTC, _amount_edit(0, 60000))

    earnings = result.structure.earnings
    assert [c.amount for c in earnings] == [60000, 14737, 13263]
    assert result.structure.annual_ctc == 1_200_000
    assert abs(result.structure.annual_from_components - 1_200_000) <= 12
    assert result.notices[0].level == NoticeLevel.INFO
    assert result.notices[0].message == "Adjusted other components to maintain CTC of ₹1,200,000"


def test_lock_ctc_increase_of_other_earnings_when_component_lowered():
    s = distribute_ctc(1_200_000)

    result = reconcile(s, ReconcileMode.LOCK_CTC, _amount_edit(2, 8000))

    assert result.structure.earnings[2].amount == 8000
    assert abs(result.structure.annual_from_components - 1_200_000) <= 12


def test_lock_ctc_within_tolerance_does_nothing():
    s = distribute_ctc(1_200_000)

    # +0.5/month -> 6 per year, below the tolerance of 10
    result = reconcile(s, ReconcileMode.LOCK_CTC, _amount_edit(0, 50000.5))

    assert [c.amount for c in result.structure.earnings] == [50000.5, 20000, 18000]
    assert result.notices == ()
    assert result.structure.annual_ctc == 1_200_000


def test_lock_ctc_never_drives_components_negative():
    s = distribute_ctc(1_200_000)

    result = reconcile(s, ReconcileMode.LOCK_CTC, _amount_edit(0, 500000))

    assert all(c.amount >= 0 for c in result.structure.earnings)
    assert result.structure.earnings[1].amount == 0
    assert result.structure.earnings[2].amount == 0


def test_lock_ctc_with_empty_pool_falls_back_to_recomputing_ctc():
    s = SalaryStructure(
        earnings=(
            SalaryComponent(name="Basic Salary", amount=50000),
            SalaryComponent(name="HRA", amount=0),
        ),
        employer_contributions=(SalaryComponent(name="Employer PF", amount=12000),),
        annual_ctc=1_200_000,
    )

    result = reconcile(s, ReconcileMode.LOCK_CTC, _amount_edit(0, 60000))

    assert result.structure.annual_ctc == (60000 + 12000) * 12
    assert result.structure.earnings[1].amount == 0
    assert "Cannot adjust components" in result.notices[0].message
    assert result.derived_write is True


def test_lock_ctc_without_target_recomputes_ctc():
    s = replace(distribute_ctc(1_200_000), annual_ctc=0)

    result = reconcile(s, ReconcileMode.LOCK_CTC, _amount_edit(0, 40000))

    assert result.structure.annual_ctc == (40000 + 20000 + 18000 + 12000) * 12


def test_lock_ctc_employer_edit_adjusts_all_earnings():
    s = distribute_ctc(1_200_000)

    result = reconcile(
        s,
        ReconcileMode.LOCK_CTC,
        _amount_edit(0, 24000, group=ComponentGroup.EMPLOYER_CONTRIBUTIONS),
    )

    assert result.structure.employer_contributions[0].amount == 24000
    assert result.structure.earnings[0].amount < 50000
    assert abs(result.structure.annual_from_components - 1_200_000) <= 12 * 3


def test_lock_components_leaves_ctc_alone():
    s = distribute_ctc(1_200_000)

    result = reconcile(s, ReconcileMode.LOCK_COMPONENTS, _amount_edit(0, 70000))

    assert result.structure.earnings[0].amount == 70000
    assert [c.amount for c in result.structure.earnings[1:]] == [20000, 18000]
    assert result.structure.annual_ctc == 1_200_000
    assert result.derived_write is False
    assert result.mismatch.significant


def test_lock_components_ctc_entry_does_not_fan_out():
    s = distribute_ctc(1_200_000)

    result = reconcile(s, ReconcileMode.LOCK_COMPONENTS, CtcEdit(value=900000))

    assert result.structure.annual_ctc == 900_000
    assert result.structure.earnings == s.earnings


def test_lock_components_first_ctc_entry_seeds_distribution():
    result = reconcile(SalaryStructure.seeded(), ReconcileMode.LOCK_COMPONENTS, CtcEdit(value="1200000"))

    s = result.structure
    assert [c.amount for c in s.earnings] == [50000, 20000, 18000]
    assert [c.amount for c in s.employer_contributions] == [12000]
    assert s.annual_ctc == 1_200_000
    assert result.mismatch.synced

    # Once seeded, later CTC entries leave the components alone.
    again = reconcile(s, ReconcileMode.LOCK_COMPONENTS, CtcEdit(value="900000"))
    assert again.structure.earnings == s.earnings
    assert again.structure.annual_ctc == 900_000


def test_lock_ctc_ctc_entry_fans_out():
    result = reconcile(SalaryStructure.seeded(), ReconcileMode.LOCK_CTC, CtcEdit(value=600000))

    assert result.structure.earnings[0].amount == 25000


def test_adjusting_edits_are_applied_without_recomputation():
    seeded = SalaryStructure.seeded()

    ctc_echo = reconcile(seeded, ReconcileMode.AUTO, CtcEdit(value=1200000), adjusting=True)
    assert ctc_echo.structure.annual_ctc == 1_200_000
    assert ctc_echo.structure.earnings == seeded.earnings

    amount_echo = reconcile(distribute_ctc(1_200_000), ReconcileMode.AUTO, _amount_edit(0, 1), adjusting=True)
    assert amount_echo.structure.earnings[0].amount == 1
    assert amount_echo.structure.annual_ctc == 1_200_000
    assert amount_echo.derived_write is False


def test_non_amount_fields_do_not_recompute():
    s = distribute_ctc(1_200_000)

    result = reconcile(
        s,
        ReconcileMode.AUTO,
        ComponentEdit(group=ComponentGroup.DEDUCTIONS, index=0, field=ComponentField.IS_PERCENT, value=True),
    )

    assert result.structure.deductions[0].is_percent is True
    # percent flags are stored only
    assert result.structure.deductions[0].amount == 6000
    assert result.structure.annual_ctc == 1_200_000


def test_invalid_amount_is_coerced_to_zero():
    s = distribute_ctc(1_200_000)

    result = reconcile(s, ReconcileMode.AUTO, _amount_edit(1, "abc"))

    assert result.structure.earnings[1].amount == 0
    assert result.structure.annual_ctc == (50000 + 18000 + 12000) * 12


def test_invalid_ctc_is_coerced_to_zero_and_keeps_components():
    s = distribute_ctc(1_200_000)

    result = reconcile(s, ReconcileMode.AUTO, CtcEdit(value=""))

    assert result.structure.annual_ctc == 0
    assert result.structure.earnings == s.earnings
    assert result.mismatch.synced


def test_edit_of_missing_row_is_rejected():
    with pytest.raises(ValidationError):
        reconcile(SalaryStructure.seeded(), ReconcileMode.AUTO, _amount_edit(7, 100))


def test_parse_edit_and_mode_from_json():
    assert parse_edit({"target": "annualCTC", "value": "5"}) == CtcEdit(value="5")
    edit = parse_edit({"group": "employerContributions", "index": "0", "field": "amount", "value": 10})
    assert edit.group == ComponentGroup.EMPLOYER_CONTRIBUTIONS
    assert edit.index == 0

    assert parse_mode("unlocked") == ReconcileMode.AUTO
    assert parse_mode(None) == ReconcileMode.AUTO
    assert parse_mode("lock-ctc") == ReconcileMode.LOCK_CTC

    with pytest.raises(ValidationError):
        parse_mode("frozen")
    with pytest.raises(ValidationError):
        parse_edit({"group": "bonuses", "index": 0, "field": "amount"})
