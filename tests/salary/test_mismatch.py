from dataclasses import replace

from src.payroll_console.payroll_console.core.enums import NoticeLevel
from src.payroll_console.payroll_console.salary.distribution import distribute_ctc
from src.payroll_console.payroll_console.salary.notices import ctc_mismatch


def test_within_two_percent_is_synced():
    s = replace(distribute_ctc(1_200_000), annual_ctc=1_220_000)

    m = ctc_mismatch(s)

    assert m.synced
    assert m.notice().level == NoticeLevel.SUCCESS


def test_over_two_percent_warns_with_percentage():
    s = replace(distribute_ctc(1_200_000), annual_ctc=1_000_000)

    m = ctc_mismatch(s)

    assert m.significant
    assert m.difference == 200_000
    assert m.message == "CTC differs by 20.00% from component total. Please verify amounts."


def test_no_target_is_never_a_mismatch():
    m = ctc_mismatch(replace(distribute_ctc(1_200_000), annual_ctc=0))

    assert m.synced
    assert m.percent == 0.0
