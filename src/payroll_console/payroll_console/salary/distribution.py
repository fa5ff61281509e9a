from __future__ import annotations

from ..common.validators import round_half_up
from ..core.constants import (
    ALLOWANCE_SHARE,
    BASIC_SHARE,
    DEFAULT_DEDUCTIONS,
    DEFAULT_EARNINGS,
    DEFAULT_EMPLOYER_CONTRIBUTIONS,
    DEFAULT_PERCENT_OF,
    EMPLOYER_PF_SHARE,
    HRA_SHARE,
    INSURANCE_SHARE_OF_BASIC,
    MONTHS_PER_YEAR,
    PF_SHARE_OF_BASIC,
    PROFESSIONAL_TAX,
)
from .model import SalaryComponent, SalaryStructure


def distribute_ctc(annual_ctc: int) -> SalaryStructure:
    """Propose a full salary structure for an annual CTC.

    Earnings (50/20/18%) plus employer PF (12%) rebuild the whole monthly
    gross. Each amount is rounded on its own; the resulting drift against
    ``annual_ctc`` is left as is.
    """
    monthly_gross = annual_ctc / MONTHS_PER_YEAR

    basic = round_half_up(monthly_gross * BASIC_SHARE)
    hra = round_half_up(monthly_gross * HRA_SHARE)
    allowance = round_half_up(monthly_gross * ALLOWANCE_SHARE)
    employer_pf = round_half_up(monthly_gross * EMPLOYER_PF_SHARE)

    pf = round_half_up(basic * PF_SHARE_OF_BASIC)
    insurance = round_half_up(basic * INSURANCE_SHARE_OF_BASIC)

    basic_name, hra_name, allowance_name = DEFAULT_EARNINGS
    pf_name, insurance_name, tax_name = DEFAULT_DEDUCTIONS
    (employer_pf_name,) = DEFAULT_EMPLOYER_CONTRIBUTIONS

    def _deduction(name: str, amount: int) -> SalaryComponent:
        return SalaryComponent(name=name, amount=amount, is_percent=False, percent_of=DEFAULT_PERCENT_OF)

    return SalaryStructure(
        earnings=(
            SalaryComponent(name=basic_name, amount=basic),
            SalaryComponent(name=hra_name, amount=hra),
            SalaryComponent(name=allowance_name, amount=allowance),
        ),
        deductions=(
            _deduction(pf_name, pf),
            _deduction(insurance_name, insurance),
            _deduction(tax_name, PROFESSIONAL_TAX),
        ),
        employer_contributions=(_deduction(employer_pf_name, employer_pf),),
        annual_ctc=int(annual_ctc),
    )
