from __future__ import annotations

import math
import re
from typing import Any, Optional, Union

from ..core.constants import PAYSLIP_MAX_YEAR, PAYSLIP_MIN_YEAR
from ..core.exceptions import ValidationError

Number = Union[int, float]

PATTERNS = {
    "email": re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$"),
    "phone": re.compile(r"^[0-9]{10}$"),
    "ifsc": re.compile(r"^[A-Z]{4}0[A-Z0-9]{6}$"),
    "pan": re.compile(r"^[A-Z]{5}[0-9]{4}[A-Z]$"),
    "account_number": re.compile(r"^[0-9]{9,18}$"),
    "time": re.compile(r"^([01][0-9]|2[0-3]):[0-5][0-9]$"),
}


def require_non_empty(value: str, field_name: str) -> str:
    if not value or not value.strip():
        raise ValidationError(f"{field_name} is required", errors={field_name: f"{field_name} is required"})
    return value.strip()


def matches(pattern: str, value: str) -> bool:
    return bool(PATTERNS[pattern].match(value or ""))


def coerce_amount(value: Any) -> Number:
    """Parse a monetary form value; anything non-numeric becomes 0."""
    if isinstance(value, bool):
        return 0
    try:
        number = float(str(value).strip()) if not isinstance(value, (int, float)) else float(value)
    except (TypeError, ValueError):
        return 0
    if math.isnan(number) or math.isinf(number):
        return 0
    return int(number) if number.is_integer() else number


def coerce_int(value: Any) -> int:
    """Parse an integer form value (e.g. annual CTC); invalid input becomes 0."""
    amount = coerce_amount(value)
    return int(amount)


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves toward positive infinity."""
    return int(math.floor(value + 0.5))


def validate_period(month: Optional[int], year: Optional[int]) -> tuple[int, int]:
    """Month/year pair for payroll and attendance lookups."""
    if not month or not year:
        raise ValidationError("Month and year are required")
    if month < 1 or month > 12:
        raise ValidationError("Month must be between 1 and 12")
    if year < PAYSLIP_MIN_YEAR or year > PAYSLIP_MAX_YEAR:
        raise ValidationError(f"Year must be between {PAYSLIP_MIN_YEAR} and {PAYSLIP_MAX_YEAR}")
    return int(month), int(year)
