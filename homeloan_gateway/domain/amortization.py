"""Amortization engine - EMI and repayment schedule for fixed-rate loans"""

import math
from decimal import Decimal, ROUND_HALF_UP
from numbers import Real
from typing import List

from homeloan_gateway.domain.models import AmortizationResult, ScheduleRow
from homeloan_gateway.domain.exceptions import InvalidInputError

MONTHS_PER_YEAR = 12

_CENT = Decimal("0.01")


def round_half_up(value: float) -> int:
    """Round to the nearest integer, ties away from zero (8678.5 -> 8679)"""
    return int(Decimal(value).quantize(Decimal(1), rounding=ROUND_HALF_UP))


def _to_cents(value: float) -> float:
    return float(Decimal(value).quantize(_CENT, rounding=ROUND_HALF_UP))


def require_number(name: str, value: float) -> float:
    if isinstance(value, bool) or not isinstance(value, Real):
        raise InvalidInputError(f"{name} must be a number")
    if not math.isfinite(value):
        raise InvalidInputError(f"{name} must be finite")
    return float(value)


def _validate_loan(principal: float, annual_rate_percent: float, tenure_years: float) -> tuple[float, float, float]:
    principal = require_number("principal", principal)
    annual_rate_percent = require_number("annual_rate_percent", annual_rate_percent)
    tenure_years = require_number("tenure_years", tenure_years)

    if principal < 0:
        raise InvalidInputError("principal must be >= 0")
    if annual_rate_percent < 0:
        raise InvalidInputError("annual_rate_percent must be >= 0")
    if tenure_years <= 0:
        raise InvalidInputError("tenure_years must be > 0")

    return principal, annual_rate_percent, tenure_years


def monthly_rate(annual_rate_percent: float) -> float:
    """Convert an annual percentage (8.5) to a monthly fraction (0.0070833...)"""
    return annual_rate_percent / MONTHS_PER_YEAR / 100


def _raw_installment(principal: float, rate: float, periods: float) -> float:
    if principal == 0:
        return 0.0
    if rate == 0:
        return principal / periods

    # r(1+r)^n / ((1+r)^n - 1) == r / (1 - (1+r)^-n); expm1/log1p keep it
    # accurate for tiny rates and avoid overflow for long tenures
    denominator = -math.expm1(-periods * math.log1p(rate))
    return principal * rate / denominator


def compute_amortization(
    principal: float,
    annual_rate_percent: float,
    tenure_years: float,
) -> AmortizationResult:
    """
    Compute the EMI, total payment and total interest for a loan.

    Steps:
    - r = annual_rate_percent / 12 / 100, n = tenure_years * 12
    - EMI = P * r * (1+r)^n / ((1+r)^n - 1), or P / n when r == 0
    - EMI is rounded half-up to whole currency units
    - Totals are derived from the rounded EMI, then rounded

    Args:
        principal: Loan amount (>= 0)
        annual_rate_percent: Annual interest rate in percent (>= 0)
        tenure_years: Loan term in years (> 0)

    Returns:
        AmortizationResult with integer installment and totals

    Raises:
        InvalidInputError: On negative amounts, non-positive tenure, or non-finite input

    Example:
        compute_amortization(120000, 0, 10) -> installment 1000,
        total_interest 0, total_payment 120000
    """
    principal, annual_rate_percent, tenure_years = _validate_loan(
        principal, annual_rate_percent, tenure_years
    )

    rate = monthly_rate(annual_rate_percent)
    periods = tenure_years * MONTHS_PER_YEAR

    raw = _raw_installment(principal, rate, periods)
    if not math.isfinite(raw):
        raise InvalidInputError("Loan terms produce a non-finite installment")

    installment = round_half_up(raw)
    total_payment = installment * periods
    total_interest = total_payment - principal

    return AmortizationResult(
        installment=installment,
        total_interest=round_half_up(total_interest),
        total_payment=round_half_up(total_payment),
        periods=periods,
    )


def generate_amortization_schedule(
    principal: float,
    annual_rate_percent: float,
    tenure_years: float,
) -> List[ScheduleRow]:
    """
    Split each monthly installment into interest and principal.

    Requirements:
    - Uses the rounded EMI from compute_amortization
    - Interest for a month is charged on the opening balance
    - Last row absorbs rounding drift so the closing balance is exactly 0
    - tenure_years * 12 must be a whole number of months
    """
    result = compute_amortization(principal, annual_rate_percent, tenure_years)
    if not float(result.periods).is_integer():
        raise InvalidInputError("tenure_years must cover a whole number of months")

    if principal == 0:
        return []

    rate = monthly_rate(annual_rate_percent)
    periods = int(result.periods)
    balance = float(principal)

    rows = []
    for period in range(1, periods + 1):
        interest = _to_cents(balance * rate)

        if period == periods:
            principal_part = balance
        else:
            principal_part = min(max(_to_cents(result.installment - interest), 0.0), balance)

        balance = _to_cents(balance - principal_part)
        rows.append(
            ScheduleRow(
                period=period,
                payment=_to_cents(principal_part + interest),
                interest=interest,
                principal=_to_cents(principal_part),
                balance=balance,
            )
        )

        if balance == 0:
            break

    return rows
