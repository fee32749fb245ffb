"""Affordability check - EMI-to-income ratio against a fixed policy threshold"""

from homeloan_gateway.domain.models import EligibilityResult, MortgageQuote
from homeloan_gateway.domain.amortization import compute_amortization, round_half_up, require_number
from homeloan_gateway.domain.exceptions import InvalidInputError

# EMI may take at most 40% of monthly income
MAX_EMI_TO_INCOME_PERCENT = 40

ELIGIBLE_MESSAGE = "You are eligible for this loan"
INELIGIBLE_MESSAGE = f"EMI exceeds {MAX_EMI_TO_INCOME_PERCENT}% of your monthly income"


def check_eligibility(installment: float, monthly_income: float) -> EligibilityResult:
    """
    Compare a monthly installment against monthly income.

    The eligibility decision uses the unrounded ratio; ratio_percent is the
    rounded value for display. 4001 / 10000 is 40.01%: shown as 40, not eligible.

    Zero or negative income has no meaningful ratio: the result is not
    eligible with ratio_percent None.
    """
    installment = require_number("installment", installment)
    monthly_income = require_number("monthly_income", monthly_income)

    if installment < 0:
        raise InvalidInputError("installment must be >= 0")

    if monthly_income <= 0:
        return EligibilityResult(
            is_eligible=False,
            ratio_percent=None,
            message=INELIGIBLE_MESSAGE,
        )

    ratio = installment * 100 / monthly_income
    is_eligible = ratio <= MAX_EMI_TO_INCOME_PERCENT

    return EligibilityResult(
        is_eligible=is_eligible,
        ratio_percent=round_half_up(ratio),
        message=ELIGIBLE_MESSAGE if is_eligible else INELIGIBLE_MESSAGE,
    )


def build_quote(
    property_price: float,
    down_payment: float,
    annual_rate_percent: float,
    tenure_years: float,
    monthly_income: float,
) -> MortgageQuote:
    """
    Main entry point for the calculator: derive the loan from the property
    price and down payment, then run the EMI and eligibility checks.
    """
    property_price = require_number("property_price", property_price)
    down_payment = require_number("down_payment", down_payment)

    loan_amount = property_price - down_payment
    if loan_amount < 0:
        raise InvalidInputError("down_payment cannot exceed property_price")

    down_payment_percent = (
        round_half_up(down_payment / property_price * 100) if property_price > 0 else 0
    )

    amortization = compute_amortization(loan_amount, annual_rate_percent, tenure_years)
    eligibility = check_eligibility(amortization.installment, monthly_income)

    return MortgageQuote(
        loan_amount=loan_amount,
        down_payment_percent=down_payment_percent,
        amortization=amortization,
        eligibility=eligibility,
    )
