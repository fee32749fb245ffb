"""POST /v1/amortization, /v1/eligibility, /v1/quote - mortgage calculator endpoints"""

import time
from fastapi import APIRouter, HTTPException, Request

from homeloan_gateway.api.v1.schemas import (
    AmortizationRequest,
    AmortizationResponse,
    ScheduleResponse,
    ScheduleRowSchema,
    EligibilityRequest,
    EligibilityResponse,
    QuoteRequest,
    QuoteResponse,
)
from homeloan_gateway.api.dependencies import get_request_id
from homeloan_gateway.config import settings
from homeloan_gateway.domain.amortization import compute_amortization, generate_amortization_schedule
from homeloan_gateway.domain.eligibility import check_eligibility, build_quote
from homeloan_gateway.domain.exceptions import InvalidInputError
from homeloan_gateway.domain.models import EligibilityResult
from homeloan_gateway.infrastructure.observability.logging import log_quote
from homeloan_gateway.infrastructure.observability.metrics import record_quote
from homeloan_gateway.utils.currency import format_currency

router = APIRouter()


def _eligibility_response(result: EligibilityResult) -> EligibilityResponse:
    return EligibilityResponse(
        is_eligible=result.is_eligible,
        ratio_percent=result.ratio_percent,
        message=result.message,
    )


@router.post("/amortization", response_model=AmortizationResponse)
def calculate_amortization(request_body: AmortizationRequest):
    """Compute EMI, total interest and total payment for a loan"""
    try:
        result = compute_amortization(
            request_body.principal,
            request_body.annual_rate_percent,
            request_body.tenure_years,
        )
    except InvalidInputError as e:
        raise HTTPException(status_code=422, detail=str(e))

    return AmortizationResponse(
        installment=result.installment,
        total_interest=result.total_interest,
        total_payment=result.total_payment,
        periods=result.periods,
    )


@router.post("/amortization/schedule", response_model=ScheduleResponse)
def calculate_schedule(request_body: AmortizationRequest):
    """
    Month-by-month split of each installment into interest and principal.

    Returns:
        Totals plus one row per month, closing balance 0
    """
    try:
        result = compute_amortization(
            request_body.principal,
            request_body.annual_rate_percent,
            request_body.tenure_years,
        )
        rows = generate_amortization_schedule(
            request_body.principal,
            request_body.annual_rate_percent,
            request_body.tenure_years,
        )
    except InvalidInputError as e:
        raise HTTPException(status_code=422, detail=str(e))

    return ScheduleResponse(
        installment=result.installment,
        total_interest=result.total_interest,
        total_payment=result.total_payment,
        rows=[
            ScheduleRowSchema(
                period=row.period,
                payment=row.payment,
                interest=row.interest,
                principal=row.principal,
                balance=row.balance,
            )
            for row in rows
        ],
    )


@router.post("/eligibility", response_model=EligibilityResponse)
def calculate_eligibility(request_body: EligibilityRequest):
    """Check an installment against monthly income (40% cap)"""
    try:
        result = check_eligibility(request_body.installment, request_body.monthly_income)
    except InvalidInputError as e:
        raise HTTPException(status_code=422, detail=str(e))

    return _eligibility_response(result)


@router.post("/quote", response_model=QuoteResponse)
def calculate_quote(request_body: QuoteRequest, request: Request):
    """
    Full calculator output for one set of inputs.

    Flow:
    1. Derive loan amount from property price minus down payment
    2. Compute EMI and totals
    3. Check EMI against monthly income
    4. Format amounts for display
    """
    start_time = time.time()
    request_id = get_request_id(request)

    try:
        quote = build_quote(
            property_price=request_body.property_price,
            down_payment=request_body.down_payment,
            annual_rate_percent=request_body.interest_rate,
            tenure_years=request_body.tenure_years,
            monthly_income=request_body.monthly_income,
        )
    except InvalidInputError as e:
        raise HTTPException(status_code=422, detail=str(e))

    duration_ms = (time.time() - start_time) * 1000
    record_quote(quote.eligibility.is_eligible, quote.eligibility.ratio_percent)
    log_quote(
        request_id,
        quote.loan_amount,
        quote.amortization.installment,
        quote.eligibility.is_eligible,
        duration_ms,
    )

    currency = settings.currency_code
    return QuoteResponse(
        loan_amount=quote.loan_amount,
        down_payment_percent=quote.down_payment_percent,
        installment=quote.amortization.installment,
        total_interest=quote.amortization.total_interest,
        total_payment=quote.amortization.total_payment,
        installment_display=format_currency(quote.amortization.installment, currency),
        total_interest_display=format_currency(quote.amortization.total_interest, currency),
        loan_amount_display=format_currency(quote.loan_amount, currency),
        eligibility=_eligibility_response(quote.eligibility),
    )
