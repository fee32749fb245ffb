"""Pydantic schemas for API request/response validation"""

from pydantic import BaseModel, Field
from typing import List, Optional


class AmortizationRequest(BaseModel):
    """Request body for POST /v1/amortization and /v1/amortization/schedule"""

    principal: float = Field(..., ge=0, allow_inf_nan=False, description="Loan amount")
    annual_rate_percent: float = Field(..., ge=0, allow_inf_nan=False, description="Annual interest rate, 8.5 = 8.5%")
    tenure_years: float = Field(..., gt=0, allow_inf_nan=False, description="Loan term in years")


class AmortizationResponse(BaseModel):
    """Response for POST /v1/amortization"""

    installment: int
    total_interest: int
    total_payment: int
    periods: float


class ScheduleRowSchema(BaseModel):
    """Single month in an amortization schedule"""

    period: int
    payment: float
    interest: float
    principal: float
    balance: float


class ScheduleResponse(BaseModel):
    """Response for POST /v1/amortization/schedule"""

    installment: int
    total_interest: int
    total_payment: int
    rows: List[ScheduleRowSchema]


class EligibilityRequest(BaseModel):
    """Request body for POST /v1/eligibility"""

    installment: float = Field(..., ge=0, allow_inf_nan=False, description="Monthly installment")
    monthly_income: float = Field(..., allow_inf_nan=False, description="Monthly income")


class EligibilityResponse(BaseModel):
    """Affordability verdict"""

    is_eligible: bool
    ratio_percent: Optional[int] = None
    message: str


class QuoteRequest(BaseModel):
    """Request body for POST /v1/quote - the calculator's five inputs"""

    property_price: float = Field(0, ge=0, allow_inf_nan=False)
    down_payment: float = Field(0, ge=0, allow_inf_nan=False)
    interest_rate: float = Field(0, ge=0, allow_inf_nan=False, description="Annual interest rate in percent")
    tenure_years: float = Field(1, gt=0, allow_inf_nan=False)
    monthly_income: float = Field(0, ge=0, allow_inf_nan=False)


class QuoteResponse(BaseModel):
    """Response for POST /v1/quote"""

    loan_amount: float
    down_payment_percent: int
    installment: int
    total_interest: int
    total_payment: int
    installment_display: str
    total_interest_display: str
    loan_amount_display: str
    eligibility: EligibilityResponse


class ProductResponse(BaseModel):
    """Response for GET /v1/product/{product_id}"""

    id: int
    title: str
    description: str
    category: str
    brand: str
    thumbnail: str
    availability_status: str
    price: float
    original_price: float
    savings: float
    discount_percentage: float
    has_discount: bool
    rating: float
    rating_stars: int
    stock: int
    stock_level: str
