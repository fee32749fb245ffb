"""Domain models - pure Python dataclasses representing business entities"""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass
class LoanInput:
    """Fixed-rate, fixed-term loan terms"""

    principal: float
    annual_rate_percent: float  # 8.5 means 8.5%
    tenure_years: float


@dataclass
class AmortizationResult:
    """EMI and derived totals, in whole currency units"""

    installment: int
    total_interest: int
    total_payment: int
    periods: float


@dataclass
class EligibilityResult:
    """Affordability verdict for an installment against monthly income"""

    is_eligible: bool
    ratio_percent: Optional[int]  # None when income is zero or negative
    message: str


@dataclass
class ScheduleRow:
    """Single month in an amortization schedule"""

    period: int
    payment: float
    interest: float
    principal: float
    balance: float


@dataclass
class MortgageQuote:
    """Everything the calculator widget shows for one set of inputs"""

    loan_amount: float
    down_payment_percent: int
    amortization: AmortizationResult
    eligibility: EligibilityResult


@dataclass
class Lead:
    """Validated contact form submission"""

    name: str
    email: str
    phone: str
    property_value: float
    monthly_salary: float
    received_at: datetime


@dataclass
class Product:
    """Catalogue product from the external product API"""

    id: int
    title: str = ""
    description: str = ""
    category: str = ""
    price: float = 0.0
    discount_percentage: float = 0.0
    rating: float = 0.0
    stock: int = 0
    brand: str = ""
    thumbnail: str = ""
    availability_status: str = ""


@dataclass
class ProductDisplay:
    """Product plus the pricing and badge fields derived for display"""

    product: Product
    original_price: float
    savings: float
    has_discount: bool
    stock_level: str  # "high", "medium" or "low"
    rating_stars: int
