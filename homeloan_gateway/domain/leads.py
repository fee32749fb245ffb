"""Contact form validation for incoming leads"""

import re
from datetime import datetime, timezone
from typing import Any, Dict

from homeloan_gateway.domain.models import Lead
from homeloan_gateway.domain.exceptions import LeadValidationError

REQUIRED_FIELDS = ("name", "email", "phone", "propertyValue", "monthlySalary")

EMAIL_PATTERN = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")
PHONE_PATTERN = re.compile(r"\d{10,15}", re.ASCII)


def validate_lead(payload: Dict[str, Any], received_at: datetime | None = None) -> Lead:
    """
    Validate a contact form payload and build a Lead.

    Checks, in order:
    - every required field is present and non-empty (0 counts as missing)
    - email looks like local@domain.tld
    - phone is 10 to 15 digits

    Raises:
        LeadValidationError: With the user-facing message for the first failure
    """
    if not isinstance(payload, dict) or any(not payload.get(field) for field in REQUIRED_FIELDS):
        raise LeadValidationError("All fields are required")

    email = str(payload["email"])
    if not EMAIL_PATTERN.fullmatch(email):
        raise LeadValidationError("Invalid email format")

    phone = str(payload["phone"])
    if not PHONE_PATTERN.fullmatch(phone):
        raise LeadValidationError("Invalid phone number")

    return Lead(
        name=str(payload["name"]),
        email=email,
        phone=phone,
        property_value=payload["propertyValue"],
        monthly_salary=payload["monthlySalary"],
        received_at=received_at or datetime.now(timezone.utc),
    )
