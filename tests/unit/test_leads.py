"""Unit tests for contact form validation"""

import pytest
from datetime import datetime, timezone
from homeloan_gateway.domain.leads import validate_lead
from homeloan_gateway.domain.exceptions import LeadValidationError


def test_validate_lead_accepts_complete_payload(valid_lead: dict):
    received = datetime(2026, 10, 19, 9, 30, tzinfo=timezone.utc)
    lead = validate_lead(valid_lead, received_at=received)

    assert lead.name == "Asha Rao"
    assert lead.email == "asha@example.com"
    assert lead.phone == "9876543210"
    assert lead.property_value == 7500000
    assert lead.received_at == received


@pytest.mark.parametrize("field", ["name", "email", "phone", "propertyValue", "monthlySalary"])
def test_validate_lead_missing_field(valid_lead: dict, field: str):
    del valid_lead[field]
    with pytest.raises(LeadValidationError, match="All fields are required"):
        validate_lead(valid_lead)


def test_validate_lead_zero_counts_as_missing(valid_lead: dict):
    valid_lead["monthlySalary"] = 0
    with pytest.raises(LeadValidationError, match="All fields are required"):
        validate_lead(valid_lead)


def test_validate_lead_non_object_payload():
    with pytest.raises(LeadValidationError, match="All fields are required"):
        validate_lead(["not", "a", "dict"])


@pytest.mark.parametrize("email", ["asha", "asha@example", "asha @example.com", "@example.com", "asha@example.com\n"])
def test_validate_lead_bad_email(valid_lead: dict, email: str):
    valid_lead["email"] = email
    with pytest.raises(LeadValidationError, match="Invalid email format"):
        validate_lead(valid_lead)


@pytest.mark.parametrize("phone", ["98765", "+919876543210", "98765-43210", "1234567890123456", "９８７６５４３２１０"])
def test_validate_lead_bad_phone(valid_lead: dict, phone: str):
    valid_lead["phone"] = phone
    with pytest.raises(LeadValidationError, match="Invalid phone number"):
        validate_lead(valid_lead)


def test_validate_lead_numeric_phone_is_accepted(valid_lead: dict):
    valid_lead["phone"] = 9876543210
    assert validate_lead(valid_lead).phone == "9876543210"
