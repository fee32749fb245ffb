"""Unit tests for currency display formatting"""

from homeloan_gateway.utils.currency import format_currency, group_indian


def test_group_indian_lakh_and_crore():
    assert group_indian("999") == "999"
    assert group_indian("1000") == "1,000"
    assert group_indian("100000") == "1,00,000"
    assert group_indian("12345678") == "1,23,45,678"


def test_format_currency_rounds_to_whole_units():
    assert format_currency(1234567.6) == "12,34,568 INR"
    assert format_currency(8678) == "8,678 INR"
    assert format_currency(0) == "0 INR"


def test_format_currency_custom_code_and_negative():
    assert format_currency(-2500, "USD") == "-2,500 USD"
