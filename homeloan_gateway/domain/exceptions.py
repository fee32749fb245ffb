"""Domain-specific exceptions"""


class DomainException(Exception):
    """Base exception for domain layer"""

    pass


class InvalidInputError(DomainException):
    """Loan or income figures outside the calculator's domain"""

    pass


class LeadValidationError(DomainException):
    """Contact form submission is incomplete or malformed"""

    pass


class ProductAPIError(DomainException):
    """Product catalogue returned an error or is unavailable"""

    pass
