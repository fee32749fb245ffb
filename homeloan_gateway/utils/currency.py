"""Currency display formatting"""

from decimal import Decimal, ROUND_HALF_UP


def group_indian(digits: str) -> str:
    """Group an unsigned digit string the en-IN way: last three, then pairs"""
    if len(digits) <= 3:
        return digits
    head, tail = digits[:-3], digits[-3:]
    pairs = []
    while len(head) > 2:
        pairs.insert(0, head[-2:])
        head = head[:-2]
    return ",".join([head] + pairs + [tail])


def format_currency(amount: float, currency: str = "INR") -> str:
    """
    Format an amount as whole units with en-IN grouping and a currency suffix.

    Example:
        1234567.6 -> "12,34,568 INR"
    """
    whole = int(Decimal(amount).quantize(Decimal(1), rounding=ROUND_HALF_UP))
    sign = "-" if whole < 0 else ""
    return f"{sign}{group_indian(str(abs(whole)))} {currency}"
