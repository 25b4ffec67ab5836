"""Currency formatting for quoted prices."""
from decimal import Decimal, ROUND_HALF_UP

CENTS = Decimal('0.01')


def format_currency(value) -> str:
    """Render a price as dollars with exactly two decimals, rounding half up."""
    amount = Decimal(value).quantize(CENTS, rounding=ROUND_HALF_UP)
    return f"${amount}"
