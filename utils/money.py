# utils/money.py
from decimal import Decimal, ROUND_HALF_UP

CENT = Decimal("0.01")


def to_decimal(value) -> Decimal:
    # Go through str() so 1.5 becomes Decimal("1.5"), not its binary expansion.
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def format_money(amount, symbol: str = "$") -> str:
    # Display only: 1234.5 -> "$1,234.50", -3 -> "-$3.00"
    value = to_decimal(amount).quantize(CENT, rounding=ROUND_HALF_UP)
    sign = "-" if value < 0 else ""
    return f"{sign}{symbol}{abs(value):,.2f}"
