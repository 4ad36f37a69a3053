"""Helpers for currency display strings."""

from decimal import ROUND_HALF_EVEN, Decimal, localcontext

from matter_finance.utils.decimal_utils import default_zero

CURRENCY_SYMBOL = "$"
_CENTS = Decimal("0.01")
_DEFAULT_PRECISION = 28


def format_currency(value) -> str:
    """Format a value as a dollar amount with two fraction digits.

    Args:
        value: Raw numeric value; missing or non-numeric values format as zero.

    Returns:
        str: Display string such as ``$1,234.50`` or ``-$7.00``.
    """
    amount = default_zero(value)
    with localcontext() as ctx:
        # Every integer digit plus the cents must fit in the precision.
        ctx.prec = max(_DEFAULT_PRECISION, amount.adjusted() + 3)
        amount = amount.quantize(_CENTS, rounding=ROUND_HALF_EVEN)
        sign = "-" if amount < 0 else ""
        return f"{sign}{CURRENCY_SYMBOL}{abs(amount):,.2f}"


__all__ = ["CURRENCY_SYMBOL", "format_currency"]
