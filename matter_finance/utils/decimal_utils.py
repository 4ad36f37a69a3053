"""Helpers for Decimal normalization."""

from decimal import DefaultContext, Decimal, InvalidOperation

# Leaves headroom so sums of normalized amounts cannot overflow the context.
_MAX_ADJUSTED_EXPONENT = DefaultContext.Emax - 2


def default_zero(value) -> Decimal:
    """Normalize a raw numeric value to Decimal, defaulting to zero.

    Missing values, booleans, non-numeric strings, non-finite numbers and
    magnitudes too large for Decimal arithmetic all normalize to zero.
    Explicit negative values are kept as given.

    Args:
        value: Raw numeric value from a record or adapter.

    Returns:
        Decimal: Normalized numeric value.
    """
    if value is None or isinstance(value, bool):
        return Decimal("0")
    try:
        if isinstance(value, Decimal):
            candidate = value
        elif isinstance(value, int):
            candidate = Decimal(value)
        elif isinstance(value, float):
            candidate = Decimal(str(value))
        elif isinstance(value, str):
            candidate = Decimal(value.strip())
        else:
            return Decimal("0")
    except (InvalidOperation, ValueError):
        return Decimal("0")
    if not candidate.is_finite():
        return Decimal("0")
    if candidate and candidate.adjusted() > _MAX_ADJUSTED_EXPONENT:
        return Decimal("0")
    return candidate


__all__ = ["default_zero"]
