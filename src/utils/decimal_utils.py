"""Helpers for Decimal normalization."""

from decimal import Decimal, InvalidOperation


def coerce_decimal(value) -> Decimal:
    """Normalize numeric values to Decimal.

    Missing, empty, non-numeric and non-finite values collapse to zero so
    display helpers never fail on malformed input.

    Args:
        value: Raw numeric value from SQL, templates or adapters.

    Returns:
        Decimal: Normalized finite numeric value.
    """
    if value is None or value == "":
        return Decimal("0")
    if isinstance(value, Decimal):
        return value if value.is_finite() else Decimal("0")
    if isinstance(value, bool):
        return Decimal(int(value))
    try:
        result = Decimal(str(value).strip())
    except (InvalidOperation, ValueError):
        return Decimal("0")
    if not result.is_finite():
        return Decimal("0")
    return result


def is_real_number(value) -> bool:
    """Return True for finite int, float or Decimal values (bool excluded).

    Args:
        value: Candidate value.

    Returns:
        bool: True when the value is a finite real number.
    """
    if isinstance(value, bool):
        return False
    if isinstance(value, int):
        return True
    if isinstance(value, float):
        return value == value and value not in (float("inf"), float("-inf"))
    if isinstance(value, Decimal):
        return value.is_finite()
    return False


__all__ = ["coerce_decimal", "is_real_number"]
