"""Helpers for Decimal normalization."""

from decimal import Decimal, InvalidOperation


def coerce_decimal(value) -> Decimal:
    """Normalize numeric values to Decimal.

    Args:
        value: Raw numeric value from SQL or adapters.

    Returns:
        Decimal: Normalized numeric value.
    """
    if value is None:
        return Decimal("0")
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def parse_decimal(value) -> Decimal | None:
    """Parse a raw amount into a finite Decimal.

    Unlike coerce_decimal, missing or unparseable values are not defaulted.

    Args:
        value: Raw amount (Decimal, int, float, str or None).

    Returns:
        Decimal | None: Parsed value, or None when the amount is unusable.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, str):
        value = value.strip()
        if not value:
            return None
    try:
        parsed = value if isinstance(value, Decimal) else Decimal(str(value))
    except (InvalidOperation, ValueError):
        return None
    if not parsed.is_finite():
        return None
    return parsed


__all__ = ["coerce_decimal", "parse_decimal"]
