"""Numeric coercion and rounding helpers shared by the ledger and metrics."""

import math
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

_ONE_DECIMAL = Decimal("0.1")
_WHOLE = Decimal("1")


def to_float(value: object, default: float = 0.0) -> float:
    """Coerce user or stored input into a finite float."""
    if isinstance(value, bool):
        return default
    if not isinstance(value, int | float | str):
        return default
    try:
        result = float(value.strip() if isinstance(value, str) else value)
    except (ValueError, OverflowError):
        return default
    if not math.isfinite(result):
        return default
    return result


def to_non_negative(value: object, default: float = 0.0) -> float:
    """Coerce input into a float that is never below zero."""
    return max(0.0, to_float(value, default))


def clamp(value: float, low: float, high: float) -> float:
    return min(high, max(low, value))


def round_servings(value: float) -> float:
    """Round a serving quantity to one decimal place, halves away from zero."""
    return _round(value, _ONE_DECIMAL)


def round_whole(value: float) -> float:
    return _round(value, _WHOLE)


def _round(value: float, quantum: Decimal) -> float:
    try:
        rounded = Decimal(repr(float(value))).quantize(quantum, rounding=ROUND_HALF_UP)
    except InvalidOperation:
        return 0.0
    return float(rounded)
