from __future__ import annotations

from decimal import Decimal, InvalidOperation, ROUND_FLOOR, ROUND_HALF_UP
from typing import Optional

from mawb_engine.errors import InvalidInput

ONE_CENT = Decimal("0.01")
TWOPLACES = Decimal("0.01")
THREEPLACES = Decimal("0.001")
ZERO = Decimal("0")


def d(val, field: Optional[str] = None) -> Decimal:
    """Coerce incoming values to Decimal, raising InvalidInput for anything non-numeric."""
    if isinstance(val, Decimal):
        result = val
    elif isinstance(val, bool) or val is None:
        raise InvalidInput(f"expected a number, got {val!r}", field=field)
    else:
        try:
            result = Decimal(str(val).strip())
        except (InvalidOperation, ValueError):
            raise InvalidInput(f"expected a number, got {val!r}", field=field)
    if not result.is_finite():
        raise InvalidInput(f"expected a finite number, got {val!r}", field=field)
    return result


def d_or_zero(val, field: Optional[str] = None) -> Decimal:
    """Like d(), but blank strings and None count as zero (optional form fields)."""
    if val is None or (isinstance(val, str) and not val.strip()):
        return ZERO
    return d(val, field=field)


def _quantize(amount, exp: Decimal, rounding: str, field: Optional[str] = None) -> Decimal:
    value = d(amount, field=field)
    try:
        return value.quantize(exp, rounding=rounding)
    except InvalidOperation:
        # more digits than the decimal context can hold at this scale
        raise InvalidInput(f"too large to round to {exp}, got {value}", field=field)


def q2(amount: Decimal, field: Optional[str] = None) -> Decimal:
    return _quantize(amount, TWOPLACES, ROUND_HALF_UP, field)


def q3(amount: Decimal, field: Optional[str] = None) -> Decimal:
    return _quantize(amount, THREEPLACES, ROUND_HALF_UP, field)


def floor_cents(amount: Decimal, field: Optional[str] = None) -> Decimal:
    """Round down to whole cents (e.g., 8.8888 -> 8.88)."""
    return _quantize(amount, TWOPLACES, ROUND_FLOOR, field)
