"""Fixed-Point Coercion — Decimal <-> native number conversion at the process boundary.

Invariants:
    - Amount columns are NUMERIC(10,2); rate columns are NUMERIC(5,2)
    - to_fixed_point never routes through a binary float (str() first)
    - to_number(to_fixed_point(x)) == x for any x representable at the column scale

Design Decisions:
    - Decimal inside the process, float on the wire: JSON clients expect numbers,
      the store expects fixed-point text
    - ROUND_HALF_UP: matches how PostgreSQL rounds NUMERIC on insert
"""

from decimal import Decimal, ROUND_HALF_UP, InvalidOperation

from marketplace.core.errors import InputValidationError


AMOUNT_PRECISION: int = 10
AMOUNT_SCALE: int = 2
RATE_PRECISION: int = 5
RATE_SCALE: int = 2


def to_decimal(value: Decimal | float | int | str) -> Decimal:
    """Exact Decimal for value, without rounding (filter bounds compare unrounded)."""
    try:
        dec = value if isinstance(value, Decimal) else Decimal(str(value))
    except (InvalidOperation, ValueError) as e:
        raise InputValidationError(
            f"'{value}' is not a valid decimal amount", "amount",
        ) from e
    if not dec.is_finite():
        raise InputValidationError(
            f"'{value}' is not a valid decimal amount", "amount",
        )
    return dec


def to_fixed_point(
    value: Decimal | float | int | str, places: int = AMOUNT_SCALE,
) -> Decimal:
    """Quantize value to `places` fractional digits."""
    dec = to_decimal(value)
    try:
        return dec.quantize(Decimal(1).scaleb(-places), rounding=ROUND_HALF_UP)
    except InvalidOperation as e:
        raise InputValidationError(
            f"'{value}' is out of range for a decimal amount", "amount",
        ) from e


def to_number(value: Decimal | float | int | None) -> float | None:
    """Coerce a stored fixed-point value back to a native number."""
    if value is None:
        return None
    return float(value)
