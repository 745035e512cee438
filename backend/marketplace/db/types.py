"""Column Types — shared SQLAlchemy type factories for enum and fixed-point columns.

Invariants:
    - Enum columns persist the enum VALUE ("used_good"), never the member name
    - Monetary columns are NUMERIC(10,2), rate columns NUMERIC(5,2), both asdecimal
"""

from enum import Enum as PyEnum

from sqlalchemy import Enum, Numeric

from marketplace.core.money import (
    AMOUNT_PRECISION, AMOUNT_SCALE, RATE_PRECISION, RATE_SCALE,
)


def enum_type(enum_cls: type[PyEnum], name: str) -> Enum:
    """Named database enum backed by a Python str Enum."""
    return Enum(
        enum_cls,
        name=name,
        values_callable=lambda members: [m.value for m in members],
        validate_strings=True,
    )


def amount_type() -> Numeric:
    return Numeric(AMOUNT_PRECISION, AMOUNT_SCALE, asdecimal=True)


def rate_type() -> Numeric:
    return Numeric(RATE_PRECISION, RATE_SCALE, asdecimal=True)
