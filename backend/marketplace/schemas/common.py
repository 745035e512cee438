"""Shared schema types — fixed-point inputs and numeric outputs.

Invariants:
    - AmountInput: > 0, at most 10 digits with 2 fractional (NUMERIC(10,2))
    - RateInput: 0..100, at most 5 digits with 2 fractional (NUMERIC(5,2))
    - NumericOut: Decimal from the store -> float on the wire
"""

from decimal import Decimal
from typing import Annotated

from pydantic import BeforeValidator, ConfigDict, BaseModel, Field

from marketplace.core.money import (
    AMOUNT_PRECISION, AMOUNT_SCALE, RATE_PRECISION, RATE_SCALE, to_number,
)


AmountInput = Annotated[
    Decimal,
    Field(gt=0, max_digits=AMOUNT_PRECISION, decimal_places=AMOUNT_SCALE),
]
RateInput = Annotated[
    Decimal,
    Field(ge=0, le=100, max_digits=RATE_PRECISION, decimal_places=RATE_SCALE),
]
NumericOut = Annotated[float, BeforeValidator(to_number)]


class ORMResponse(BaseModel):
    """Base for responses built from ORM rows."""
    model_config = ConfigDict(from_attributes=True)
