"""Auto Part Schemas — listing create/update/search inputs and part/image records.

Invariants:
    - year within [1900, current_year + 1], evaluated at validation time
    - UpdateAutoPartInput distinguishes "absent" from "explicit null" (model_fields_set)
    - SearchPartsInput: limit 1..100 (default 20), offset >= 0 (default 0)
"""

from datetime import datetime, timezone

from pydantic import BaseModel, Field, HttpUrl, field_validator, model_validator

from marketplace.core.domain_types import (
    PartCategory, PartCondition, PartId, PartImageId, UserId,
)
from marketplace.schemas.common import AmountInput, NumericOut, ORMResponse

MIN_YEAR = 1900
DEFAULT_PAGE_SIZE = 20
MAX_PAGE_SIZE = 100


def _max_year() -> int:
    return datetime.now(timezone.utc).year + 1


class CreateAutoPartInput(BaseModel):
    seller_id: UserId
    title: str = Field(min_length=1)
    description: str = Field(min_length=1)
    category: PartCategory
    condition: PartCondition
    price: AmountInput
    make: str = Field(min_length=1)
    model: str = Field(min_length=1)
    year: int = Field(ge=MIN_YEAR)
    part_number: str | None = None

    @field_validator("year")
    @classmethod
    def year_not_beyond_next(cls, v: int) -> int:
        if v > _max_year():
            raise ValueError(f"year must be <= {_max_year()}")
        return v


class UpdateAutoPartInput(BaseModel):
    """Sparse update — only fields present in the request are applied."""
    id: PartId
    title: str | None = Field(None, min_length=1)
    description: str | None = Field(None, min_length=1)
    category: PartCategory | None = None
    condition: PartCondition | None = None
    price: AmountInput | None = None
    part_number: str | None = None
    is_active: bool | None = None

    @model_validator(mode="after")
    def reject_null_for_required_columns(self):
        for name in ("title", "description", "category", "condition", "price", "is_active"):
            if name in self.model_fields_set and getattr(self, name) is None:
                raise ValueError(f"{name} cannot be null")
        return self

    def changes(self) -> dict:
        """Fields explicitly sent by the caller, minus the id."""
        return {
            name: getattr(self, name)
            for name in self.model_fields_set
            if name != "id"
        }


class SearchPartsInput(BaseModel):
    query: str | None = None
    category: PartCategory | None = None
    condition: PartCondition | None = None
    make: str | None = None
    model: str | None = None
    year: int | None = None
    min_price: float | None = Field(None, ge=0)
    max_price: float | None = Field(None, ge=0)
    limit: int = Field(DEFAULT_PAGE_SIZE, ge=1, le=MAX_PAGE_SIZE)
    offset: int = Field(0, ge=0)


class AutoPartResponse(ORMResponse):
    id: PartId
    seller_id: UserId
    title: str
    description: str
    category: PartCategory
    condition: PartCondition
    price: NumericOut
    make: str
    model: str
    year: int
    part_number: str | None
    is_active: bool
    created_at: datetime
    updated_at: datetime


class CreatePartImageInput(BaseModel):
    part_id: PartId
    image_url: HttpUrl
    is_primary: bool = False


class PartImageResponse(ORMResponse):
    id: PartImageId
    part_id: PartId
    image_url: str
    is_primary: bool
    created_at: datetime
