"""User Schemas — registration input and public user record.

Invariants:
    - password is >= 8 chars and never echoed back
    - UserResponse omits password_hash
"""

from datetime import datetime

from pydantic import BaseModel, EmailStr, Field, field_validator

from marketplace.core.domain_types import UserId, UserRole
from marketplace.schemas.common import ORMResponse


class CreateUserInput(BaseModel):
    email: EmailStr
    password: str = Field(min_length=8)
    first_name: str = Field(min_length=1)
    last_name: str = Field(min_length=1)
    user_type: UserRole
    phone: str | None = None
    address: str | None = None
    city: str | None = None
    state: str | None = None
    zip_code: str | None = None

    @field_validator("email")
    @classmethod
    def lowercase_email(cls, v: str) -> str:
        return v.strip().lower()


class UserResponse(ORMResponse):
    id: UserId
    email: str
    first_name: str
    last_name: str
    user_type: UserRole
    phone: str | None
    address: str | None
    city: str | None
    state: str | None
    zip_code: str | None
    created_at: datetime
    updated_at: datetime
