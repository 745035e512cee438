"""Financing Schemas — option/application inputs, records, and payment estimates.

Invariants:
    - CreateFinancingOptionInput: min_amount <= max_amount, rate in [0, 100], term > 0
    - CreateFinancingApplicationInput has NO provider_id field (derived server-side)
    - application_data is an opaque string, never parsed
"""

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, Field, model_validator

from marketplace.core.domain_types import (
    ApplicationId, ApplicationStatus, FinancingOptionId, PartId, UserId,
)
from marketplace.schemas.common import (
    AmountInput, NumericOut, ORMResponse, RateInput,
)


class CreateFinancingOptionInput(BaseModel):
    provider_id: UserId
    name: str = Field(min_length=1)
    description: str = Field(min_length=1)
    min_amount: AmountInput
    max_amount: AmountInput
    interest_rate: RateInput
    term_months: int = Field(gt=0)

    @model_validator(mode="after")
    def check_amount_bounds(self):
        if self.min_amount > self.max_amount:
            raise ValueError("min_amount must not exceed max_amount")
        return self


class FinancingOptionResponse(ORMResponse):
    id: FinancingOptionId
    provider_id: UserId
    name: str
    description: str
    min_amount: NumericOut
    max_amount: NumericOut
    interest_rate: NumericOut
    term_months: int
    is_active: bool
    created_at: datetime
    updated_at: datetime


class CreateFinancingApplicationInput(BaseModel):
    buyer_id: UserId
    part_id: PartId
    financing_option_id: FinancingOptionId
    requested_amount: AmountInput
    application_data: str


class GetFinancingApplicationsInput(BaseModel):
    user_id: UserId
    user_type: Literal["buyer", "financing_provider"]


class UpdateApplicationStatusInput(BaseModel):
    id: ApplicationId
    status: ApplicationStatus


class FinancingApplicationResponse(ORMResponse):
    id: ApplicationId
    buyer_id: UserId
    provider_id: UserId
    part_id: PartId
    financing_option_id: FinancingOptionId
    requested_amount: NumericOut
    status: ApplicationStatus
    application_data: str
    created_at: datetime
    updated_at: datetime


class MonthlyPaymentInput(BaseModel):
    amount: float = Field(gt=0)
    interest_rate: float = Field(ge=0, le=100)
    term_months: int = Field(gt=0)


class MonthlyPaymentResponse(BaseModel):
    amount: float
    interest_rate: float
    term_months: int
    monthly_payment: float
    total_repayment: float
