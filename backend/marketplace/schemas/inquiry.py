"""Inquiry Schemas — buyer inquiry create/status inputs and inquiry record.

Invariants:
    - CreateBuyerInquiryInput has NO seller_id field; stray keys are ignored
"""

from datetime import datetime

from pydantic import BaseModel, Field

from marketplace.core.domain_types import InquiryId, InquiryStatus, PartId, UserId
from marketplace.schemas.common import ORMResponse


class CreateBuyerInquiryInput(BaseModel):
    buyer_id: UserId
    part_id: PartId
    message: str = Field(min_length=1)


class UpdateInquiryStatusInput(BaseModel):
    id: InquiryId
    status: InquiryStatus


class BuyerInquiryResponse(ORMResponse):
    id: InquiryId
    buyer_id: UserId
    seller_id: UserId
    part_id: PartId
    message: str
    status: InquiryStatus
    created_at: datetime
    updated_at: datetime
