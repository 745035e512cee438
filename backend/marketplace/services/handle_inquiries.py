"""Inquiry Handlers — buyer-to-seller messages about a part.

Invariants:
    - seller_id is derived from the part (core/ownership.py); callers cannot supply it
    - update_inquiry_status on an unknown id raises NotFound and never inserts
    - Status changes pass through core/workflow.check_transition
"""

import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from marketplace.core.domain_types import UserId, WorkflowKind
from marketplace.core.ownership import derive_inquiry_fields, require_user
from marketplace.core.timestamps import next_modification_time
from marketplace.core.workflow import check_transition
from marketplace.models.auto_part import AutoPart
from marketplace.models.buyer_inquiry import BuyerInquiry
from marketplace.models.user import User
from marketplace.schemas.inquiry import (
    CreateBuyerInquiryInput, UpdateInquiryStatusInput,
)
from marketplace.services.lookups import fetch_or_404, find_by_id

logger = logging.getLogger(__name__)


class InquiryHandlers:
    """createBuyerInquiry / getBuyerInquiries / getSellerInquiries / updateInquiryStatus."""

    def __init__(self, db: AsyncSession, enforce_transitions: bool = True):
        self.db = db
        self.enforce_transitions = enforce_transitions

    async def create_buyer_inquiry(self, data: CreateBuyerInquiryInput) -> BuyerInquiry:
        part = await find_by_id(self.db, AutoPart, data.part_id)
        fields = derive_inquiry_fields(part, data.part_id, data.buyer_id, data.message)
        require_user(await find_by_id(self.db, User, data.buyer_id), data.buyer_id, "Buyer")

        inquiry = BuyerInquiry(**fields)
        self.db.add(inquiry)
        await self.db.commit()
        await self.db.refresh(inquiry)
        logger.info(
            f"Inquiry opened for part {inquiry.part_id} (seller {inquiry.seller_id})",
            extra={"entity": "BuyerInquiry", "entity_id": inquiry.id},
        )
        return inquiry

    async def get_buyer_inquiries(self, buyer_id: UserId) -> list[BuyerInquiry]:
        return await self._list_where(BuyerInquiry.buyer_id == buyer_id)

    async def get_seller_inquiries(self, seller_id: UserId) -> list[BuyerInquiry]:
        return await self._list_where(BuyerInquiry.seller_id == seller_id)

    async def update_inquiry_status(self, data: UpdateInquiryStatusInput) -> BuyerInquiry:
        inquiry = await fetch_or_404(self.db, BuyerInquiry, data.id, "BuyerInquiry")
        check_transition(
            WorkflowKind.INQUIRY, inquiry.status, data.status,
            enforce=self.enforce_transitions,
        )
        previous = inquiry.status
        inquiry.status = data.status
        inquiry.updated_at = next_modification_time(inquiry.updated_at)
        await self.db.commit()
        await self.db.refresh(inquiry)
        logger.info(
            f"Inquiry status {previous.value} -> {inquiry.status.value}",
            extra={"entity": "BuyerInquiry", "entity_id": inquiry.id},
        )
        return inquiry

    async def _list_where(self, clause) -> list[BuyerInquiry]:
        result = await self.db.execute(
            select(BuyerInquiry)
            .where(clause)
            .order_by(BuyerInquiry.created_at.desc(), BuyerInquiry.id.desc())
        )
        return list(result.scalars().all())
