"""Inquiry Handlers — seller derivation and the inquiry status workflow.

Invariants:
    - seller_id always equals the referenced part's seller_id
    - Unknown part/buyer -> NotFound with no inquiry row
    - pending -> responded -> closed; closed is terminal unless enforcement is off
"""

import pytest
from sqlalchemy import func, select

from marketplace.core.domain_types import InquiryStatus
from marketplace.core.errors import InvalidTransitionError, ResourceNotFoundError
from marketplace.models.buyer_inquiry import BuyerInquiry
from marketplace.schemas.inquiry import (
    CreateBuyerInquiryInput, UpdateInquiryStatusInput,
)
from marketplace.services.handle_inquiries import InquiryHandlers


async def _open(db, buyer_id: int, part_id: int, message: str = "Still available?"):
    return await InquiryHandlers(db).create_buyer_inquiry(CreateBuyerInquiryInput(
        buyer_id=buyer_id, part_id=part_id, message=message,
    ))


async def _count(db) -> int:
    return await db.scalar(select(func.count()).select_from(BuyerInquiry))


async def test_inquiry_seller_derived_from_part(test_db, buyer, part, seller):
    inquiry = await _open(test_db, buyer.id, part.id)
    assert inquiry.seller_id == part.seller_id == seller.id
    assert inquiry.status == InquiryStatus.PENDING
    assert inquiry.message == "Still available?"


async def test_supplied_seller_id_is_ignored(test_db, buyer, part, other_seller):
    data = CreateBuyerInquiryInput.model_validate({
        "buyer_id": buyer.id, "part_id": part.id,
        "message": "Is this OEM?", "seller_id": other_seller.id,
    })
    inquiry = await InquiryHandlers(test_db).create_buyer_inquiry(data)
    assert inquiry.seller_id == part.seller_id
    assert inquiry.seller_id != other_seller.id


async def test_inquiry_for_unknown_part_is_not_found(test_db, buyer):
    with pytest.raises(ResourceNotFoundError) as exc_info:
        await _open(test_db, buyer.id, 31337)
    assert exc_info.value.resource_type == "AutoPart"
    assert await _count(test_db) == 0


async def test_inquiry_from_unknown_buyer_is_not_found(test_db, part):
    with pytest.raises(ResourceNotFoundError):
        await _open(test_db, 9999, part.id)
    assert await _count(test_db) == 0


async def test_buyer_and_seller_views(test_db, buyer, part, seller, other_seller):
    first = await _open(test_db, buyer.id, part.id, "First")
    second = await _open(test_db, buyer.id, part.id, "Second")
    handlers = InquiryHandlers(test_db)

    buyer_view = await handlers.get_buyer_inquiries(buyer.id)
    seller_view = await handlers.get_seller_inquiries(seller.id)

    assert [i.id for i in buyer_view] == [second.id, first.id]
    assert [i.id for i in seller_view] == [second.id, first.id]
    assert await handlers.get_seller_inquiries(other_seller.id) == []
    assert await handlers.get_buyer_inquiries(seller.id) == []


# ─── status workflow ─────────────────────────────────────────────

async def test_inquiry_full_lifecycle(test_db, buyer, part):
    inquiry = await _open(test_db, buyer.id, part.id)
    handlers = InquiryHandlers(test_db)
    created_at = inquiry.created_at
    stamp = inquiry.updated_at

    responded = await handlers.update_inquiry_status(
        UpdateInquiryStatusInput(id=inquiry.id, status="responded"),
    )
    assert responded.status == InquiryStatus.RESPONDED
    assert responded.updated_at > stamp
    stamp = responded.updated_at

    closed = await handlers.update_inquiry_status(
        UpdateInquiryStatusInput(id=inquiry.id, status="closed"),
    )
    assert closed.status == InquiryStatus.CLOSED
    assert closed.updated_at > stamp
    assert closed.created_at == created_at


async def test_pending_can_close_directly(test_db, buyer, part):
    inquiry = await _open(test_db, buyer.id, part.id)
    closed = await InquiryHandlers(test_db).update_inquiry_status(
        UpdateInquiryStatusInput(id=inquiry.id, status="closed"),
    )
    assert closed.status == InquiryStatus.CLOSED


async def test_reopening_closed_inquiry_rejected(test_db, buyer, part):
    inquiry = await _open(test_db, buyer.id, part.id)
    handlers = InquiryHandlers(test_db)
    await handlers.update_inquiry_status(
        UpdateInquiryStatusInput(id=inquiry.id, status="closed"),
    )
    with pytest.raises(InvalidTransitionError) as exc_info:
        await handlers.update_inquiry_status(
            UpdateInquiryStatusInput(id=inquiry.id, status="pending"),
        )
    assert exc_info.value.current == "closed"
    assert exc_info.value.target == "pending"

    await test_db.refresh(inquiry)
    assert inquiry.status == InquiryStatus.CLOSED


async def test_same_status_is_a_restamp(test_db, buyer, part):
    inquiry = await _open(test_db, buyer.id, part.id)
    stamp = inquiry.updated_at
    again = await InquiryHandlers(test_db).update_inquiry_status(
        UpdateInquiryStatusInput(id=inquiry.id, status="pending"),
    )
    assert again.status == InquiryStatus.PENDING
    assert again.updated_at > stamp


async def test_permissive_mode_allows_reopen(test_db, buyer, part):
    inquiry = await _open(test_db, buyer.id, part.id)
    handlers = InquiryHandlers(test_db, enforce_transitions=False)
    await handlers.update_inquiry_status(
        UpdateInquiryStatusInput(id=inquiry.id, status="closed"),
    )
    reopened = await handlers.update_inquiry_status(
        UpdateInquiryStatusInput(id=inquiry.id, status="pending"),
    )
    assert reopened.status == InquiryStatus.PENDING


async def test_update_unknown_inquiry_creates_nothing(test_db):
    with pytest.raises(ResourceNotFoundError):
        await InquiryHandlers(test_db).update_inquiry_status(
            UpdateInquiryStatusInput(id=404, status="responded"),
        )
    assert await _count(test_db) == 0
