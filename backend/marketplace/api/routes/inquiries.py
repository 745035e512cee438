"""Inquiry Procedures — buyer inquiries and their status workflow."""

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from marketplace.api.routes import RPC_PREFIX
from marketplace.config import get_settings
from marketplace.core.domain_types import UserId
from marketplace.infrastructure.database import get_db
from marketplace.schemas.inquiry import (
    BuyerInquiryResponse, CreateBuyerInquiryInput, UpdateInquiryStatusInput,
)
from marketplace.services.handle_inquiries import InquiryHandlers

router = APIRouter(prefix=RPC_PREFIX, tags=["inquiries"])


def _handlers(db: AsyncSession) -> InquiryHandlers:
    return InquiryHandlers(
        db, enforce_transitions=get_settings().enforce_status_transitions,
    )


@router.post(
    "/createBuyerInquiry", response_model=BuyerInquiryResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_buyer_inquiry(
    body: CreateBuyerInquiryInput, db: AsyncSession = Depends(get_db),
):
    inquiry = await _handlers(db).create_buyer_inquiry(body)
    return BuyerInquiryResponse.model_validate(inquiry)


@router.get("/getBuyerInquiries", response_model=list[BuyerInquiryResponse])
async def get_buyer_inquiries(
    user_id: int = Query(...), db: AsyncSession = Depends(get_db),
):
    inquiries = await _handlers(db).get_buyer_inquiries(UserId(user_id))
    return [BuyerInquiryResponse.model_validate(i) for i in inquiries]


@router.get("/getSellerInquiries", response_model=list[BuyerInquiryResponse])
async def get_seller_inquiries(
    user_id: int = Query(...), db: AsyncSession = Depends(get_db),
):
    inquiries = await _handlers(db).get_seller_inquiries(UserId(user_id))
    return [BuyerInquiryResponse.model_validate(i) for i in inquiries]


@router.post("/updateInquiryStatus", response_model=BuyerInquiryResponse)
async def update_inquiry_status(
    body: UpdateInquiryStatusInput, db: AsyncSession = Depends(get_db),
):
    inquiry = await _handlers(db).update_inquiry_status(body)
    return BuyerInquiryResponse.model_validate(inquiry)
