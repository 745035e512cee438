"""BuyerInquiry ORM — a buyer's message about one part to its seller.

Invariants:
    - seller_id equals the referenced part's seller_id at creation time (derived, never supplied)
    - status follows pending -> responded -> closed (see core/workflow.py)
"""

from datetime import datetime, timezone

from sqlalchemy import DateTime, ForeignKey, Integer, Text
from sqlalchemy.orm import Mapped, mapped_column

from marketplace.core.domain_types import InquiryStatus
from marketplace.db.base import Base
from marketplace.db.types import enum_type


class BuyerInquiry(Base):
    __tablename__ = "buyer_inquiries"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    buyer_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("users.id"), nullable=False, index=True,
    )
    seller_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("users.id"), nullable=False, index=True,
    )
    part_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("auto_parts.id"), nullable=False,
    )
    message: Mapped[str] = mapped_column(Text, nullable=False)
    status: Mapped[InquiryStatus] = mapped_column(
        enum_type(InquiryStatus, "inquiry_status"),
        nullable=False,
        default=InquiryStatus.PENDING,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
