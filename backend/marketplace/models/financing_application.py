"""FinancingApplication ORM — a buyer's loan request against one option for one part.

Invariants:
    - provider_id equals the referenced option's provider_id at creation (derived, never supplied)
    - application_data is opaque text: round-tripped, never parsed server-side
    - status follows pending -> approved | rejected | withdrawn (see core/workflow.py)
"""

from datetime import datetime, timezone
from decimal import Decimal

from sqlalchemy import DateTime, ForeignKey, Integer, Text
from sqlalchemy.orm import Mapped, mapped_column

from marketplace.core.domain_types import ApplicationStatus
from marketplace.db.base import Base
from marketplace.db.types import amount_type, enum_type


class FinancingApplication(Base):
    __tablename__ = "financing_applications"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    buyer_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("users.id"), nullable=False, index=True,
    )
    provider_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("users.id"), nullable=False, index=True,
    )
    part_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("auto_parts.id"), nullable=False,
    )
    financing_option_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("financing_options.id"), nullable=False,
    )
    requested_amount: Mapped[Decimal] = mapped_column(amount_type(), nullable=False)
    status: Mapped[ApplicationStatus] = mapped_column(
        enum_type(ApplicationStatus, "application_status"),
        nullable=False,
        default=ApplicationStatus.PENDING,
    )
    application_data: Mapped[str] = mapped_column(Text, nullable=False)
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
