"""AutoPart ORM — a seller's listing.

Invariants:
    - seller_id references a user whose role is seller (checked on create, not by the DB)
    - price is NUMERIC(10,2), always > 0
    - is_active is the only removal path (no hard delete)
    - updated_at advances on every partial update

Design Decisions:
    - Index on (is_active, created_at): search always filters active and sorts newest-first
"""

from datetime import datetime, timezone
from decimal import Decimal

from sqlalchemy import Boolean, DateTime, ForeignKey, Index, Integer, Text
from sqlalchemy.orm import Mapped, mapped_column

from marketplace.core.domain_types import PartCategory, PartCondition
from marketplace.db.base import Base
from marketplace.db.types import amount_type, enum_type


class AutoPart(Base):
    """Part listing owned by exactly one seller."""
    __tablename__ = "auto_parts"
    __table_args__ = (
        Index("ix_auto_parts_active_created", "is_active", "created_at"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    seller_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("users.id"), nullable=False, index=True,
    )
    title: Mapped[str] = mapped_column(Text, nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    category: Mapped[PartCategory] = mapped_column(
        enum_type(PartCategory, "part_category"), nullable=False,
    )
    condition: Mapped[PartCondition] = mapped_column(
        enum_type(PartCondition, "part_condition"), nullable=False,
    )
    price: Mapped[Decimal] = mapped_column(amount_type(), nullable=False)
    make: Mapped[str] = mapped_column(Text, nullable=False)
    model: Mapped[str] = mapped_column(Text, nullable=False)
    year: Mapped[int] = mapped_column(Integer, nullable=False)
    part_number: Mapped[str | None] = mapped_column(Text, nullable=True)
    is_active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
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
