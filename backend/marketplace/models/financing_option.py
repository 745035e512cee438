"""FinancingOption ORM — a provider's loan product.

Invariants:
    - provider_id references users (FK); role is not checked by the DB
    - min_amount/max_amount NUMERIC(10,2); interest_rate NUMERIC(5,2) in [0, 100]
    - is_active toggles visibility, parallel to AutoPart
"""

from datetime import datetime, timezone
from decimal import Decimal

from sqlalchemy import Boolean, DateTime, ForeignKey, Integer, Text
from sqlalchemy.orm import Mapped, mapped_column

from marketplace.db.base import Base
from marketplace.db.types import amount_type, rate_type


class FinancingOption(Base):
    __tablename__ = "financing_options"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    provider_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("users.id"), nullable=False, index=True,
    )
    name: Mapped[str] = mapped_column(Text, nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    min_amount: Mapped[Decimal] = mapped_column(amount_type(), nullable=False)
    max_amount: Mapped[Decimal] = mapped_column(amount_type(), nullable=False)
    interest_rate: Mapped[Decimal] = mapped_column(rate_type(), nullable=False)
    term_months: Mapped[int] = mapped_column(Integer, nullable=False)
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
