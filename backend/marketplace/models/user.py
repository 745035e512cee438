"""User ORM — marketplace identity with a fixed role tag.

Invariants:
    - email is unique and non-nullable
    - user_type is fixed at registration and never updated
    - password_hash only ever holds a passlib hash (never the plain password)
    - contact fields (phone/address/city/state/zip_code) are nullable
"""

from datetime import datetime, timezone

from sqlalchemy import String, Text, DateTime, Integer
from sqlalchemy.orm import Mapped, mapped_column

from marketplace.core.domain_types import UserRole
from marketplace.db.base import Base
from marketplace.db.types import enum_type


class User(Base):
    """Buyer, seller, or financing provider."""
    __tablename__ = "users"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    email: Mapped[str] = mapped_column(String(320), nullable=False, unique=True)
    password_hash: Mapped[str] = mapped_column(Text, nullable=False)
    first_name: Mapped[str] = mapped_column(Text, nullable=False)
    last_name: Mapped[str] = mapped_column(Text, nullable=False)
    user_type: Mapped[UserRole] = mapped_column(
        enum_type(UserRole, "user_type"), nullable=False,
    )
    phone: Mapped[str | None] = mapped_column(Text, nullable=True)
    address: Mapped[str | None] = mapped_column(Text, nullable=True)
    city: Mapped[str | None] = mapped_column(Text, nullable=True)
    state: Mapped[str | None] = mapped_column(Text, nullable=True)
    zip_code: Mapped[str | None] = mapped_column(Text, nullable=True)
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
