"""PartImage ORM — URL pointer to a listing photo.

Invariants:
    - Always belongs to an AutoPart (part_id FK)
    - More than one is_primary image per part is allowed (not enforced)
"""

from datetime import datetime, timezone

from sqlalchemy import Boolean, DateTime, ForeignKey, Integer, Text
from sqlalchemy.orm import Mapped, mapped_column

from marketplace.db.base import Base


class PartImage(Base):
    __tablename__ = "part_images"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    part_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("auto_parts.id"), nullable=False, index=True,
    )
    image_url: Mapped[str] = mapped_column(Text, nullable=False)
    is_primary: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
