"""Part Handlers — listing creation, search, partial update, and images.

Invariants:
    - create_auto_part runs the seller role check BEFORE any insert (nothing persisted on failure)
    - search never returns inactive parts; every supplied predicate is ANDed
    - update applies only fields the caller sent; updated_at strictly advances
    - Prices cross the boundary as Decimal quantized to NUMERIC(10,2)

Design Decisions:
    - Conditions collected in a list then ANDed: absent filters add no clause
    - Price bounds compared unrounded: a bound between two cents never admits
      a part outside it
    - icontains(autoescape=True): user '%' / '_' match literally, not as wildcards
    - Secondary sort on id desc: stable paging when created_at ties
"""

import logging

from sqlalchemy import and_, or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from marketplace.core.domain_types import PartId
from marketplace.core.money import to_decimal, to_fixed_point
from marketplace.core.ownership import require_seller
from marketplace.core.timestamps import next_modification_time
from marketplace.models.auto_part import AutoPart
from marketplace.models.part_image import PartImage
from marketplace.models.user import User
from marketplace.schemas.auto_part import (
    CreateAutoPartInput, CreatePartImageInput, SearchPartsInput,
    UpdateAutoPartInput,
)
from marketplace.services.lookups import fetch_or_404, find_by_id

logger = logging.getLogger(__name__)


def build_search_conditions(filters: SearchPartsInput) -> list:
    """WHERE clauses for a part search — active-only plus each supplied predicate."""
    conditions = [AutoPart.is_active.is_(True)]
    if filters.query:
        conditions.append(or_(
            AutoPart.title.icontains(filters.query, autoescape=True),
            AutoPart.description.icontains(filters.query, autoescape=True),
        ))
    if filters.category is not None:
        conditions.append(AutoPart.category == filters.category)
    if filters.condition is not None:
        conditions.append(AutoPart.condition == filters.condition)
    if filters.make:
        conditions.append(AutoPart.make.icontains(filters.make, autoescape=True))
    if filters.model:
        conditions.append(AutoPart.model.icontains(filters.model, autoescape=True))
    if filters.year is not None:
        conditions.append(AutoPart.year == filters.year)
    if filters.min_price is not None:
        conditions.append(AutoPart.price >= to_decimal(filters.min_price))
    if filters.max_price is not None:
        conditions.append(AutoPart.price <= to_decimal(filters.max_price))
    return conditions


class PartHandlers:
    """createAutoPart / getAutoParts / searchAutoParts / updateAutoPart / part images."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def create_auto_part(self, data: CreateAutoPartInput) -> AutoPart:
        seller = await find_by_id(self.db, User, data.seller_id)
        require_seller(seller, data.seller_id)

        part = AutoPart(
            seller_id=data.seller_id,
            title=data.title,
            description=data.description,
            category=data.category,
            condition=data.condition,
            price=to_fixed_point(data.price),
            make=data.make,
            model=data.model,
            year=data.year,
            part_number=data.part_number,
            is_active=True,
        )
        self.db.add(part)
        await self.db.commit()
        await self.db.refresh(part)
        logger.info(
            "Auto part listed",
            extra={"entity": "AutoPart", "entity_id": part.id},
        )
        return part

    async def get_auto_parts(self) -> list[AutoPart]:
        result = await self.db.execute(
            select(AutoPart)
            .where(AutoPart.is_active.is_(True))
            .order_by(AutoPart.created_at.desc(), AutoPart.id.desc())
        )
        return list(result.scalars().all())

    async def search_auto_parts(self, filters: SearchPartsInput) -> list[AutoPart]:
        query = (
            select(AutoPart)
            .where(and_(*build_search_conditions(filters)))
            .order_by(AutoPart.created_at.desc(), AutoPart.id.desc())
            .limit(filters.limit)
            .offset(filters.offset)
        )
        result = await self.db.execute(query)
        return list(result.scalars().all())

    async def update_auto_part(self, data: UpdateAutoPartInput) -> AutoPart:
        part = await fetch_or_404(self.db, AutoPart, data.id, "AutoPart")
        changes = data.changes()
        if "price" in changes:
            changes["price"] = to_fixed_point(changes["price"])
        for name, value in changes.items():
            setattr(part, name, value)
        part.updated_at = next_modification_time(part.updated_at)
        await self.db.commit()
        await self.db.refresh(part)
        logger.info(
            f"Auto part updated ({', '.join(sorted(changes)) or 'touch'})",
            extra={"entity": "AutoPart", "entity_id": part.id},
        )
        return part

    async def create_part_image(self, data: CreatePartImageInput) -> PartImage:
        await fetch_or_404(self.db, AutoPart, data.part_id, "AutoPart")
        image = PartImage(
            part_id=data.part_id,
            image_url=str(data.image_url),
            is_primary=data.is_primary,
        )
        self.db.add(image)
        await self.db.commit()
        await self.db.refresh(image)
        logger.info(
            "Part image attached",
            extra={"entity": "PartImage", "entity_id": image.id},
        )
        return image

    async def get_part_images(self, part_id: PartId) -> list[PartImage]:
        """Images for a part, primary first."""
        await fetch_or_404(self.db, AutoPart, part_id, "AutoPart")
        result = await self.db.execute(
            select(PartImage)
            .where(PartImage.part_id == part_id)
            .order_by(PartImage.is_primary.desc(), PartImage.id)
        )
        return list(result.scalars().all())
