"""Row Lookups — fetch-by-id helpers shared by all handlers.

Invariants:
    - fetch_or_404 raises ResourceNotFoundError, never returns None
    - find_by_id returns None for absent rows (caller decides the error)
"""

from typing import TypeVar

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from marketplace.core.errors import ResourceNotFoundError

ModelT = TypeVar("ModelT")


async def find_by_id(db: AsyncSession, model: type[ModelT], row_id: int) -> ModelT | None:
    result = await db.execute(select(model).where(model.id == row_id))
    return result.scalar_one_or_none()


async def fetch_or_404(
    db: AsyncSession, model: type[ModelT], row_id: int, resource_type: str,
) -> ModelT:
    row = await find_by_id(db, model, row_id)
    if row is None:
        raise ResourceNotFoundError(resource_type, row_id)
    return row
