"""Auto Part Procedures — listings, search, partial update, and images.

Invariants:
    - searchAutoParts takes its filters from the query string (SearchPartsInput)
    - Responses carry price as a JSON number, never a string
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from marketplace.api.routes import RPC_PREFIX
from marketplace.core.domain_types import PartId
from marketplace.infrastructure.database import get_db
from marketplace.schemas.auto_part import (
    AutoPartResponse, CreateAutoPartInput, CreatePartImageInput,
    PartImageResponse, SearchPartsInput, UpdateAutoPartInput,
)
from marketplace.services.handle_parts import PartHandlers

router = APIRouter(prefix=RPC_PREFIX, tags=["auto_parts"])


@router.post(
    "/createAutoPart", response_model=AutoPartResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_auto_part(
    body: CreateAutoPartInput, db: AsyncSession = Depends(get_db),
):
    part = await PartHandlers(db).create_auto_part(body)
    return AutoPartResponse.model_validate(part)


@router.get("/getAutoParts", response_model=list[AutoPartResponse])
async def get_auto_parts(db: AsyncSession = Depends(get_db)):
    parts = await PartHandlers(db).get_auto_parts()
    return [AutoPartResponse.model_validate(p) for p in parts]


@router.get("/searchAutoParts", response_model=list[AutoPartResponse])
async def search_auto_parts(
    filters: Annotated[SearchPartsInput, Query()],
    db: AsyncSession = Depends(get_db),
):
    parts = await PartHandlers(db).search_auto_parts(filters)
    return [AutoPartResponse.model_validate(p) for p in parts]


@router.post("/updateAutoPart", response_model=AutoPartResponse)
async def update_auto_part(
    body: UpdateAutoPartInput, db: AsyncSession = Depends(get_db),
):
    part = await PartHandlers(db).update_auto_part(body)
    return AutoPartResponse.model_validate(part)


@router.post(
    "/createPartImage", response_model=PartImageResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_part_image(
    body: CreatePartImageInput, db: AsyncSession = Depends(get_db),
):
    image = await PartHandlers(db).create_part_image(body)
    return PartImageResponse.model_validate(image)


@router.get("/getPartImages", response_model=list[PartImageResponse])
async def get_part_images(
    part_id: int = Query(...), db: AsyncSession = Depends(get_db),
):
    images = await PartHandlers(db).get_part_images(PartId(part_id))
    return [PartImageResponse.model_validate(i) for i in images]
