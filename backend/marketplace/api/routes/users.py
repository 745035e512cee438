"""User Procedures — createUser (mutation), getUsers (query)."""

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from marketplace.api.routes import RPC_PREFIX
from marketplace.infrastructure.database import get_db
from marketplace.schemas.user import CreateUserInput, UserResponse
from marketplace.services.handle_users import UserHandlers

router = APIRouter(prefix=RPC_PREFIX, tags=["users"])


@router.post(
    "/createUser", response_model=UserResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_user(body: CreateUserInput, db: AsyncSession = Depends(get_db)):
    user = await UserHandlers(db).create_user(body)
    return UserResponse.model_validate(user)


@router.get("/getUsers", response_model=list[UserResponse])
async def get_users(db: AsyncSession = Depends(get_db)):
    users = await UserHandlers(db).get_users()
    return [UserResponse.model_validate(u) for u in users]
