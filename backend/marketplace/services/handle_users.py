"""User Handlers — registration and listing.

Invariants:
    - Passwords hashed via infrastructure/passwords.py before the row exists
    - Duplicate email raises UniquenessViolationError (pre-check AND IntegrityError at commit)
    - Role is set once here and never updated anywhere else
"""

import logging

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from marketplace.core.errors import UniquenessViolationError
from marketplace.infrastructure.passwords import hash_password
from marketplace.models.user import User
from marketplace.schemas.user import CreateUserInput

logger = logging.getLogger(__name__)


class UserHandlers:
    """createUser / getUsers."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def create_user(self, data: CreateUserInput) -> User:
        existing = await self.db.execute(
            select(User.id).where(User.email == data.email),
        )
        if existing.scalar_one_or_none() is not None:
            raise UniquenessViolationError("email", data.email)

        user = User(
            email=data.email,
            password_hash=hash_password(data.password),
            first_name=data.first_name,
            last_name=data.last_name,
            user_type=data.user_type,
            phone=data.phone,
            address=data.address,
            city=data.city,
            state=data.state,
            zip_code=data.zip_code,
        )
        self.db.add(user)
        try:
            await self.db.commit()
        except IntegrityError as e:
            await self.db.rollback()
            logger.warning(f"Duplicate email on commit: {data.email}")
            raise UniquenessViolationError("email", data.email) from e
        await self.db.refresh(user)
        logger.info(
            f"User created ({user.user_type.value})",
            extra={"entity": "User", "entity_id": user.id},
        )
        return user

    async def get_users(self) -> list[User]:
        result = await self.db.execute(select(User).order_by(User.id))
        return list(result.scalars().all())
