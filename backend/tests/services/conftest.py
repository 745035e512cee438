"""Service test fixtures — async DB, FastAPI test client, and seeded entities.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - get_db dependency overridden to use the test DB
    - db_manager patched so the readiness probe sees the test engine
    - Seed users carry a pre-computed hash (bcrypt per fixture would dominate runtime)

Design Decisions:
    - SQLite in-memory: fast, no external dependency, sufficient for handler tests
      (PostgreSQL-native enums and NUMERIC are exercised by the Alembic migration instead)
    - StaticPool: one shared connection so the in-memory DB outlives each session
"""

from decimal import Decimal

import pytest
from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)
from sqlalchemy.pool import StaticPool
from httpx import ASGITransport, AsyncClient

from marketplace.core.domain_types import PartCategory, PartCondition, UserRole
from marketplace.db.base import Base
from marketplace.infrastructure.database import get_db, DatabaseSessionManager
import marketplace.infrastructure.database as db_module
import marketplace.models  # noqa: F401
from marketplace.models.auto_part import AutoPart
from marketplace.models.financing_option import FinancingOption
from marketplace.models.user import User
from marketplace.main import app

FAKE_HASH = "$2b$12$KIXQJ5fJ1lJ0pZ9yVb8bUuZx8Q3cZ7y0uQ6e9o9i1n2m3l4k5j6h7"


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        echo=False,
        poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def test_session_factory(test_engine):
    return async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False,
    )


@pytest.fixture
async def test_db(test_session_factory):
    async with test_session_factory() as session:
        yield session


@pytest.fixture
async def client(test_engine, test_session_factory):
    """FastAPI test client with DB dependency overridden."""
    async def override_get_db():
        async with test_session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db

    original_manager = db_module.db_manager
    fake_manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    fake_manager.engine = test_engine
    fake_manager._session_factory = test_session_factory
    db_module.db_manager = fake_manager

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
    db_module.db_manager = original_manager


async def _add_user(db, email: str, role: UserRole, first_name: str) -> User:
    user = User(
        email=email, password_hash=FAKE_HASH,
        first_name=first_name, last_name="Tester", user_type=role,
    )
    db.add(user)
    await db.commit()
    await db.refresh(user)
    return user


@pytest.fixture
async def seller(test_db):
    return await _add_user(test_db, "seller@example.com", UserRole.SELLER, "Sam")


@pytest.fixture
async def other_seller(test_db):
    return await _add_user(test_db, "seller2@example.com", UserRole.SELLER, "Sue")


@pytest.fixture
async def buyer(test_db):
    return await _add_user(test_db, "buyer@example.com", UserRole.BUYER, "Bea")


@pytest.fixture
async def provider(test_db):
    return await _add_user(
        test_db, "lender@example.com", UserRole.FINANCING_PROVIDER, "Lee",
    )


@pytest.fixture
async def part(test_db, seller):
    row = AutoPart(
        seller_id=seller.id,
        title="Brake Pad Set",
        description="Ceramic front brake pads",
        category=PartCategory.BRAKES,
        condition=PartCondition.NEW,
        price=Decimal("89.99"),
        make="Toyota",
        model="Camry",
        year=2019,
        part_number="BP-1234",
    )
    test_db.add(row)
    await test_db.commit()
    await test_db.refresh(row)
    return row


@pytest.fixture
async def option(test_db, provider):
    row = FinancingOption(
        provider_id=provider.id,
        name="Parts Loan 24",
        description="Two-year financing for parts",
        min_amount=Decimal("250.50"),
        max_amount=Decimal("5000.00"),
        interest_rate=Decimal("6.25"),
        term_months=24,
    )
    test_db.add(row)
    await test_db.commit()
    await test_db.refresh(row)
    return row
