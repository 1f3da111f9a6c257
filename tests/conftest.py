"""Pytest configuration and fixtures."""

import itertools

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from contactbook.core.auth import create_access_token
from contactbook.core.password import hash_password
from contactbook.domain.attributes import ContactAttributes
from contactbook.domain.services.contact_service import ContactService
from contactbook.persistence.database import Base, get_db
from contactbook.persistence.models import *  # noqa: F401, F403
from contactbook.persistence.repositories.user_repository import UserRepository

ADMIN_PASSWORD = "correct-horse-battery"


@pytest.fixture
async def db_session():
    """Create a test database session."""
    # In-memory SQLite shared by every connection of this engine
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        echo=False,
        poolclass=StaticPool,
    )

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    async_session = async_sessionmaker(
        engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
    )

    async with async_session() as session:
        yield session

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)

    await engine.dispose()


@pytest.fixture
async def client(db_session):
    """Create a test API client bound to the test session."""
    from contactbook.main import app

    app.dependency_overrides[get_db] = lambda: db_session

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as test_client:
        yield test_client

    app.dependency_overrides.clear()


@pytest.fixture
def contact_service(db_session):
    return ContactService(db_session)


@pytest.fixture
def admin_password():
    return ADMIN_PASSWORD


@pytest.fixture
async def admin_user(db_session):
    """Create an admin user."""
    return await UserRepository(db_session).create(
        email="admin@example.com",
        hashed_password=hash_password(ADMIN_PASSWORD),
        role="admin",
    )


@pytest.fixture
def auth_headers(admin_user):
    token = create_access_token({"sub": str(admin_user.id)})
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def contact_factory(contact_service):
    """Persist contacts with three phones and a unique email unless overridden."""
    sequence = itertools.count(1)

    async def create(**overrides):
        n = next(sequence)
        data = {
            "firstname": "Jane",
            "lastname": "Doe",
            "email": f"contact{n}@example.com",
            "phones": [
                {"phone": f"555-01{n:02d}", "phone_type": phone_type}
                for phone_type in ("home", "office", "mobile")
            ],
        }
        data.update(overrides)
        result = await contact_service.create(ContactAttributes(**data))
        assert result.ok, result.errors.to_dict()
        return result.contact

    return create
