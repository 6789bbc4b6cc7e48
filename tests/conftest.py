import os
from datetime import datetime
from typing import AsyncGenerator, Callable

import bcrypt

from helpers import OPERATOR_PASSWORD

# Settings are read at import time, so the environment must be ready first.
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("JWT_SECRET_KEY", "test-secret-key")
os.environ["ACCESS_PASSWORD_HASH"] = bcrypt.hashpw(
    OPERATOR_PASSWORD.encode("utf-8"), bcrypt.gensalt()
).decode("utf-8")
os.environ["DELIVERY_DELAY_SECONDS"] = "0"

import pytest  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

from admission_tracker.core.models import Admission  # noqa: E402
from admission_tracker.db.session import Base, get_db  # noqa: E402
from admission_tracker.main import app  # noqa: E402


TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


@pytest.fixture()
async def db_session() -> AsyncGenerator[AsyncSession, None]:
    """Fresh in-memory database per test; overrides the FastAPI session dependency."""
    engine = create_async_engine(
        TEST_DATABASE_URL,
        echo=False,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    async_session = async_sessionmaker(
        bind=engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )

    async with async_session() as session:

        async def override_get_db() -> AsyncGenerator[AsyncSession, None]:
            yield session

        app.dependency_overrides[get_db] = override_get_db
        yield session

    app.dependency_overrides.pop(get_db, None)
    await engine.dispose()


@pytest.fixture()
async def client(db_session: AsyncSession) -> AsyncGenerator[AsyncClient, None]:
    """Async HTTP client bound to the FastAPI app."""
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac


@pytest.fixture()
async def auth_headers(client: AsyncClient) -> dict:
    response = await client.post("/api/v1/auth/login", json={"password": OPERATOR_PASSWORD})
    assert response.status_code == 200
    return {"Authorization": f"Bearer {response.json()['access_token']}"}


@pytest.fixture()
def add_admission(db_session: AsyncSession) -> Callable:
    """Insert an admission row directly, with a chosen created_at."""
    counter = {"n": 0}

    async def _add(
        created_at: datetime,
        consultant_name: str = "Alice Mensah",
        admission_status: str = "Pending",
        visa_status: str = "Documentation in progress",
        student_name: str = "",
    ) -> Admission:
        counter["n"] += 1
        n = counter["n"]
        row = Admission(
            student_name=student_name or f"Student {n}",
            program_of_interest="Computer Science",
            email_address=f"student{n}@example.com",
            home_address=f"{n} Main Street",
            school_name="Central High",
            consultant_name=consultant_name,
            admission_status=admission_status,
            visa_status=visa_status,
            created_at=created_at,
            updated_at=created_at,
        )
        db_session.add(row)
        await db_session.commit()
        await db_session.refresh(row)
        return row

    return _add
