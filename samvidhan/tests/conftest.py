"""
Shared fixtures: an in-memory database seeded with the sample content,
fake provider clients, and an httpx client bound to the app.
"""
from typing import AsyncGenerator

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from samvidhan.database import get_db
from samvidhan.main import app
from samvidhan.orm.base import Base
from samvidhan.rate_limit import limiter
from samvidhan.seed.seed_data import seed_database
from samvidhan.services.llm_client import get_completion_client
from samvidhan.services.tts_client import get_speech_client
from samvidhan.tests.fakes import FakeCompletionClient, FakeSpeechClient

TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


@pytest_asyncio.fixture
async def engine():
    engine = create_async_engine(
        TEST_DATABASE_URL,
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
        echo=False,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest_asyncio.fixture
async def session_factory(engine):
    return async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False, autoflush=False)


@pytest_asyncio.fixture
async def seeded(session_factory) -> dict:
    """Load the sample content once per test; returns the seed counts."""
    async with session_factory() as session:
        return await seed_database(session)


@pytest_asyncio.fixture
async def db_session(session_factory, seeded) -> AsyncGenerator[AsyncSession, None]:
    async with session_factory() as session:
        yield session


@pytest.fixture
def completion_client() -> FakeCompletionClient:
    return FakeCompletionClient()


@pytest.fixture
def speech_client() -> FakeSpeechClient:
    return FakeSpeechClient()


@pytest_asyncio.fixture
async def client(session_factory, seeded, completion_client, speech_client) -> AsyncGenerator[AsyncClient, None]:
    """App client over the seeded database; every request gets its own session."""
    async def override_get_db():
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_completion_client] = lambda: completion_client
    app.dependency_overrides[get_speech_client] = lambda: speech_client
    limiter.enabled = False

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        yield client

    app.dependency_overrides.clear()
