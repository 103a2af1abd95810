"""Pytest configuration and fixtures for Logophile tests."""

from collections.abc import AsyncGenerator
from datetime import UTC, datetime

import pytest
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool

from logophile.core.database import Base
from logophile.modules.dictionary import DictionaryService, MappingCorpusSource
from logophile.modules.vocabulary.models import SavedWord  # noqa: F401

from .fixtures.sample_data import SAMPLE_CORPUS

TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


# ==================== Database Fixtures ====================


@pytest.fixture
async def engine() -> AsyncGenerator[AsyncEngine, None]:
    """Create a fresh in-memory database with all tables.

    StaticPool keeps a single connection so every session sees the same
    in-memory database.
    """
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


@pytest.fixture
def session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
        autocommit=False,
    )


@pytest.fixture
async def db_session(
    session_factory: async_sessionmaker[AsyncSession],
) -> AsyncGenerator[AsyncSession, None]:
    """Create a new database session for a test, rolled back afterwards."""
    async with session_factory() as session:
        yield session
        await session.rollback()


# ==================== Dictionary Fixtures ====================


@pytest.fixture
def dictionary_service() -> DictionaryService:
    """Dictionary service over the in-memory sample corpus."""
    return DictionaryService(MappingCorpusSource(SAMPLE_CORPUS))


@pytest.fixture
def now() -> datetime:
    """A fixed point in time for scheduling tests."""
    return datetime(2026, 3, 15, 12, 0, tzinfo=UTC)
