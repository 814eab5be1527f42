"""
Shared test fixtures.

Uses an in-memory SQLite database (via aiosqlite) so tests run without
Docker / PostgreSQL.  The production ``SchoolModel`` has no
PostgreSQL-specific columns, so the real metadata is created as-is.
"""

from typing import AsyncGenerator

import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool

from src.api.app import create_app
from src.api.dependencies import get_db
from src.infrastructure.database import Base
from src.infrastructure.models import SchoolModel  # noqa: F401

TEST_DB_URL = "sqlite+aiosqlite:///:memory:"


def _make_engine() -> AsyncEngine:
    # StaticPool keeps one connection so every session sees the same DB
    return create_async_engine(TEST_DB_URL, echo=False, poolclass=StaticPool)


def _client_for(session_factory: async_sessionmaker) -> AsyncClient:
    async def _test_db():
        async with session_factory() as session:
            try:
                yield session
            except Exception:
                await session.rollback()
                raise

    app = create_app()
    app.dependency_overrides[get_db] = _test_db
    return AsyncClient(transport=ASGITransport(app=app), base_url="http://test")


# ── Fixtures ──────────────────────────────────────────────────────────


@pytest_asyncio.fixture
async def session_factory() -> AsyncGenerator[async_sessionmaker, None]:
    """Create tables on a fresh engine, yield a session factory, then drop."""
    engine = _make_engine()
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest_asyncio.fixture
async def db_session(session_factory) -> AsyncGenerator[AsyncSession, None]:
    async with session_factory() as session:
        yield session


@pytest_asyncio.fixture
async def client(session_factory) -> AsyncGenerator[AsyncClient, None]:
    """AsyncClient whose requests hit the SQLite-backed app."""
    async with _client_for(session_factory) as ac:
        yield ac


@pytest_asyncio.fixture
async def broken_client() -> AsyncGenerator[AsyncClient, None]:
    """AsyncClient backed by a database that has no ``schools_table``."""
    engine = _make_engine()
    factory = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    async with _client_for(factory) as ac:
        yield ac
    await engine.dispose()
