"""
Pytest configuration and fixtures for the article CMS tests
"""

import os
import sys
from collections.abc import AsyncGenerator

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import NullPool

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))  # noqa: PTH100, PTH118, PTH119, PTH120

from article_cms.database import Base, get_db, get_session_factory  # noqa: E402
import article_cms.models  # noqa: E402, F401


@pytest.fixture(scope="function")
async def test_engine(tmp_path):
    """
    Fresh SQLite file database per test.

    A file (not :memory:) is used so that the independent sessions opened
    by concurrent listing queries all see the same tables and rows. NullPool
    keeps connections from leaking between the test loop and TestClient.
    """
    engine = create_async_engine(
        f"sqlite+aiosqlite:///{tmp_path / 'articles_test.db'}",
        echo=False,
        poolclass=NullPool,
    )

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture(scope="function")
def session_factory(test_engine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(test_engine, class_=AsyncSession, expire_on_commit=False)


@pytest.fixture(scope="function")
async def test_db(session_factory) -> AsyncGenerator[AsyncSession, None]:
    """Provide a database session for tests that need it."""
    async with session_factory() as session:
        yield session


@pytest.fixture
def client(session_factory):
    """Test client with the app's database dependencies pointed at the test database"""
    from main import app

    async def override_get_db():
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_session_factory] = lambda: session_factory

    with TestClient(app, raise_server_exceptions=False) as test_client:
        yield test_client

    app.dependency_overrides.clear()
