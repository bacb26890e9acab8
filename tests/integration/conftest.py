"""Fixtures for API and persistence tests backed by a temporary SQLite file."""

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from sqlalchemy.ext.asyncio import (
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from passgate.infrastructure.persistence.sqlalchemy.models import Base
from passgate_config import Settings
from tests.shared.fixtures.app import make_app, make_settings, sqlite_url


@pytest.fixture
def api_settings(tmp_path) -> Settings:
    return make_settings(tmp_path)


@pytest.fixture
def app(api_settings) -> FastAPI:
    return make_app(api_settings)


@pytest.fixture
def test_client(app):
    """Client whose context runs the lifespan, creating the schema."""
    with TestClient(app) as client:
        yield client


@pytest.fixture
async def db_session(tmp_path):
    engine = create_async_engine(sqlite_url(tmp_path / "store.db"))
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    session_maker = async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )
    async with session_maker() as session:
        yield session

    await engine.dispose()
