"""API test fixtures — async DB + FastAPI test client.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - get_db dependency overridden to use a session on the test engine
    - db_manager patched so /health/ready sees the test engine

Design Decisions:
    - SQLite in-memory with StaticPool: every session shares the one connection,
      so data written through the API is visible to seed/inspection sessions
    - Rows are seeded through the API where possible; create_usuario helper for the rest
"""

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import (
    AsyncSession, async_sessionmaker, create_async_engine,
)
from sqlalchemy.pool import StaticPool

import crud_usuarios.infrastructure.database as db_module
from crud_usuarios.db.base import Base
from crud_usuarios.infrastructure.database import DatabaseSessionManager, get_db
from crud_usuarios.main import app
from crud_usuarios.models.usuario import Usuario


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False, poolclass=StaticPool,
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
async def client(test_engine, test_session_factory):
    """FastAPI test client with DB dependency overridden."""
    fake_manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    fake_manager.engine = test_engine
    fake_manager._session_factory = test_session_factory

    async def override_get_db():
        async with fake_manager.session() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    original_manager = db_module.db_manager
    db_module.db_manager = fake_manager

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
    db_module.db_manager = original_manager


@pytest.fixture
def create_usuario(client):
    """POST a user and return the created row."""
    async def _create(**fields):
        payload = {"nombre": "Juan Pérez", "email": "juan@email.com"}
        payload.update(fields)
        res = await client.post("/usuarios", json=payload)
        assert res.status_code == 201, res.text
        return res.json()["data"]
    return _create


@pytest.fixture
def fetch_row(test_session_factory):
    """Read a row straight from the database, bypassing the API."""
    async def _fetch(usuario_id: int) -> Usuario | None:
        async with test_session_factory() as session:
            return await session.get(Usuario, usuario_id)
    return _fetch
