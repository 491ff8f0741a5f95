import asyncio
import os

# Settings are read at import time, so configure before importing the app
os.environ["ENVIRONMENT"] = "test"
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("BCRYPT_ROUNDS", "4")
os.environ.setdefault("CREDENTIAL_SECRET", "test-credential-secret")

import httpx
import pytest
from fastapi.testclient import TestClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker
from sqlalchemy.pool import NullPool

from tuition_api.client.api import TuitionAPIClient
from tuition_api.core.database import build_engine, get_db, init_models
from tuition_api.main import app


@pytest.fixture
def engine(tmp_path):
    """Fresh SQLite file per test; NullPool so each event loop opens its own connection"""
    return build_engine(f"sqlite+aiosqlite:///{tmp_path / 'tuition_test.db'}", poolclass=NullPool)


@pytest.fixture
def session_factory(engine):
    return async_sessionmaker(engine, expire_on_commit=False, class_=AsyncSession, autoflush=False)


@pytest.fixture
def override_db(session_factory):
    async def _get_db():
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = _get_db
    yield
    app.dependency_overrides.clear()


@pytest.fixture
def client(engine, override_db):
    asyncio.run(init_models(engine))
    return TestClient(app)


@pytest.fixture
async def api(engine, override_db):
    await init_models(engine)
    transport = httpx.ASGITransport(app=app)
    async with TuitionAPIClient(base_url="http://testserver", transport=transport) as api:
        yield api
