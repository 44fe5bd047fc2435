import os

os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///./test.db"
os.environ.setdefault("ENVIRONMENT", "test")

import pytest
import pytest_asyncio
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.ext.asyncio import create_async_engine, AsyncSession, async_sessionmaker
from sqlalchemy.pool import NullPool

from eticket.database.models import Base
from eticket.database.session import get_db, enable_sqlite_foreign_keys
from eticket.main import app

DATABASE_URL = os.environ["DATABASE_URL"]

engine = create_async_engine(DATABASE_URL, echo=False, poolclass=NullPool)
enable_sqlite_foreign_keys(engine)
TestingSessionLocal = async_sessionmaker(
    bind=engine,
    class_=AsyncSession,
    expire_on_commit=False,
    autoflush=False,
)

# same file, driven synchronously so schema resets stay outside the test event loop
schema_engine = create_engine(DATABASE_URL.replace("+aiosqlite", ""), poolclass=NullPool)


async def override_get_db():
    async with TestingSessionLocal() as session:
        yield session


@pytest.fixture(autouse=True)
def prepare_test_db():
    Base.metadata.drop_all(schema_engine)
    Base.metadata.create_all(schema_engine)
    app.dependency_overrides = {get_db: override_get_db}
    yield
    app.dependency_overrides = {get_db: override_get_db}


@pytest.fixture()
def client():
    with TestClient(app) as c:
        yield c


@pytest.fixture()
def session_factory():
    return TestingSessionLocal


@pytest_asyncio.fixture()
async def db_session():
    async with TestingSessionLocal() as session:
        yield session
