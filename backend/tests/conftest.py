"""Root conftest — shared test configuration and fixtures.

Invariants:
    - Every DB-backed test gets a fresh in-memory SQLite database
    - The client's controller is wired to the test DB through the real repository
    - db_manager is patched so the readiness probe sees the test engine
"""

import os

os.environ.setdefault("JWT_SECRET", "test-secret")
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///test.db")
os.environ.setdefault("LOG_FORMAT", "text")

import pytest  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402
from sqlalchemy.ext.asyncio import (  # noqa: E402
    AsyncSession, async_sessionmaker, create_async_engine,
)

import user_api.infrastructure.database as db_module  # noqa: E402
import user_api.models  # noqa: E402,F401
from user_api.api.routes.users import get_user_controller  # noqa: E402
from user_api.api.user_controller import build_user_controller  # noqa: E402
from user_api.core.auth_tokens import TokenIssuer  # noqa: E402
from user_api.db.base import Base  # noqa: E402
from user_api.infrastructure.database import DatabaseSessionManager  # noqa: E402
from user_api.infrastructure.user_repository import (  # noqa: E402
    SqlAlchemyUserRepository,
)
from user_api.main import app  # noqa: E402
from tests.fakes import InMemoryUserRepository  # noqa: E402


@pytest.fixture
def token_issuer():
    return TokenIssuer("test-secret")


@pytest.fixture
def fake_repository():
    return InMemoryUserRepository()


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def test_db_manager(test_engine):
    """DatabaseSessionManager bound to the in-memory test engine."""
    manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    manager.engine = test_engine
    manager._session_factory = async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False,
    )
    return manager


@pytest.fixture
def user_repository(test_db_manager):
    return SqlAlchemyUserRepository(test_db_manager)


@pytest.fixture
async def client(test_db_manager, user_repository, token_issuer):
    """FastAPI test client with the controller wired to the test DB."""
    controller = build_user_controller(user_repository, token_issuer)
    app.dependency_overrides[get_user_controller] = lambda: controller

    original_manager = db_module.db_manager
    db_module.db_manager = test_db_manager

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
    db_module.db_manager = original_manager
