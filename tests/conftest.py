"""Pytest configuration and fixtures."""

import sys
from collections.abc import AsyncGenerator, Awaitable, Callable
from pathlib import Path
from typing import Any

import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient
from sqlalchemy import event
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.ext.compiler import compiles
from sqlalchemy.pool import StaticPool

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from infrastructure.auth.jwt_provider import JWTAuthProvider
from infrastructure.auth.password import BcryptPasswordHasher
from infrastructure.database.models import Base


# Compile JSONB as JSON for SQLite (used in tests)
@compiles(JSONB, "sqlite")
def _compile_jsonb_sqlite(type_: Any, compiler: Any, **kw: Any) -> str:
    return "JSON"


# Test database URL (SQLite in memory)
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"

TEST_SECRET_KEY = "test-secret-key"

RegisterFn = Callable[..., Awaitable[dict[str, str]]]


@pytest.fixture
async def engine() -> AsyncGenerator[AsyncEngine, None]:
    """Create a fresh in-memory database for each test."""
    engine = create_async_engine(
        TEST_DATABASE_URL,
        echo=False,
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )

    # Let SQLAlchemy drive BEGIN itself so SAVEPOINTs nest properly
    @event.listens_for(engine.sync_engine, "connect")
    def _do_connect(dbapi_connection: Any, connection_record: Any) -> None:
        dbapi_connection.isolation_level = None

    @event.listens_for(engine.sync_engine, "begin")
    def _do_begin(conn: Any) -> None:
        conn.exec_driver_sql("BEGIN")

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Create session factory."""
    return async_sessionmaker(
        bind=engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )


@pytest.fixture
async def db_session(
    session_factory: async_sessionmaker[AsyncSession],
) -> AsyncGenerator[AsyncSession, None]:
    """Create a database session for repository-level tests."""
    async with session_factory() as session:
        yield session
        await session.rollback()


@pytest.fixture
def token_service() -> JWTAuthProvider:
    """Create token service for testing."""
    return JWTAuthProvider(
        secret_key=TEST_SECRET_KEY,
        algorithm="HS256",
        expire_seconds=3600,
    )


@pytest.fixture
def password_hasher() -> BcryptPasswordHasher:
    """Cheap bcrypt cost so tests stay fast."""
    return BcryptPasswordHasher(rounds=4)


@pytest.fixture
def app(
    session_factory: async_sessionmaker[AsyncSession],
    token_service: JWTAuthProvider,
    password_hasher: BcryptPasswordHasher,
) -> FastAPI:
    """
    Create the application wired to the test database.

    Services, the token service and the health-check session are all
    overridden so nothing touches the configured production database.
    """
    from api.dependencies.auth import get_token_service
    from api.dependencies.services import (
        get_auth_service,
        get_post_service,
        get_profile_service,
    )
    from domain.services.auth_service import AuthService
    from domain.services.post_service import PostService
    from domain.services.profile_service import ProfileService
    from infrastructure.database.session import get_async_session
    from infrastructure.database.sqlalchemy_uow import SQLAlchemyUnitOfWork
    from infrastructure.gravatar import gravatar_url
    from main import create_app

    app = create_app()

    def test_uow_factory() -> SQLAlchemyUnitOfWork:
        return SQLAlchemyUnitOfWork(session_factory)

    async def override_get_async_session() -> AsyncGenerator[AsyncSession, None]:
        async with session_factory() as session:
            yield session

    auth_service = AuthService(
        test_uow_factory,
        token_service=token_service,
        password_hasher=password_hasher,
        avatar_for=gravatar_url,
    )
    post_service = PostService(test_uow_factory)
    profile_service = ProfileService(test_uow_factory)

    app.dependency_overrides[get_token_service] = lambda: token_service
    app.dependency_overrides[get_auth_service] = lambda: auth_service
    app.dependency_overrides[get_post_service] = lambda: post_service
    app.dependency_overrides[get_profile_service] = lambda: profile_service
    app.dependency_overrides[get_async_session] = override_get_async_session

    return app


@pytest.fixture
async def client(app: FastAPI) -> AsyncGenerator[AsyncClient, None]:
    """Create async test client."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c

    app.dependency_overrides.clear()


@pytest.fixture
def register(client: AsyncClient) -> RegisterFn:
    """Register a user through the API and return auth headers for them."""

    async def _register(
        name: str = "Jane Doe",
        email: str = "jane@example.com",
        password: str = "secret123",
    ) -> dict[str, str]:
        response = await client.post(
            "/api/users",
            json={"name": name, "email": email, "password": password},
        )
        assert response.status_code == 200, response.text
        return {"x-auth-token": response.json()["token"]}

    return _register


@pytest.fixture
async def auth_headers(register: RegisterFn) -> dict[str, str]:
    """Headers for a freshly registered default user."""
    return await register()
