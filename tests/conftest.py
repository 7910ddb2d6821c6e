"""
Pytest configuration and fixtures for testing.

This module provides shared fixtures for settings, databases, the
application container, HTTP clients and bearer tokens.
"""

import os

import pytest
import pytest_asyncio

# Set required environment variables for testing before importing app modules
os.environ.setdefault("DB_USER", "test-user")
os.environ.setdefault("DB_PASSWORD", "test-password")
os.environ.setdefault(
    "JWT_SECRET_KEY", "test-secret-key-that-is-long-enough-for-hs256"
)
os.environ.setdefault("BCRYPT_ROUNDS", "4")

from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy.ext.asyncio import create_async_engine  # noqa: E402
from sqlmodel import SQLModel, create_engine  # noqa: E402
from sqlmodel.pool import StaticPool  # noqa: E402

import bookstore.models  # noqa: E402,F401
from bookstore.constants import ADMINISTRATOR_ROLE, CUSTOMER_ROLE  # noqa: E402
from bookstore.container import build_container  # noqa: E402
from bookstore.models.user import Role, User  # noqa: E402
from bookstore.settings import Settings  # noqa: E402
from bookstore.storage.db import create_session_factory  # noqa: E402


@pytest.fixture
def test_settings():
    """
    Provides settings with a cheap bcrypt cost.

    Returns:
        Settings: Settings instance for tests
    """
    return Settings(BCRYPT_ROUNDS=4)


@pytest_asyncio.fixture
async def db_engine():
    """
    Provides an in-memory SQLite engine with every table created.

    Yields:
        AsyncEngine: Engine sharing a single connection (StaticPool)
    """
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest_asyncio.fixture
async def db_session(db_engine):
    """
    Provides a session bound to the in-memory SQLite engine.

    Yields:
        AsyncSession: Session for repository tests
    """
    async with create_session_factory(db_engine)() as session:
        yield session


@pytest.fixture
def container(tmp_path, test_settings):
    """
    Provides an application container backed by a SQLite file database.

    The schema is created with a synchronous engine so that the async
    engine is only ever used from the test client's event loop.

    Returns:
        Container: Container for building the application
    """
    db_path = tmp_path / "bookstore.db"

    sync_engine = create_engine(f"sqlite:///{db_path}")
    SQLModel.metadata.create_all(sync_engine)
    sync_engine.dispose()

    engine = create_async_engine(f"sqlite+aiosqlite:///{db_path}")
    return build_container(test_settings, engine)


@pytest.fixture
def client(container):
    """
    Provides a TestClient for the fully wired application.

    Entering the client runs the startup (database wait, role seeding).

    Yields:
        TestClient: FastAPI test client instance
    """
    from bookstore import application

    with TestClient(application(container)) as test_client:
        yield test_client


def create_user_fixture(
    id: int = 1,
    email: str = "user@example.com",
    roles: list[str] | None = None,
    password_hash: str = "not-a-real-hash",
) -> User:
    """
    Factory function to create transient User instances for testing.

    Args:
        id: User ID
        email: Email address
        roles: Role names granted to the user
        password_hash: Stored password hash

    Returns:
        User: User instance with Role objects attached
    """
    return User(
        id=id,
        email=email,
        password_hash=password_hash,
        roles=[Role(name=name) for name in (roles or [])],
    )


@pytest.fixture
def admin_headers(container):
    """
    Provides Authorization headers carrying an Administrator token.

    Returns:
        dict: Headers dictionary with Authorization header
    """
    user = create_user_fixture(1, "admin@example.com", [ADMINISTRATOR_ROLE])
    return {"Authorization": f"Bearer {container.tokens.issue(user)}"}


@pytest.fixture
def customer_headers(container):
    """
    Provides Authorization headers carrying a Customer token.

    Returns:
        dict: Headers dictionary with Authorization header
    """
    user = create_user_fixture(2, "customer@example.com", [CUSTOMER_ROLE])
    return {"Authorization": f"Bearer {container.tokens.issue(user)}"}
