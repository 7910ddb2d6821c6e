import asyncio

from sqlalchemy.exc import OperationalError
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    async_sessionmaker,
    create_async_engine,
)
from sqlmodel.ext.asyncio.session import AsyncSession

from bookstore.constants import DEFAULT_ROLES
from bookstore.exceptions import DatabaseError
from bookstore.logging import logger
from bookstore.settings import Settings


def create_engine(settings: Settings) -> AsyncEngine:
    """
    Create the application engine from settings.

    Args:
        settings: Application settings carrying the connection details.

    Returns:
        AsyncEngine bound to ``settings.DATABASE_URL``.
    """
    return create_async_engine(
        settings.DATABASE_URL,
        echo=False,
        pool_size=settings.DB_POOL_SIZE,
        max_overflow=settings.DB_MAX_OVERFLOW,
        pool_recycle=settings.DB_POOL_RECYCLE,
        pool_pre_ping=settings.DB_POOL_PRE_PING,
    )


def create_session_factory(
    engine: AsyncEngine,
) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(
        engine, expire_on_commit=False, class_=AsyncSession
    )


async def wait_and_init_db(
    engine: AsyncEngine,
    retry_interval: int = 2,
    max_retries: int = 5,
) -> None:
    """
    Wait until the database is available.

    Note: Database schema is managed by Alembic migrations.
    Run 'alembic upgrade head' after the database is ready.

    Args:
        engine: Engine to probe.
        retry_interval: Time in seconds between retries.
        max_retries: Maximum number of retries before giving up.

    Raises:
        DatabaseError: If no connection could be made.
    """
    for attempt in range(max_retries):
        try:
            # Test a lightweight connection to check if the DB is ready
            async with engine.connect() as conn:
                await conn.exec_driver_sql("SELECT 1")
            logger.info("Database is now ready.")
            return
        except OperationalError:
            logger.warning(
                f"Database not ready, retrying in {retry_interval} seconds... (Attempt {attempt + 1}/{max_retries})"
            )
            await asyncio.sleep(retry_interval)

    logger.error("Failed to connect to the database after multiple attempts.")
    raise DatabaseError("Database connection could not be established.")


async def seed_roles(
    session_factory: async_sessionmaker[AsyncSession],
) -> None:
    """Create the Administrator and Customer roles if they are missing."""
    from bookstore.repositories.user_repository import UserRepository

    async with session_factory() as session:
        await UserRepository(session).ensure_roles(DEFAULT_ROLES)
        await session.commit()
    logger.info(f"Roles available: {', '.join(DEFAULT_ROLES)}")
