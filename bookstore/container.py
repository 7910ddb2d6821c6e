"""
Composition root.

The Container is built once when the application is created and holds
every long-lived collaborator. Request-scoped objects (sessions,
repositories, commands) are constructed from it by the FastAPI
dependencies in ``bookstore.dependencies``.

Example:
    ```python
    from bookstore import application
    from bookstore.container import build_container

    container = build_container()
    app = application(container)
    ```
"""

from dataclasses import dataclass

from sqlalchemy.ext.asyncio import AsyncEngine, async_sessionmaker
from sqlmodel.ext.asyncio.session import AsyncSession

from bookstore.managers.password_manager import PasswordManager, PasswordPolicy
from bookstore.managers.token_manager import TokenManager
from bookstore.settings import Settings, app_settings
from bookstore.storage.db import create_engine, create_session_factory


@dataclass
class Container:
    settings: Settings
    engine: AsyncEngine
    session_factory: async_sessionmaker[AsyncSession]
    passwords: PasswordManager
    password_policy: PasswordPolicy
    tokens: TokenManager


def build_container(
    settings: Settings | None = None, engine: AsyncEngine | None = None
) -> Container:
    """
    Build the application container.

    Args:
        settings: Settings to use, defaults to the module-level app_settings.
        engine: Pre-built engine, e.g. an in-memory SQLite engine in tests.
            A PostgreSQL engine is created from settings when omitted.

    Returns:
        Fully wired Container.
    """
    settings = settings or app_settings
    engine = engine or create_engine(settings)

    return Container(
        settings=settings,
        engine=engine,
        session_factory=create_session_factory(engine),
        passwords=PasswordManager(rounds=settings.BCRYPT_ROUNDS),
        password_policy=PasswordPolicy(),
        tokens=TokenManager(
            secret=settings.JWT_SECRET_KEY.get_secret_value(),
            issuer=settings.JWT_ISSUER,
            expire_hours=settings.JWT_EXPIRE_HOURS,
        ),
    )
