"""
Dependency injection configuration for FastAPI.

Long-lived collaborators live on the Container stored in
``app.state.container``; sessions and repositories are created per request
from it.

Example:
    ```python
    from fastapi import APIRouter
    from bookstore.dependencies import AuthorRepoDep

    router = APIRouter()

    @router.get("/authors")
    async def get_authors(repo: AuthorRepoDep) -> list[AuthorDTO]:
        ...
    ```
"""

from typing import Annotated, AsyncIterator

from fastapi import Depends, Request
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlmodel.ext.asyncio.session import AsyncSession

from bookstore.container import Container
from bookstore.dependencies.permissions import require_roles
from bookstore.logging import logger
from bookstore.repositories.author_repository import AuthorRepository
from bookstore.repositories.book_repository import BookRepository
from bookstore.repositories.user_repository import UserRepository

__all__ = [
    "AuthorRepoDep",
    "BookRepoDep",
    "ContainerDep",
    "SessionDep",
    "UserRepoDep",
    "require_roles",
]


# ============================================================================
# Container
# ============================================================================


def get_container(request: Request) -> Container:
    return request.app.state.container


ContainerDep = Annotated[Container, Depends(get_container)]


# ============================================================================
# Database Session Dependencies
# ============================================================================


async def get_session(container: ContainerDep) -> AsyncIterator[AsyncSession]:
    """
    Get a request-scoped session.

    The session is committed when the endpoint finishes without error and
    rolled back otherwise.

    Yields:
        AsyncSession: An asynchronous SQLAlchemy session.
    """
    async with container.session_factory() as session:
        try:
            yield session
            await session.commit()
        except IntegrityError as ex:
            await session.rollback()
            logger.error(f"Database integrity error: {ex}")
            raise
        except SQLAlchemyError as ex:
            await session.rollback()
            logger.error(f"Database error: {ex}")
            raise


SessionDep = Annotated[AsyncSession, Depends(get_session)]


# ============================================================================
# Repository Dependencies
# ============================================================================


def get_author_repository(session: SessionDep) -> AuthorRepository:
    return AuthorRepository(session)


def get_book_repository(session: SessionDep) -> BookRepository:
    return BookRepository(session)


def get_user_repository(session: SessionDep) -> UserRepository:
    return UserRepository(session)


AuthorRepoDep = Annotated[AuthorRepository, Depends(get_author_repository)]
BookRepoDep = Annotated[BookRepository, Depends(get_book_repository)]
UserRepoDep = Annotated[UserRepository, Depends(get_user_repository)]
