"""
Repository for Author entity with specialized query methods.

Example:
    ```python
    from bookstore.repositories.author_repository import AuthorRepository

    async with session_factory() as session:
        repo = AuthorRepository(session)
        authors = await repo.find_all()
        has_books = await repo.has_books(1)
    ```
"""

from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from bookstore.logging import logger
from bookstore.models.author import Author
from bookstore.models.book import Book
from bookstore.repositories.base import BaseRepository


class AuthorRepository(BaseRepository[Author]):
    """
    Repository for Author entity operations.

    Provides CRUD operations inherited from BaseRepository plus
    the dependent-books check used by the deletion policy.
    """

    def __init__(self, session: AsyncSession):
        """
        Initialize Author repository.

        Args:
            session: Database session for executing queries.
        """
        super().__init__(session, Author)

    async def has_books(self, author_id: int) -> bool:
        """
        Check whether any book references the author.

        Args:
            author_id: Primary key of the author.

        Returns:
            True if at least one book belongs to the author.
        """
        try:
            stmt = select(Book.id).where(Book.author_id == author_id).limit(1)
            result = await self.session.exec(stmt)
            return result.first() is not None
        except SQLAlchemyError as e:
            logger.error(f"Error checking books of author {author_id}: {e}")
            raise
