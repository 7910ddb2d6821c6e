"""Repository for Book entity."""

from sqlmodel.ext.asyncio.session import AsyncSession

from bookstore.models.book import Book
from bookstore.repositories.base import BaseRepository


class BookRepository(BaseRepository[Book]):
    """Repository for Book entity operations (plain CRUD)."""

    def __init__(self, session: AsyncSession):
        super().__init__(session, Book)
