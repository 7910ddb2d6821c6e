"""Tests for UserRepository and BookRepository against SQLite."""

from decimal import Decimal

import pytest

from bookstore.constants import ADMINISTRATOR_ROLE, CUSTOMER_ROLE, DEFAULT_ROLES
from bookstore.models.author import Author
from bookstore.models.book import Book
from bookstore.models.user import User
from bookstore.repositories.author_repository import AuthorRepository
from bookstore.repositories.book_repository import BookRepository
from bookstore.repositories.user_repository import UserRepository
from bookstore.storage.db import create_session_factory


class TestUserRepository:
    """Tests for user lookups and role management."""

    @pytest.mark.asyncio
    async def test_ensure_roles_is_idempotent(self, db_session):
        """Test roles are created once and then reused."""
        repo = UserRepository(db_session)

        first = await repo.ensure_roles(DEFAULT_ROLES)
        second = await repo.ensure_roles(DEFAULT_ROLES)

        assert [r.name for r in first] == [ADMINISTRATOR_ROLE, CUSTOMER_ROLE]
        assert [r.id for r in first] == [r.id for r in second]

    @pytest.mark.asyncio
    async def test_find_role_missing(self, db_session):
        """Test unknown role names return None."""
        repo = UserRepository(db_session)

        assert await repo.find_role("Librarian") is None

    @pytest.mark.asyncio
    async def test_find_by_email_is_case_insensitive(self, db_session):
        """Test lookups normalise the email address."""
        repo = UserRepository(db_session)
        roles = await repo.ensure_roles([CUSTOMER_ROLE])
        user = User(email="reader@example.com", password_hash="x", roles=roles)
        assert await repo.create(user) is True

        found = await repo.find_by_email("  Reader@Example.COM ")

        assert found is not None
        assert found.id == user.id
        assert found.role_names == [CUSTOMER_ROLE]

    @pytest.mark.asyncio
    async def test_find_by_email_missing(self, db_session):
        """Test unknown emails return None."""
        repo = UserRepository(db_session)

        assert await repo.find_by_email("ghost@example.com") is None


class TestBookRepository:
    """Tests for book CRUD through the shared base repository."""

    @pytest.mark.asyncio
    async def test_book_lifecycle(self, db_session):
        """Test create, update and delete of a book."""
        author = Author(firstname="Terry", lastname="Pratchett", books=[])
        await AuthorRepository(db_session).create(author)
        repo = BookRepository(db_session)

        book = Book(title="Mort", isbn="0-575-04171-4", author_id=author.id)
        book.author = author
        assert await repo.create(book) is True

        assert await repo.update(
            Book(
                id=book.id,
                title="Mort (reissue)",
                isbn="0-575-04171-4",
                year=1987,
                author_id=author.id,
            )
        )
        found = await repo.find_by_id(book.id)
        assert found.title == "Mort (reissue)"
        assert found.year == 1987

        assert await repo.delete(found) is True
        assert await repo.find_all() == []

    @pytest.mark.asyncio
    async def test_price_is_stored_exactly(self, db_engine):
        """Test a price read back in a new session equals the stored decimal."""
        session_factory = create_session_factory(db_engine)

        async with session_factory() as session:
            author = Author(firstname="Terry", lastname="Pratchett", books=[])
            await AuthorRepository(session).create(author)
            book = Book(
                title="Mort",
                isbn="0-575-04171-4",
                price=Decimal("19.99"),
                author_id=author.id,
            )
            await BookRepository(session).create(book)
            await session.commit()
            book_id = book.id

        async with session_factory() as session:
            found = await BookRepository(session).find_by_id(book_id)

        assert found.price == Decimal("19.99")
        assert str(found.price) == "19.99"
