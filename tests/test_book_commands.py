"""Tests for Book commands."""

import pytest

from bookstore.commands.base import OutcomeStatus
from bookstore.commands.book_commands import (
    CreateBookCommand,
    DeleteBookCommand,
    GetBookCommand,
    ListBooksCommand,
    UpdateBookCommand,
    UpdateBookInput,
)
from bookstore.models.author import Author
from bookstore.models.book import Book
from bookstore.schemas.book import BookCreateDTO
from tests.mocks.repository_mocks import (
    create_mock_author_repository,
    create_mock_book_repository,
)


def make_book(id: int = 1) -> Book:
    return Book(
        id=id,
        title="Small Gods",
        year=1992,
        isbn="0-575-05223-6",
        summary="Om returns as a tortoise",
        price=9.99,
        author_id=3,
    )


def book_payload(**overrides) -> dict:
    payload = {
        "id": 1,
        "title": "Small Gods",
        "year": 1992,
        "isbn": "0-575-05223-6",
        "authorId": 3,
    }
    payload.update(overrides)
    return payload


class TestListAndGetBooks:
    """Tests for read commands."""

    @pytest.mark.asyncio
    async def test_list_books(self):
        """Test listing maps every book."""
        repo = create_mock_book_repository()
        repo.find_all.return_value = [make_book(1), make_book(2)]

        outcome = await ListBooksCommand(repo).execute()

        assert outcome.ok
        assert [b.id for b in outcome.value] == [1, 2]

    @pytest.mark.asyncio
    async def test_get_book(self):
        """Test getting an existing book."""
        repo = create_mock_book_repository()
        repo.find_by_id.return_value = make_book(4)

        outcome = await GetBookCommand(repo).execute(4)

        assert outcome.ok
        assert outcome.value.isbn == "0-575-05223-6"
        assert outcome.value.author_id == 3

    @pytest.mark.asyncio
    async def test_get_missing_book(self):
        """Test unknown ids produce NOT_FOUND."""
        repo = create_mock_book_repository()

        outcome = await GetBookCommand(repo).execute(4)

        assert outcome.status is OutcomeStatus.NOT_FOUND

    @pytest.mark.asyncio
    @pytest.mark.parametrize("book_id", [0, -3])
    async def test_get_non_positive_id_is_not_found(self, book_id):
        """Test ids below 1 are looked up and reported as NOT_FOUND."""
        repo = create_mock_book_repository()

        outcome = await GetBookCommand(repo).execute(book_id)

        assert outcome.status is OutcomeStatus.NOT_FOUND
        repo.find_by_id.assert_awaited_once_with(book_id)


class TestCreateBookCommand:
    """Tests for CreateBookCommand."""

    @pytest.mark.asyncio
    async def test_create_book_attaches_author(self):
        """Test the created book carries its author summary."""
        books = create_mock_book_repository()
        authors = create_mock_author_repository()
        authors.find_by_id.return_value = Author(
            id=3, firstname="Terry", lastname="Pratchett", books=[]
        )

        async def assign_id(book):
            book.id = 11
            return True

        books.create.side_effect = assign_id
        dto = BookCreateDTO(title="Small Gods", isbn="0-575-05223-6", author_id=3)

        outcome = await CreateBookCommand(books, authors).execute(dto)

        assert outcome.ok
        assert outcome.value.id == 11
        assert outcome.value.author.first_name == "Terry"

    @pytest.mark.asyncio
    async def test_create_book_unknown_author(self):
        """Test an unknown authorId is INVALID and nothing is written."""
        books = create_mock_book_repository()
        authors = create_mock_author_repository()
        dto = BookCreateDTO(title="Small Gods", isbn="0-575-05223-6", author_id=99)

        outcome = await CreateBookCommand(books, authors).execute(dto)

        assert outcome.status is OutcomeStatus.INVALID
        assert outcome.errors[0].field == "authorId"
        books.create.assert_not_called()


class TestUpdateBookCommand:
    """Tests for UpdateBookCommand."""

    @pytest.mark.asyncio
    async def test_update_book(self):
        """Test a valid update succeeds."""
        books = create_mock_book_repository()
        authors = create_mock_author_repository()
        books.exists.return_value = True
        authors.exists.return_value = True

        outcome = await UpdateBookCommand(books, authors).execute(
            UpdateBookInput(id=1, payload=book_payload(title="Pyramids"))
        )

        assert outcome.ok
        assert books.update.call_args.args[0].title == "Pyramids"

    @pytest.mark.asyncio
    async def test_update_id_mismatch(self):
        """Test mismatched ids are INVALID before any lookup."""
        books = create_mock_book_repository()
        authors = create_mock_author_repository()

        outcome = await UpdateBookCommand(books, authors).execute(
            UpdateBookInput(id=2, payload=book_payload(id=1))
        )

        assert outcome.status is OutcomeStatus.INVALID
        books.exists.assert_not_called()

    @pytest.mark.asyncio
    async def test_update_missing_book(self):
        """Test unknown ids produce NOT_FOUND."""
        books = create_mock_book_repository()
        authors = create_mock_author_repository()

        outcome = await UpdateBookCommand(books, authors).execute(
            UpdateBookInput(id=1, payload=book_payload())
        )

        assert outcome.status is OutcomeStatus.NOT_FOUND

    @pytest.mark.asyncio
    async def test_update_invalid_year(self):
        """Test out of range fields are reported by wire name."""
        books = create_mock_book_repository()
        authors = create_mock_author_repository()
        books.exists.return_value = True

        outcome = await UpdateBookCommand(books, authors).execute(
            UpdateBookInput(id=1, payload=book_payload(year=10000))
        )

        assert outcome.status is OutcomeStatus.INVALID
        assert [e.field for e in outcome.errors] == ["year"]

    @pytest.mark.asyncio
    async def test_update_unknown_author(self):
        """Test re-assigning to an unknown author is INVALID."""
        books = create_mock_book_repository()
        authors = create_mock_author_repository()
        books.exists.return_value = True

        outcome = await UpdateBookCommand(books, authors).execute(
            UpdateBookInput(id=1, payload=book_payload(authorId=50))
        )

        assert outcome.status is OutcomeStatus.INVALID
        assert outcome.errors[0].field == "authorId"
        books.update.assert_not_called()


class TestDeleteBookCommand:
    """Tests for DeleteBookCommand."""

    @pytest.mark.asyncio
    async def test_delete_book(self):
        """Test deleting an existing book."""
        repo = create_mock_book_repository()
        book = make_book(1)
        repo.find_by_id.return_value = book

        outcome = await DeleteBookCommand(repo).execute(1)

        assert outcome.ok
        repo.delete.assert_called_once_with(book)

    @pytest.mark.asyncio
    async def test_delete_missing_book(self):
        """Test unknown ids produce NOT_FOUND."""
        repo = create_mock_book_repository()

        outcome = await DeleteBookCommand(repo).execute(1)

        assert outcome.status is OutcomeStatus.NOT_FOUND
        repo.delete.assert_not_called()
