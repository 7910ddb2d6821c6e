"""
Commands for Book business operations.

Books always belong to an author, so create and update additionally
check that the referenced author exists and report a field error on
``authorId`` when it does not.
"""

from typing import Any

from pydantic import BaseModel, Field

from bookstore.commands.base import BaseCommand, Outcome
from bookstore.commands.validation import (
    identifier_errors,
    parse_payload,
    update_identifier_errors,
)
from bookstore.logging import logger, set_log_context
from bookstore.mappers.book_mapper import (
    book_from_create,
    book_from_update,
    book_to_dto,
)
from bookstore.models.author import Author
from bookstore.models.book import Book
from bookstore.protocols import Repository
from bookstore.schemas.book import BookCreateDTO, BookDTO, BookUpdateDTO
from bookstore.schemas.errors import FieldError


class UpdateBookInput(BaseModel):  # type: ignore[misc]
    """Input for updating a book: the path id and the raw request body."""

    id: int = Field(..., description="Book ID taken from the path")
    payload: dict[str, Any] | None = Field(
        default=None, description="Unvalidated request body"
    )


def _unknown_author(author_id: int) -> list[FieldError]:
    return [
        FieldError(
            field="authorId", message=f"Author with ID {author_id} does not exist"
        )
    ]


class ListBooksCommand(BaseCommand[None, list[BookDTO]]):
    location = "Books - GetBooks"

    def __init__(self, repository: Repository[Book]):
        self.repository = repository

    async def execute(self, input_data: None = None) -> Outcome[list[BookDTO]]:
        set_log_context(location=self.location)
        logger.info(f"{self.location}: Attempted call")

        books = await self.repository.find_all()

        logger.info(f"{self.location}: Successful")
        return Outcome.success([book_to_dto(book) for book in books])


class GetBookCommand(BaseCommand[int, BookDTO]):
    location = "Books - GetBook"

    def __init__(self, repository: Repository[Book]):
        self.repository = repository

    async def execute(self, book_id: int) -> Outcome[BookDTO]:
        set_log_context(location=self.location)
        logger.info(f"{self.location}: Attempted call for id: {book_id}")

        book = await self.repository.find_by_id(book_id)
        if book is None:
            logger.warning(
                f"{self.location}: Failed to retrieve record with id: {book_id}"
            )
            return Outcome.not_found(f"Book with ID {book_id} not found")

        logger.info(f"{self.location}: Successfully got record by id: {book_id}")
        return Outcome.success(book_to_dto(book))


class CreateBookCommand(BaseCommand[BookCreateDTO, BookDTO]):
    """
    Command to create a new book.

    Args:
        repository: Book repository used for the insert.
        authors: Author repository used to check the owning author.
    """

    location = "Books - Create"

    def __init__(self, repository: Repository[Book], authors: Repository[Author]):
        self.repository = repository
        self.authors = authors

    async def execute(self, input_data: BookCreateDTO) -> Outcome[BookDTO]:
        set_log_context(location=self.location)
        logger.info(f"{self.location}: Create attempted")

        author = await self.authors.find_by_id(input_data.author_id)
        if author is None:
            logger.warning(
                f"{self.location}: Unknown author id: {input_data.author_id}"
            )
            return Outcome.invalid(
                "Invalid book data", _unknown_author(input_data.author_id)
            )

        book = book_from_create(input_data, author)
        if not await self.repository.create(book):
            logger.error(f"{self.location}: Creation failed")
            return Outcome.failed("Creation failed")

        logger.info(f"{self.location}: Creation was successful, id: {book.id}")
        return Outcome.success(book_to_dto(book))


class UpdateBookCommand(BaseCommand[UpdateBookInput, None]):
    """
    Command to replace an existing book.

    Checks run in order: path/body ids, existence, payload fields and
    finally the referenced author.
    """

    location = "Books - Update"

    def __init__(self, repository: Repository[Book], authors: Repository[Author]):
        self.repository = repository
        self.authors = authors

    async def execute(self, input_data: UpdateBookInput) -> Outcome[None]:
        book_id = input_data.id
        set_log_context(location=self.location)
        logger.info(f"{self.location}: Update attempted on record with id: {book_id}")

        if errors := update_identifier_errors(book_id, input_data.payload):
            logger.warning(f"{self.location}: Update with bad data - id: {book_id}")
            return Outcome.invalid("Invalid book id", errors)

        if not await self.repository.exists(book_id):
            logger.warning(
                f"{self.location}: Failed to retrieve record with id: {book_id}"
            )
            return Outcome.not_found(f"Book with ID {book_id} not found")

        dto, errors = parse_payload(BookUpdateDTO, input_data.payload)
        if errors:
            logger.warning(f"{self.location}: Data was incomplete")
            return Outcome.invalid("Invalid book data", errors)

        if not await self.authors.exists(dto.author_id):
            logger.warning(f"{self.location}: Unknown author id: {dto.author_id}")
            return Outcome.invalid("Invalid book data", _unknown_author(dto.author_id))

        if not await self.repository.update(book_from_update(dto)):
            logger.error(f"{self.location}: Update failed for id: {book_id}")
            return Outcome.failed("Update failed")

        logger.info(f"{self.location}: Record with id: {book_id} successfully updated")
        return Outcome.success()


class DeleteBookCommand(BaseCommand[int, None]):
    location = "Books - Delete"

    def __init__(self, repository: Repository[Book]):
        self.repository = repository

    async def execute(self, book_id: int) -> Outcome[None]:
        set_log_context(location=self.location)
        logger.info(f"{self.location}: Delete attempted on record with id: {book_id}")

        if errors := identifier_errors(book_id):
            logger.warning(
                f"{self.location}: Delete failed with bad data - id: {book_id}"
            )
            return Outcome.invalid("Invalid book id", errors)

        book = await self.repository.find_by_id(book_id)
        if book is None:
            logger.warning(
                f"{self.location}: Delete failed to retrieve record with id: {book_id}"
            )
            return Outcome.not_found(f"Book with ID {book_id} not found")

        if not await self.repository.delete(book):
            logger.error(f"{self.location}: Delete failed for record with id: {book_id}")
            return Outcome.failed("Delete failed")

        logger.info(f"{self.location}: Record with id: {book_id} successfully deleted")
        return Outcome.success()
