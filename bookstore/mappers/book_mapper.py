from bookstore.models.author import Author
from bookstore.models.book import Book
from bookstore.schemas.book import (
    AuthorSummaryDTO,
    BookCreateDTO,
    BookDTO,
    BookUpdateDTO,
)


def book_from_create(dto: BookCreateDTO, author: Author | None = None) -> Book:
    """
    Build a new, not yet persisted Book from a create payload.

    When the owning author is given it is attached to the relationship so
    the created book can be mapped back without another query.
    """
    book = Book(
        title=dto.title,
        year=dto.year,
        isbn=dto.isbn,
        summary=dto.summary,
        image=dto.image,
        price=dto.price,
        author_id=dto.author_id,
    )
    if author is not None:
        book.author = author
    return book


def book_from_update(dto: BookUpdateDTO) -> Book:
    """Build a detached Book carrying the full replacement state."""
    return Book(
        id=dto.id,
        title=dto.title,
        year=dto.year,
        isbn=dto.isbn,
        summary=dto.summary,
        image=dto.image,
        price=dto.price,
        author_id=dto.author_id,
    )


def book_to_dto(book: Book) -> BookDTO:
    """Map a persisted Book, including a summary of its author, to the read DTO."""
    author = None
    if book.author is not None:
        author = AuthorSummaryDTO(
            id=book.author.id,
            first_name=book.author.firstname,
            last_name=book.author.lastname,
        )

    return BookDTO(
        id=book.id,
        title=book.title,
        year=book.year,
        isbn=book.isbn,
        summary=book.summary,
        image=book.image,
        price=book.price,
        author_id=book.author_id,
        author=author,
    )
