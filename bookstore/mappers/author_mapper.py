from bookstore.models.author import Author
from bookstore.schemas.author import (
    AuthorCreateDTO,
    AuthorDTO,
    AuthorUpdateDTO,
    BookSummaryDTO,
)


def author_from_create(dto: AuthorCreateDTO) -> Author:
    """Build a new, not yet persisted Author from a create payload."""
    return Author(
        firstname=dto.first_name,
        lastname=dto.last_name,
        bio=dto.bio,
        books=[],
    )


def author_from_update(dto: AuthorUpdateDTO) -> Author:
    """Build a detached Author carrying the full replacement state."""
    return Author(
        id=dto.id,
        firstname=dto.first_name,
        lastname=dto.last_name,
        bio=dto.bio,
    )


def author_to_dto(author: Author) -> AuthorDTO:
    """Map a persisted Author, including its books, to the read DTO."""
    return AuthorDTO(
        id=author.id,
        first_name=author.firstname,
        last_name=author.lastname,
        bio=author.bio,
        books=[
            BookSummaryDTO(
                id=book.id,
                title=book.title,
                year=book.year,
                isbn=book.isbn,
            )
            for book in author.books
        ],
    )
