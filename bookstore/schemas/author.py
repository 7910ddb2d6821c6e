from pydantic import Field

from bookstore.constants import AUTHOR_BIO_MAX_LENGTH, AUTHOR_NAME_MAX_LENGTH
from bookstore.schemas.base import CamelModel


class AuthorCreateDTO(CamelModel):
    """Payload accepted when creating an author."""

    first_name: str = Field(
        ..., min_length=1, max_length=AUTHOR_NAME_MAX_LENGTH
    )
    last_name: str = Field(
        ..., min_length=1, max_length=AUTHOR_NAME_MAX_LENGTH
    )
    bio: str | None = Field(default=None, max_length=AUTHOR_BIO_MAX_LENGTH)


class AuthorUpdateDTO(AuthorCreateDTO):
    """Payload accepted when replacing an author; id must match the path."""

    id: int = Field(..., ge=1)


class BookSummaryDTO(CamelModel):
    """Book as listed inside an author representation."""

    id: int
    title: str
    year: int | None = None
    isbn: str


class AuthorDTO(CamelModel):
    """Read representation of an author."""

    id: int
    first_name: str
    last_name: str
    bio: str | None = None
    books: list[BookSummaryDTO] = []
