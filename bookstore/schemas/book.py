from decimal import Decimal
from typing import Annotated

from pydantic import Field, PlainSerializer

from bookstore.constants import (
    BOOK_IMAGE_MAX_LENGTH,
    BOOK_ISBN_MAX_LENGTH,
    BOOK_PRICE_DECIMAL_PLACES,
    BOOK_PRICE_MAX_DIGITS,
    BOOK_SUMMARY_MAX_LENGTH,
    BOOK_TITLE_MAX_LENGTH,
    BOOK_YEAR_MAX,
)
from bookstore.schemas.base import CamelModel

# Exact decimal in memory and storage, a JSON number on the wire
Price = Annotated[
    Decimal,
    Field(
        ge=0,
        max_digits=BOOK_PRICE_MAX_DIGITS,
        decimal_places=BOOK_PRICE_DECIMAL_PLACES,
    ),
    PlainSerializer(float, return_type=float, when_used="json"),
]


class BookCreateDTO(CamelModel):
    """Payload accepted when creating a book."""

    title: str = Field(..., min_length=1, max_length=BOOK_TITLE_MAX_LENGTH)
    year: int | None = Field(default=None, ge=0, le=BOOK_YEAR_MAX)
    isbn: str = Field(..., min_length=1, max_length=BOOK_ISBN_MAX_LENGTH)
    summary: str | None = Field(default=None, max_length=BOOK_SUMMARY_MAX_LENGTH)
    image: str | None = Field(default=None, max_length=BOOK_IMAGE_MAX_LENGTH)
    price: Price | None = None
    author_id: int = Field(..., ge=1)


class BookUpdateDTO(BookCreateDTO):
    """Payload accepted when replacing a book; id must match the path."""

    id: int = Field(..., ge=1)


class AuthorSummaryDTO(CamelModel):
    """Author as embedded inside a book representation."""

    id: int
    first_name: str
    last_name: str


class BookDTO(CamelModel):
    """Read representation of a book."""

    id: int
    title: str
    year: int | None = None
    isbn: str
    summary: str | None = None
    image: str | None = None
    price: Price | None = None
    author_id: int
    author: AuthorSummaryDTO | None = None
