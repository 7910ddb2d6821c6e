from decimal import Decimal
from typing import TYPE_CHECKING, Optional

from sqlmodel import Field, Relationship, SQLModel

from bookstore.constants import (
    BOOK_IMAGE_MAX_LENGTH,
    BOOK_ISBN_MAX_LENGTH,
    BOOK_PRICE_DECIMAL_PLACES,
    BOOK_PRICE_MAX_DIGITS,
    BOOK_SUMMARY_MAX_LENGTH,
    BOOK_TITLE_MAX_LENGTH,
)

if TYPE_CHECKING:
    from bookstore.models.author import Author


class Book(SQLModel, table=True):
    """
    SQLModel representing a book entity in the database.

    Every book belongs to exactly one author; author_id is required.

    Attributes:
        id: Primary key identifier for the book
        title: Book title
        year: Publication year
        isbn: ISBN-like identifier
        summary: Short summary of the book
        image: Reference to the cover image
        price: Sale price, stored as an exact decimal
        author_id: Foreign key of the owning author
        author: Owning author (loaded eagerly with selectin)
    """

    __table_args__ = {"extend_existing": True}

    id: int | None = Field(default=None, primary_key=True)
    title: str = Field(max_length=BOOK_TITLE_MAX_LENGTH)
    year: int | None = None
    isbn: str = Field(max_length=BOOK_ISBN_MAX_LENGTH)
    summary: str | None = Field(default=None, max_length=BOOK_SUMMARY_MAX_LENGTH)
    image: str | None = Field(default=None, max_length=BOOK_IMAGE_MAX_LENGTH)
    price: Decimal | None = Field(
        default=None,
        max_digits=BOOK_PRICE_MAX_DIGITS,
        decimal_places=BOOK_PRICE_DECIMAL_PLACES,
    )
    author_id: int = Field(foreign_key="author.id", index=True)

    author: Optional["Author"] = Relationship(
        back_populates="books",
        sa_relationship_kwargs={"lazy": "selectin"},
    )
