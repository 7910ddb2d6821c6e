from typing import TYPE_CHECKING

from sqlmodel import Field, Relationship, SQLModel

from bookstore.constants import AUTHOR_BIO_MAX_LENGTH, AUTHOR_NAME_MAX_LENGTH

if TYPE_CHECKING:
    from bookstore.models.book import Book


class Author(SQLModel, table=True):
    """
    SQLModel representing an author entity in the database.

    This is a clean data model without Active Record methods.
    Use AuthorRepository for all database operations.

    Attributes:
        id: Primary key identifier for the author
        firstname: Given name of the author
        lastname: Family name of the author
        bio: Short biography text
        books: Books written by the author (loaded eagerly with selectin)
    """

    __table_args__ = {"extend_existing": True}

    id: int | None = Field(default=None, primary_key=True)
    firstname: str = Field(max_length=AUTHOR_NAME_MAX_LENGTH)
    lastname: str = Field(max_length=AUTHOR_NAME_MAX_LENGTH)
    bio: str | None = Field(default=None, max_length=AUTHOR_BIO_MAX_LENGTH)

    books: list["Book"] = Relationship(
        back_populates="author",
        sa_relationship_kwargs={"lazy": "selectin"},
    )
