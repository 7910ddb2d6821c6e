"""
Hand-written conversions between persisted entities and transfer objects.

Every mapper lists each field explicitly so that adding a column without
updating the conversion is caught by the mapper tests.
"""

from bookstore.mappers.author_mapper import (
    author_from_create,
    author_from_update,
    author_to_dto,
)
from bookstore.mappers.book_mapper import (
    book_from_create,
    book_from_update,
    book_to_dto,
)
from bookstore.mappers.user_mapper import user_to_dto

__all__ = [
    "author_from_create",
    "author_from_update",
    "author_to_dto",
    "book_from_create",
    "book_from_update",
    "book_to_dto",
    "user_to_dto",
]
