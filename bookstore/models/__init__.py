"""SQLModel table definitions.

Every table module is imported here so that relationships declared with
string references resolve and SQLModel.metadata knows about all tables.
"""

from bookstore.models.author import Author
from bookstore.models.book import Book
from bookstore.models.user import Role, User, UserRole

__all__ = ["Author", "Book", "Role", "User", "UserRole"]
