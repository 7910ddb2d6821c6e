"""
Protocol classes for structural subtyping (duck typing with type safety).

Protocols define interfaces without requiring explicit inheritance. Any class
that implements the required methods is considered compatible, which lets
commands accept either a real repository or a test double.

Example:
    ```python
    from bookstore.protocols import Repository
    from bookstore.models.author import Author


    async def first_author(repo: Repository[Author]) -> Author | None:
        return await repo.find_by_id(1)
    ```
"""

from typing import Protocol, TypeVar, runtime_checkable

T = TypeVar("T")


@runtime_checkable
class Repository(Protocol[T]):
    """
    Protocol for repository pattern.

    Defines the interface for data access objects that manage entities
    of type T. Write methods report whether the change reached the
    database.

    Type Parameters:
        T: The entity type this repository manages.
    """

    async def find_by_id(self, id: int) -> T | None:
        """
        Get entity by primary key ID.

        Args:
            id: Primary key value.

        Returns:
            Entity if found, None otherwise.
        """
        ...

    async def find_all(self) -> list[T]:
        """
        Get all entities ordered by primary key.

        Returns:
            List of every stored entity.
        """
        ...

    async def exists(self, id: int) -> bool:
        """
        Check if an entity with the given primary key exists.

        Args:
            id: Primary key value.

        Returns:
            True if a row with that id is stored, False otherwise.
        """
        ...

    async def create(self, entity: T) -> bool:
        """
        Insert a new entity.

        Args:
            entity: The entity instance to create.

        Returns:
            True if the row was written.
        """
        ...

    async def update(self, entity: T) -> bool:
        """
        Replace the stored state of an entity.

        Args:
            entity: The entity instance with updated values.

        Returns:
            True if the row was written.
        """
        ...

    async def delete(self, entity: T) -> bool:
        """
        Delete entity from database.

        Args:
            entity: The entity instance to delete.

        Returns:
            True if the row was removed.
        """
        ...
