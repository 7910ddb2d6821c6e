"""
Base repository with common CRUD operations.

The Repository pattern separates data access logic from business logic,
making it easier to test and maintain. Repositories encapsulate all
database operations for a specific entity.

Write operations report success as a boolean: True when the flush wrote
the change to the database. Persistence errors are logged, the session is
rolled back and the original SQLAlchemyError is re-raised.

Example:
    ```python
    from bookstore.repositories.base import BaseRepository
    from bookstore.models.author import Author


    class AuthorRepository(BaseRepository[Author]):
        def __init__(self, session: AsyncSession):
            super().__init__(session, Author)
    ```
"""

from typing import Generic, Type, TypeVar

from sqlalchemy import inspect
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from bookstore.logging import logger

T = TypeVar("T")


class BaseRepository(Generic[T]):
    """
    Base repository providing common CRUD operations.

    Type Parameters:
        T: The SQLModel type this repository manages. The model must have
            an integer ``id`` primary key.

    Attributes:
        session: The database session for executing queries.
        model: The SQLModel class this repository manages.
    """

    def __init__(self, session: AsyncSession, model: Type[T]):
        """
        Initialize repository with session and model.

        Args:
            session: Database session for executing queries.
            model: The SQLModel class to manage.
        """
        self.session = session
        self.model = model

    async def find_by_id(self, id: int) -> T | None:
        """
        Get entity by primary key ID.

        Args:
            id: Primary key value.

        Returns:
            Entity if found, None otherwise.
        """
        try:
            return await self.session.get(self.model, id)
        except SQLAlchemyError as e:
            logger.error(f"Error retrieving {self.model.__name__} {id}: {e}")
            raise

    async def find_all(self) -> list[T]:
        """
        Get all entities ordered by primary key.

        Returns:
            List of every stored entity.

        Raises:
            SQLAlchemyError: If database query fails.
        """
        try:
            stmt = select(self.model).order_by(self.model.id)
            result = await self.session.exec(stmt)
            return list(result.all())
        except SQLAlchemyError as e:
            logger.error(f"Error retrieving {self.model.__name__}: {e}")
            raise

    async def exists(self, id: int) -> bool:
        """
        Check if an entity with the given primary key exists.

        Args:
            id: Primary key value.

        Returns:
            True if a row with that id is stored, False otherwise.

        Raises:
            SQLAlchemyError: If database query fails.
        """
        try:
            stmt = select(self.model.id).where(self.model.id == id)
            result = await self.session.exec(stmt)
            return result.first() is not None
        except SQLAlchemyError as e:
            logger.error(
                f"Error checking existence of {self.model.__name__}: {e}"
            )
            raise

    async def create(self, entity: T) -> bool:
        """
        Insert a new entity.

        Args:
            entity: The transient entity to insert. The generated primary
                key is populated on it when the insert succeeds. Relationships
                read afterwards must be set before the call.

        Returns:
            True if the row was written.

        Raises:
            SQLAlchemyError: If database operation fails.
        """
        try:
            self.session.add(entity)
            await self.session.flush()
            return inspect(entity).persistent
        except SQLAlchemyError as e:
            await self.session.rollback()
            logger.error(f"Error creating {self.model.__name__}: {e}")
            raise

    async def update(self, entity: T) -> bool:
        """
        Replace the stored state of an entity with the given state.

        The entity may be detached (for example built from a request
        payload); its state is merged onto the stored row.

        Args:
            entity: Entity carrying the primary key and the new values.

        Returns:
            True if the row was written.

        Raises:
            SQLAlchemyError: If database operation fails.
        """
        try:
            merged = await self.session.merge(entity)
            await self.session.flush()
            return inspect(merged).persistent
        except SQLAlchemyError as e:
            await self.session.rollback()
            logger.error(f"Error updating {self.model.__name__}: {e}")
            raise

    async def delete(self, entity: T) -> bool:
        """
        Delete a persistent entity.

        Args:
            entity: The entity instance to delete.

        Returns:
            True if the row was removed.

        Raises:
            SQLAlchemyError: If database operation fails.
        """
        try:
            await self.session.delete(entity)
            await self.session.flush()
            return inspect(entity).deleted
        except SQLAlchemyError as e:
            await self.session.rollback()
            logger.error(f"Error deleting {self.model.__name__}: {e}")
            raise
