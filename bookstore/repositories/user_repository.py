"""
Repository for the local identity store.

Users are looked up by their lower-cased email address. Roles live in
their own table and are attached through the userrole link table.
"""

from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from bookstore.logging import logger
from bookstore.models.user import Role, User
from bookstore.repositories.base import BaseRepository


class UserRepository(BaseRepository[User]):
    """
    Repository for User entity operations.

    Provides CRUD operations inherited from BaseRepository plus
    lookups by email and role management.
    """

    def __init__(self, session: AsyncSession):
        """
        Initialize User repository.

        Args:
            session: Database session for executing queries.
        """
        super().__init__(session, User)

    async def find_by_email(self, email: str) -> User | None:
        """
        Get user by email address (case-insensitive).

        Args:
            email: Email address to look up.

        Returns:
            User if found, None otherwise.
        """
        try:
            stmt = select(User).where(User.email == email.strip().lower())
            result = await self.session.exec(stmt)
            return result.first()
        except SQLAlchemyError as e:
            logger.error(f"Error retrieving user by email: {e}")
            raise

    async def find_role(self, name: str) -> Role | None:
        """
        Get role by exact name.

        Args:
            name: Role name, e.g. "Customer".

        Returns:
            Role if found, None otherwise.
        """
        try:
            stmt = select(Role).where(Role.name == name)
            result = await self.session.exec(stmt)
            return result.first()
        except SQLAlchemyError as e:
            logger.error(f"Error retrieving role {name}: {e}")
            raise

    async def ensure_roles(self, names: tuple[str, ...] | list[str]) -> list[Role]:
        """
        Create any of the given roles that do not exist yet.

        Args:
            names: Role names that must exist.

        Returns:
            The Role rows for every requested name, in the given order.

        Raises:
            SQLAlchemyError: If database operation fails.
        """
        roles = []
        try:
            for name in names:
                role = await self.find_role(name)
                if role is None:
                    role = Role(name=name)
                    self.session.add(role)
                    await self.session.flush()
                    logger.info(f"Created role {name}")
                roles.append(role)
            return roles
        except SQLAlchemyError as e:
            await self.session.rollback()
            logger.error(f"Error creating roles {list(names)}: {e}")
            raise
