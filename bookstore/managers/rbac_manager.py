from fastapi import HTTPException, Request, status
from starlette.authentication import UnauthenticatedUser

from bookstore.logging import logger
from bookstore.schemas.user import UserModel


class RBACManager:
    """
    Manager for Role-Based Access Control (RBAC).

    An endpoint declares the roles that may call it; a user is allowed in
    when they hold ANY of those roles.
    """

    @staticmethod
    def check_user_has_roles(
        user: UserModel, allowed_roles: list[str]
    ) -> bool:
        """
        Core role-checking logic: checks if user has ANY of the allowed roles.

        Args:
            user: The user to check permissions for.
            allowed_roles: Role names that grant access. An empty list
                grants access to every authenticated user.

        Returns:
            True if access is granted.
        """
        if not allowed_roles:
            return True

        return any(role in user.roles for role in allowed_roles)

    def require_roles(self, *roles: str):
        """
        Create a FastAPI dependency that requires ANY of the specified roles.

        Args:
            *roles: Role names that grant access.

        Returns:
            A dependency function that checks the authenticated user's roles.

        Example:
            ```python
            from fastapi import APIRouter, Depends
            from bookstore.managers.rbac_manager import RBACManager

            router = APIRouter()
            rbac = RBACManager()

            @router.delete(
                "/authors/{id}",
                dependencies=[Depends(rbac.require_roles("Administrator"))],
            )
            async def delete_author(id: int): ...
            ```

        Raises:
            HTTPException: 401 if user is not authenticated, 403 if user
                holds none of the roles.
        """

        async def check_roles(request: Request) -> None:
            # Check if user is authenticated
            if isinstance(request.user, UnauthenticatedUser) or not request.user:
                raise HTTPException(
                    status_code=status.HTTP_401_UNAUTHORIZED,
                    detail="Authentication required",
                )

            user: UserModel = request.user
            if not self.check_user_has_roles(user, list(roles)):
                logger.info(
                    f"HTTP permission denied for user {user.username} on "
                    f"{request.method} {request.url.path}. "
                    f"Allowed roles: {list(roles)}, User roles: {user.roles}"
                )
                raise HTTPException(
                    status_code=status.HTTP_403_FORBIDDEN,
                    detail=f"Requires one of roles: {', '.join(roles)}",
                )

        return check_roles


rbac_manager = RBACManager()
