"""
FastAPI dependencies for role-based access control.

This module provides a convenient standalone function for enforcing
role-based permissions on HTTP endpoints. It delegates to rbac_manager.
"""

from bookstore.managers.rbac_manager import rbac_manager


def require_roles(*roles: str):  # type: ignore[no-untyped-def]
    """
    Create a FastAPI dependency that requires the user to have ANY of the roles.

    Args:
        *roles: Role names that grant access.

    Returns:
        A dependency function that checks the authenticated user's roles.

    Example:
        ```python
        from fastapi import APIRouter, Depends
        from bookstore.constants import WRITE_ROLES
        from bookstore.dependencies.permissions import require_roles

        router = APIRouter()


        @router.post(
            "/authors", dependencies=[Depends(require_roles(*WRITE_ROLES))]
        )
        async def create_author(): ...
        ```

    Raises:
        HTTPException: 401 if user is not authenticated, 403 if user holds
            none of the roles.
    """
    return rbac_manager.require_roles(*roles)
