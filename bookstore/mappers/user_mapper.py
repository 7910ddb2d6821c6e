from bookstore.models.user import User
from bookstore.schemas.user import UserReadDTO


def user_to_dto(user: User) -> UserReadDTO:
    """Map a User to its public representation (no credential fields)."""
    return UserReadDTO(
        id=user.id,
        email_address=user.email,
        roles=user.role_names,
    )
