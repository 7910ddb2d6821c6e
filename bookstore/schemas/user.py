from datetime import datetime

from pydantic import BaseModel, Field

from bookstore.constants import EMAIL_MAX_LENGTH
from bookstore.schemas.base import CamelModel

EMAIL_PATTERN = r"^[^@\s]+@[^@\s]+\.[^@\s]+$"


class UserDTO(CamelModel):
    """Credentials submitted to the register and login endpoints."""

    email_address: str = Field(
        ..., max_length=EMAIL_MAX_LENGTH, pattern=EMAIL_PATTERN
    )
    password: str = Field(..., min_length=1)


class UserReadDTO(CamelModel):
    """Public representation of a user. Never carries the password."""

    id: int
    email_address: str
    roles: list[str] = []


class TokenDTO(BaseModel):  # type: ignore[misc]
    token: str


class UserModel(BaseModel):  # type: ignore[misc]
    """
    Authenticated principal built from validated token claims.

    Attributes:
        id: Internal user identifier ("nameid" claim).
        username: Email address ("sub" claim).
        token_id: Unique token identifier ("jti" claim).
        expired_in: Expiry timestamp ("exp" claim).
        roles: Role names ("roles" claim).
    """

    id: int = Field(..., alias="nameid")
    username: str = Field(..., alias="sub")
    token_id: str = Field(..., alias="jti")
    expired_in: int = Field(..., alias="exp")
    roles: list[str] = []

    @property
    def is_authenticated(self) -> bool:
        return True

    @property
    def display_name(self) -> str:
        return self.username

    @property
    def expired_seconds(self) -> int:
        return self.expired_in - int(datetime.now().timestamp())

    def __hash__(self) -> int:
        return hash(self.token_id)
