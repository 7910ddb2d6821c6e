from sqlmodel import Field, Relationship, SQLModel

from bookstore.constants import EMAIL_MAX_LENGTH


class UserRole(SQLModel, table=True):
    """Link table between users and their roles."""

    __table_args__ = {"extend_existing": True}

    user_id: int | None = Field(
        default=None, foreign_key="user.id", primary_key=True
    )
    role_id: int | None = Field(
        default=None, foreign_key="role.id", primary_key=True
    )


class Role(SQLModel, table=True):
    """Named role used for authorization decisions (e.g. "Administrator")."""

    __table_args__ = {"extend_existing": True}

    id: int | None = Field(default=None, primary_key=True)
    name: str = Field(unique=True, index=True, max_length=64)


class User(SQLModel, table=True):
    """
    Local identity record.

    The password is only ever stored as a bcrypt hash and no DTO exposes it.

    Attributes:
        id: Primary key identifier for the user
        email: Login name, stored lower-cased
        password_hash: bcrypt hash of the password
        roles: Roles granted to the user (loaded eagerly with selectin)
    """

    __table_args__ = {"extend_existing": True}

    id: int | None = Field(default=None, primary_key=True)
    email: str = Field(unique=True, index=True, max_length=EMAIL_MAX_LENGTH)
    password_hash: str

    roles: list[Role] = Relationship(
        link_model=UserRole,
        sa_relationship_kwargs={"lazy": "selectin"},
    )

    @property
    def role_names(self) -> list[str]:
        return [role.name for role in self.roles]
