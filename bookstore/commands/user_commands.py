"""
Commands for registration and login against the local identity store.

Registration hashes the password, stores the user and grants the
Customer role. Login verifies the credentials and issues a bearer token.
Neither command ever logs or returns the submitted password.
"""

from bookstore.commands.base import BaseCommand, Outcome
from bookstore.constants import DEFAULT_USER_ROLE
from bookstore.logging import logger, set_log_context
from bookstore.managers.password_manager import PasswordManager, PasswordPolicy
from bookstore.managers.token_manager import TokenManager
from bookstore.mappers.user_mapper import user_to_dto
from bookstore.models.user import User
from bookstore.repositories.user_repository import UserRepository
from bookstore.schemas.errors import FieldError
from bookstore.schemas.user import TokenDTO, UserDTO, UserReadDTO


class RegisterUserCommand(BaseCommand[UserDTO, UserReadDTO]):
    """
    Command to register a new user.

    Password policy violations and an already registered email are
    reported together as one INVALID outcome.
    """

    location = "Users - Register"

    def __init__(
        self,
        repository: UserRepository,
        passwords: PasswordManager,
        policy: PasswordPolicy | None = None,
    ):
        self.repository = repository
        self.passwords = passwords
        self.policy = policy or PasswordPolicy()

    async def execute(self, input_data: UserDTO) -> Outcome[UserReadDTO]:
        """
        Execute command to register a user.

        Args:
            input_data: Submitted email address and password.

        Returns:
            SUCCESS with the new user, INVALID when the password breaks the
            policy or the email is taken, FAILED if nothing was written.
        """
        email = input_data.email_address.strip().lower()
        set_log_context(location=self.location)
        logger.info(f"{self.location}: Registration attempt for {email}")

        errors = self.policy.validate(input_data.password)
        if await self.repository.find_by_email(email) is not None:
            errors.append(
                FieldError(
                    field="emailAddress",
                    message=f"Email '{email}' is already taken.",
                )
            )
        if errors:
            logger.warning(
                f"{self.location}: Registration rejected for {email} "
                f"({len(errors)} problem(s))"
            )
            return Outcome.invalid("Registration failed", errors)

        password_hash = await self.passwords.hash_password(input_data.password)
        roles = await self.repository.ensure_roles([DEFAULT_USER_ROLE])
        user = User(email=email, password_hash=password_hash, roles=roles)

        if not await self.repository.create(user):
            logger.error(f"{self.location}: Registration failed for {email}")
            return Outcome.failed("Registration failed")

        logger.info(f"{self.location}: Registered user with id: {user.id}")
        return Outcome.success(user_to_dto(user))


class LoginUserCommand(BaseCommand[UserDTO, TokenDTO]):
    """
    Command to exchange credentials for a bearer token.

    Unknown emails and wrong passwords produce the same UNAUTHORIZED
    outcome; its details carry only the email address.
    """

    location = "Users - Login"

    def __init__(
        self,
        repository: UserRepository,
        passwords: PasswordManager,
        tokens: TokenManager,
    ):
        self.repository = repository
        self.passwords = passwords
        self.tokens = tokens

    async def execute(self, input_data: UserDTO) -> Outcome[TokenDTO]:
        email = input_data.email_address.strip().lower()
        set_log_context(location=self.location)
        logger.info(f"{self.location}: Login attempt for {email}")

        user = await self.repository.find_by_email(email)
        if user is None or not await self.passwords.verify_password(
            input_data.password, user.password_hash
        ):
            logger.warning(f"{self.location}: Login failed for {email}")
            return Outcome.unauthorized(
                "Invalid email or password",
                details={"emailAddress": input_data.email_address},
            )

        token = self.tokens.issue(user)

        logger.info(f"{self.location}: Login successful for user id: {user.id}")
        return Outcome.success(TokenDTO(token=token))
