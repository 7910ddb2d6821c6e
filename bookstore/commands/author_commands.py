"""
Commands for Author business operations.

Every command follows the same pipeline: validate the input, check that
the record exists where required, delegate to the repository and map the
result to a transfer object.

Example:
    ```python
    from bookstore.commands.author_commands import GetAuthorCommand
    from bookstore.repositories.author_repository import AuthorRepository

    command = GetAuthorCommand(AuthorRepository(session))
    outcome = await command.execute(1)
    if outcome.ok:
        print(outcome.value.first_name)
    ```
"""

from typing import Any

from pydantic import BaseModel, Field

from bookstore.commands.base import BaseCommand, Outcome
from bookstore.commands.validation import (
    identifier_errors,
    parse_payload,
    update_identifier_errors,
)
from bookstore.logging import logger, set_log_context
from bookstore.mappers.author_mapper import (
    author_from_create,
    author_from_update,
    author_to_dto,
)
from bookstore.models.author import Author
from bookstore.protocols import Repository
from bookstore.repositories.author_repository import AuthorRepository
from bookstore.schemas.author import (
    AuthorCreateDTO,
    AuthorDTO,
    AuthorUpdateDTO,
)

# ============================================================================
# Input Models
# ============================================================================


class UpdateAuthorInput(BaseModel):  # type: ignore[misc]
    """Input for updating an author: the path id and the raw request body."""

    id: int = Field(..., description="Author ID taken from the path")
    payload: dict[str, Any] | None = Field(
        default=None, description="Unvalidated request body"
    )


# ============================================================================
# Commands
# ============================================================================


class ListAuthorsCommand(BaseCommand[None, list[AuthorDTO]]):
    """Command to get every author."""

    location = "Authors - GetAuthors"

    def __init__(self, repository: Repository[Author]):
        self.repository = repository

    async def execute(self, input_data: None = None) -> Outcome[list[AuthorDTO]]:
        set_log_context(location=self.location)
        logger.info(f"{self.location}: Attempted call")

        authors = await self.repository.find_all()
        response = [author_to_dto(author) for author in authors]

        logger.info(f"{self.location}: Successful")
        return Outcome.success(response)


class GetAuthorCommand(BaseCommand[int, AuthorDTO]):
    """Command to get a single author by id."""

    location = "Authors - GetAuthor"

    def __init__(self, repository: Repository[Author]):
        self.repository = repository

    async def execute(self, author_id: int) -> Outcome[AuthorDTO]:
        """
        Execute command to get an author.

        Args:
            author_id: ID of the author to fetch.

        Returns:
            SUCCESS with the author, NOT_FOUND when no such author
            exists (ids below 1 included).
        """
        set_log_context(location=self.location)
        logger.info(f"{self.location}: Attempted call for id: {author_id}")

        author = await self.repository.find_by_id(author_id)
        if author is None:
            logger.warning(
                f"{self.location}: Failed to retrieve record with id: {author_id}"
            )
            return Outcome.not_found(f"Author with ID {author_id} not found")

        logger.info(f"{self.location}: Successfully got record by id: {author_id}")
        return Outcome.success(author_to_dto(author))


class CreateAuthorCommand(BaseCommand[AuthorCreateDTO, AuthorDTO]):
    """Command to create a new author."""

    location = "Authors - Create"

    def __init__(self, repository: Repository[Author]):
        self.repository = repository

    async def execute(self, input_data: AuthorCreateDTO) -> Outcome[AuthorDTO]:
        """
        Execute command to create an author.

        Args:
            input_data: Validated create payload.

        Returns:
            SUCCESS with the created author, FAILED if nothing was written.
        """
        set_log_context(location=self.location)
        logger.info(f"{self.location}: Create attempted")

        author = author_from_create(input_data)
        if not await self.repository.create(author):
            logger.error(f"{self.location}: Creation failed")
            return Outcome.failed("Creation failed")

        logger.info(f"{self.location}: Creation was successful, id: {author.id}")
        return Outcome.success(author_to_dto(author))


class UpdateAuthorCommand(BaseCommand[UpdateAuthorInput, None]):
    """
    Command to replace an existing author.

    Checks run in order: path/body ids, existence, payload fields.
    """

    location = "Authors - Update"

    def __init__(self, repository: Repository[Author]):
        self.repository = repository

    async def execute(self, input_data: UpdateAuthorInput) -> Outcome[None]:
        """
        Execute command to update an author.

        Args:
            input_data: Path id and raw request body.

        Returns:
            SUCCESS with no value, INVALID on id mismatch or bad fields,
            NOT_FOUND when the author does not exist, FAILED if nothing
            was written.
        """
        author_id = input_data.id
        set_log_context(location=self.location)
        logger.info(
            f"{self.location}: Update attempted on record with id: {author_id}"
        )

        if errors := update_identifier_errors(author_id, input_data.payload):
            logger.warning(f"{self.location}: Update with bad data - id: {author_id}")
            return Outcome.invalid("Invalid author id", errors)

        if not await self.repository.exists(author_id):
            logger.warning(
                f"{self.location}: Failed to retrieve record with id: {author_id}"
            )
            return Outcome.not_found(f"Author with ID {author_id} not found")

        dto, errors = parse_payload(AuthorUpdateDTO, input_data.payload)
        if errors:
            logger.warning(f"{self.location}: Data was incomplete")
            return Outcome.invalid("Invalid author data", errors)

        if not await self.repository.update(author_from_update(dto)):
            logger.error(f"{self.location}: Update failed for id: {author_id}")
            return Outcome.failed("Update failed")

        logger.info(
            f"{self.location}: Record with id: {author_id} successfully updated"
        )
        return Outcome.success()


class DeleteAuthorCommand(BaseCommand[int, None]):
    """
    Command to delete an author.

    Authors that still own books are never deleted; the command answers
    CONFLICT and leaves both the author and the books untouched.

    Uses the concrete AuthorRepository because it requires has_books().
    """

    location = "Authors - Delete"

    def __init__(self, repository: AuthorRepository):
        self.repository = repository

    async def execute(self, author_id: int) -> Outcome[None]:
        """
        Execute command to delete an author.

        Args:
            author_id: ID of author to delete.

        Returns:
            SUCCESS with no value, INVALID for ids below 1, NOT_FOUND when
            the author does not exist, CONFLICT when books reference it,
            FAILED if nothing was removed.
        """
        set_log_context(location=self.location)
        logger.info(
            f"{self.location}: Delete attempted on record with id: {author_id}"
        )

        if errors := identifier_errors(author_id):
            logger.warning(f"{self.location}: Delete failed with bad data - id: {author_id}")
            return Outcome.invalid("Invalid author id", errors)

        if not await self.repository.exists(author_id):
            logger.warning(
                f"{self.location}: Delete failed to retrieve record with id: {author_id}"
            )
            return Outcome.not_found(f"Author with ID {author_id} not found")

        if await self.repository.has_books(author_id):
            logger.warning(
                f"{self.location}: Author with id: {author_id} still owns books"
            )
            return Outcome.conflict(
                f"Author with ID {author_id} still has books; delete or reassign them first"
            )

        author = await self.repository.find_by_id(author_id)
        if not await self.repository.delete(author):
            logger.error(f"{self.location}: Delete failed for record with id: {author_id}")
            return Outcome.failed("Delete failed")

        logger.info(f"{self.location}: Record with id: {author_id} successfully deleted")
        return Outcome.success()
