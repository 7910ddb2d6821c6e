"""
Base command and outcome types for encapsulating business operations.

The Command pattern encapsulates business logic as objects, making it
reusable and easy to test in isolation. Commands report expected results
(not found, invalid input, conflicts) as Outcome values instead of raising,
so the HTTP layer maps them to status codes in a single place. Exceptions
escaping a command are unexpected faults and end up as HTTP 500.

Example:
    ```python
    class GetAuthorCommand(BaseCommand[int, AuthorDTO]):
        def __init__(self, repository: AuthorRepository):
            self.repository = repository

        async def execute(self, author_id: int) -> Outcome[AuthorDTO]:
            author = await self.repository.find_by_id(author_id)
            if author is None:
                return Outcome.not_found(f"Author {author_id} not found")
            return Outcome.success(author_to_dto(author))
    ```
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from typing import Generic, TypeVar

from bookstore.schemas.errors import FieldError

TInput = TypeVar("TInput")
TOutput = TypeVar("TOutput")


class OutcomeStatus(str, Enum):
    SUCCESS = "success"
    NOT_FOUND = "not_found"
    INVALID = "invalid"
    CONFLICT = "conflict"
    UNAUTHORIZED = "unauthorized"
    FAILED = "failed"


@dataclass(frozen=True)
class Outcome(Generic[TOutput]):
    """
    Result of a command execution.

    Attributes:
        status: Which kind of result this is.
        value: Payload for successful results.
        message: Human-readable explanation for unsuccessful results.
        errors: Field-level problems for INVALID results.
        details: Extra context to expose to the client.
    """

    status: OutcomeStatus
    value: TOutput | None = None
    message: str | None = None
    errors: list[FieldError] = field(default_factory=list)
    details: dict | None = None

    @property
    def ok(self) -> bool:
        return self.status is OutcomeStatus.SUCCESS

    @classmethod
    def success(cls, value: TOutput | None = None) -> "Outcome[TOutput]":
        return cls(status=OutcomeStatus.SUCCESS, value=value)

    @classmethod
    def not_found(cls, message: str) -> "Outcome[TOutput]":
        return cls(status=OutcomeStatus.NOT_FOUND, message=message)

    @classmethod
    def invalid(
        cls, message: str, errors: list[FieldError] | None = None
    ) -> "Outcome[TOutput]":
        return cls(
            status=OutcomeStatus.INVALID, message=message, errors=errors or []
        )

    @classmethod
    def conflict(cls, message: str) -> "Outcome[TOutput]":
        return cls(status=OutcomeStatus.CONFLICT, message=message)

    @classmethod
    def unauthorized(
        cls, message: str, details: dict | None = None
    ) -> "Outcome[TOutput]":
        return cls(
            status=OutcomeStatus.UNAUTHORIZED, message=message, details=details
        )

    @classmethod
    def failed(cls, message: str) -> "Outcome[TOutput]":
        return cls(status=OutcomeStatus.FAILED, message=message)


class BaseCommand(ABC, Generic[TInput, TOutput]):
    """
    Base command for business operations.

    Commands encapsulate business logic and depend on repositories for
    data access. Each command carries a ``location`` used as log prefix.

    Type Parameters:
        TInput: Input data type.
        TOutput: Value type carried by a successful Outcome.
    """

    location: str = ""

    @abstractmethod
    async def execute(self, input_data: TInput) -> Outcome[TOutput]:
        """
        Execute the command.

        Args:
            input_data: Input data for the command.

        Returns:
            Outcome describing the result.
        """
        pass
