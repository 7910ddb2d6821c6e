"""
Author endpoints.

Reading is open to Administrators and Customers, writing is reserved for
Administrators. Each endpoint builds its command from injected
repositories and converts the outcome with ``outcome_response``.
"""

from typing import Any

from fastapi import APIRouter, Body, Depends, Response, status

from bookstore.api.responses import outcome_response
from bookstore.commands.author_commands import (
    CreateAuthorCommand,
    DeleteAuthorCommand,
    GetAuthorCommand,
    ListAuthorsCommand,
    UpdateAuthorCommand,
    UpdateAuthorInput,
)
from bookstore.constants import READ_ROLES, WRITE_ROLES
from bookstore.dependencies import AuthorRepoDep, require_roles
from bookstore.schemas.author import AuthorCreateDTO, AuthorDTO, AuthorUpdateDTO

router = APIRouter(prefix="/api/authors", tags=["authors"])


@router.get(
    "",
    response_model=list[AuthorDTO],
    summary="Get all authors",
    dependencies=[Depends(require_roles(*READ_ROLES))],
)
async def get_authors(repo: AuthorRepoDep) -> Response:
    outcome = await ListAuthorsCommand(repo).execute()
    return outcome_response(outcome)


@router.get(
    "/{author_id}",
    response_model=AuthorDTO,
    summary="Get an author with their books",
    dependencies=[Depends(require_roles(*READ_ROLES))],
)
async def get_author(author_id: int, repo: AuthorRepoDep) -> Response:
    """
    Get a single author.

    Returns 404 with an empty body when the author does not exist,
    ids below 1 included.
    """
    outcome = await GetAuthorCommand(repo).execute(author_id)
    return outcome_response(outcome)


@router.post(
    "",
    response_model=AuthorDTO,
    status_code=status.HTTP_201_CREATED,
    summary="Create a new author",
    dependencies=[Depends(require_roles(*WRITE_ROLES))],
)
async def create_author(
    author_data: AuthorCreateDTO, repo: AuthorRepoDep
) -> Response:
    outcome = await CreateAuthorCommand(repo).execute(author_data)
    return outcome_response(outcome, status.HTTP_201_CREATED)


@router.put(
    "/{author_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Replace an author",
    dependencies=[Depends(require_roles(*WRITE_ROLES))],
    openapi_extra={
        "requestBody": {
            "content": {
                "application/json": {
                    "schema": AuthorUpdateDTO.model_json_schema(by_alias=True)
                }
            }
        }
    },
)
async def update_author(
    author_id: int,
    repo: AuthorRepoDep,
    payload: dict[str, Any] | None = Body(default=None),
) -> Response:
    """
    Replace an existing author.

    The body is validated by the command so that an id mismatch (400) and
    an unknown id (404) are reported before field errors (400).

    Example:
        PUT /api/authors/1
        {
            "id": 1,
            "firstName": "Terry",
            "lastName": "Pratchett",
            "bio": "English humorist"
        }
    """
    input_data = UpdateAuthorInput(id=author_id, payload=payload)
    outcome = await UpdateAuthorCommand(repo).execute(input_data)
    return outcome_response(outcome, status.HTTP_204_NO_CONTENT)


@router.delete(
    "/{author_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete an author",
    dependencies=[Depends(require_roles(*WRITE_ROLES))],
)
async def delete_author(author_id: int, repo: AuthorRepoDep) -> Response:
    """
    Delete an author.

    Authors that still own books are kept and the request answers 409.
    """
    outcome = await DeleteAuthorCommand(repo).execute(author_id)
    return outcome_response(outcome, status.HTTP_204_NO_CONTENT)
