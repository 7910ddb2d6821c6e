"""Book endpoints."""

from typing import Any

from fastapi import APIRouter, Body, Depends, Response, status

from bookstore.api.responses import outcome_response
from bookstore.commands.book_commands import (
    CreateBookCommand,
    DeleteBookCommand,
    GetBookCommand,
    ListBooksCommand,
    UpdateBookCommand,
    UpdateBookInput,
)
from bookstore.constants import READ_ROLES, WRITE_ROLES
from bookstore.dependencies import AuthorRepoDep, BookRepoDep, require_roles
from bookstore.schemas.book import BookCreateDTO, BookDTO, BookUpdateDTO

router = APIRouter(prefix="/api/books", tags=["books"])


@router.get(
    "",
    response_model=list[BookDTO],
    summary="Get all books",
    dependencies=[Depends(require_roles(*READ_ROLES))],
)
async def get_books(repo: BookRepoDep) -> Response:
    outcome = await ListBooksCommand(repo).execute()
    return outcome_response(outcome)


@router.get(
    "/{book_id}",
    response_model=BookDTO,
    summary="Get a book with its author",
    dependencies=[Depends(require_roles(*READ_ROLES))],
)
async def get_book(book_id: int, repo: BookRepoDep) -> Response:
    outcome = await GetBookCommand(repo).execute(book_id)
    return outcome_response(outcome)


@router.post(
    "",
    response_model=BookDTO,
    status_code=status.HTTP_201_CREATED,
    summary="Create a new book",
    dependencies=[Depends(require_roles(*WRITE_ROLES))],
)
async def create_book(
    book_data: BookCreateDTO, repo: BookRepoDep, authors: AuthorRepoDep
) -> Response:
    """
    Create a book for an existing author.

    Returns 400 naming ``authorId`` when the author does not exist.
    """
    outcome = await CreateBookCommand(repo, authors).execute(book_data)
    return outcome_response(outcome, status.HTTP_201_CREATED)


@router.put(
    "/{book_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Replace a book",
    dependencies=[Depends(require_roles(*WRITE_ROLES))],
    openapi_extra={
        "requestBody": {
            "content": {
                "application/json": {
                    "schema": BookUpdateDTO.model_json_schema(by_alias=True)
                }
            }
        }
    },
)
async def update_book(
    book_id: int,
    repo: BookRepoDep,
    authors: AuthorRepoDep,
    payload: dict[str, Any] | None = Body(default=None),
) -> Response:
    input_data = UpdateBookInput(id=book_id, payload=payload)
    outcome = await UpdateBookCommand(repo, authors).execute(input_data)
    return outcome_response(outcome, status.HTTP_204_NO_CONTENT)


@router.delete(
    "/{book_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete a book",
    dependencies=[Depends(require_roles(*WRITE_ROLES))],
)
async def delete_book(book_id: int, repo: BookRepoDep) -> Response:
    outcome = await DeleteBookCommand(repo).execute(book_id)
    return outcome_response(outcome, status.HTTP_204_NO_CONTENT)
