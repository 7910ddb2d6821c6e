"""
Registration and login endpoints.

Both endpoints are reachable without a token (see ``EXCLUDED_PATHS``).
"""

from fastapi import APIRouter, Response, status

from bookstore.api.responses import outcome_response
from bookstore.commands.user_commands import LoginUserCommand, RegisterUserCommand
from bookstore.dependencies import ContainerDep, UserRepoDep
from bookstore.schemas.errors import HTTPErrorResponse
from bookstore.schemas.user import TokenDTO, UserDTO, UserReadDTO

router = APIRouter(prefix="/api/users", tags=["users"])


@router.post(
    "/register",
    response_model=UserReadDTO,
    summary="Register a new customer account",
    responses={400: {"model": HTTPErrorResponse}},
)
async def register(
    user_data: UserDTO, repo: UserRepoDep, container: ContainerDep
) -> Response:
    """
    Register a user and grant the Customer role.

    Example:
        POST /api/users/register
        {
            "emailAddress": "reader@example.com",
            "password": "Secret1!"
        }
    """
    command = RegisterUserCommand(
        repo, container.passwords, container.password_policy
    )
    outcome = await command.execute(user_data)
    return outcome_response(outcome)


@router.post(
    "/login",
    response_model=TokenDTO,
    summary="Exchange credentials for a bearer token",
    responses={status.HTTP_401_UNAUTHORIZED: {"model": HTTPErrorResponse}},
)
async def login(
    user_data: UserDTO, repo: UserRepoDep, container: ContainerDep
) -> Response:
    command = LoginUserCommand(repo, container.passwords, container.tokens)
    outcome = await command.execute(user_data)
    return outcome_response(outcome)
