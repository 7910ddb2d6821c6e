# Uvicorn application factory <https://www.uvicorn.org/#application-factories>
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, Response
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.middleware.authentication import AuthenticationMiddleware

from bookstore.auth import AuthBackend, on_auth_error
from bookstore.constants import INTERNAL_ERROR_MESSAGE
from bookstore.container import Container, build_container
from bookstore.logging import get_log_context, logger
from bookstore.middlewares.correlation_id import CorrelationIDMiddleware
from bookstore.routing import collect_subrouters
from bookstore.schemas.errors import (
    ErrorCode,
    field_errors_from_pydantic,
    http_error_response,
)
from bookstore.storage.db import seed_roles, wait_and_init_db

# Error codes used for HTTPExceptions raised by FastAPI and dependencies
HTTP_ERROR_CODES = {
    status.HTTP_400_BAD_REQUEST: ErrorCode.VALIDATION_ERROR,
    status.HTTP_401_UNAUTHORIZED: ErrorCode.AUTHENTICATION_FAILED,
    status.HTTP_403_FORBIDDEN: ErrorCode.PERMISSION_DENIED,
    status.HTTP_404_NOT_FOUND: ErrorCode.NOT_FOUND,
    status.HTTP_409_CONFLICT: ErrorCode.CONFLICT,
}


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application startup and shutdown.

    On startup waits for the database and makes sure the Administrator and
    Customer roles exist. On shutdown disposes the engine's connection pool.
    """
    container: Container = app.state.container
    settings = container.settings

    await wait_and_init_db(
        container.engine,
        retry_interval=settings.DB_INIT_RETRY_INTERVAL,
        max_retries=settings.DB_INIT_MAX_RETRIES,
    )
    await seed_roles(container.session_factory)
    logger.info("Application startup complete")

    yield

    logger.info("Application shutdown initiated")
    await container.engine.dispose()
    logger.info("Application shutdown complete")


async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Answer malformed request bodies and parameters with 400, not 422."""
    errors = field_errors_from_pydantic(exc.errors())
    logger.warning(
        f"Request validation failed on {request.method} {request.url.path}: "
        f"{[e.field for e in errors]}"
    )
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=http_error_response(
            ErrorCode.VALIDATION_ERROR,
            "Request data is invalid",
            {"errors": [e.model_dump() for e in errors]},
        ),
    )


async def http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> Response:
    """Render HTTPExceptions with the common error envelope."""
    if exc.status_code == status.HTTP_404_NOT_FOUND and exc.detail == "Not Found":
        # Unknown route, keep the body empty like unknown records
        return Response(status_code=status.HTTP_404_NOT_FOUND)

    code = HTTP_ERROR_CODES.get(
        exc.status_code,
        ErrorCode.INTERNAL_ERROR
        if exc.status_code >= 500
        else ErrorCode.VALIDATION_ERROR,
    )
    return JSONResponse(
        status_code=exc.status_code,
        content=http_error_response(code, str(exc.detail)),
        headers=getattr(exc, "headers", None),
    )


async def unhandled_exception_handler(
    request: Request, exc: Exception
) -> JSONResponse:
    """Log unexpected errors with their location and hide the details."""
    location = get_log_context().get(
        "location", f"{request.method} {request.url.path}"
    )
    logger.error(
        f"{location}: Something went wrong: {exc}", exc_info=exc
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=http_error_response(
            ErrorCode.INTERNAL_ERROR, INTERNAL_ERROR_MESSAGE
        ),
    )


def application(container: Container | None = None) -> FastAPI:
    """
    Initializes and configures the FastAPI application.

    The application is built around a Container holding the settings,
    database engine, password hasher and token manager. Pass a container
    to run against a different database (tests use in-memory SQLite).

    Registered pieces:
    - Routers collected by ``bookstore.routing.collect_subrouters()``
    - Exception handlers rendering the common error envelope
    - ``AuthenticationMiddleware`` with the bearer token ``AuthBackend``
    - ``CorrelationIDMiddleware`` for request correlation IDs

    Role-based permissions are enforced via FastAPI dependencies using
    ``require_roles()``.
    """
    container = container or build_container()

    # Initialize application
    app = FastAPI(
        title="Bookstore API",
        description="Authors, books and customer accounts",
        version="1.0.0",
        lifespan=lifespan,
    )
    app.state.container = container

    # Collect routers
    app.include_router(collect_subrouters())

    # Exception handlers
    app.add_exception_handler(
        RequestValidationError, validation_exception_handler
    )
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)

    # Middlewares (execute in REVERSE order of registration)
    # Execution flow: CorrelationIDMiddleware → AuthenticationMiddleware
    app.add_middleware(
        AuthenticationMiddleware,
        backend=AuthBackend(
            container.tokens, container.settings.EXCLUDED_PATHS
        ),
        on_error=on_auth_error,
    )
    app.add_middleware(CorrelationIDMiddleware)

    return app
