import re

from fastapi.security.utils import get_authorization_scheme_param
from jwcrypto.common import JWException
from jwcrypto.jwt import JWTExpired
from pydantic import ValidationError
from starlette.authentication import AuthCredentials, AuthenticationBackend
from starlette.requests import HTTPConnection
from starlette.responses import JSONResponse

from bookstore.exceptions import AuthenticationError
from bookstore.logging import logger
from bookstore.managers.token_manager import TokenManager
from bookstore.schemas.errors import ErrorCode, http_error_response
from bookstore.schemas.user import UserModel


class AuthBackend(AuthenticationBackend):
    """
    Authentication backend for bearer tokens issued by this service.

    Attributes:
        tokens: Token manager used to verify signatures and claims.
        excluded_paths: Pattern of URL paths that bypass authentication.

    The authentication process involves:
    1. Extracting the bearer token from the Authorization header
    2. Verifying signature, issuer, audience and expiry
    3. Creating a UserModel from the token claims
    4. Returning authentication credentials (the role names) and the user

    Requests without a token stay anonymous; endpoints that require roles
    reject them. A token that is present but invalid fails the request.
    """

    def __init__(self, tokens: TokenManager, excluded_paths: re.Pattern) -> None:
        super().__init__()
        self.tokens = tokens
        self.excluded_paths = excluded_paths

    async def authenticate(self, conn: HTTPConnection):
        """
        Authenticate a request from its Authorization header.

        Returns:
            Tuple of (AuthCredentials, UserModel), or None for anonymous
            requests and excluded paths.

        Raises:
            AuthenticationError: If the token is expired or invalid.
        """
        if self.excluded_paths.match(conn.url.path):
            return

        scheme, access_token = get_authorization_scheme_param(
            conn.headers.get("authorization", "")
        )
        if not access_token:
            return

        if scheme.lower() != "bearer":
            raise AuthenticationError(
                "invalid_scheme", f"Unsupported authorization scheme: {scheme}"
            )

        try:
            claims = self.tokens.decode(access_token)
            user: UserModel = UserModel(**claims)
        except JWTExpired as ex:
            logger.error(f"JWT token expired: {ex}")
            raise AuthenticationError("token_expired", str(ex))
        except ValidationError as ex:
            logger.error(f"Token claims are incomplete: {ex}")
            raise AuthenticationError("invalid_claims", "Token claims are incomplete")
        except (JWException, ValueError) as ex:
            logger.error(f"Error occurred while decode auth token: {ex}")
            raise AuthenticationError("token_decode_error", str(ex))

        return AuthCredentials(user.roles), user


def on_auth_error(conn: HTTPConnection, exc: Exception) -> JSONResponse:
    """Answer failed token authentication with a 401 error envelope."""
    reason = getattr(exc, "reason", "invalid_token")
    return JSONResponse(
        status_code=401,
        content=http_error_response(
            ErrorCode.AUTHENTICATION_FAILED,
            "Invalid or expired token",
            {"reason": reason},
        ),
        headers={"WWW-Authenticate": "Bearer"},
    )
