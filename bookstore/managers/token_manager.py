"""
Issuing and validating signed bearer tokens.

Tokens are HS256 JWTs signed with a symmetric key derived from
``JWT_SECRET_KEY``. Issuer and audience are both ``JWT_ISSUER``.

Claims:
    sub: the user's email address
    jti: random token identifier
    nameid: the user's numeric id
    roles: list of role names
    iss, aud, iat, exp: standard registered claims
"""

import json
import time
from typing import Any
from uuid import uuid4

from jwcrypto import jwk, jwt

from bookstore.models.user import User


class TokenManager:
    """
    Creates and verifies access tokens.

    Attributes:
        issuer: Value used for both the iss and aud claims.
        expire_hours: Token lifetime in hours.
    """

    algorithm = "HS256"

    def __init__(self, secret: str, issuer: str, expire_hours: int = 5):
        self.key = jwk.JWK.from_password(secret)
        self.issuer = issuer
        self.expire_hours = expire_hours

    def issue(self, user: User, now: int | None = None) -> str:
        """
        Create a signed token for a user.

        Args:
            user: Persisted user with roles loaded.
            now: Issue time as unix timestamp, defaults to the current time.

        Returns:
            Compact serialized JWT.
        """
        issued_at = int(time.time()) if now is None else now
        claims = {
            "sub": user.email,
            "jti": str(uuid4()),
            "nameid": user.id,
            "roles": user.role_names,
            "iss": self.issuer,
            "aud": self.issuer,
            "iat": issued_at,
            "exp": issued_at + self.expire_hours * 3600,
        }

        token = jwt.JWT(
            header={"alg": self.algorithm, "typ": "JWT"}, claims=claims
        )
        token.make_signed_token(self.key)
        return token.serialize()

    def decode(self, raw_token: str) -> dict[str, Any]:
        """
        Verify a token and return its claims.

        Args:
            raw_token: Compact serialized JWT.

        Returns:
            The token claims.

        Raises:
            jwcrypto.jwt.JWTExpired: If the token has expired.
            jwcrypto.common.JWException: If the signature, issuer or
                audience do not check out.
            ValueError: If the token cannot be parsed.
        """
        token = jwt.JWT(
            jwt=raw_token,
            key=self.key,
            algs=[self.algorithm],
            check_claims={"iss": self.issuer, "aud": self.issuer, "exp": None},
        )
        return json.loads(token.claims)
