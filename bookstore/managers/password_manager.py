"""
Password hashing and password policy.

Hashing uses bcrypt. bcrypt is deliberately slow, so hashing and
verification run in a worker thread to keep the event loop responsive.
"""

import asyncio

import bcrypt

from bookstore.constants import PASSWORD_MAX_BYTES, PASSWORD_MIN_LENGTH
from bookstore.logging import logger
from bookstore.schemas.errors import FieldError


class PasswordPolicy:
    """
    Rules a new password must satisfy.

    A password needs at least ``min_length`` characters, a digit, a
    lowercase letter, an uppercase letter and a non-alphanumeric character.
    """

    def __init__(self, min_length: int = PASSWORD_MIN_LENGTH):
        self.min_length = min_length

    def validate(self, password: str) -> list[FieldError]:
        """
        Check a password against every rule.

        Args:
            password: Candidate password in clear text.

        Returns:
            One FieldError per violated rule; empty when the password is
            acceptable.
        """
        messages = []

        if len(password) < self.min_length:
            messages.append(
                f"Passwords must be at least {self.min_length} characters."
            )
        if len(password.encode("utf-8")) > PASSWORD_MAX_BYTES:
            messages.append(
                f"Passwords must be at most {PASSWORD_MAX_BYTES} bytes long."
            )
        if not any(ch.isdigit() for ch in password):
            messages.append("Passwords must have at least one digit ('0'-'9').")
        if not any(ch.islower() for ch in password):
            messages.append(
                "Passwords must have at least one lowercase ('a'-'z')."
            )
        if not any(ch.isupper() for ch in password):
            messages.append(
                "Passwords must have at least one uppercase ('A'-'Z')."
            )
        if all(ch.isalnum() for ch in password):
            messages.append(
                "Passwords must have at least one non alphanumeric character."
            )

        return [FieldError(field="password", message=msg) for msg in messages]


class PasswordManager:
    """
    bcrypt based password hasher.

    Attributes:
        rounds: bcrypt cost factor used for new hashes.
    """

    def __init__(self, rounds: int = 12):
        self.rounds = rounds

    def _hash(self, password: str) -> str:
        salt = bcrypt.gensalt(rounds=self.rounds)
        return bcrypt.hashpw(password.encode("utf-8"), salt).decode("utf-8")

    @staticmethod
    def _verify(password: str, password_hash: str) -> bool:
        try:
            return bcrypt.checkpw(
                password.encode("utf-8"), password_hash.encode("utf-8")
            )
        except ValueError as ex:
            # Malformed stored hash or over-long password
            logger.warning(f"Password verification rejected input: {ex}")
            return False

    async def hash_password(self, password: str) -> str:
        """
        Hash a password with a fresh salt.

        Args:
            password: Clear text password.

        Returns:
            bcrypt hash as text, suitable for storing.
        """
        return await asyncio.to_thread(self._hash, password)

    async def verify_password(self, password: str, password_hash: str) -> bool:
        """
        Check a clear text password against a stored hash.

        Args:
            password: Clear text password.
            password_hash: Hash previously produced by hash_password.

        Returns:
            True if the password matches.
        """
        return await asyncio.to_thread(self._verify, password, password_hash)
