import os
import re

from pydantic import SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        case_sensitive=True, env_file=".env", extra="ignore"
    )

    ENVIRONMENT: str = "development"

    # Database settings (credentials MUST be provided via environment)
    DB_USER: str
    DB_PASSWORD: SecretStr
    DB_HOST: str = "bookstore-db"
    DB_PORT: int = 5432
    DB_NAME: str = "bookstore"
    DB_POOL_SIZE: int = 20
    DB_MAX_OVERFLOW: int = 10
    DB_POOL_RECYCLE: int = 3600
    DB_POOL_PRE_PING: bool = True

    @property
    def DATABASE_URL(self) -> str:
        """Construct the database URL from individual components."""
        password = self.DB_PASSWORD.get_secret_value()
        return (
            f"postgresql+asyncpg://{self.DB_USER}:{password}"
            f"@{self.DB_HOST}:{self.DB_PORT}/{self.DB_NAME}"
        )

    # Database initialization settings
    DB_INIT_RETRY_INTERVAL: int = 2
    DB_INIT_MAX_RETRIES: int = 5

    # Token settings
    JWT_SECRET_KEY: SecretStr
    JWT_ISSUER: str = "bookstore-api"
    JWT_EXPIRE_HOURS: int = 5

    @field_validator("JWT_SECRET_KEY")
    @classmethod
    def validate_jwt_secret(cls, v: SecretStr) -> SecretStr:
        """Refuse short signing secrets in production."""
        if (
            os.getenv("ENVIRONMENT") == "production"
            and len(v.get_secret_value()) < 32
        ):
            raise ValueError(
                "JWT_SECRET_KEY must be at least 32 characters in production"
            )
        return v

    # Credential settings
    BCRYPT_ROUNDS: int = 12

    # Paths reachable without a bearer token
    EXCLUDED_PATHS: re.Pattern = re.compile(
        r"^(/docs|/openapi.json|/health|/api/users/login|/api/users/register)$"
    )

    # Logging settings
    LOG_LEVEL: str = "INFO"
    LOG_FILE_PATH: str = "logs/logging_errors.log"
    LOG_EXCLUDED_PATHS: list[str] = ["/health"]


app_settings = Settings()
