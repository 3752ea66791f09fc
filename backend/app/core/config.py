"""
Configuration settings for the course platform backend.

Uses Pydantic settings management for environment variables and configuration.
"""

from typing import Annotated, List
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict
from pydantic import field_validator
import json
import secrets


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.
    """

    # API Settings
    PROJECT_NAME: str = "Course Platform"
    VERSION: str = "1.0.0"
    DESCRIPTION: str = "Backend for user registration and course management"

    # Server
    HOST: str = "0.0.0.0"
    PORT: int = 3000

    # Security
    SECRET_KEY: str = secrets.token_urlsafe(32)
    ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 60 * 24 * 7  # 7 days

    # Database
    DATABASE_URL: str = "mongodb://localhost:27017"
    DATABASE_TIMEOUT_MS: int = 5000
    USER_DB_NAME: str = "userDB"
    USER_COLLECTION: str = "userCollection"
    COURSE_DB_NAME: str = "courseDB"
    COURSE_COLLECTION: str = "courseCollection"

    # CORS
    BACKEND_CORS_ORIGINS: Annotated[List[str], NoDecode] = ["*"]

    @field_validator("BACKEND_CORS_ORIGINS", mode="before")
    @classmethod
    def assemble_cors_origins(cls, v: str | List[str]) -> List[str] | str:
        if isinstance(v, str) and not v.startswith("["):
            return [i.strip() for i in v.split(",") if i.strip()]
        elif isinstance(v, str):
            return json.loads(v)
        elif isinstance(v, list):
            return v
        raise ValueError(v)

    # Logging
    LOG_LEVEL: str = "INFO"

    # Development settings
    DEBUG: bool = False

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True
    )


# Create global settings instance
settings = Settings()
