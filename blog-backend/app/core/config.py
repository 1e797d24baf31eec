# File: app/core/config.py

import os
from collections.abc import Mapping
from functools import lru_cache
from typing import List, Optional

from pydantic import BaseModel, Field, ValidationError, field_validator  # BaseSettings not needed

from app.core.exceptions import ConfigurationError

# Environment variables that must be present at startup. No defaults.
REQUIRED_ENV_VARS = ("DATABASE_URL", "JWT_SECRET")


class Settings(BaseModel):
    # Basic app info
    PROJECT_NAME: str = "Blog Backend API"
    VERSION: str = "0.1.0"

    api_v1_prefix: str = "/api/v1"
    debug: bool = False
    log_level: str = "INFO"

    # CORS
    backend_cors_origins: List[str] = []

    # Database
    database_url: str = Field(min_length=1)

    # Token signing
    jwt_secret: str = Field(min_length=1)
    algorithm: str = "HS256"
    # None keeps issued tokens valid indefinitely
    access_token_expire_minutes: Optional[int] = Field(default=None, gt=0)

    @field_validator("backend_cors_origins", mode="before")
    @classmethod
    def assemble_cors_origins(cls, v):
        if isinstance(v, str):
            return [i.strip() for i in v.split(",") if i.strip()]
        if isinstance(v, list):
            return v
        return []

    @field_validator("access_token_expire_minutes", mode="before")
    @classmethod
    def blank_expiry_is_none(cls, v):
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        """
        Build settings from the process environment.

        DATABASE_URL and JWT_SECRET are required; everything else has a
        default. Raises ConfigurationError listing any missing variables.
        """
        env = os.environ if environ is None else environ

        missing = [name for name in REQUIRED_ENV_VARS if not env.get(name)]
        if missing:
            raise ConfigurationError(
                f"Missing required environment variables: {', '.join(missing)}",
                details={"missing": missing},
            )

        values = {
            "database_url": env["DATABASE_URL"],
            "jwt_secret": env["JWT_SECRET"],
            "backend_cors_origins": env.get("BACKEND_CORS_ORIGINS", ""),
            "access_token_expire_minutes": env.get("JWT_EXPIRE_MINUTES"),
        }
        if env.get("JWT_ALGORITHM"):
            values["algorithm"] = env["JWT_ALGORITHM"]
        if env.get("DEBUG"):
            values["debug"] = env["DEBUG"]
        if env.get("LOG_LEVEL"):
            values["log_level"] = env["LOG_LEVEL"].upper()

        try:
            return cls(**values)
        except ValidationError as exc:
            invalid = sorted({str(err["loc"][0]) for err in exc.errors() if err["loc"]})
            raise ConfigurationError(
                f"Invalid configuration values: {', '.join(invalid)}",
                details={"invalid": invalid},
            ) from exc


@lru_cache
def get_settings() -> Settings:
    return Settings.from_env()


settings = get_settings()
