"""
Application settings loaded from environment variables.

Required values (database connection, ``PORT``, ``JWT_SECRET``,
``JWT_EXPIRY_SECONDS``) have no defaults, so a missing one fails
``get_settings()`` at process start instead of surfacing per request.
"""

from functools import lru_cache
from typing import Optional

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings
from sqlalchemy.engine import URL


class Settings(BaseSettings):
    # ── Database ─────────────────────────────────────────────────────────
    database_url: Optional[str] = None   # full URL, overrides the DB_* parts
    db_user: Optional[str] = None
    db_password: Optional[str] = None
    db_host: Optional[str] = None
    db_port: int = 5432
    db_name: Optional[str] = None

    # ── Security Secrets ──────────────────────────────────────────────────
    jwt_secret: str = Field(..., min_length=1)       # HMAC secret for auth tokens
    jwt_expiry_seconds: int = Field(..., gt=0)
    bcrypt_rounds: int = Field(10, ge=4, le=31)

    # ── Server ───────────────────────────────────────────────────────────
    port: int
    host: str = "0.0.0.0"
    debug: bool = False

    model_config = {
        "env_file": ".env",
        "case_sensitive": False,
        "extra": "ignore",
    }

    @model_validator(mode="after")
    def _require_database(self) -> "Settings":
        if self.database_url:
            return self
        missing = [
            name
            for name in ("db_user", "db_password", "db_host", "db_name")
            if not getattr(self, name)
        ]
        if missing:
            raise ValueError(
                "Database configuration incomplete, missing: "
                + ", ".join(name.upper() for name in missing)
            )
        return self

    @property
    def sqlalchemy_url(self) -> str:
        """Async driver URL used by the engine."""
        if self.database_url:
            return self.database_url
        return URL.create(
            "postgresql+asyncpg",
            username=self.db_user,
            password=self.db_password,
            host=self.db_host,
            port=self.db_port,
            database=self.db_name,
        ).render_as_string(hide_password=False)


@lru_cache
def get_settings() -> Settings:
    return Settings()
