"""
core/config.py -- Centralized configuration via pydantic-settings.

All environment variable reads happen here. No module should call os.getenv()
directly -- import get_settings() instead.

  Singleton via lru_cache: get_settings() builds Settings once at first call
      and returns the cached instance afterwards.

  @model_validator(mode="after"): DEBUG-conditional SECRET_KEY handling. Dev
      mode generates a throwaway key with a warning; production mode refuses
      to start without one.

Layer rule: core/ may not import from api/. The router and response builder in
core/ never read settings -- only the collaborators around them do.
"""

import logging
import secrets
from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger("loginrouter.config")

_DEFAULT_AUTH_DB_URL = f"sqlite:///{Path(__file__).resolve().parent.parent / 'auth' / 'loginrouter_auth.db'}"


class Settings(BaseSettings):
    """Application settings loaded from environment variables and .env file.

    Every field has a default so Settings() works in tests without a .env
    file. Field names map to upper-cased env vars (secret_key -> SECRET_KEY).
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # ------------------------------------------------------------------
    # Core
    # ------------------------------------------------------------------

    debug: bool = False
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    # Empty string means "not configured"; the validator below replaces or rejects it.
    secret_key: str = ""

    # ------------------------------------------------------------------
    # Auth
    # ------------------------------------------------------------------

    token_expire_seconds: int = 3600
    auth_db_url: str = _DEFAULT_AUTH_DB_URL

    # ------------------------------------------------------------------
    # Validators
    # ------------------------------------------------------------------

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, value: object) -> object:
        """Accept any case (LOG_LEVEL=debug) before the Literal check runs."""
        if isinstance(value, str):
            return value.strip().upper()
        return value

    @model_validator(mode="after")
    def validate_secret_key(self) -> "Settings":
        """Enforce the SECRET_KEY policy.

        DEBUG=true: auto-generate a random key with a warning. Issued tokens
            stop verifying after a restart.

        DEBUG unset/false: refuse to start without SECRET_KEY.

        Both modes: keys shorter than 32 characters are rejected.
        """
        if not self.secret_key:
            if self.debug:
                self.secret_key = secrets.token_hex(32)
                logger.warning("Using auto-generated SECRET_KEY. Tokens will not survive a restart.")
            else:
                raise ValueError(
                    "SECRET_KEY is required in production mode. "
                    "Set SECRET_KEY in your environment or .env file. "
                    "To run in development mode, set DEBUG=true."
                )
        if len(self.secret_key) < 32:
            raise ValueError("SECRET_KEY must be at least 32 characters.")
        if self.token_expire_seconds <= 0:
            raise ValueError("TOKEN_EXPIRE_SECONDS must be positive.")
        return self


@lru_cache
def get_settings() -> Settings:
    """Return the application Settings singleton.

    In tests: call get_settings.cache_clear() before and after changing
    environment variables.
    """
    return Settings()
