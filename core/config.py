"""
core/config.py -- Centralized application configuration via pydantic-settings.

All environment variable reads for AccountDesk happen here. No module should
call os.getenv() or os.environ.get() directly -- import get_settings() instead.

Design patterns used:
  Singleton via lru_cache: get_settings() instantiates Settings once at first
      call and returns the cached instance on every subsequent call.

  BaseSettings (pydantic-settings): Reads values from environment variables
      and an optional .env file automatically. Field names map to env var names
      (e.g. app_env -> APP_ENV). Type coercion and validation are built in.

  @model_validator(mode="after"): Resolves the effective TLS verification flag
      from APP_ENV and the optional HTTP_VERIFY_TLS override.

Security notes:
  TLS verification may only be disabled when APP_ENV=local. Any other
  environment that asks for HTTP_VERIFY_TLS=false is a hard startup failure.

Layer rule: core/ is the kernel. This module may not import from api/ or auth/.
"""

import logging
from functools import lru_cache
from typing import Optional

from pydantic import field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger("accountdesk.config")

LOCAL_ENV = "local"


class Settings(BaseSettings):
    """Application settings loaded from environment variables and .env file.

    All fields have defaults so Settings() can be instantiated in test
    environments without a real .env file.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # ------------------------------------------------------------------
    # Core
    # ------------------------------------------------------------------

    app_env: str = "production"
    log_level: str = "INFO"

    # ------------------------------------------------------------------
    # Outbound HTTP
    # ------------------------------------------------------------------

    http_timeout: float = 30.0
    # None means "derive from app_env". The validator below always resolves it
    # to a bool, so callers never see None.
    http_verify_tls: Optional[bool] = None

    # ------------------------------------------------------------------
    # OAuth providers (empty string means provider is disabled)
    # ------------------------------------------------------------------

    google_client_id: str = ""
    google_client_secret: str = ""

    @property
    def is_local(self) -> bool:
        return self.app_env.strip().lower() == LOCAL_ENV

    @field_validator("http_timeout")
    @classmethod
    def validate_timeout(cls, value: float) -> float:
        if value <= 0:
            raise ValueError("HTTP_TIMEOUT must be a positive number of seconds.")
        return value

    @model_validator(mode="after")
    def resolve_tls_verification(self) -> "Settings":
        """Default TLS verification to on everywhere except APP_ENV=local.

        Local development: verification is off unless HTTP_VERIFY_TLS=true.
            Developer machines often sit behind intercepting proxies whose
            certificates are not in the system trust store.

        Any other environment: verification is on. An explicit
            HTTP_VERIFY_TLS=false outside local is rejected.
        """
        if self.http_verify_tls is None:
            self.http_verify_tls = not self.is_local
        elif not self.http_verify_tls and not self.is_local:
            raise ValueError(
                "HTTP_VERIFY_TLS=false is only allowed when APP_ENV=local. "
                f"Current APP_ENV is {self.app_env!r}."
            )
        if not self.http_verify_tls:
            logger.warning("TLS certificate verification is DISABLED for outbound HTTP (APP_ENV=local).")
        return self


@lru_cache
def get_settings() -> Settings:
    """Return the application Settings singleton.

    In tests: call get_settings.cache_clear() between test cases if you need
    to inject different environment variables.
    """
    return Settings()
