# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Environment-driven settings, one ``BaseSettings`` section per concern.

Every section reads the process environment and ``.env`` on its own, so a
variable such as ``ARGON2_TIME_COST`` reaches ``AppConfig().password``.
"""

from functools import lru_cache
from typing import Annotated, Any

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict

_SECTION_CONFIG = SettingsConfigDict(
    env_file=".env",
    env_file_encoding="utf-8",
    validate_by_name=True,
    extra="ignore",
)

_TRUTHY = frozenset({"1", "true", "yes", "on"})
_INSECURE_SECRET_KEYS = frozenset({"", "dev", "development", "test", "changeme"})


def _env_flag(value: Any) -> bool:
    if isinstance(value, str):
        return value.strip().lower() in _TRUTHY
    return bool(value)


class DatabaseConfig(BaseSettings):
    url: str = Field("sqlite:///todolist.db", alias="DATABASE_URL")
    # ignored for sqlite
    pool_size: int = Field(10, ge=1, alias="DATABASE_POOL_SIZE")
    max_overflow: int = Field(5, ge=0, alias="DATABASE_MAX_OVERFLOW")
    pool_timeout: float = Field(30.0, ge=0.1, alias="DATABASE_POOL_TIMEOUT")

    model_config = _SECTION_CONFIG


class PasswordConfig(BaseSettings):
    # argon2id parameters; memory cost is in KiB
    time_cost: int = Field(3, ge=1, alias="ARGON2_TIME_COST")
    memory_cost: int = Field(65536, ge=8, alias="ARGON2_MEMORY_COST")
    parallelism: int = Field(4, ge=1, alias="ARGON2_PARALLELISM")

    model_config = _SECTION_CONFIG


class LoggingConfig(BaseSettings):
    # unset level follows DEBUG_LOGGING; unset file means stderr only
    level: str | None = Field(None, alias="LOG_LEVEL")
    file: str | None = Field(None, alias="LOG_FILE")

    model_config = _SECTION_CONFIG


class SecurityConfig(BaseSettings):
    session_cookie_name: str = Field("auth", alias="SESSION_COOKIE_NAME")
    session_max_age: int = Field(7 * 24 * 3600, ge=60, alias="SESSION_MAX_AGE")
    cookie_secure: bool = Field(False, alias="COOKIE_SECURE")
    cookie_samesite: str = Field("Lax", alias="COOKIE_SAMESITE")

    allowed_origins: Annotated[list[str], NoDecode] = Field(["*"], alias="ALLOWED_ORIGINS")

    enable_csrf: bool = Field(False, alias="ENABLE_CSRF")
    enable_rate_limit: bool = Field(True, alias="ENABLE_RATE_LIMIT")
    rate_limit_requests: int = Field(10, ge=1, alias="RL_LIMIT")
    rate_limit_window: float = Field(60.0, gt=0, alias="RL_WINDOW")
    enable_hsts: bool = Field(False, alias="ENABLE_HSTS")

    model_config = _SECTION_CONFIG

    @field_validator("allowed_origins", mode="before")
    @classmethod
    def _split_origins(cls, value: Any) -> Any:
        if isinstance(value, str):
            return [part.strip() for part in value.split(",") if part.strip()]
        return value

    @field_validator(
        "cookie_secure", "enable_csrf", "enable_rate_limit", "enable_hsts", mode="before"
    )
    @classmethod
    def _flag(cls, value: Any) -> bool:
        return _env_flag(value)


class AppConfig(BaseSettings):
    app_env: str = Field("development", alias="APP_ENV")
    secret_key: str = Field("dev", alias="SECRET_KEY")
    debug_logging: bool = Field(False, alias="DEBUG_LOGGING")

    database: DatabaseConfig = Field(default_factory=DatabaseConfig)
    password: PasswordConfig = Field(default_factory=PasswordConfig)
    security: SecurityConfig = Field(default_factory=SecurityConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        validate_assignment=True,
        extra="ignore",
    )

    @field_validator("debug_logging", mode="before")
    @classmethod
    def _flag(cls, value: Any) -> bool:
        return _env_flag(value)

    @model_validator(mode="after")
    def _require_real_secret_in_production(self) -> "AppConfig":
        if self.is_production() and self.secret_key.strip().lower() in _INSECURE_SECRET_KEYS:
            raise ValueError(
                "SECRET_KEY signs the session cookie and must be a strong random value "
                "in production"
            )
        return self

    def is_production(self) -> bool:
        return self.app_env.lower() in ("production", "prod")

    def security_warnings(self) -> list[str]:
        """Settings that are acceptable in development but weak in production."""
        if not self.is_production():
            return []
        checks = {
            "CSRF protection is disabled": not self.security.enable_csrf,
            "session cookie is sent without the Secure flag": not self.security.cookie_secure,
            "CORS allows any origin": "*" in self.security.allowed_origins,
            "HSTS is disabled": not self.security.enable_hsts,
        }
        return [message for message, failed in checks.items() if failed]


@lru_cache(maxsize=1)
def load_config() -> AppConfig:
    return AppConfig()  # type: ignore[call-arg]


__all__ = [
    "AppConfig",
    "DatabaseConfig",
    "LoggingConfig",
    "PasswordConfig",
    "SecurityConfig",
    "load_config",
]
