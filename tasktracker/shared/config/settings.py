# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from functools import lru_cache
from pathlib import Path
from typing import Annotated

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict

_DEV_JWT_SECRET = "dev-only-secret-change-me-0123456789abcdef"
_MIN_SECRET_BYTES = 32


def _section_config() -> SettingsConfigDict:
    return SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        validate_by_name=True,
    )


def _parse_bool(value: str | bool) -> bool:
    if isinstance(value, str):
        return value.lower() in ("1", "true", "yes")
    return bool(value)


class DatabaseConfig(BaseSettings):
    url: str = Field("sqlite:///tasktracker.db", alias="DATABASE_URL")
    pool_size: int = Field(10, ge=1, alias="DATABASE_POOL_SIZE")
    max_overflow: int = Field(5, ge=0, alias="DATABASE_MAX_OVERFLOW")
    pool_timeout: float = Field(30.0, ge=0.1, alias="DATABASE_POOL_TIMEOUT")

    model_config = _section_config()

    def is_sqlite(self) -> bool:
        return self.url.startswith("sqlite")


class JwtConfig(BaseSettings):
    secret: str = Field(_DEV_JWT_SECRET, alias="JWT_SECRET")
    expiration_ms: int = Field(86_400_000, ge=1, alias="JWT_EXPIRATION_MS")

    model_config = _section_config()

    @field_validator("secret")
    @classmethod
    def _check_key_size(cls, value: str) -> str:
        # HS256 needs at least a 256-bit key
        if len(value.encode("utf-8")) < _MIN_SECRET_BYTES:
            raise ValueError(f"JWT_SECRET must be at least {_MIN_SECRET_BYTES} bytes")
        return value

    def uses_dev_secret(self) -> bool:
        return self.secret == _DEV_JWT_SECRET


class StaticConfig(BaseSettings):
    directory: Path = Field(Path("static"), alias="STATIC_DIR")
    fallback_document: str = Field("index.html", alias="STATIC_FALLBACK")

    model_config = _section_config()


class SecurityConfig(BaseSettings):
    allowed_origins: Annotated[list[str], NoDecode] = Field(
        ["http://localhost:5173"], alias="ALLOWED_ORIGINS"
    )
    enable_hsts: bool = Field(False, alias="ENABLE_HSTS")

    model_config = _section_config()

    @field_validator("allowed_origins", mode="before")
    @classmethod
    def _parse_origins(cls, value: str | list[str]) -> list[str]:
        if isinstance(value, str):
            return [origin.strip() for origin in value.split(",") if origin.strip()]
        return value

    @field_validator("enable_hsts", mode="before")
    @classmethod
    def _parse_hsts(cls, value: str | bool) -> bool:
        return _parse_bool(value)


class SeedConfig(BaseSettings):
    enabled: bool = Field(True, alias="SEED_DEV_USER")
    username: str = Field("user", alias="SEED_USERNAME")
    password: str = Field("password", alias="SEED_PASSWORD")

    model_config = _section_config()

    @field_validator("enabled", mode="before")
    @classmethod
    def _parse_enabled(cls, value: str | bool) -> bool:
        return _parse_bool(value)


def _database_config_factory() -> DatabaseConfig:
    return DatabaseConfig()  # type: ignore[call-arg]


def _jwt_config_factory() -> JwtConfig:
    return JwtConfig()  # type: ignore[call-arg]


def _static_config_factory() -> StaticConfig:
    return StaticConfig()  # type: ignore[call-arg]


def _security_config_factory() -> SecurityConfig:
    return SecurityConfig()  # type: ignore[call-arg]


def _seed_config_factory() -> SeedConfig:
    return SeedConfig()  # type: ignore[call-arg]


class AppConfig(BaseSettings):
    app_env: str = Field("development", alias="APP_ENV")
    debug_logging: bool = Field(False, alias="DEBUG_LOGGING")
    log_level: str = Field("INFO", alias="LOG_LEVEL")
    log_file: Path | None = Field(None, alias="LOG_FILE")

    database: DatabaseConfig = Field(default_factory=_database_config_factory)
    jwt: JwtConfig = Field(default_factory=_jwt_config_factory)
    static: StaticConfig = Field(default_factory=_static_config_factory)
    security: SecurityConfig = Field(default_factory=_security_config_factory)
    seed: SeedConfig = Field(default_factory=_seed_config_factory)

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        validate_by_name=True,
        validate_assignment=True,
    )

    @field_validator("debug_logging", mode="before")
    @classmethod
    def _parse_debug_logging(cls, value: str | bool) -> bool:
        return _parse_bool(value)

    @model_validator(mode="after")
    def _validate_production_settings(self) -> "AppConfig":
        if self.is_production() and self.jwt.uses_dev_secret():
            raise ValueError(
                "JWT_SECRET must be set to a strong random value in production"
            )
        return self

    def is_production(self) -> bool:
        return self.app_env.lower() in ("production", "prod")

    def should_seed(self) -> bool:
        return self.seed.enabled and not self.is_production()


@lru_cache(maxsize=1)
def load_config() -> AppConfig:
    return AppConfig()  # type: ignore[call-arg]


__all__ = [
    "AppConfig",
    "DatabaseConfig",
    "JwtConfig",
    "SecurityConfig",
    "SeedConfig",
    "StaticConfig",
    "load_config",
]
