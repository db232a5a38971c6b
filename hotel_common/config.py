"""Centralized application configuration using Pydantic settings."""
from functools import lru_cache
from typing import List, Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Environment-driven configuration for the reservation API."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    app_name: str = Field(default="Hotel Reservations", description="Title shown in the OpenAPI docs")
    storage_backend: Literal["memory", "sql"] = Field(
        default="memory",
        description="Repository backend. 'memory' keeps records in process memory; 'sql' uses SQLAlchemy.",
    )
    database_url: str = Field(
        default="sqlite:///./hotel.db",
        description="SQLAlchemy database URL used by the 'sql' backend.",
    )
    run_db_migrations: bool = Field(
        default=False,
        description="Whether the 'sql' backend should create database tables on startup.",
    )
    seed_demo_users: bool = Field(default=True, description="Load the admin/staff/customer demo accounts")
    jwt_secret: str = Field(default="super-secret", description="JWT signing secret")
    jwt_algorithm: str = Field(default="HS256", description="JWT signing algorithm")
    access_token_expire_minutes: int = Field(default=60, description="Token lifetime in minutes")
    cors_origins: List[str] = Field(default_factory=lambda: ["*"], description="Allowed CORS origins")
    default_rate_limit: str = Field(default="60/minute", description="Global rate limiting rule")
    login_rate_limit: str = Field(default="10/minute", description="Limit for login attempts per client")
    register_rate_limit: str = Field(default="5/minute", description="Limit for registrations per client")
    rate_limiting_enabled: bool = Field(default=True, description="Toggle to disable SlowAPI limits (useful in tests)")
    room_cache_ttl: int = Field(default=60, description="TTL (s) for cached room search results")
    log_dir: str = Field(default="logs", description="Directory for the request audit logs")

    app_port: int = 8000


@lru_cache
def get_settings() -> Settings:
    """Return a cached instance of the Settings object."""

    return Settings()


def reset_settings_cache() -> None:
    """Clear the cached Settings instance (useful for tests)."""

    get_settings.cache_clear()
