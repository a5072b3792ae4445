"""Application settings using pydantic-settings.

Settings are loaded from environment variables (and an optional ``.env``
file). Variable names follow the Cloud Run deployment contract, so no
prefix is applied.
"""

from functools import lru_cache

from pydantic import Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict


class DatabaseSettings(BaseSettings):
    """Database connection settings.

    Environment variables:
        INSTANCE_HOST: Database host; when set, the TCP transport is used
        INSTANCE_UNIX_SOCKET: Socket directory or instance connection name;
            used when INSTANCE_HOST is unset
        DB_PORT: Database port (default: 5432)
        DB_USER: Database user
        DB_PASS: Database password
        DB_NAME: Database name
        DB_ROOT_CERT: Server CA file; when set, TLS is enabled
        DB_KEY: Client private key file
        DB_CERT: Client certificate file
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    instance_host: str | None = Field(default=None, description="Database host")
    instance_unix_socket: str | None = Field(
        default=None,
        description="Unix socket directory or instance connection name",
    )
    db_port: int = Field(default=5432, description="Database port", ge=1, le=65535)
    db_user: str = Field(default="postgres", description="Database username")
    db_pass: SecretStr = Field(
        default=SecretStr(""),
        description="Database password",
    )
    db_name: str = Field(default="postgres", description="Database name")
    db_root_cert: str | None = Field(default=None, description="Server CA file")
    db_key: str | None = Field(default=None, description="Client key file")
    db_cert: str | None = Field(default=None, description="Client certificate file")


class CacheSettings(BaseSettings):
    """Redis cache settings.

    Environment variables:
        REDIS_IP: Cache host (default: localhost)
        REDIS_PORT: Cache port (default: 6379)
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    redis_ip: str = Field(default="localhost", description="Redis host")
    redis_port: int = Field(default=6379, description="Redis port", ge=1, le=65535)


class Settings(BaseSettings):
    """Main application settings aggregating all configuration sections."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    app_name: str = Field(default="Status Service", description="Application name")
    debug: bool = Field(default=False, description="Debug mode")
    port: int = Field(default=8080, description="HTTP listen port", ge=1, le=65535)

    @property
    def database(self) -> DatabaseSettings:
        """Get database settings."""
        return get_database_settings()

    @property
    def cache(self) -> CacheSettings:
        """Get cache settings."""
        return get_cache_settings()


@lru_cache
def get_settings() -> Settings:
    """Get cached application settings.

    Uses lru_cache to ensure settings are only loaded once.
    """
    return Settings()


@lru_cache
def get_database_settings() -> DatabaseSettings:
    """Get cached database settings.

    Uses lru_cache to ensure settings are only loaded once.
    """
    return DatabaseSettings()


@lru_cache
def get_cache_settings() -> CacheSettings:
    """Get cached cache settings."""
    return CacheSettings()
