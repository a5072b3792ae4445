"""Unit test fixtures with mocked dependencies."""

from unittest.mock import AsyncMock, MagicMock

import pytest

CONFIG_ENV_VARS = (
    "INSTANCE_HOST",
    "INSTANCE_UNIX_SOCKET",
    "DB_PORT",
    "DB_USER",
    "DB_PASS",
    "DB_NAME",
    "DB_ROOT_CERT",
    "DB_KEY",
    "DB_CERT",
    "REDIS_IP",
    "REDIS_PORT",
    "PORT",
)


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Run every test without deployment configuration in the environment."""
    for name in CONFIG_ENV_VARS:
        monkeypatch.delenv(name, raising=False)

    from infrastructure import dependencies, settings

    for cached in (
        settings.get_settings,
        settings.get_database_settings,
        settings.get_cache_settings,
        dependencies.get_database_pool_provider,
        dependencies.get_cache_client,
    ):
        cached.cache_clear()
    yield
    for cached in (
        dependencies.get_database_pool_provider,
        dependencies.get_cache_client,
    ):
        cached.cache_clear()


@pytest.fixture
def make_db_settings():
    """Build DatabaseSettings without reading a .env file."""
    from infrastructure.settings import DatabaseSettings

    def _make(**values):
        return DatabaseSettings(_env_file=None, **values)

    return _make


@pytest.fixture
def tcp_db_settings(make_db_settings):
    """Provide test database settings for the TCP transport."""
    return make_db_settings(
        instance_host="10.0.0.3",
        db_port=5432,
        db_user="testuser",
        db_pass="testpass",
        db_name="testdb",
    )


@pytest.fixture
def mock_cache():
    """Provide a cache double that records the probe round trip."""
    cache = MagicMock()
    cache.host = "10.0.0.5"
    cache.set = MagicMock()
    cache.get = AsyncMock(return_value="value!")
    return cache
