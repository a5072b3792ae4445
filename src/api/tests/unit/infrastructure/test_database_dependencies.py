"""Unit tests for the lazily-initialized pool provider."""

import asyncio
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from infrastructure.database.dependencies import DatabasePoolProvider
from infrastructure.database.engines import PoolConfiguration
from infrastructure.database.exceptions import (
    TlsMaterialError,
    TransportNotConfiguredError,
)
from infrastructure.database.transport import TcpTransport
from infrastructure.dependencies import get_database_pool_provider


class TestGetEngine:
    """Tests for DatabasePoolProvider.get_engine."""

    @pytest.mark.asyncio
    async def test_builds_engine_on_first_call(self, tcp_db_settings):
        probe = MagicMock()
        provider = DatabasePoolProvider(lambda: tcp_db_settings, probe=probe)
        assert provider.engine is None

        with patch(
            "infrastructure.database.dependencies.create_pool_engine"
        ) as mock_create:
            engine = await provider.get_engine()

        assert engine is mock_create.return_value
        assert provider.engine is engine
        transport = mock_create.call_args.args[0]
        assert isinstance(transport, TcpTransport)
        assert transport.host == "10.0.0.3"
        probe.pool_initialized.assert_called_once_with(
            transport="tcp",
            address="10.0.0.3:5432",
            min_conn=5,
            max_conn=5,
        )

    @pytest.mark.asyncio
    async def test_reuses_engine(self, tcp_db_settings):
        provider = DatabasePoolProvider(lambda: tcp_db_settings, probe=MagicMock())

        with patch(
            "infrastructure.database.dependencies.create_pool_engine"
        ) as mock_create:
            first = await provider.get_engine()
            second = await provider.get_engine()

        assert first is second
        mock_create.assert_called_once()

    @pytest.mark.asyncio
    async def test_concurrent_first_callers_share_one_construction(
        self, tcp_db_settings
    ):
        settings_factory = MagicMock(return_value=tcp_db_settings)
        provider = DatabasePoolProvider(settings_factory, probe=MagicMock())

        with patch(
            "infrastructure.database.dependencies.create_pool_engine",
            side_effect=lambda *args, **kwargs: MagicMock(),
        ) as mock_create:
            engines = await asyncio.gather(
                *(provider.get_engine() for _ in range(20))
            )

        mock_create.assert_called_once()
        settings_factory.assert_called_once()
        assert all(engine is engines[0] for engine in engines)

    @pytest.mark.asyncio
    async def test_passes_pool_configuration(self, tcp_db_settings):
        config = PoolConfiguration(max_connections=3, min_connections=1)
        probe = MagicMock()
        provider = DatabasePoolProvider(
            lambda: tcp_db_settings, config=config, probe=probe
        )

        with patch(
            "infrastructure.database.dependencies.create_pool_engine"
        ) as mock_create:
            await provider.get_engine()

        assert mock_create.call_args.args[1] is config
        assert mock_create.call_args.kwargs["probe"] is probe

    @pytest.mark.asyncio
    async def test_missing_transport_raises_configuration_error(
        self, make_db_settings
    ):
        probe = MagicMock()
        provider = DatabasePoolProvider(lambda: make_db_settings(), probe=probe)

        with pytest.raises(TransportNotConfiguredError):
            await provider.get_engine()

        assert provider.engine is None
        probe.pool_initialization_failed.assert_called_once()

    @pytest.mark.asyncio
    async def test_unreadable_certificate_raises(self, make_db_settings, tmp_path):
        settings = make_db_settings(
            instance_host="127.0.0.1",
            db_root_cert=str(tmp_path / "missing-ca.pem"),
        )
        provider = DatabasePoolProvider(lambda: settings, probe=MagicMock())

        with pytest.raises(TlsMaterialError):
            await provider.get_engine()

    @pytest.mark.asyncio
    async def test_failure_is_not_cached(self, make_db_settings, tcp_db_settings):
        settings = iter([make_db_settings(), tcp_db_settings])
        provider = DatabasePoolProvider(lambda: next(settings), probe=MagicMock())

        with patch("infrastructure.database.dependencies.create_pool_engine"):
            with pytest.raises(TransportNotConfiguredError):
                await provider.get_engine()

            engine = await provider.get_engine()

        assert engine is not None


class TestClose:
    """Tests for DatabasePoolProvider.close."""

    @pytest.mark.asyncio
    async def test_disposes_built_engine(self, tcp_db_settings):
        probe = MagicMock()
        provider = DatabasePoolProvider(lambda: tcp_db_settings, probe=probe)
        engine = MagicMock()
        engine.dispose = AsyncMock()

        with patch(
            "infrastructure.database.dependencies.create_pool_engine",
            return_value=engine,
        ):
            await provider.get_engine()
        await provider.close()

        engine.dispose.assert_awaited_once()
        probe.pool_closed.assert_called_once()
        assert provider.engine is None

    @pytest.mark.asyncio
    async def test_close_without_engine_is_a_no_op(self, tcp_db_settings):
        probe = MagicMock()
        provider = DatabasePoolProvider(lambda: tcp_db_settings, probe=probe)

        await provider.close()

        probe.pool_closed.assert_not_called()


def test_provider_is_application_scoped():
    """The shared provider is created once per process."""
    assert get_database_pool_provider() is get_database_pool_provider()
