"""Transport selection for reaching PostgreSQL.

The database is reached either directly over TCP (optionally with TLS) or
through the Unix socket exposed by a Cloud SQL Auth Proxy sidecar.
"""

from __future__ import annotations

import posixpath
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, TypeAlias

from infrastructure.database.exceptions import TransportNotConfiguredError

if TYPE_CHECKING:
    from infrastructure.settings import DatabaseSettings

__all__ = [
    "CLOUD_SQL_SOCKET_DIR",
    "TcpTransport",
    "TlsMaterial",
    "Transport",
    "UnixSocketTransport",
    "select_transport",
]

# Directory the Cloud SQL proxy mounts instance sockets under
CLOUD_SQL_SOCKET_DIR = "/cloudsql"


@dataclass(frozen=True)
class TlsMaterial:
    """Paths to the certificate files used for a TLS connection.

    Files are only read when the pool is built.
    """

    root_cert: str
    client_key: str | None = None
    client_cert: str | None = None


@dataclass(frozen=True)
class TcpTransport:
    """Direct TCP connection to the database host."""

    host: str
    port: int
    user: str
    password: str = field(repr=False)
    database: str
    tls: TlsMaterial | None = None

    @property
    def kind(self) -> str:
        return "tcp"

    @property
    def address(self) -> str:
        return f"{self.host}:{self.port}"


@dataclass(frozen=True)
class UnixSocketTransport:
    """Connection through a local Unix-domain socket directory."""

    socket_path: str
    user: str
    password: str = field(repr=False)
    database: str

    @property
    def kind(self) -> str:
        return "unix_socket"

    @property
    def address(self) -> str:
        return self.socket_path


Transport: TypeAlias = TcpTransport | UnixSocketTransport


def select_transport(settings: DatabaseSettings) -> Transport:
    """Choose how to reach the database from the given settings.

    INSTANCE_HOST takes precedence over INSTANCE_UNIX_SOCKET.

    Args:
        settings: Database connection settings

    Returns:
        The transport descriptor to build the pool from.

    Raises:
        TransportNotConfiguredError: If neither variable is set.
    """
    password = settings.db_pass.get_secret_value()

    if settings.instance_host:
        tls = None
        if settings.db_root_cert:
            tls = TlsMaterial(
                root_cert=settings.db_root_cert,
                client_key=settings.db_key,
                client_cert=settings.db_cert,
            )
        return TcpTransport(
            host=settings.instance_host,
            port=settings.db_port,
            user=settings.db_user,
            password=password,
            database=settings.db_name,
            tls=tls,
        )

    if settings.instance_unix_socket:
        return UnixSocketTransport(
            socket_path=_socket_path(settings.instance_unix_socket),
            user=settings.db_user,
            password=password,
            database=settings.db_name,
        )

    raise TransportNotConfiguredError()


def _socket_path(value: str) -> str:
    """Resolve an instance connection name to its proxy socket directory."""
    if value.startswith("/"):
        return value
    return posixpath.join(CLOUD_SQL_SOCKET_DIR, value)
