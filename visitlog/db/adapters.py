"""
MySQL and PostgreSQL Dialect Adapters

This module implements the DialectAdapter interface for the two supported
engine selectors. All engine-specific configuration is encapsulated here:

- mysql -> mysql+aiomysql, Cloud SQL socket passed as ``unix_socket``
- pg    -> postgresql+asyncpg, Cloud SQL socket directory passed as ``host``

Without a socket path both connect over TCP to ``connection.host``
(``localhost`` when unset).
"""

from abc import abstractmethod
from typing import Any

from sqlalchemy.engine import URL
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine

from visitlog.core.setting import ConnectionParams, SqlClient
from visitlog.db.interface import DialectAdapter

DEFAULT_HOST = "localhost"


class ServerDialectAdapter(DialectAdapter):
    """
    Shared behaviour for client/server databases.

    Subclasses provide the driver name and how a Unix socket is passed to
    their driver.
    """

    drivername: str = ""

    @abstractmethod
    def socket_query(self, socket_path: str) -> dict[str, str]:
        """Query parameters that point the driver at a Unix socket."""
        pass

    def build_url(self, connection: ConnectionParams) -> URL:
        if connection.socket_path:
            host = None
            query = self.socket_query(connection.socket_path)
        else:
            host = connection.host or DEFAULT_HOST
            query = {}

        return URL.create(
            self.drivername,
            username=connection.user,
            password=connection.password,
            host=host,
            database=connection.database,
            query=query,
        )

    def create_engine(self, connection: ConnectionParams, **kwargs) -> AsyncEngine:
        """
        Create the async engine for this backend.

        The engine connects lazily, so building it never touches the network.
        """
        engine_kwargs = self.get_engine_kwargs()
        engine_kwargs.update(kwargs)

        return create_async_engine(
            self.build_url(connection),
            connect_args=self.get_connect_args(),
            **engine_kwargs
        )

    def get_connect_args(self) -> dict[str, Any]:
        return {}

    def get_engine_kwargs(self) -> dict[str, Any]:
        return {
            "echo": False,
            "pool_pre_ping": True,
        }


class MySQLAdapter(ServerDialectAdapter):
    """MySQL adapter using the aiomysql driver."""

    drivername = "mysql+aiomysql"

    def socket_query(self, socket_path: str) -> dict[str, str]:
        return {"unix_socket": socket_path}

    def get_dialect_name(self) -> str:
        return "mysql"


class PostgreSQLAdapter(ServerDialectAdapter):
    """PostgreSQL adapter using the asyncpg driver."""

    drivername = "postgresql+asyncpg"

    def socket_query(self, socket_path: str) -> dict[str, str]:
        # asyncpg treats a directory as the location of the .s.PGSQL socket
        return {"host": socket_path}

    def get_dialect_name(self) -> str:
        return "postgresql"


_ADAPTERS: dict[SqlClient, type[ServerDialectAdapter]] = {
    SqlClient.mysql: MySQLAdapter,
    SqlClient.pg: PostgreSQLAdapter,
}


def get_dialect_adapter(client: SqlClient) -> DialectAdapter:
    """
    Factory function to get the adapter for an engine selector.

    Args:
        client: Validated engine selector

    Returns:
        DialectAdapter instance
    """
    return _ADAPTERS[client]()
