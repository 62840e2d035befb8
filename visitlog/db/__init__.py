"""
Database module with abstraction layer.

This module provides:
- DatabaseClient interface: what the request handler depends on
- SQLDatabaseClient: SQLAlchemy implementation for MySQL and PostgreSQL
- InMemoryDatabaseClient: list-backed implementation for tests
- create_database_client(): builds the client for a validated ServiceConfig

To add a new database backend:
1. Create a new adapter class inheriting from DialectAdapter
2. Register it in get_dialect_adapter() in adapters.py
3. No other code changes needed!
"""

import logging

from visitlog.core.setting import ServiceConfig
from visitlog.db.adapters import get_dialect_adapter
from visitlog.db.interface import DatabaseClient, DialectAdapter
from visitlog.db.memory import InMemoryDatabaseClient
from visitlog.db.sql_client import SQLDatabaseClient

logger = logging.getLogger(__name__)

__all__ = [
    "DatabaseClient",
    "DialectAdapter",
    "InMemoryDatabaseClient",
    "SQLDatabaseClient",
    "create_database_client",
]


def create_database_client(config: ServiceConfig) -> DatabaseClient:
    """
    Build the database client for a validated configuration.

    Called once at startup; the returned client is reused for the lifetime
    of the process.

    Args:
        config: Validated service configuration

    Returns:
        DatabaseClient bound to the selected engine
    """
    adapter = get_dialect_adapter(config.client)
    engine = adapter.create_engine(config.connection)
    logger.info(
        f"Database client created: client={config.client.value}, "
        f"dialect={adapter.get_dialect_name()}, "
        f"database={config.connection.database}"
    )
    return SQLDatabaseClient(engine)
