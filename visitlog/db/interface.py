"""
Database Abstraction Interfaces

This module defines the two abstractions the rest of the codebase depends on:

- DatabaseClient: what the request handler needs (insert a visit, read the
  most recent ones). MySQL, Postgres and in-memory implementations can be
  swapped without touching the handler.
- DialectAdapter: how an async SQLAlchemy engine is built for one engine
  selector. Each backend encapsulates its URL and connection
  options here.
"""

from abc import ABC, abstractmethod
from typing import Any, Sequence

from sqlalchemy.engine import URL
from sqlalchemy.ext.asyncio import AsyncEngine

from visitlog.core.setting import ConnectionParams
from visitlog.db.models import VisitRecord


class DatabaseClient(ABC):
    """
    Abstract base class for visit storage.

    The service holds exactly one instance for its lifetime.
    """

    @abstractmethod
    async def insert(self, record: VisitRecord) -> None:
        """
        Append a visit.

        Args:
            record: The visit to store
        """
        pass

    @abstractmethod
    async def select_recent(self, limit: int) -> Sequence[VisitRecord]:
        """
        Read the most recent visits, newest first.

        Visits with equal timestamps are returned in reverse insertion order.

        Args:
            limit: Maximum number of visits to return

        Returns:
            Sequence of VisitRecord, newest first
        """
        pass

    async def close(self) -> None:
        """Release any resources held by the client."""
        return None


class DialectAdapter(ABC):
    """
    Abstract base class for engine-specific configuration.

    To add a new database backend:
    1. Create a new class inheriting from DialectAdapter
    2. Implement all abstract methods
    3. Register it in get_dialect_adapter()
    """

    @abstractmethod
    def build_url(self, connection: ConnectionParams) -> URL:
        """
        Build the SQLAlchemy URL for the given connection parameters.

        Args:
            connection: Credentials and optional host/socket

        Returns:
            SQLAlchemy URL using an async driver
        """
        pass

    @abstractmethod
    def create_engine(self, connection: ConnectionParams, **kwargs) -> AsyncEngine:
        """
        Create and configure the async database engine.

        Args:
            connection: Credentials and optional host/socket
            **kwargs: Additional engine configuration options

        Returns:
            Configured AsyncEngine instance
        """
        pass

    @abstractmethod
    def get_connect_args(self) -> dict[str, Any]:
        """
        Get connection arguments specific to this database type.

        Returns:
            Dictionary of connection arguments
        """
        pass

    @abstractmethod
    def get_engine_kwargs(self) -> dict[str, Any]:
        """
        Get additional engine configuration specific to this database type.

        Returns:
            Dictionary of engine configuration options
        """
        pass

    @abstractmethod
    def get_dialect_name(self) -> str:
        """
        Get the SQLAlchemy dialect name for this database.

        Returns:
            Dialect name (e.g., 'mysql', 'postgresql')
        """
        pass
