"""
SQL Database Client

DatabaseClient implementation on top of an async SQLAlchemy engine. It works
with any engine produced by a DialectAdapter (MySQL, PostgreSQL) and with
SQLite engines in tests.

Each operation opens its own short-lived session from the session factory:
- insert commits on success and rolls back on any exception
- select_recent only reads

Errors from the driver propagate unchanged; the service layer decides how
to report them.
"""

import logging
from typing import Sequence

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncEngine, async_sessionmaker
from sqlmodel.ext.asyncio.session import AsyncSession as SQLModelAsyncSession

from visitlog.db.interface import DatabaseClient
from visitlog.db.models import Visit, VisitRecord

logger = logging.getLogger(__name__)


class SQLDatabaseClient(DatabaseClient):
    """Visit storage backed by the ``visits`` table."""

    def __init__(self, engine: AsyncEngine):
        """
        Initialize the client with an async engine.

        Args:
            engine: Async engine; connections are opened lazily on first use
        """
        self.engine = engine
        self.session_maker = async_sessionmaker(
            engine,
            class_=SQLModelAsyncSession,
            expire_on_commit=False,
            autoflush=False,
        )

    async def insert(self, record: VisitRecord) -> None:
        async with self.session_maker() as session:
            try:
                session.add(Visit.from_record(record))
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    async def select_recent(self, limit: int) -> Sequence[VisitRecord]:
        statement = (
            select(Visit.timestamp, Visit.address_hash)
            .order_by(Visit.timestamp.desc(), Visit.id.desc())
            .limit(limit)
        )

        async with self.session_maker() as session:
            result = await session.execute(statement)
            rows = result.all()

        return [
            VisitRecord(timestamp=timestamp, address_hash=address_hash)
            for timestamp, address_hash in rows
        ]

    async def close(self) -> None:
        logger.info("Disposing database engine")
        await self.engine.dispose()
