"""
In-Memory Database Client

Keeps visits in a list. Used in tests and for running the handler without a
database; nothing is persisted across processes.
"""

from typing import Sequence

from visitlog.db.interface import DatabaseClient
from visitlog.db.models import VisitRecord


class InMemoryDatabaseClient(DatabaseClient):
    """DatabaseClient storing visits in process memory."""

    def __init__(self, records: Sequence[VisitRecord] = ()):
        self.records: list[VisitRecord] = list(records)

    async def insert(self, record: VisitRecord) -> None:
        self.records.append(record)

    async def select_recent(self, limit: int) -> Sequence[VisitRecord]:
        # Visits are appended in time order, so newest first is reverse insertion
        return list(reversed(self.records))[:limit]
