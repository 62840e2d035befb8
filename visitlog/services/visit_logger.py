"""
Visit Logging Service

This service records a visit and reads back the most recent ones.
Database failures are wrapped in VisitInsertError / VisitReadError so the
endpoint can report which step failed; the original error text is kept
verbatim in the message.

Design Decisions:
- The raw client address never reaches the database, only a short hash
- Insert and read run sequentially; a failed insert skips the read
"""

import hashlib
import logging
from datetime import datetime, timezone
from typing import Sequence

from visitlog.core.exceptions import VisitInsertError, VisitReadError
from visitlog.db.interface import DatabaseClient
from visitlog.db.models import VisitRecord

logger = logging.getLogger(__name__)

RECENT_VISITS_LIMIT = 10
ADDRESS_HASH_LENGTH = 7
HEADER = f"Last {RECENT_VISITS_LIMIT} visits:"


def hash_address(address: str) -> str:
    """
    Obfuscate a client address.

    Args:
        address: Client IP address (or any identifying string)

    Returns:
        First 7 hex characters of the SHA-256 digest of the address
    """
    digest = hashlib.sha256(address.encode("utf-8")).hexdigest()
    return digest[:ADDRESS_HASH_LENGTH]


def format_visit(record: VisitRecord) -> str:
    return f"Time: {record.timestamp}, AddrHash: {record.address_hash}"


def render_visits(records: Sequence[VisitRecord]) -> str:
    """
    Render visits as the plain-text response body.

    The header is followed by one line per visit, joined by newlines, with
    no trailing newline.
    """
    return "\n".join([HEADER, *(format_visit(record) for record in records)])


class VisitLoggerService:
    """
    Service for logging visits and reading recent ones.

    Works with any DatabaseClient implementation.
    """

    def __init__(self, client: DatabaseClient):
        """
        Initialize the visit logger with a database client.

        Args:
            client: Shared database client for the process
        """
        self.client = client

    async def log_visit(self, address: str) -> VisitRecord:
        """
        Record a visit from the given address.

        Args:
            address: Client IP address; only its hash is stored

        Returns:
            The stored VisitRecord

        Raises:
            VisitInsertError: If the database insert fails
        """
        record = VisitRecord(
            timestamp=datetime.now(timezone.utc),
            address_hash=hash_address(address),
        )

        try:
            await self.client.insert(record)
        except Exception as e:
            raise VisitInsertError(e) from e

        return record

    async def get_recent_visits(self, limit: int = RECENT_VISITS_LIMIT) -> Sequence[VisitRecord]:
        """
        Read the most recent visits, newest first.

        Raises:
            VisitReadError: If the database query fails
        """
        try:
            return await self.client.select_recent(limit)
        except Exception as e:
            raise VisitReadError(e) from e
