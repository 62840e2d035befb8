"""
Database Models for the Visit Logger Service

This module defines:
- VisitRecord: the immutable record the service appends and reads back
- Visit: the SQLModel table backing it

Design Decisions:
- The address hash column keeps its historical name ``userIp`` so existing
  tables created by earlier deployments stay compatible
- Index on timestamp for the newest-first query
- Microsecond precision on MySQL so close visits still order correctly
"""

from datetime import datetime
from typing import Optional, Union

from pydantic import BaseModel, ConfigDict
from sqlalchemy import DateTime, String
from sqlalchemy.dialects import mysql
from sqlmodel import SQLModel, Field, Column


class VisitRecord(BaseModel):
    """
    A single recorded visit.

    Fields:
    - timestamp: When the visit happened (datetime from SQL clients, but any
      client may hand back its own textual form)
    - address_hash: Opaque hash of the visitor address, never the raw address
    """
    model_config = ConfigDict(frozen=True)

    timestamp: Union[datetime, str]
    address_hash: str


class Visit(SQLModel, table=True):
    """
    Visits table.

    Fields:
    - id: Auto-incrementing primary key (tie-break for equal timestamps)
    - timestamp: Time of the visit
    - address_hash: Hashed visitor address, stored in column ``userIp``
    """
    __tablename__ = "visits"

    id: Optional[int] = Field(default=None, primary_key=True)
    timestamp: datetime = Field(
        sa_column=Column(
            DateTime(timezone=True).with_variant(mysql.DATETIME(fsp=6), "mysql"),
            nullable=False,
            index=True,
        )
    )
    address_hash: str = Field(sa_column=Column("userIp", String(64), nullable=False))

    @classmethod
    def from_record(cls, record: VisitRecord) -> "Visit":
        return cls(timestamp=record.timestamp, address_hash=record.address_hash)
