"""Shared base for table models."""

from datetime import datetime, timezone
from sqlmodel import SQLModel, Column
from sqlalchemy import DateTime


def utcnow() -> datetime:
    """Timezone-aware current UTC time used for every audit timestamp"""
    return datetime.now(timezone.utc)


def timestamp_column(nullable: bool = False) -> Column:
    return Column(DateTime(timezone=True), nullable=nullable)


class BaseModel(SQLModel):
    """Base class for every persisted entity"""
    pass
