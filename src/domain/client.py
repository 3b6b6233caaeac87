"""Client Domain Entity

Clients are billed by one or more companies.
"""

from datetime import datetime
from typing import Optional
from sqlmodel import Field, Column
from sqlalchemy import ForeignKey, Integer, String
from src.domain.base import BaseModel, timestamp_column, utcnow


class ClientCompanyLink(BaseModel, table=True):
    """Many-to-many association between clients and companies"""

    __tablename__ = "client_company"

    client_id: int = Field(
        sa_column=Column(Integer, ForeignKey("clients.id", ondelete="CASCADE"), primary_key=True)
    )

    company_id: int = Field(
        sa_column=Column(Integer, ForeignKey("companies.id", ondelete="CASCADE"), primary_key=True)
    )


class Client(BaseModel, table=True):
    """
    Client - Customer receiving invoices

    Domain Rules:
    - Associated with a set of companies through ClientCompanyLink
    - Soft-deleted clients are not counted by the dashboard
    """

    __tablename__ = "clients"

    id: Optional[int] = Field(
        default=None,
        sa_column=Column(Integer, primary_key=True, autoincrement=True),
        description="Unique client identifier (auto-increment)"
    )

    name: str = Field(
        sa_column=Column(String(255), nullable=False),
        description="Client name"
    )

    email: Optional[str] = Field(
        default=None,
        sa_column=Column(String(255), nullable=True),
    )

    phone: Optional[str] = Field(
        default=None,
        sa_column=Column(String(50), nullable=True),
    )

    created_at: datetime = Field(default_factory=utcnow, sa_column=timestamp_column())
    updated_at: datetime = Field(default_factory=utcnow, sa_column=timestamp_column())
    deleted_at: Optional[datetime] = Field(default=None, sa_column=timestamp_column(nullable=True))
