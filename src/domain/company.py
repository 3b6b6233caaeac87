"""Company Domain Entity

The issuing business shown on an invoice header.
"""

from datetime import datetime
from typing import Optional
from sqlmodel import Field, Column
from sqlalchemy import Integer, String, Text
from src.domain.base import BaseModel, timestamp_column, utcnow


class Company(BaseModel, table=True):
    """
    Company - Issuer of invoices

    Domain Rules:
    - A company may serve many clients (see ClientCompanyLink)
    - Soft-deleted companies keep their invoices
    """

    __tablename__ = "companies"

    id: Optional[int] = Field(
        default=None,
        sa_column=Column(Integer, primary_key=True, autoincrement=True),
        description="Unique company identifier (auto-increment)"
    )

    name: str = Field(
        sa_column=Column(String(255), nullable=False),
        description="Company name"
    )

    address: Optional[str] = Field(
        default=None,
        sa_column=Column(Text, nullable=True),
        description="Postal address printed on invoices"
    )

    phone: Optional[str] = Field(
        default=None,
        sa_column=Column(String(50), nullable=True),
    )

    logo_path: Optional[str] = Field(
        default=None,
        sa_column=Column(String(255), nullable=True),
        description="Reference to the stored logo file"
    )

    created_at: datetime = Field(default_factory=utcnow, sa_column=timestamp_column())
    updated_at: datetime = Field(default_factory=utcnow, sa_column=timestamp_column())
    deleted_at: Optional[datetime] = Field(default=None, sa_column=timestamp_column(nullable=True))
