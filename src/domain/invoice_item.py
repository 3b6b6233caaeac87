"""Invoice Item Domain Entity

One billable row of an invoice.
"""

from datetime import datetime
from decimal import Decimal
from typing import Optional
from sqlmodel import Field, Column, Index
from sqlalchemy import ForeignKey, Integer, Numeric, String
from src.domain.base import BaseModel, timestamp_column, utcnow


class InvoiceItem(BaseModel, table=True):
    """
    Invoice Item - Individual line item within an invoice

    Domain Rules:
    - Each item belongs to exactly one invoice
    - line_total = round(quantity * unit_price, 2)
    - cost_price is internal and only used for profit reporting
    - Items are replaced wholesale when the invoice is updated
    """

    __tablename__ = "invoice_items"
    __table_args__ = (
        Index('ix_invoice_items_invoice_id', 'invoice_id'),
    )

    id: Optional[int] = Field(
        default=None,
        sa_column=Column(Integer, primary_key=True, autoincrement=True),
        description="Unique invoice item identifier (auto-increment)"
    )

    invoice_id: int = Field(
        sa_column=Column(Integer, ForeignKey("invoices.id", ondelete="CASCADE"), nullable=False),
        description="Foreign key to Invoice"
    )

    description: str = Field(
        sa_column=Column(String(255), nullable=False),
        description="Line item description"
    )

    quantity: Decimal = Field(
        sa_column=Column(Numeric(15, 2), nullable=False),
    )

    cost_price: Decimal = Field(
        default=Decimal("0.00"),
        sa_column=Column(Numeric(15, 2), nullable=False, default=0),
        description="Internal unit cost, never printed for the client"
    )

    unit_price: Decimal = Field(
        sa_column=Column(Numeric(15, 2), nullable=False),
    )

    line_total: Decimal = Field(
        sa_column=Column(Numeric(15, 2), nullable=False),
        description="quantity * unit_price, rounded to 2 places"
    )

    created_at: datetime = Field(default_factory=utcnow, sa_column=timestamp_column())
