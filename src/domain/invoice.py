"""Invoice Domain Entity

Invoice header: issuer, client, dates, payment state and computed totals.
"""

import datetime as dt
from decimal import Decimal
from enum import Enum
from typing import List, Optional
from sqlmodel import Field, Column, Index
from sqlalchemy import JSON, Date, Enum as SAEnum, ForeignKey, Integer, Numeric, String, Text
from src.domain.base import BaseModel, timestamp_column, utcnow


class InvoiceStatus(str, Enum):
    """Invoice status types"""
    DRAFT = "draft"
    UNPAID = "unpaid"
    PARTIALLY_PAID = "partially_paid"
    PAID = "paid"
    # Reserved in the schema, never assigned by the API
    OVERDUE = "overdue"
    CANCELLED = "cancelled"


class PaymentTerms(str, Enum):
    """Accepted payment methods"""
    CASH = "cash"
    CREDIT_CARD = "credit_card"
    BANK_TRANSFER = "bank_transfer"


def _enum_column(enum_cls, default) -> Column:
    return Column(
        SAEnum(
            enum_cls,
            values_callable=lambda members: [m.value for m in members],
            native_enum=False,
            length=20,
        ),
        nullable=False,
        default=default,
    )


class Invoice(BaseModel, table=True):
    """
    Invoice - Bill issued by a company to a client

    Domain Rules:
    - invoice_number must be unique (#ALPA-YYYY-SEQ)
    - subtotal is the sum of all invoice_items.line_total
    - tax_amount is always 0, so total == subtotal
    - balance_due is entered by the operator and never derived from total
    - deleted_at marks a soft-deleted invoice
    """

    __tablename__ = "invoices"
    __table_args__ = (
        Index('ix_invoices_status', 'status'),
        Index('ix_invoices_client_id', 'client_id'),
        Index('ix_invoices_invoice_number', 'invoice_number', unique=True),
    )

    id: Optional[int] = Field(
        default=None,
        sa_column=Column(Integer, primary_key=True, autoincrement=True),
        description="Unique invoice identifier (auto-increment)"
    )

    company_id: int = Field(
        sa_column=Column(Integer, ForeignKey("companies.id", ondelete="CASCADE"), nullable=False),
        description="Issuing company"
    )

    client_id: int = Field(
        sa_column=Column(Integer, ForeignKey("clients.id", ondelete="CASCADE"), nullable=False),
        description="Billed client"
    )

    invoice_number: str = Field(
        sa_column=Column(String(50), nullable=False),
        description="Unique invoice number (e.g., #ALPA-2025-07)"
    )

    date: dt.date = Field(
        sa_column=Column(Date, nullable=False),
        description="Invoice date"
    )

    due_date: Optional[dt.date] = Field(
        default=None,
        sa_column=Column(Date, nullable=True),
        description="Payment due date"
    )

    payment_terms: PaymentTerms = Field(
        default=PaymentTerms.CASH,
        sa_column=_enum_column(PaymentTerms, PaymentTerms.CASH.value),
    )

    status: InvoiceStatus = Field(
        default=InvoiceStatus.DRAFT,
        sa_column=_enum_column(InvoiceStatus, InvoiceStatus.DRAFT.value),
    )

    subtotal: Decimal = Field(
        default=Decimal("0.00"),
        sa_column=Column(Numeric(15, 2), nullable=False, default=0),
        description="Sum of line totals"
    )

    tax_amount: Decimal = Field(
        default=Decimal("0.00"),
        sa_column=Column(Numeric(15, 2), nullable=False, default=0),
        description="Tax amount (always 0)"
    )

    total: Decimal = Field(
        default=Decimal("0.00"),
        sa_column=Column(Numeric(15, 2), nullable=False, default=0),
        description="subtotal + tax_amount"
    )

    balance_due: Optional[Decimal] = Field(
        default=None,
        sa_column=Column(Numeric(15, 2), nullable=True),
        description="Remaining amount entered by the operator"
    )

    note: Optional[str] = Field(
        default=None,
        sa_column=Column(Text, nullable=True),
    )

    attachments: List[str] = Field(
        default_factory=list,
        sa_column=Column(JSON, nullable=True),
        description="References to stored attachment files"
    )

    created_at: dt.datetime = Field(
        default_factory=utcnow,
        sa_column=timestamp_column(),
        description="Invoice creation timestamp"
    )

    updated_at: dt.datetime = Field(
        default_factory=utcnow,
        sa_column=timestamp_column(),
        description="Last update timestamp"
    )

    deleted_at: Optional[dt.datetime] = Field(
        default=None,
        sa_column=timestamp_column(nullable=True),
        description="Soft-delete timestamp"
    )

    class Config:
        """SQLModel configuration"""
        json_schema_extra = {
            "example": {
                "id": 1,
                "company_id": 1,
                "client_id": 3,
                "invoice_number": "#ALPA-2025-07",
                "date": "2025-03-01",
                "due_date": "2025-03-31",
                "payment_terms": "bank_transfer",
                "status": "unpaid",
                "subtotal": "120.00",
                "tax_amount": "0.00",
                "total": "120.00",
                "balance_due": None,
                "note": None,
                "attachments": [],
            }
        }
