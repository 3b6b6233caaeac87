"""Request schemas for the Invoice API

Pydantic models for validating incoming HTTP requests.
"""

import datetime as dt
from decimal import Decimal
from typing import List, Optional
from pydantic import BaseModel, Field, field_validator

from src.domain.invoice import InvoiceStatus, PaymentTerms

# overdue and cancelled exist in the schema but cannot be set through the API
ASSIGNABLE_STATUSES = (
    InvoiceStatus.DRAFT,
    InvoiceStatus.UNPAID,
    InvoiceStatus.PARTIALLY_PAID,
    InvoiceStatus.PAID,
)


class InvoiceItemRequestSchema(BaseModel):
    description: str = Field(..., min_length=1, max_length=255)

    quantity: Decimal = Field(
        ...,
        ge=Decimal("0.01"),
        max_digits=15,
        decimal_places=2,
        description="Quantity (minimum 0.01)"
    )

    cost_price: Optional[Decimal] = Field(
        default=None,
        ge=0,
        max_digits=15,
        decimal_places=2,
        description="Internal unit cost, defaults to 0"
    )

    unit_price: Decimal = Field(
        ...,
        ge=0,
        max_digits=15,
        decimal_places=2,
    )


class InvoiceRequestSchema(BaseModel):
    """
    Request schema for creating or updating an invoice

    Used for POST /invoices and PUT /invoices/{invoice_id}.
    """

    company_id: int = Field(..., gt=0)
    client_id: int = Field(..., gt=0)
    date: dt.date
    due_date: Optional[dt.date] = None
    payment_terms: PaymentTerms
    status: InvoiceStatus
    items: List[InvoiceItemRequestSchema] = Field(..., min_length=1)
    note: Optional[str] = None

    balance_due: Optional[Decimal] = Field(
        default=None,
        ge=0,
        max_digits=15,
        decimal_places=2,
    )

    attachments: List[str] = Field(default_factory=list)

    @field_validator("status")
    @classmethod
    def validate_status(cls, v):
        """Reserved statuses are rejected"""
        if v not in ASSIGNABLE_STATUSES:
            allowed = ", ".join(s.value for s in ASSIGNABLE_STATUSES)
            raise ValueError(f"Status must be one of: {allowed}")
        return v

    class Config:
        json_schema_extra = {
            "example": {
                "company_id": 1,
                "client_id": 3,
                "date": "2025-03-01",
                "due_date": "2025-03-31",
                "payment_terms": "bank_transfer",
                "status": "unpaid",
                "items": [
                    {"description": "Design work", "quantity": "2", "unit_price": "50.00", "cost_price": "30.00"},
                    {"description": "Hosting", "quantity": "1", "unit_price": "20.00", "cost_price": "5.00"},
                ],
            }
        }
