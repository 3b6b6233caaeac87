"""Data Transfer Objects for Invoicing Use Cases

Pydantic models for command inputs and response outputs.
"""

import datetime as dt
from decimal import Decimal
from typing import List, Optional
from pydantic import BaseModel, Field

from src.domain.invoice import InvoiceStatus, PaymentTerms


class InvoiceItemCommandDTO(BaseModel):
    """One raw line item supplied on create or update"""

    description: str = Field(..., min_length=1)

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
        description="Internal unit cost (defaults to 0)"
    )

    unit_price: Decimal = Field(
        ...,
        ge=0,
        max_digits=15,
        decimal_places=2,
        description="Unit price billed to the client"
    )


class InvoiceCommandDTO(BaseModel):
    """
    Command DTO for creating or updating an invoice

    On update the item list replaces the stored items entirely.
    """

    company_id: int = Field(..., description="Issuing company ID")
    client_id: int = Field(..., description="Billed client ID")
    date: dt.date = Field(..., description="Invoice date")
    due_date: Optional[dt.date] = Field(default=None)
    payment_terms: PaymentTerms = Field(...)
    status: InvoiceStatus = Field(...)
    items: List[InvoiceItemCommandDTO] = Field(..., min_length=1)
    note: Optional[str] = Field(default=None)

    balance_due: Optional[Decimal] = Field(
        default=None,
        ge=0,
        max_digits=15,
        decimal_places=2,
        description="Remaining amount entered by the operator"
    )

    attachments: List[str] = Field(
        default_factory=list,
        description="References to already stored attachment files"
    )

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
                "note": "Thank you for your business",
            }
        }


class InvoiceItemDTO(BaseModel):
    """Persisted line item"""

    id: int
    description: str
    quantity: Decimal
    cost_price: Decimal
    unit_price: Decimal
    line_total: Decimal


class InvoiceResponseDTO(BaseModel):
    """
    Response DTO for invoice operations

    Returned by CreateInvoice, UpdateInvoice and GetInvoice.
    """

    invoice_id: int = Field(..., description="Invoice ID")
    invoice_number: str = Field(..., description="Invoice number (#ALPA-YYYY-SEQ)")
    company_id: int
    client_id: int
    date: dt.date
    due_date: Optional[dt.date] = None
    payment_terms: str
    status: str
    subtotal: Decimal
    tax_amount: Decimal
    total: Decimal
    balance_due: Optional[Decimal] = None
    note: Optional[str] = None
    attachments: List[str] = Field(default_factory=list)
    items: List[InvoiceItemDTO] = Field(default_factory=list)
    created_at: dt.datetime
    updated_at: dt.datetime

    class Config:
        json_schema_extra = {
            "example": {
                "invoice_id": 7,
                "invoice_number": "#ALPA-2025-07",
                "company_id": 1,
                "client_id": 3,
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
                "items": [
                    {"id": 1, "description": "Design work", "quantity": "2.00",
                     "cost_price": "30.00", "unit_price": "50.00", "line_total": "100.00"},
                ],
                "created_at": "2025-03-01T10:00:00Z",
                "updated_at": "2025-03-01T10:00:00Z",
            }
        }


class DeleteInvoiceResponseDTO(BaseModel):
    invoice_id: int
    message: str


class InvoiceListResponseDTO(BaseModel):
    """Every non-deleted invoice, newest first"""

    data: List[InvoiceResponseDTO] = Field(default_factory=list)
    total: int = 0
