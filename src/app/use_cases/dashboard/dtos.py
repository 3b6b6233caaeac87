"""Data Transfer Objects for the dashboard statistics use case."""

import datetime as dt
from decimal import Decimal
from typing import List, Optional
from pydantic import BaseModel, Field


class InvoiceStatusCountDTO(BaseModel):
    """
    Invoice counts per status bucket

    unpaid merges unpaid and partially_paid; total counts every status,
    including ones outside the named buckets.
    """

    paid: int = 0
    unpaid: int = 0
    draft: int = 0
    total: int = 0


class FinancialSummaryDTO(BaseModel):
    expenses: Decimal = Field(default=Decimal("0.00"), description="Sum of quantity * cost_price")
    revenue: Decimal = Field(default=Decimal("0.00"), description="Sum of stored line totals")
    profit: Decimal = Field(default=Decimal("0.00"), description="revenue - expenses, per item")


class YearlyFinancialDTO(FinancialSummaryDTO):
    year: int


class ClientSnapshotDTO(BaseModel):
    id: int
    name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None


class CompanySnapshotDTO(BaseModel):
    id: int
    name: Optional[str] = None


class OutstandingInvoiceDTO(BaseModel):
    invoice_number: str
    total: Decimal
    balance_due: Decimal = Field(..., description="Outstanding amount counted for this invoice")
    due_date: Optional[dt.date] = None
    status: str


class ClientOutstandingDTO(BaseModel):
    client: ClientSnapshotDTO
    company: Optional[CompanySnapshotDTO] = None
    total_outstanding: Decimal = Decimal("0.00")
    invoice_count: int = 0
    invoices: List[OutstandingInvoiceDTO] = Field(default_factory=list)


class StatisticsResponseDTO(BaseModel):
    """Response DTO for the analytics dashboard"""

    total_clients: int = 0
    total_unpaid_invoices: int = 0
    invoice_status: InvoiceStatusCountDTO = Field(default_factory=InvoiceStatusCountDTO)
    financial: FinancialSummaryDTO = Field(default_factory=FinancialSummaryDTO)
    yearly_financial: List[YearlyFinancialDTO] = Field(default_factory=list)
    clients_with_outstanding: List[ClientOutstandingDTO] = Field(default_factory=list)

    class Config:
        json_schema_extra = {
            "example": {
                "total_clients": 12,
                "total_unpaid_invoices": 2,
                "invoice_status": {"paid": 5, "unpaid": 2, "draft": 1, "total": 8},
                "financial": {"expenses": "65.00", "revenue": "120.00", "profit": "55.00"},
                "yearly_financial": [
                    {"year": 2025, "expenses": "65.00", "revenue": "120.00", "profit": "55.00"}
                ],
                "clients_with_outstanding": [
                    {
                        "client": {"id": 3, "name": "Acme", "email": "ap@acme.test", "phone": None},
                        "company": {"id": 1, "name": "Alpa Studio"},
                        "total_outstanding": "140.00",
                        "invoice_count": 2,
                        "invoices": [
                            {"invoice_number": "#ALPA-2025-01", "total": "100.00",
                             "balance_due": "100.00", "due_date": "2025-02-01", "status": "unpaid"},
                        ],
                    }
                ],
            }
        }
