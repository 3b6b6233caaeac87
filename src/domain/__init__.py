from .base import BaseModel
from .company import Company
from .client import Client, ClientCompanyLink
from .invoice import Invoice, InvoiceStatus, PaymentTerms
from .invoice_item import InvoiceItem

__all__ = [
    "BaseModel",
    "Company",
    "Client",
    "ClientCompanyLink",
    "Invoice",
    "InvoiceStatus",
    "PaymentTerms",
    "InvoiceItem",
]
