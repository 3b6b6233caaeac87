from .invoice_repository import InvoiceRepository, DuplicateInvoiceNumberError
from .invoice_item_repository import InvoiceItemRepository
from .client_repository import ClientRepository
from .company_repository import CompanyRepository

__all__ = [
    "InvoiceRepository",
    "DuplicateInvoiceNumberError",
    "InvoiceItemRepository",
    "ClientRepository",
    "CompanyRepository",
]
