from .invoice_repository import SqlAlchemyInvoiceRepository
from .invoice_item_repository import SqlAlchemyInvoiceItemRepository
from .client_repository import SqlAlchemyClientRepository
from .company_repository import SqlAlchemyCompanyRepository

__all__ = [
    "SqlAlchemyInvoiceRepository",
    "SqlAlchemyInvoiceItemRepository",
    "SqlAlchemyClientRepository",
    "SqlAlchemyCompanyRepository",
]
