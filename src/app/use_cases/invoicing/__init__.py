"""Invoicing use cases"""
from .create_invoice import CreateInvoice
from .update_invoice import UpdateInvoice
from .get_invoice import GetInvoice
from .delete_invoice import DeleteInvoice
from .list_invoices import ListInvoices
from .dtos import (
    InvoiceItemCommandDTO,
    InvoiceCommandDTO,
    InvoiceItemDTO,
    InvoiceResponseDTO,
    DeleteInvoiceResponseDTO,
    InvoiceListResponseDTO,
)

__all__ = [
    "CreateInvoice",
    "UpdateInvoice",
    "GetInvoice",
    "DeleteInvoice",
    "ListInvoices",
    "InvoiceItemCommandDTO",
    "InvoiceCommandDTO",
    "InvoiceItemDTO",
    "InvoiceResponseDTO",
    "DeleteInvoiceResponseDTO",
    "InvoiceListResponseDTO",
]
