"""Invoice Repository Interface

Defines the contract for invoice persistence operations.
"""

from abc import ABC, abstractmethod
from typing import Optional, List
from src.domain.invoice import Invoice


class DuplicateInvoiceNumberError(Exception):
    """
    Raised when a flush violates the unique constraint on invoice_number

    Signals that another request claimed the same number first; the caller
    should roll back and generate a new number.
    """

    def __init__(self, invoice_number: str):
        super().__init__(f"Invoice number {invoice_number} is already taken")
        self.invoice_number = invoice_number


class InvoiceRepository(ABC):
    """
    Repository interface for Invoice persistence

    Every read excludes soft-deleted invoices, except the invoice number
    scan which must see every number the unique index sees.
    """

    @abstractmethod
    async def create(self, invoice: Invoice) -> Invoice:
        """
        Create a new invoice

        Args:
            invoice: Invoice entity to persist

        Returns:
            Created Invoice with generated ID

        Raises:
            DuplicateInvoiceNumberError: invoice_number already exists
        """
        pass

    @abstractmethod
    async def get_by_id(self, invoice_id: int) -> Optional[Invoice]:
        """
        Retrieve a non-deleted invoice by ID

        Args:
            invoice_id: Invoice ID

        Returns:
            Invoice if found, None otherwise
        """
        pass

    @abstractmethod
    async def get_all(self) -> List[Invoice]:
        """
        Retrieve every non-deleted invoice ordered by ID

        Used by the dashboard full rescan.
        """
        pass

    @abstractmethod
    async def update(self, invoice: Invoice) -> Invoice:
        """
        Update an existing invoice

        Args:
            invoice: Invoice entity with updated values

        Returns:
            Updated Invoice
        """
        pass

    @abstractmethod
    async def soft_delete(self, invoice: Invoice) -> Invoice:
        """Mark an invoice as deleted without removing the row"""
        pass

    @abstractmethod
    async def get_invoice_numbers_with_prefix(self, prefix: str) -> List[str]:
        """
        Retrieve all stored invoice numbers starting with ``prefix``

        Args:
            prefix: Literal prefix, e.g. "#ALPA-2025-"

        Returns:
            List of invoice numbers, soft-deleted invoices included
        """
        pass
