"""Invoice Item Repository Interface

Defines the contract for invoice item persistence operations.
"""

from abc import ABC, abstractmethod
from typing import Dict, Iterable, List
from src.domain.invoice_item import InvoiceItem


class InvoiceItemRepository(ABC):
    """
    Repository interface for InvoiceItem persistence

    Items are never edited in place: an invoice's item set is replaced by
    deleting every item and creating the new ones.
    """

    @abstractmethod
    async def get_by_invoice_id(self, invoice_id: int) -> List[InvoiceItem]:
        """
        Retrieve all line items for an invoice in insertion order

        Args:
            invoice_id: Invoice ID

        Returns:
            List of InvoiceItem
        """
        pass

    @abstractmethod
    async def get_by_invoice_ids(self, invoice_ids: Iterable[int]) -> Dict[int, List[InvoiceItem]]:
        """
        Retrieve line items for many invoices at once

        Returns:
            Mapping of invoice ID to its items in insertion order
        """
        pass

    @abstractmethod
    async def create(self, item: InvoiceItem) -> InvoiceItem:
        """
        Create a new invoice item

        Args:
            item: InvoiceItem entity to persist

        Returns:
            Created InvoiceItem with generated ID
        """
        pass

    @abstractmethod
    async def delete_by_invoice_id(self, invoice_id: int) -> int:
        """
        Delete every item of an invoice

        Returns:
            Number of deleted items
        """
        pass
