"""ListInvoices Use Case"""

from libs.result import Result, Return, Error
from src.app.repositories.invoice_repository import InvoiceRepository
from src.app.repositories.invoice_item_repository import InvoiceItemRepository
from .dtos import InvoiceListResponseDTO
from .support import build_invoice_response


class ListInvoices:
    """
    Use Case: List every non-deleted invoice with its items

    Newest first. No search, filter or pagination parameters.
    """

    def __init__(
        self,
        invoice_repo: InvoiceRepository,
        item_repo: InvoiceItemRepository,
    ):
        self.invoice_repo = invoice_repo
        self.item_repo = item_repo

    async def execute(self) -> Result[InvoiceListResponseDTO]:
        try:
            invoices = sorted(
                await self.invoice_repo.get_all(),
                key=lambda invoice: invoice.id,
                reverse=True,
            )
            items_by_invoice = await self.item_repo.get_by_invoice_ids(
                invoice.id for invoice in invoices
            )
            return Return.ok(
                InvoiceListResponseDTO(
                    data=[
                        build_invoice_response(invoice, items_by_invoice.get(invoice.id, []))
                        for invoice in invoices
                    ],
                    total=len(invoices),
                )
            )

        except Exception as e:
            return Return.err(
                Error(
                    code="LIST_INVOICES_FAILED",
                    message="Failed to list invoices",
                    reason=str(e),
                )
            )
