"""DeleteInvoice Use Case

Soft-deletes an invoice. The row and its items stay in the database but
disappear from every read, including the dashboard statistics.
"""

import logging
from libs.result import Result, Return, Error
from src.app.services.unit_of_work import UnitOfWork
from src.app.repositories.invoice_repository import InvoiceRepository
from .dtos import DeleteInvoiceResponseDTO

logger = logging.getLogger(__name__)


class DeleteInvoice:

    def __init__(self, uow: UnitOfWork, invoice_repo: InvoiceRepository):
        self.uow = uow
        self.invoice_repo = invoice_repo

    async def execute(self, invoice_id: int) -> Result[DeleteInvoiceResponseDTO]:
        try:
            invoice = await self.invoice_repo.get_by_id(invoice_id)
            if not invoice:
                return Return.err(
                    Error(
                        code="INVOICE_NOT_FOUND",
                        message=f"Invoice with ID {invoice_id} not found",
                        reason="Invoice does not exist",
                    )
                )

            await self.invoice_repo.soft_delete(invoice)
            await self.uow.commit()

            logger.info(f"Soft-deleted invoice {invoice.invoice_number} (id={invoice_id})")
            return Return.ok(
                DeleteInvoiceResponseDTO(
                    invoice_id=invoice_id,
                    message="Invoice deleted successfully",
                )
            )

        except Exception as e:
            await self.uow.rollback()
            logger.error(f"Invoice deletion failed for id={invoice_id}: {e}")
            return Return.err(
                Error(
                    code="DELETE_INVOICE_FAILED",
                    message="Could not delete invoice",
                    reason=str(e),
                )
            )
