"""UpdateInvoice Use Case

Replaces an invoice's header fields and its entire item set.
"""

import logging
from libs.result import Result, Return, Error
from src.app.services.unit_of_work import UnitOfWork
from src.app.repositories.invoice_repository import InvoiceRepository
from src.app.repositories.invoice_item_repository import InvoiceItemRepository
from src.app.repositories.client_repository import ClientRepository
from src.app.repositories.company_repository import CompanyRepository
from src.domain.invoice_totals import EmptyInvoiceError, compute_invoice_totals
from src.app.use_cases.common import validation_error
from .dtos import InvoiceCommandDTO, InvoiceResponseDTO
from .support import build_invoice_response, build_items, find_reference_errors

logger = logging.getLogger(__name__)


class UpdateInvoice:
    """
    Use Case: Update an invoice

    Business Rules:
    1. Invoice must exist and not be soft-deleted
    2. Totals are recomputed from the replacement items only
    3. Old items are deleted, new ones created (no merging)
    4. invoice_number never changes
    5. New attachment references are appended to the stored ones
    """

    def __init__(
        self,
        uow: UnitOfWork,
        invoice_repo: InvoiceRepository,
        item_repo: InvoiceItemRepository,
        company_repo: CompanyRepository,
        client_repo: ClientRepository,
    ):
        self.uow = uow
        self.invoice_repo = invoice_repo
        self.item_repo = item_repo
        self.company_repo = company_repo
        self.client_repo = client_repo

    async def execute(
        self, invoice_id: int, command: InvoiceCommandDTO
    ) -> Result[InvoiceResponseDTO]:
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

            errors = await find_reference_errors(command, self.company_repo, self.client_repo)
            if errors:
                return Return.err(validation_error(errors))

            totals = compute_invoice_totals(command.items)

            attachments = list(invoice.attachments or [])
            attachments.extend(a for a in command.attachments if a not in attachments)

            invoice.company_id = command.company_id
            invoice.client_id = command.client_id
            invoice.date = command.date
            invoice.due_date = command.due_date
            invoice.payment_terms = command.payment_terms
            invoice.status = command.status
            invoice.subtotal = totals.subtotal
            invoice.tax_amount = totals.tax_amount
            invoice.total = totals.total
            invoice.balance_due = command.balance_due
            invoice.note = command.note
            invoice.attachments = attachments

            updated_invoice = await self.invoice_repo.update(invoice)

            removed = await self.item_repo.delete_by_invoice_id(updated_invoice.id)
            items = [
                await self.item_repo.create(item)
                for item in build_items(updated_invoice.id, totals)
            ]

            await self.uow.commit()

            logger.info(
                f"Updated invoice {updated_invoice.invoice_number} "
                f"(replaced {removed} items with {len(items)}, total={updated_invoice.total})"
            )
            return Return.ok(build_invoice_response(updated_invoice, items))

        except EmptyInvoiceError as e:
            return Return.err(validation_error({"items": [str(e)]}))

        except Exception as e:
            await self.uow.rollback()
            logger.error(f"Invoice update failed for id={invoice_id}: {e}")
            return Return.err(
                Error(
                    code="UPDATE_INVOICE_FAILED",
                    message="Could not update invoice",
                    reason=str(e),
                )
            )
