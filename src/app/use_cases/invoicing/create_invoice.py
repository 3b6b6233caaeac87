"""CreateInvoice Use Case

Creates an invoice and its line items in one transaction.
"""

import logging
from datetime import date
from typing import Callable, Optional
from libs.result import Result, Return, Error
from src.app.services.unit_of_work import UnitOfWork
from src.app.repositories.invoice_repository import (
    DuplicateInvoiceNumberError,
    InvoiceRepository,
)
from src.app.repositories.invoice_item_repository import InvoiceItemRepository
from src.app.repositories.client_repository import ClientRepository
from src.app.repositories.company_repository import CompanyRepository
from src.domain.invoice import Invoice
from src.domain.invoice_number import (
    DEFAULT_INVOICE_PREFIX,
    invoice_number_prefix,
    next_invoice_number,
)
from src.domain.invoice_totals import EmptyInvoiceError, compute_invoice_totals
from src.app.use_cases.common import validation_error
from .dtos import InvoiceCommandDTO, InvoiceResponseDTO
from .support import build_invoice_response, build_items, find_reference_errors

logger = logging.getLogger(__name__)

DEFAULT_MAX_ATTEMPTS = 3


class CreateInvoice:
    """
    Use Case: Create an invoice with its line items

    Business Rules:
    1. company_id and client_id must resolve to existing records
    2. At least one item; line_total = round(quantity * unit_price, 2)
    3. subtotal = sum of line totals, tax_amount = 0, total = subtotal
    4. Invoice number is #ALPA-<current year>-<max sequence + 1>
    5. Invoice and items are committed together or not at all

    Flow:
    1. Validate references
    2. Compute totals
    3. Scan existing numbers of the year and pick the next one
    4. Insert invoice; on a unique-number conflict roll back and go to 3
    5. Insert items, commit, return response
    """

    def __init__(
        self,
        uow: UnitOfWork,
        invoice_repo: InvoiceRepository,
        item_repo: InvoiceItemRepository,
        company_repo: CompanyRepository,
        client_repo: ClientRepository,
        number_prefix: str = DEFAULT_INVOICE_PREFIX,
        max_attempts: int = DEFAULT_MAX_ATTEMPTS,
        today: Optional[Callable[[], date]] = None,
    ):
        self.uow = uow
        self.invoice_repo = invoice_repo
        self.item_repo = item_repo
        self.company_repo = company_repo
        self.client_repo = client_repo
        self.number_prefix = number_prefix
        self.max_attempts = max(1, int(max_attempts))
        self.today = today or date.today

    async def execute(self, command: InvoiceCommandDTO) -> Result[InvoiceResponseDTO]:
        """
        Execute invoice creation

        Args:
            command: InvoiceCommandDTO with header fields and items

        Returns:
            Result[InvoiceResponseDTO]: Created invoice or error
            (VALIDATION_ERROR, INVOICE_NUMBER_CONFLICT, CREATE_INVOICE_FAILED)
        """
        try:
            # Step 1: Validate references
            errors = await find_reference_errors(command, self.company_repo, self.client_repo)
            if errors:
                return Return.err(validation_error(errors))

            # Step 2: Compute totals
            totals = compute_invoice_totals(command.items)

            year = self.today().year
            prefix = invoice_number_prefix(year, self.number_prefix)

            for attempt in range(1, self.max_attempts + 1):
                # Step 3: Generate invoice number from current data
                existing_numbers = await self.invoice_repo.get_invoice_numbers_with_prefix(prefix)
                invoice_number = next_invoice_number(existing_numbers, year, self.number_prefix)

                invoice = Invoice(
                    company_id=command.company_id,
                    client_id=command.client_id,
                    invoice_number=invoice_number,
                    date=command.date,
                    due_date=command.due_date,
                    payment_terms=command.payment_terms,
                    status=command.status,
                    subtotal=totals.subtotal,
                    tax_amount=totals.tax_amount,
                    total=totals.total,
                    balance_due=command.balance_due,
                    note=command.note,
                    attachments=list(command.attachments),
                )

                # Step 4: Insert invoice
                try:
                    created_invoice = await self.invoice_repo.create(invoice)
                except DuplicateInvoiceNumberError:
                    await self.uow.rollback()
                    logger.warning(
                        f"Invoice number {invoice_number} taken concurrently "
                        f"(attempt {attempt}/{self.max_attempts}), rescanning"
                    )
                    continue

                # Step 5: Insert items and commit
                items = [
                    await self.item_repo.create(item)
                    for item in build_items(created_invoice.id, totals)
                ]
                await self.uow.commit()

                logger.info(
                    f"Created invoice {created_invoice.invoice_number} "
                    f"(id={created_invoice.id}, items={len(items)}, total={created_invoice.total})"
                )
                return Return.ok(build_invoice_response(created_invoice, items))

            logger.error(
                f"Could not allocate an invoice number for {year} after {self.max_attempts} attempts"
            )
            return Return.err(
                Error(
                    code="INVOICE_NUMBER_CONFLICT",
                    message="Could not allocate a unique invoice number, please retry",
                    reason=f"Unique constraint conflict on {self.max_attempts} consecutive attempts",
                )
            )

        except EmptyInvoiceError as e:
            return Return.err(validation_error({"items": [str(e)]}))

        except Exception as e:
            await self.uow.rollback()
            logger.error(f"Invoice creation failed: {e}")
            return Return.err(
                Error(
                    code="CREATE_INVOICE_FAILED",
                    message="Could not create invoice",
                    reason=str(e),
                )
            )
