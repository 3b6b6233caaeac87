"""GetStatistics Use Case

Builds the analytics dashboard from a full rescan of invoices and items.
"""

import logging
import time
from datetime import date
from typing import Callable, Optional
from libs.result import Result, Return, Error
from src.app.repositories.invoice_repository import InvoiceRepository
from src.app.repositories.invoice_item_repository import InvoiceItemRepository
from src.app.repositories.client_repository import ClientRepository
from src.app.repositories.company_repository import CompanyRepository
from .aggregator import build_statistics, is_outstanding
from .dtos import StatisticsResponseDTO

logger = logging.getLogger(__name__)


class GetStatistics:
    """
    Use Case: Compute dashboard statistics

    Business Rules:
    1. Every call reads the complete non-deleted history, nothing is cached
    2. Read-only: calling twice without writes in between gives equal results
    3. An empty database yields zero counts and empty lists

    Flow:
    1. Load all invoices and their items
    2. Load clients and companies referenced by outstanding invoices
    3. Count clients
    4. Aggregate
    """

    def __init__(
        self,
        invoice_repo: InvoiceRepository,
        item_repo: InvoiceItemRepository,
        client_repo: ClientRepository,
        company_repo: CompanyRepository,
        today: Optional[Callable[[], date]] = None,
    ):
        self.invoice_repo = invoice_repo
        self.item_repo = item_repo
        self.client_repo = client_repo
        self.company_repo = company_repo
        self.today = today or date.today

    async def execute(self) -> Result[StatisticsResponseDTO]:
        start_time = time.time()

        try:
            invoices = await self.invoice_repo.get_all()
            items_by_invoice = await self.item_repo.get_by_invoice_ids(
                invoice.id for invoice in invoices
            )

            outstanding = [invoice for invoice in invoices if is_outstanding(invoice)]
            clients = await self.client_repo.get_by_ids(invoice.client_id for invoice in outstanding)
            companies = await self.company_repo.get_by_ids(invoice.company_id for invoice in outstanding)

            total_clients = await self.client_repo.count()

            statistics = build_statistics(
                total_clients=total_clients,
                invoices=invoices,
                items_by_invoice=items_by_invoice,
                clients=clients,
                companies=companies,
                current_year=self.today().year,
            )

            execution_time_ms = int((time.time() - start_time) * 1000)
            logger.info(
                f"Statistics computed over {len(invoices)} invoices "
                f"({len(statistics.clients_with_outstanding)} clients with outstanding balance) "
                f"in {execution_time_ms}ms"
            )
            return Return.ok(statistics)

        except Exception as e:
            logger.error(f"Statistics computation failed: {e}")
            return Return.err(
                Error(
                    code="STATISTICS_FAILED",
                    message="Failed to compute dashboard statistics",
                    reason=str(e),
                )
            )
