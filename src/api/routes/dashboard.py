"""Dashboard API Routes"""

from fastapi import APIRouter, Depends, status
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.use_cases.dashboard import GetStatistics, StatisticsResponseDTO
from src.adapter.repositories import (
    SqlAlchemyClientRepository,
    SqlAlchemyCompanyRepository,
    SqlAlchemyInvoiceItemRepository,
    SqlAlchemyInvoiceRepository,
)
from src.depends import get_session
from src.api.error import ClientError

router = APIRouter(prefix="/dashboard", tags=["Dashboard"])


@router.get(
    "/statistics",
    response_model=StatisticsResponseDTO,
    status_code=status.HTTP_200_OK,
)
async def get_statistics(session: AsyncSession = Depends(get_session)):
    """
    Financial statistics for the analytics dashboard.

    Recomputed from every non-deleted invoice on each call.

    **Example response:**
    ```json
    {
      "total_clients": 12,
      "total_unpaid_invoices": 2,
      "invoice_status": {"paid": 5, "unpaid": 2, "draft": 1, "total": 8},
      "financial": {"expenses": "65.00", "revenue": "120.00", "profit": "55.00"},
      "yearly_financial": [{"year": 2025, "expenses": "65.00", "revenue": "120.00", "profit": "55.00"}],
      "clients_with_outstanding": [...]
    }
    ```
    """
    use_case = GetStatistics(
        invoice_repo=SqlAlchemyInvoiceRepository(session),
        item_repo=SqlAlchemyInvoiceItemRepository(session),
        client_repo=SqlAlchemyClientRepository(session),
        company_repo=SqlAlchemyCompanyRepository(session),
    )
    result = await use_case.execute()

    if result.is_err():
        raise ClientError.from_error(result.error)

    return result.value
