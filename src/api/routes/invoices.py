"""Invoice API Routes

FastAPI routes for creating, reading, updating and deleting invoices.
"""

from fastapi import APIRouter, Depends, status
from sqlmodel.ext.asyncio.session import AsyncSession

from config import ApplicationConfig
from src.api.schemas.invoice_request import InvoiceRequestSchema
from src.app.use_cases.invoicing import (
    CreateInvoice,
    DeleteInvoice,
    GetInvoice,
    ListInvoices,
    UpdateInvoice,
    DeleteInvoiceResponseDTO,
    InvoiceCommandDTO,
    InvoiceListResponseDTO,
    InvoiceResponseDTO,
)
from src.adapter.repositories import (
    SqlAlchemyClientRepository,
    SqlAlchemyCompanyRepository,
    SqlAlchemyInvoiceItemRepository,
    SqlAlchemyInvoiceRepository,
)
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.depends import get_session
from src.api.error import ClientError

router = APIRouter(prefix="/invoices", tags=["Invoices"])

ERROR_RESPONSES = {
    404: {
        "description": "Invoice not found",
        "content": {
            "application/json": {
                "example": {
                    "error": {
                        "code": "INVOICE_NOT_FOUND",
                        "message": "Invoice with ID 123 not found"
                    }
                }
            }
        }
    },
    409: {
        "description": "Invoice number conflict after retries",
        "content": {
            "application/json": {
                "example": {
                    "error": {
                        "code": "INVOICE_NUMBER_CONFLICT",
                        "message": "Could not allocate a unique invoice number, please retry"
                    }
                }
            }
        }
    },
    422: {
        "description": "Validation error",
        "content": {
            "application/json": {
                "example": {
                    "error": {
                        "code": "VALIDATION_ERROR",
                        "message": "The given data was invalid.",
                        "details": {"items.0.quantity": ["Input should be greater than or equal to 0.01"]}
                    }
                }
            }
        }
    },
}


def _to_command(request: InvoiceRequestSchema) -> InvoiceCommandDTO:
    return InvoiceCommandDTO.model_validate(request.model_dump())


@router.get("", response_model=InvoiceListResponseDTO, status_code=status.HTTP_200_OK)
async def list_invoices(session: AsyncSession = Depends(get_session)):
    """List every invoice with its line items, newest first."""
    use_case = ListInvoices(
        invoice_repo=SqlAlchemyInvoiceRepository(session),
        item_repo=SqlAlchemyInvoiceItemRepository(session),
    )
    result = await use_case.execute()

    if result.is_err():
        raise ClientError.from_error(result.error)

    return result.value


@router.post(
    "",
    response_model=InvoiceResponseDTO,
    status_code=status.HTTP_201_CREATED,
    responses={code: ERROR_RESPONSES[code] for code in (409, 422)},
)
async def create_invoice(
    request: InvoiceRequestSchema,
    session: AsyncSession = Depends(get_session)
):
    """
    Create an invoice with its line items.

    The invoice number (`#ALPA-YYYY-SEQ`) and all totals are computed by the
    server; `tax_amount` is always 0.

    **Returns:**
    - 201: Invoice created
    - 409: No unique invoice number could be allocated (retry later)
    - 422: Invalid request or unknown company/client
    """
    use_case = CreateInvoice(
        uow=SqlAlchemyUnitOfWork(session),
        invoice_repo=SqlAlchemyInvoiceRepository(session),
        item_repo=SqlAlchemyInvoiceItemRepository(session),
        company_repo=SqlAlchemyCompanyRepository(session),
        client_repo=SqlAlchemyClientRepository(session),
        number_prefix=ApplicationConfig.INVOICE_NUMBER_PREFIX,
        max_attempts=ApplicationConfig.INVOICE_NUMBER_MAX_RETRIES,
    )
    result = await use_case.execute(_to_command(request))

    if result.is_err():
        raise ClientError.from_error(result.error)

    return result.value


@router.get(
    "/{invoice_id}",
    response_model=InvoiceResponseDTO,
    status_code=status.HTTP_200_OK,
    responses={404: ERROR_RESPONSES[404]},
)
async def get_invoice(
    invoice_id: int,
    session: AsyncSession = Depends(get_session)
):
    """Retrieve an invoice with its line items."""
    use_case = GetInvoice(
        invoice_repo=SqlAlchemyInvoiceRepository(session),
        item_repo=SqlAlchemyInvoiceItemRepository(session),
    )
    result = await use_case.execute(invoice_id)

    if result.is_err():
        raise ClientError.from_error(result.error)

    return result.value


@router.put(
    "/{invoice_id}",
    response_model=InvoiceResponseDTO,
    status_code=status.HTTP_200_OK,
    responses={code: ERROR_RESPONSES[code] for code in (404, 422)},
)
async def update_invoice(
    invoice_id: int,
    request: InvoiceRequestSchema,
    session: AsyncSession = Depends(get_session)
):
    """
    Update an invoice.

    The submitted items replace the stored ones entirely and the totals are
    recomputed from them. The invoice number is kept.
    """
    use_case = UpdateInvoice(
        uow=SqlAlchemyUnitOfWork(session),
        invoice_repo=SqlAlchemyInvoiceRepository(session),
        item_repo=SqlAlchemyInvoiceItemRepository(session),
        company_repo=SqlAlchemyCompanyRepository(session),
        client_repo=SqlAlchemyClientRepository(session),
    )
    result = await use_case.execute(invoice_id, _to_command(request))

    if result.is_err():
        raise ClientError.from_error(result.error)

    return result.value


@router.delete(
    "/{invoice_id}",
    response_model=DeleteInvoiceResponseDTO,
    status_code=status.HTTP_200_OK,
    responses={404: ERROR_RESPONSES[404]},
)
async def delete_invoice(
    invoice_id: int,
    session: AsyncSession = Depends(get_session)
):
    """Soft-delete an invoice."""
    use_case = DeleteInvoice(
        uow=SqlAlchemyUnitOfWork(session),
        invoice_repo=SqlAlchemyInvoiceRepository(session),
    )
    result = await use_case.execute(invoice_id)

    if result.is_err():
        raise ClientError.from_error(result.error)

    return result.value
