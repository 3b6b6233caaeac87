"""Client API Routes"""

from typing import List
from fastapi import APIRouter, Depends, status
from sqlmodel.ext.asyncio.session import AsyncSession

from src.api.schemas.client_request import ClientRequestSchema
from src.app.use_cases.clients import (
    CreateClient,
    DeleteClient,
    GetClient,
    GetClientCompanies,
    ListClients,
    UpdateClient,
    ClientCommandDTO,
    ClientListResponseDTO,
    ClientResponseDTO,
    DeleteClientResponseDTO,
)
from src.app.use_cases.companies import CompanyResponseDTO
from src.adapter.repositories import SqlAlchemyClientRepository, SqlAlchemyCompanyRepository
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.depends import get_session
from src.api.error import ClientError

router = APIRouter(prefix="/clients", tags=["Clients"])

ERROR_RESPONSES = {
    404: {
        "description": "Client not found",
        "content": {
            "application/json": {
                "example": {
                    "error": {
                        "code": "CLIENT_NOT_FOUND",
                        "message": "Client with ID 3 not found"
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
                        "details": {"company_ids.0": ["The selected company_ids.0 is invalid."]}
                    }
                }
            }
        }
    },
}


def _to_command(request: ClientRequestSchema) -> ClientCommandDTO:
    return ClientCommandDTO.model_validate(request.model_dump())


@router.get("", response_model=ClientListResponseDTO, status_code=status.HTTP_200_OK)
async def list_clients(session: AsyncSession = Depends(get_session)):
    """List every client with its companies, newest first."""
    result = await ListClients(client_repo=SqlAlchemyClientRepository(session)).execute()

    if result.is_err():
        raise ClientError.from_error(result.error)

    return result.value


@router.post(
    "",
    response_model=ClientResponseDTO,
    status_code=status.HTTP_201_CREATED,
    responses={422: ERROR_RESPONSES[422]},
)
async def create_client(
    request: ClientRequestSchema,
    session: AsyncSession = Depends(get_session)
):
    """
    Create a client linked to the given companies.

    **Returns:**
    - 201: Client created
    - 422: Invalid request or unknown company in company_ids
    """
    use_case = CreateClient(
        uow=SqlAlchemyUnitOfWork(session),
        client_repo=SqlAlchemyClientRepository(session),
        company_repo=SqlAlchemyCompanyRepository(session),
    )
    result = await use_case.execute(_to_command(request))

    if result.is_err():
        raise ClientError.from_error(result.error)

    return result.value


@router.get(
    "/{client_id}",
    response_model=ClientResponseDTO,
    status_code=status.HTTP_200_OK,
    responses={404: ERROR_RESPONSES[404]},
)
async def get_client(client_id: int, session: AsyncSession = Depends(get_session)):
    result = await GetClient(client_repo=SqlAlchemyClientRepository(session)).execute(client_id)

    if result.is_err():
        raise ClientError.from_error(result.error)

    return result.value


@router.get(
    "/{client_id}/companies",
    response_model=List[CompanyResponseDTO],
    status_code=status.HTTP_200_OK,
    responses={404: ERROR_RESPONSES[404]},
)
async def get_client_companies(client_id: int, session: AsyncSession = Depends(get_session)):
    """Companies the client is linked to, for the invoice form."""
    use_case = GetClientCompanies(client_repo=SqlAlchemyClientRepository(session))
    result = await use_case.execute(client_id)

    if result.is_err():
        raise ClientError.from_error(result.error)

    return result.value


@router.put(
    "/{client_id}",
    response_model=ClientResponseDTO,
    status_code=status.HTTP_200_OK,
    responses=ERROR_RESPONSES,
)
async def update_client(
    client_id: int,
    request: ClientRequestSchema,
    session: AsyncSession = Depends(get_session)
):
    """Update a client. company_ids replaces its company links."""
    use_case = UpdateClient(
        uow=SqlAlchemyUnitOfWork(session),
        client_repo=SqlAlchemyClientRepository(session),
        company_repo=SqlAlchemyCompanyRepository(session),
    )
    result = await use_case.execute(client_id, _to_command(request))

    if result.is_err():
        raise ClientError.from_error(result.error)

    return result.value


@router.delete(
    "/{client_id}",
    response_model=DeleteClientResponseDTO,
    status_code=status.HTTP_200_OK,
    responses={404: ERROR_RESPONSES[404]},
)
async def delete_client(client_id: int, session: AsyncSession = Depends(get_session)):
    """Soft-delete a client. Its invoices stay in the dashboard."""
    use_case = DeleteClient(
        uow=SqlAlchemyUnitOfWork(session),
        client_repo=SqlAlchemyClientRepository(session),
    )
    result = await use_case.execute(client_id)

    if result.is_err():
        raise ClientError.from_error(result.error)

    return result.value
