"""Company API Routes"""

from fastapi import APIRouter, Depends, status
from sqlmodel.ext.asyncio.session import AsyncSession

from src.api.schemas.company_request import CompanyRequestSchema
from src.app.use_cases.companies import (
    CreateCompany,
    DeleteCompany,
    GetCompany,
    ListCompanies,
    UpdateCompany,
    CompanyCommandDTO,
    CompanyListResponseDTO,
    CompanyResponseDTO,
    DeleteCompanyResponseDTO,
)
from src.adapter.repositories import SqlAlchemyCompanyRepository
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.depends import get_session
from src.api.error import ClientError

router = APIRouter(prefix="/companies", tags=["Companies"])

NOT_FOUND_RESPONSE = {
    404: {
        "description": "Company not found",
        "content": {
            "application/json": {
                "example": {
                    "error": {
                        "code": "COMPANY_NOT_FOUND",
                        "message": "Company with ID 5 not found"
                    }
                }
            }
        }
    }
}


def _to_command(request: CompanyRequestSchema) -> CompanyCommandDTO:
    return CompanyCommandDTO.model_validate(request.model_dump())


@router.get("", response_model=CompanyListResponseDTO, status_code=status.HTTP_200_OK)
async def list_companies(session: AsyncSession = Depends(get_session)):
    """List every company, newest first."""
    result = await ListCompanies(company_repo=SqlAlchemyCompanyRepository(session)).execute()

    if result.is_err():
        raise ClientError.from_error(result.error)

    return result.value


@router.post("", response_model=CompanyResponseDTO, status_code=status.HTTP_201_CREATED)
async def create_company(
    request: CompanyRequestSchema,
    session: AsyncSession = Depends(get_session)
):
    """Create a company."""
    use_case = CreateCompany(
        uow=SqlAlchemyUnitOfWork(session),
        company_repo=SqlAlchemyCompanyRepository(session),
    )
    result = await use_case.execute(_to_command(request))

    if result.is_err():
        raise ClientError.from_error(result.error)

    return result.value


@router.get(
    "/{company_id}",
    response_model=CompanyResponseDTO,
    status_code=status.HTTP_200_OK,
    responses=NOT_FOUND_RESPONSE,
)
async def get_company(company_id: int, session: AsyncSession = Depends(get_session)):
    result = await GetCompany(company_repo=SqlAlchemyCompanyRepository(session)).execute(company_id)

    if result.is_err():
        raise ClientError.from_error(result.error)

    return result.value


@router.put(
    "/{company_id}",
    response_model=CompanyResponseDTO,
    status_code=status.HTTP_200_OK,
    responses=NOT_FOUND_RESPONSE,
)
async def update_company(
    company_id: int,
    request: CompanyRequestSchema,
    session: AsyncSession = Depends(get_session)
):
    """Update a company. An omitted logo_path keeps the stored logo."""
    use_case = UpdateCompany(
        uow=SqlAlchemyUnitOfWork(session),
        company_repo=SqlAlchemyCompanyRepository(session),
    )
    result = await use_case.execute(company_id, _to_command(request))

    if result.is_err():
        raise ClientError.from_error(result.error)

    return result.value


@router.delete(
    "/{company_id}",
    response_model=DeleteCompanyResponseDTO,
    status_code=status.HTTP_200_OK,
    responses=NOT_FOUND_RESPONSE,
)
async def delete_company(company_id: int, session: AsyncSession = Depends(get_session)):
    """Soft-delete a company. Existing invoices keep their company_id."""
    use_case = DeleteCompany(
        uow=SqlAlchemyUnitOfWork(session),
        company_repo=SqlAlchemyCompanyRepository(session),
    )
    result = await use_case.execute(company_id)

    if result.is_err():
        raise ClientError.from_error(result.error)

    return result.value
