"""GetCompany and ListCompanies Use Cases"""

from libs.result import Result, Return, Error
from src.app.repositories.company_repository import CompanyRepository
from src.app.use_cases.common import not_found_error
from .dtos import CompanyListResponseDTO, CompanyResponseDTO, build_company_response


class GetCompany:

    def __init__(self, company_repo: CompanyRepository):
        self.company_repo = company_repo

    async def execute(self, company_id: int) -> Result[CompanyResponseDTO]:
        try:
            company = await self.company_repo.get_by_id(company_id)
            if not company:
                return Return.err(not_found_error("company", company_id))
            return Return.ok(build_company_response(company))

        except Exception as e:
            return Return.err(
                Error(
                    code="GET_COMPANY_FAILED",
                    message="Failed to retrieve company",
                    reason=str(e),
                )
            )


class ListCompanies:
    """
    Use Case: List every non-deleted company, newest first

    No search, sorting or pagination parameters.
    """

    def __init__(self, company_repo: CompanyRepository):
        self.company_repo = company_repo

    async def execute(self) -> Result[CompanyListResponseDTO]:
        try:
            companies = await self.company_repo.get_all()
            return Return.ok(
                CompanyListResponseDTO(
                    data=[build_company_response(company) for company in companies],
                    total=len(companies),
                )
            )

        except Exception as e:
            return Return.err(
                Error(
                    code="LIST_COMPANIES_FAILED",
                    message="Failed to list companies",
                    reason=str(e),
                )
            )
