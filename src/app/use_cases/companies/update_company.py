"""UpdateCompany and DeleteCompany Use Cases"""

import logging
from libs.result import Result, Return, Error
from src.app.services.unit_of_work import UnitOfWork
from src.app.repositories.company_repository import CompanyRepository
from src.app.use_cases.common import not_found_error
from .dtos import (
    CompanyCommandDTO,
    CompanyResponseDTO,
    DeleteCompanyResponseDTO,
    build_company_response,
)

logger = logging.getLogger(__name__)


class UpdateCompany:

    def __init__(self, uow: UnitOfWork, company_repo: CompanyRepository):
        self.uow = uow
        self.company_repo = company_repo

    async def execute(
        self, company_id: int, command: CompanyCommandDTO
    ) -> Result[CompanyResponseDTO]:
        try:
            company = await self.company_repo.get_by_id(company_id)
            if not company:
                return Return.err(not_found_error("company", company_id))

            company.name = command.name
            company.address = command.address
            company.phone = command.phone
            # An omitted logo keeps the stored one
            if command.logo_path is not None:
                company.logo_path = command.logo_path

            updated = await self.company_repo.update(company)
            await self.uow.commit()

            logger.info(f"Updated company id={company_id}")
            return Return.ok(build_company_response(updated))

        except Exception as e:
            await self.uow.rollback()
            logger.error(f"Company update failed for id={company_id}: {e}")
            return Return.err(
                Error(
                    code="UPDATE_COMPANY_FAILED",
                    message="Could not update company",
                    reason=str(e),
                )
            )


class DeleteCompany:
    """
    Use Case: Soft-delete a company

    Its invoices and client links stay in place. The company stops
    resolving for new invoices and disappears from the dashboard snapshots.
    """

    def __init__(self, uow: UnitOfWork, company_repo: CompanyRepository):
        self.uow = uow
        self.company_repo = company_repo

    async def execute(self, company_id: int) -> Result[DeleteCompanyResponseDTO]:
        try:
            company = await self.company_repo.get_by_id(company_id)
            if not company:
                return Return.err(not_found_error("company", company_id))

            await self.company_repo.soft_delete(company)
            await self.uow.commit()

            logger.info(f"Soft-deleted company id={company_id}")
            return Return.ok(
                DeleteCompanyResponseDTO(
                    company_id=company_id,
                    message="Company deleted successfully",
                )
            )

        except Exception as e:
            await self.uow.rollback()
            logger.error(f"Company deletion failed for id={company_id}: {e}")
            return Return.err(
                Error(
                    code="DELETE_COMPANY_FAILED",
                    message="Could not delete company",
                    reason=str(e),
                )
            )
