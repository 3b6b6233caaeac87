"""CreateCompany Use Case"""

import logging
from libs.result import Result, Return, Error
from src.app.services.unit_of_work import UnitOfWork
from src.app.repositories.company_repository import CompanyRepository
from src.domain.company import Company
from .dtos import CompanyCommandDTO, CompanyResponseDTO, build_company_response

logger = logging.getLogger(__name__)


class CreateCompany:

    def __init__(self, uow: UnitOfWork, company_repo: CompanyRepository):
        self.uow = uow
        self.company_repo = company_repo

    async def execute(self, command: CompanyCommandDTO) -> Result[CompanyResponseDTO]:
        try:
            company = await self.company_repo.create(
                Company(
                    name=command.name,
                    address=command.address,
                    phone=command.phone,
                    logo_path=command.logo_path,
                )
            )
            await self.uow.commit()

            logger.info(f"Created company {company.name!r} (id={company.id})")
            return Return.ok(build_company_response(company))

        except Exception as e:
            await self.uow.rollback()
            logger.error(f"Company creation failed: {e}")
            return Return.err(
                Error(
                    code="CREATE_COMPANY_FAILED",
                    message="Could not create company",
                    reason=str(e),
                )
            )
