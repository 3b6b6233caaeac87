"""CreateClient Use Case"""

import logging
from libs.result import Result, Return, Error
from src.app.services.unit_of_work import UnitOfWork
from src.app.repositories.client_repository import ClientRepository
from src.app.repositories.company_repository import CompanyRepository
from src.app.use_cases.common import validation_error
from src.domain.client import Client
from .dtos import ClientCommandDTO, ClientResponseDTO, build_client_response
from .support import find_company_errors

logger = logging.getLogger(__name__)


class CreateClient:
    """
    Use Case: Create a client linked to one or more companies

    Business Rules:
    1. Every company in company_ids must exist and not be soft-deleted
    2. Client row and links are written in one transaction
    """

    def __init__(
        self,
        uow: UnitOfWork,
        client_repo: ClientRepository,
        company_repo: CompanyRepository,
    ):
        self.uow = uow
        self.client_repo = client_repo
        self.company_repo = company_repo

    async def execute(self, command: ClientCommandDTO) -> Result[ClientResponseDTO]:
        try:
            errors = await find_company_errors(command.company_ids, self.company_repo)
            if errors:
                return Return.err(validation_error(errors))

            client = await self.client_repo.create(
                Client(name=command.name, email=command.email, phone=command.phone)
            )
            await self.client_repo.sync_companies(client.id, command.company_ids)
            companies = await self.client_repo.get_companies(client.id)
            await self.uow.commit()

            logger.info(
                f"Created client {client.name!r} (id={client.id}, companies={len(companies)})"
            )
            return Return.ok(build_client_response(client, companies))

        except Exception as e:
            await self.uow.rollback()
            logger.error(f"Client creation failed: {e}")
            return Return.err(
                Error(
                    code="CREATE_CLIENT_FAILED",
                    message="Could not create client",
                    reason=str(e),
                )
            )
