"""UpdateClient and DeleteClient Use Cases"""

import logging
from libs.result import Result, Return, Error
from src.app.services.unit_of_work import UnitOfWork
from src.app.repositories.client_repository import ClientRepository
from src.app.repositories.company_repository import CompanyRepository
from src.app.use_cases.common import not_found_error, validation_error
from .dtos import (
    ClientCommandDTO,
    ClientResponseDTO,
    DeleteClientResponseDTO,
    build_client_response,
)
from .support import find_company_errors

logger = logging.getLogger(__name__)


class UpdateClient:

    def __init__(
        self,
        uow: UnitOfWork,
        client_repo: ClientRepository,
        company_repo: CompanyRepository,
    ):
        self.uow = uow
        self.client_repo = client_repo
        self.company_repo = company_repo

    async def execute(
        self, client_id: int, command: ClientCommandDTO
    ) -> Result[ClientResponseDTO]:
        try:
            client = await self.client_repo.get_by_id(client_id)
            if not client:
                return Return.err(not_found_error("client", client_id))

            errors = await find_company_errors(command.company_ids, self.company_repo)
            if errors:
                return Return.err(validation_error(errors))

            client.name = command.name
            client.email = command.email
            client.phone = command.phone

            updated = await self.client_repo.update(client)
            await self.client_repo.sync_companies(updated.id, command.company_ids)
            companies = await self.client_repo.get_companies(updated.id)
            await self.uow.commit()

            logger.info(f"Updated client id={client_id} (companies={len(companies)})")
            return Return.ok(build_client_response(updated, companies))

        except Exception as e:
            await self.uow.rollback()
            logger.error(f"Client update failed for id={client_id}: {e}")
            return Return.err(
                Error(
                    code="UPDATE_CLIENT_FAILED",
                    message="Could not update client",
                    reason=str(e),
                )
            )


class DeleteClient:
    """Use Case: Soft-delete a client; its invoices and links are kept"""

    def __init__(self, uow: UnitOfWork, client_repo: ClientRepository):
        self.uow = uow
        self.client_repo = client_repo

    async def execute(self, client_id: int) -> Result[DeleteClientResponseDTO]:
        try:
            client = await self.client_repo.get_by_id(client_id)
            if not client:
                return Return.err(not_found_error("client", client_id))

            await self.client_repo.soft_delete(client)
            await self.uow.commit()

            logger.info(f"Soft-deleted client id={client_id}")
            return Return.ok(
                DeleteClientResponseDTO(
                    client_id=client_id,
                    message="Client deleted successfully",
                )
            )

        except Exception as e:
            await self.uow.rollback()
            logger.error(f"Client deletion failed for id={client_id}: {e}")
            return Return.err(
                Error(
                    code="DELETE_CLIENT_FAILED",
                    message="Could not delete client",
                    reason=str(e),
                )
            )
