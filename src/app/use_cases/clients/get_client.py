"""Read-side client use cases: GetClient, ListClients, GetClientCompanies"""

from typing import List
from libs.result import Result, Return, Error
from src.app.repositories.client_repository import ClientRepository
from src.app.use_cases.common import not_found_error
from src.app.use_cases.companies.dtos import CompanyResponseDTO, build_company_response
from .dtos import ClientListResponseDTO, ClientResponseDTO, build_client_response


class GetClient:

    def __init__(self, client_repo: ClientRepository):
        self.client_repo = client_repo

    async def execute(self, client_id: int) -> Result[ClientResponseDTO]:
        try:
            client = await self.client_repo.get_by_id(client_id)
            if not client:
                return Return.err(not_found_error("client", client_id))

            companies = await self.client_repo.get_companies(client.id)
            return Return.ok(build_client_response(client, companies))

        except Exception as e:
            return Return.err(
                Error(
                    code="GET_CLIENT_FAILED",
                    message="Failed to retrieve client",
                    reason=str(e),
                )
            )


class ListClients:
    """Use Case: Every non-deleted client with its companies, newest first"""

    def __init__(self, client_repo: ClientRepository):
        self.client_repo = client_repo

    async def execute(self) -> Result[ClientListResponseDTO]:
        try:
            clients = await self.client_repo.get_all()
            companies_by_client = await self.client_repo.get_companies_by_client_ids(
                client.id for client in clients
            )
            return Return.ok(
                ClientListResponseDTO(
                    data=[
                        build_client_response(client, companies_by_client.get(client.id, []))
                        for client in clients
                    ],
                    total=len(clients),
                )
            )

        except Exception as e:
            return Return.err(
                Error(
                    code="LIST_CLIENTS_FAILED",
                    message="Failed to list clients",
                    reason=str(e),
                )
            )


class GetClientCompanies:
    """
    Use Case: Companies a client is linked to

    Feeds the company picker of the invoice form. Soft-deleted companies
    are left out.
    """

    def __init__(self, client_repo: ClientRepository):
        self.client_repo = client_repo

    async def execute(self, client_id: int) -> Result[List[CompanyResponseDTO]]:
        try:
            client = await self.client_repo.get_by_id(client_id)
            if not client:
                return Return.err(not_found_error("client", client_id))

            companies = await self.client_repo.get_companies(client.id)
            return Return.ok([build_company_response(company) for company in companies])

        except Exception as e:
            return Return.err(
                Error(
                    code="GET_CLIENT_COMPANIES_FAILED",
                    message="Failed to retrieve client companies",
                    reason=str(e),
                )
            )
