"""Client use cases"""
from .create_client import CreateClient
from .get_client import GetClient, ListClients, GetClientCompanies
from .update_client import UpdateClient, DeleteClient
from .dtos import (
    ClientCommandDTO,
    ClientResponseDTO,
    ClientListResponseDTO,
    DeleteClientResponseDTO,
    LinkedCompanyDTO,
)

__all__ = [
    "CreateClient",
    "GetClient",
    "ListClients",
    "GetClientCompanies",
    "UpdateClient",
    "DeleteClient",
    "ClientCommandDTO",
    "ClientResponseDTO",
    "ClientListResponseDTO",
    "DeleteClientResponseDTO",
    "LinkedCompanyDTO",
]
