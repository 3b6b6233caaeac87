"""Client Repository Interface"""

from abc import ABC, abstractmethod
from typing import Dict, Iterable, List, Optional
from src.domain.client import Client
from src.domain.company import Company


class ClientRepository(ABC):
    """
    Repository interface for Client persistence and the client/company link

    Every read excludes soft-deleted clients.
    """

    @abstractmethod
    async def create(self, client: Client) -> Client:
        pass

    @abstractmethod
    async def get_by_id(self, client_id: int) -> Optional[Client]:
        """Retrieve a non-deleted client by ID"""
        pass

    @abstractmethod
    async def get_by_ids(self, client_ids: Iterable[int]) -> Dict[int, Client]:
        """Retrieve non-deleted clients keyed by ID; unknown IDs are absent"""
        pass

    @abstractmethod
    async def get_all(self) -> List[Client]:
        """Retrieve every non-deleted client, newest first"""
        pass

    @abstractmethod
    async def update(self, client: Client) -> Client:
        pass

    @abstractmethod
    async def soft_delete(self, client: Client) -> Client:
        pass

    @abstractmethod
    async def count(self) -> int:
        """Count non-deleted clients"""
        pass

    @abstractmethod
    async def get_companies(self, client_id: int) -> List[Company]:
        """Non-deleted companies linked to a client, ordered by company ID"""
        pass

    @abstractmethod
    async def get_companies_by_client_ids(
        self, client_ids: Iterable[int]
    ) -> Dict[int, List[Company]]:
        """Bulk variant of get_companies; clients without links map to []"""
        pass

    @abstractmethod
    async def sync_companies(self, client_id: int, company_ids: Iterable[int]) -> None:
        """
        Replace the set of companies linked to a client

        Links not in company_ids are removed, missing ones are added.
        """
        pass
