"""Company Repository Interface"""

from abc import ABC, abstractmethod
from typing import Dict, Iterable, List, Optional
from src.domain.company import Company


class CompanyRepository(ABC):
    """
    Repository interface for Company persistence

    Every read excludes soft-deleted companies.
    """

    @abstractmethod
    async def create(self, company: Company) -> Company:
        pass

    @abstractmethod
    async def get_by_id(self, company_id: int) -> Optional[Company]:
        """Retrieve a non-deleted company by ID"""
        pass

    @abstractmethod
    async def get_by_ids(self, company_ids: Iterable[int]) -> Dict[int, Company]:
        """Retrieve non-deleted companies keyed by ID; unknown IDs are absent"""
        pass

    @abstractmethod
    async def get_all(self) -> List[Company]:
        """Retrieve every non-deleted company, newest first"""
        pass

    @abstractmethod
    async def update(self, company: Company) -> Company:
        pass

    @abstractmethod
    async def soft_delete(self, company: Company) -> Company:
        pass
