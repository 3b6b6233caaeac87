from abc import ABC, abstractmethod


class UnitOfWork(ABC):
    """Transaction boundary shared by the repositories of one request"""

    @abstractmethod
    async def __aenter__(self):
        pass

    @abstractmethod
    async def __aexit__(self, *args):
        pass

    @abstractmethod
    async def commit(self):
        pass

    @abstractmethod
    async def rollback(self):
        pass
