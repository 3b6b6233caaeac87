"""SQLAlchemy Client Repository Implementation"""

from collections import defaultdict
from typing import Dict, Iterable, List, Optional
from sqlalchemy import delete
from sqlmodel import select, func
from sqlmodel.ext.asyncio.session import AsyncSession
from src.app.repositories.client_repository import ClientRepository
from src.domain.base import utcnow
from src.domain.client import Client, ClientCompanyLink
from src.domain.company import Company


class SqlAlchemyClientRepository(ClientRepository):

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, client: Client) -> Client:
        self.session.add(client)
        await self.session.flush()
        await self.session.refresh(client)
        return client

    async def get_by_id(self, client_id: int) -> Optional[Client]:
        statement = (
            select(Client)
            .where(Client.id == client_id)
            .where(Client.deleted_at.is_(None))
        )
        result = await self.session.execute(statement)
        return result.scalar_one_or_none()

    async def get_by_ids(self, client_ids: Iterable[int]) -> Dict[int, Client]:
        ids = list(set(client_ids))
        if not ids:
            return {}
        statement = (
            select(Client)
            .where(Client.id.in_(ids))
            .where(Client.deleted_at.is_(None))
        )
        result = await self.session.execute(statement)
        return {client.id: client for client in result.scalars().all()}

    async def get_all(self) -> List[Client]:
        statement = (
            select(Client)
            .where(Client.deleted_at.is_(None))
            .order_by(Client.id.desc())
        )
        result = await self.session.execute(statement)
        return list(result.scalars().all())

    async def update(self, client: Client) -> Client:
        client.updated_at = utcnow()
        self.session.add(client)
        await self.session.flush()
        await self.session.refresh(client)
        return client

    async def soft_delete(self, client: Client) -> Client:
        now = utcnow()
        client.deleted_at = now
        client.updated_at = now
        self.session.add(client)
        await self.session.flush()
        return client

    async def count(self) -> int:
        statement = (
            select(func.count())
            .select_from(Client)
            .where(Client.deleted_at.is_(None))
        )
        result = await self.session.execute(statement)
        return result.scalar_one()

    async def get_companies(self, client_id: int) -> List[Company]:
        companies = await self.get_companies_by_client_ids([client_id])
        return companies[client_id]

    async def get_companies_by_client_ids(
        self, client_ids: Iterable[int]
    ) -> Dict[int, List[Company]]:
        ids = list(set(client_ids))
        companies_by_client: Dict[int, List[Company]] = defaultdict(list)
        if not ids:
            return {}

        statement = (
            select(ClientCompanyLink.client_id, Company)
            .join(Company, Company.id == ClientCompanyLink.company_id)
            .where(ClientCompanyLink.client_id.in_(ids))
            .where(Company.deleted_at.is_(None))
            .order_by(ClientCompanyLink.client_id, Company.id)
        )
        result = await self.session.execute(statement)
        for client_id, company in result.all():
            companies_by_client[client_id].append(company)

        for client_id in ids:
            companies_by_client.setdefault(client_id, [])
        return dict(companies_by_client)

    async def sync_companies(self, client_id: int, company_ids: Iterable[int]) -> None:
        wanted = set(company_ids)

        result = await self.session.execute(
            select(ClientCompanyLink.company_id).where(ClientCompanyLink.client_id == client_id)
        )
        current = set(result.scalars().all())

        stale = current - wanted
        if stale:
            await self.session.execute(
                delete(ClientCompanyLink)
                .where(ClientCompanyLink.client_id == client_id)
                .where(ClientCompanyLink.company_id.in_(stale))
            )

        for company_id in sorted(wanted - current):
            self.session.add(ClientCompanyLink(client_id=client_id, company_id=company_id))
        await self.session.flush()
