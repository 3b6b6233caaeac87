"""SQLAlchemy Company Repository Implementation"""

from typing import Dict, Iterable, List, Optional
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession
from src.app.repositories.company_repository import CompanyRepository
from src.domain.base import utcnow
from src.domain.company import Company


class SqlAlchemyCompanyRepository(CompanyRepository):

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, company: Company) -> Company:
        self.session.add(company)
        await self.session.flush()
        await self.session.refresh(company)
        return company

    async def get_by_id(self, company_id: int) -> Optional[Company]:
        statement = (
            select(Company)
            .where(Company.id == company_id)
            .where(Company.deleted_at.is_(None))
        )
        result = await self.session.execute(statement)
        return result.scalar_one_or_none()

    async def get_by_ids(self, company_ids: Iterable[int]) -> Dict[int, Company]:
        ids = list(set(company_ids))
        if not ids:
            return {}
        statement = (
            select(Company)
            .where(Company.id.in_(ids))
            .where(Company.deleted_at.is_(None))
        )
        result = await self.session.execute(statement)
        return {company.id: company for company in result.scalars().all()}

    async def get_all(self) -> List[Company]:
        statement = (
            select(Company)
            .where(Company.deleted_at.is_(None))
            .order_by(Company.id.desc())
        )
        result = await self.session.execute(statement)
        return list(result.scalars().all())

    async def update(self, company: Company) -> Company:
        company.updated_at = utcnow()
        self.session.add(company)
        await self.session.flush()
        await self.session.refresh(company)
        return company

    async def soft_delete(self, company: Company) -> Company:
        now = utcnow()
        company.deleted_at = now
        company.updated_at = now
        self.session.add(company)
        await self.session.flush()
        return company
