"""SQLAlchemy Invoice Item Repository Implementation

Implements invoice item persistence using SQLAlchemy async session.
"""

from collections import defaultdict
from typing import Dict, Iterable, List
from sqlalchemy import delete
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession
from src.app.repositories.invoice_item_repository import InvoiceItemRepository
from src.domain.invoice_item import InvoiceItem


class SqlAlchemyInvoiceItemRepository(InvoiceItemRepository):
    """
    SQLAlchemy implementation of InvoiceItemRepository

    Uses async session for database operations.
    """

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_invoice_id(self, invoice_id: int) -> List[InvoiceItem]:
        statement = (
            select(InvoiceItem)
            .where(InvoiceItem.invoice_id == invoice_id)
            .order_by(InvoiceItem.id)
        )
        result = await self.session.execute(statement)
        return list(result.scalars().all())

    async def get_by_invoice_ids(self, invoice_ids: Iterable[int]) -> Dict[int, List[InvoiceItem]]:
        ids = list(invoice_ids)
        if not ids:
            return {}

        statement = (
            select(InvoiceItem)
            .where(InvoiceItem.invoice_id.in_(ids))
            .order_by(InvoiceItem.invoice_id, InvoiceItem.id)
        )
        result = await self.session.execute(statement)

        items_by_invoice: Dict[int, List[InvoiceItem]] = defaultdict(list)
        for item in result.scalars().all():
            items_by_invoice[item.invoice_id].append(item)
        return dict(items_by_invoice)

    async def create(self, item: InvoiceItem) -> InvoiceItem:
        self.session.add(item)
        await self.session.flush()
        await self.session.refresh(item)
        return item

    async def delete_by_invoice_id(self, invoice_id: int) -> int:
        statement = delete(InvoiceItem).where(InvoiceItem.invoice_id == invoice_id)
        result = await self.session.execute(statement)
        await self.session.flush()
        return result.rowcount or 0
