"""SQLAlchemy Invoice Repository Implementation

Implements invoice persistence using SQLAlchemy async session.
"""

from typing import Optional, List
from sqlalchemy.exc import IntegrityError
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession
from src.app.repositories.invoice_repository import (
    DuplicateInvoiceNumberError,
    InvoiceRepository,
)
from src.domain.base import utcnow
from src.domain.invoice import Invoice


class SqlAlchemyInvoiceRepository(InvoiceRepository):
    """
    SQLAlchemy implementation of InvoiceRepository

    Uses async session for database operations.
    """

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, invoice: Invoice) -> Invoice:
        """
        Create a new invoice

        The flush surfaces unique violations immediately, so a clashing
        invoice number is reported before any item is written.
        """
        self.session.add(invoice)
        try:
            await self.session.flush()
        except IntegrityError as e:
            if "invoice_number" in str(e.orig).lower():
                raise DuplicateInvoiceNumberError(invoice.invoice_number) from e
            raise
        await self.session.refresh(invoice)
        return invoice

    async def get_by_id(self, invoice_id: int) -> Optional[Invoice]:
        statement = (
            select(Invoice)
            .where(Invoice.id == invoice_id)
            .where(Invoice.deleted_at.is_(None))
        )
        result = await self.session.execute(statement)
        return result.scalar_one_or_none()

    async def get_all(self) -> List[Invoice]:
        statement = (
            select(Invoice)
            .where(Invoice.deleted_at.is_(None))
            .order_by(Invoice.id)
        )
        result = await self.session.execute(statement)
        return list(result.scalars().all())

    async def update(self, invoice: Invoice) -> Invoice:
        invoice.updated_at = utcnow()
        self.session.add(invoice)
        await self.session.flush()
        await self.session.refresh(invoice)
        return invoice

    async def soft_delete(self, invoice: Invoice) -> Invoice:
        now = utcnow()
        invoice.deleted_at = now
        invoice.updated_at = now
        self.session.add(invoice)
        await self.session.flush()
        return invoice

    async def get_invoice_numbers_with_prefix(self, prefix: str) -> List[str]:
        """
        Retrieve all invoice numbers starting with ``prefix``

        LIKE wildcards in the prefix are escaped; soft-deleted rows are kept
        because their numbers are still covered by the unique index.
        """
        escaped = (
            prefix.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
        )
        statement = select(Invoice.invoice_number).where(
            Invoice.invoice_number.like(f"{escaped}%", escape="\\")
        )
        result = await self.session.execute(statement)
        return list(result.scalars().all())
