"""Integration tests for CreateInvoice use case

Tests cover:
- Invoice and items persisted together
- Sequential invoice numbers within a year
- Retry when a stale number scan collides with the unique index
"""

import pytest
from datetime import date
from decimal import Decimal

from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession
from src.domain.invoice import Invoice, InvoiceStatus, PaymentTerms
from src.domain.invoice_item import InvoiceItem
from src.app.repositories.invoice_repository import DuplicateInvoiceNumberError
from src.app.use_cases.invoicing.create_invoice import CreateInvoice
from src.app.use_cases.invoicing.dtos import InvoiceCommandDTO
from src.adapter.repositories import (
    SqlAlchemyClientRepository,
    SqlAlchemyCompanyRepository,
    SqlAlchemyInvoiceItemRepository,
    SqlAlchemyInvoiceRepository,
)
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork


def build_use_case(session: AsyncSession, invoice_repo=None) -> CreateInvoice:
    return CreateInvoice(
        uow=SqlAlchemyUnitOfWork(session),
        invoice_repo=invoice_repo or SqlAlchemyInvoiceRepository(session),
        item_repo=SqlAlchemyInvoiceItemRepository(session),
        company_repo=SqlAlchemyCompanyRepository(session),
        client_repo=SqlAlchemyClientRepository(session),
        today=lambda: date(2025, 6, 1),
    )


def build_command(company_id: int, client_id: int, **overrides) -> InvoiceCommandDTO:
    values = dict(
        company_id=company_id,
        client_id=client_id,
        date=date(2025, 6, 1),
        payment_terms=PaymentTerms.BANK_TRANSFER,
        status=InvoiceStatus.UNPAID,
        items=[
            {"description": "Design work", "quantity": "2", "unit_price": "50", "cost_price": "30"},
            {"description": "Hosting", "quantity": "1", "unit_price": "20", "cost_price": "5"},
        ],
    )
    values.update(overrides)
    return InvoiceCommandDTO(**values)


class StaleNumberScanRepository(SqlAlchemyInvoiceRepository):
    """Returns an empty scan once, as if a concurrent insert had not been seen"""

    def __init__(self, session: AsyncSession):
        super().__init__(session)
        self.scans = 0

    async def get_invoice_numbers_with_prefix(self, prefix: str):
        self.scans += 1
        if self.scans == 1:
            return []
        return await super().get_invoice_numbers_with_prefix(prefix)


@pytest.mark.asyncio
class TestCreateInvoiceIntegration:
    """Integration tests with real database"""

    async def test_end_to_end_invoice_creation(self, db_session: AsyncSession, company, client_record):
        # Arrange
        use_case = build_use_case(db_session)

        # Act
        result = await use_case.execute(build_command(company.id, client_record.id))

        # Assert
        assert result.is_ok()
        response = result.value
        assert response.invoice_number == "#ALPA-2025-01"
        assert response.subtotal == Decimal("120.00")
        assert response.total == Decimal("120.00")

        # Verify database state
        invoice = await SqlAlchemyInvoiceRepository(db_session).get_by_id(response.invoice_id)
        assert invoice is not None
        assert invoice.total == Decimal("120.00")
        assert invoice.tax_amount == Decimal("0.00")
        assert invoice.status == InvoiceStatus.UNPAID

        items = await SqlAlchemyInvoiceItemRepository(db_session).get_by_invoice_id(invoice.id)
        assert [item.description for item in items] == ["Design work", "Hosting"]
        assert sum(item.line_total for item in items) == invoice.subtotal

    async def test_invoice_numbers_are_sequential(self, db_session: AsyncSession, company, client_record):
        use_case = build_use_case(db_session)

        numbers = []
        for _ in range(3):
            result = await use_case.execute(build_command(company.id, client_record.id))
            assert result.is_ok()
            numbers.append(result.value.invoice_number)

        assert numbers == ["#ALPA-2025-01", "#ALPA-2025-02", "#ALPA-2025-03"]

    async def test_numbering_continues_after_highest_existing(
        self, db_session: AsyncSession, company, client_record
    ):
        for number in ["#ALPA-2025-01", "#ALPA-2025-02", "#ALPA-2025-18", "#ALPA-2024-40"]:
            db_session.add(
                Invoice(
                    company_id=company.id,
                    client_id=client_record.id,
                    invoice_number=number,
                    date=date(2025, 1, 1),
                )
            )
        await db_session.commit()

        result = await build_use_case(db_session).execute(build_command(company.id, client_record.id))

        assert result.value.invoice_number == "#ALPA-2025-19"

    async def test_unknown_client_is_rejected(self, db_session: AsyncSession, company):
        result = await build_use_case(db_session).execute(build_command(company.id, 999))

        assert result.is_err()
        assert result.error.code == "VALIDATION_ERROR"
        assert "client_id" in result.error.details

        invoices = (await db_session.execute(select(Invoice))).scalars().all()
        assert invoices == []

    async def test_duplicate_number_is_reported_by_repository(
        self, db_session: AsyncSession, company, client_record
    ):
        repo = SqlAlchemyInvoiceRepository(db_session)
        company_id, client_id = company.id, client_record.id
        await repo.create(
            Invoice(company_id=company_id, client_id=client_id,
                    invoice_number="#ALPA-2025-01", date=date(2025, 1, 1))
        )

        with pytest.raises(DuplicateInvoiceNumberError):
            await repo.create(
                Invoice(company_id=company_id, client_id=client_id,
                        invoice_number="#ALPA-2025-01", date=date(2025, 1, 2))
            )

    async def test_retry_after_stale_number_scan(self, db_session: AsyncSession, company, client_record):
        """
        Given: #ALPA-2025-01 is committed but the first scan does not see it
        When: create_invoice is called
        Then: The insert conflicts, is rolled back and retried as #ALPA-2025-02
        """
        # Arrange
        company_id, client_id = company.id, client_record.id
        db_session.add(
            Invoice(company_id=company_id, client_id=client_id,
                    invoice_number="#ALPA-2025-01", date=date(2025, 1, 1))
        )
        await db_session.commit()

        stale_repo = StaleNumberScanRepository(db_session)
        command = build_command(company_id, client_id)

        # Act
        result = await build_use_case(db_session, invoice_repo=stale_repo).execute(command)

        # Assert
        assert result.is_ok()
        assert result.value.invoice_number == "#ALPA-2025-02"
        assert stale_repo.scans == 2

        items = (await db_session.execute(select(InvoiceItem))).scalars().all()
        assert len(items) == 2
        assert {item.invoice_id for item in items} == {result.value.invoice_id}
