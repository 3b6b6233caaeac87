"""Unit tests for ListInvoices use case"""

import pytest
from datetime import date, datetime
from decimal import Decimal
from unittest.mock import AsyncMock, MagicMock

from src.app.use_cases.invoicing import ListInvoices
from src.domain.invoice import Invoice, InvoiceStatus, PaymentTerms
from src.domain.invoice_item import InvoiceItem


def make_invoice(invoice_id, number):
    return Invoice(
        id=invoice_id,
        company_id=1,
        client_id=3,
        invoice_number=number,
        date=date(2025, 3, 1),
        payment_terms=PaymentTerms.CASH,
        status=InvoiceStatus.UNPAID,
        subtotal=Decimal("20.00"),
        tax_amount=Decimal("0.00"),
        total=Decimal("20.00"),
        attachments=[],
        created_at=datetime(2025, 3, 1),
        updated_at=datetime(2025, 3, 1),
    )


@pytest.mark.asyncio
class TestListInvoices:

    async def test_newest_first_with_items(self):
        # Arrange
        invoice_repo = MagicMock()
        invoice_repo.get_all = AsyncMock(
            return_value=[make_invoice(1, "#ALPA-2025-01"), make_invoice(2, "#ALPA-2025-02")]
        )
        item_repo = MagicMock()
        item_repo.get_by_invoice_ids = AsyncMock(
            return_value={
                1: [InvoiceItem(id=5, invoice_id=1, description="Hosting", quantity=Decimal("1"),
                                cost_price=Decimal("0"), unit_price=Decimal("20"),
                                line_total=Decimal("20"))],
            }
        )

        # Act
        result = await ListInvoices(invoice_repo, item_repo).execute()

        # Assert
        assert result.is_ok()
        assert result.value.total == 2
        assert [i.invoice_number for i in result.value.data] == ["#ALPA-2025-02", "#ALPA-2025-01"]
        assert result.value.data[0].items == []
        assert result.value.data[1].items[0].line_total == Decimal("20.00")

    async def test_empty_store(self):
        invoice_repo = MagicMock()
        invoice_repo.get_all = AsyncMock(return_value=[])
        item_repo = MagicMock()
        item_repo.get_by_invoice_ids = AsyncMock(return_value={})

        result = await ListInvoices(invoice_repo, item_repo).execute()

        assert result.value.total == 0
        assert result.value.data == []

    async def test_repository_failure(self):
        invoice_repo = MagicMock()
        invoice_repo.get_all = AsyncMock(side_effect=Exception("database is locked"))

        result = await ListInvoices(invoice_repo, MagicMock()).execute()

        assert result.is_err()
        assert result.error.code == "LIST_INVOICES_FAILED"
