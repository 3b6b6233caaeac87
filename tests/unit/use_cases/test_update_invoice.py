"""Unit tests for UpdateInvoice use case"""

import pytest
from datetime import date, datetime
from decimal import Decimal
from unittest.mock import AsyncMock, MagicMock

from src.app.use_cases.invoicing.update_invoice import UpdateInvoice
from src.app.use_cases.invoicing.dtos import InvoiceCommandDTO
from src.domain.invoice import Invoice, InvoiceStatus, PaymentTerms


@pytest.fixture
def stored_invoice():
    return Invoice(
        id=5,
        company_id=1,
        client_id=3,
        invoice_number="#ALPA-2025-05",
        date=date(2025, 2, 1),
        payment_terms=PaymentTerms.CASH,
        status=InvoiceStatus.DRAFT,
        subtotal=Decimal("999.00"),
        tax_amount=Decimal("0.00"),
        total=Decimal("999.00"),
        attachments=["invoice-attachments/a.pdf"],
        created_at=datetime(2025, 2, 1),
        updated_at=datetime(2025, 2, 1),
    )


@pytest.fixture
def mock_invoice_repo(stored_invoice):
    repo = MagicMock()
    repo.get_by_id = AsyncMock(return_value=stored_invoice)

    async def update(invoice):
        return invoice

    repo.update = AsyncMock(side_effect=update)
    return repo


@pytest.fixture
def mock_item_repo():
    repo = MagicMock()
    repo.delete_by_invoice_id = AsyncMock(return_value=3)

    async def create(item):
        item.id = 100
        return item

    repo.create = AsyncMock(side_effect=create)
    return repo


@pytest.fixture
def update_invoice_use_case(mock_uow, mock_invoice_repo, mock_item_repo):
    company_repo = MagicMock()
    company_repo.get_by_id = AsyncMock(return_value=MagicMock(id=2))
    client_repo = MagicMock()
    client_repo.get_by_id = AsyncMock(return_value=MagicMock(id=3))

    return UpdateInvoice(
        uow=mock_uow,
        invoice_repo=mock_invoice_repo,
        item_repo=mock_item_repo,
        company_repo=company_repo,
        client_repo=client_repo,
    )


@pytest.fixture
def replacement_command():
    return InvoiceCommandDTO(
        company_id=2,
        client_id=3,
        date=date(2025, 2, 1),
        payment_terms=PaymentTerms.CREDIT_CARD,
        status=InvoiceStatus.PARTIALLY_PAID,
        balance_due=Decimal("10.00"),
        items=[{"description": "Single line", "quantity": "3", "unit_price": "12.50"}],
        attachments=["invoice-attachments/a.pdf", "invoice-attachments/b.pdf"],
    )


@pytest.mark.asyncio
class TestUpdateInvoice:

    async def test_items_are_replaced_and_totals_recomputed(
        self, update_invoice_use_case, mock_item_repo, mock_uow, replacement_command
    ):
        # Act
        result = await update_invoice_use_case.execute(5, replacement_command)

        # Assert
        assert result.is_ok()
        response = result.value
        assert response.subtotal == Decimal("37.50")
        assert response.total == Decimal("37.50")
        assert response.balance_due == Decimal("10.00")
        assert len(response.items) == 1

        mock_item_repo.delete_by_invoice_id.assert_called_once_with(5)
        mock_item_repo.create.assert_called_once()
        mock_uow.commit.assert_called_once()

    async def test_invoice_number_is_kept(self, update_invoice_use_case, replacement_command):
        result = await update_invoice_use_case.execute(5, replacement_command)

        assert result.value.invoice_number == "#ALPA-2025-05"
        assert result.value.company_id == 2
        assert result.value.status == "partially_paid"

    async def test_new_attachments_are_appended(self, update_invoice_use_case, replacement_command):
        result = await update_invoice_use_case.execute(5, replacement_command)

        assert result.value.attachments == [
            "invoice-attachments/a.pdf",
            "invoice-attachments/b.pdf",
        ]

    async def test_missing_invoice(
        self, update_invoice_use_case, mock_invoice_repo, mock_item_repo, replacement_command
    ):
        mock_invoice_repo.get_by_id = AsyncMock(return_value=None)

        result = await update_invoice_use_case.execute(404, replacement_command)

        assert result.is_err()
        assert result.error.code == "INVOICE_NOT_FOUND"
        mock_item_repo.delete_by_invoice_id.assert_not_called()

    async def test_rollback_when_item_creation_fails(
        self, update_invoice_use_case, mock_item_repo, mock_uow, replacement_command
    ):
        mock_item_repo.create = AsyncMock(side_effect=Exception("disk full"))

        result = await update_invoice_use_case.execute(5, replacement_command)

        assert result.is_err()
        assert result.error.code == "UPDATE_INVOICE_FAILED"
        mock_uow.rollback.assert_called_once()
        mock_uow.commit.assert_not_called()
