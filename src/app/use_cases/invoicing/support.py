"""Helpers shared by the invoicing use cases."""

from decimal import Decimal
from enum import Enum
from typing import Dict, List, Optional, Sequence

from src.app.repositories.client_repository import ClientRepository
from src.app.repositories.company_repository import CompanyRepository
from src.domain.invoice import Invoice
from src.domain.invoice_item import InvoiceItem
from src.domain.invoice_totals import InvoiceTotals
from src.domain.money import round_money
from .dtos import InvoiceCommandDTO, InvoiceItemDTO, InvoiceResponseDTO


async def find_reference_errors(
    command: InvoiceCommandDTO,
    company_repo: CompanyRepository,
    client_repo: ClientRepository,
) -> Dict[str, List[str]]:
    """Return a field error map for company/client IDs that do not resolve"""
    errors: Dict[str, List[str]] = {}

    if await company_repo.get_by_id(command.company_id) is None:
        errors["company_id"] = ["The selected company id is invalid."]

    if await client_repo.get_by_id(command.client_id) is None:
        errors["client_id"] = ["The selected client id is invalid."]

    return errors


def build_items(invoice_id: int, totals: InvoiceTotals) -> List[InvoiceItem]:
    """Create fresh item entities for every computed line, order preserved"""
    return [
        InvoiceItem(
            invoice_id=invoice_id,
            description=line.description,
            quantity=line.quantity,
            cost_price=line.cost_price,
            unit_price=line.unit_price,
            line_total=line.line_total,
        )
        for line in totals.lines
    ]


def optional_money(value: Optional[Decimal]) -> Optional[Decimal]:
    return None if value is None else round_money(value)


def enum_value(value) -> str:
    return value.value if isinstance(value, Enum) else str(value)


def build_invoice_response(
    invoice: Invoice, items: Sequence[InvoiceItem]
) -> InvoiceResponseDTO:
    return InvoiceResponseDTO(
        invoice_id=invoice.id,
        invoice_number=invoice.invoice_number,
        company_id=invoice.company_id,
        client_id=invoice.client_id,
        date=invoice.date,
        due_date=invoice.due_date,
        payment_terms=enum_value(invoice.payment_terms),
        status=enum_value(invoice.status),
        subtotal=round_money(invoice.subtotal),
        tax_amount=round_money(invoice.tax_amount),
        total=round_money(invoice.total),
        balance_due=optional_money(invoice.balance_due),
        note=invoice.note,
        attachments=list(invoice.attachments or []),
        items=[
            InvoiceItemDTO(
                id=item.id,
                description=item.description,
                quantity=round_money(item.quantity),
                cost_price=round_money(item.cost_price),
                unit_price=round_money(item.unit_price),
                line_total=round_money(item.line_total),
            )
            for item in items
        ],
        created_at=invoice.created_at,
        updated_at=invoice.updated_at,
    )
