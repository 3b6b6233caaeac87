"""Line-item and invoice totals."""

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any, List, Optional, Sequence

from src.domain.money import ZERO, round_money, to_decimal

# Standing business rule: invoices carry no tax
TAX_AMOUNT = Decimal("0.00")


class EmptyInvoiceError(ValueError):
    """Raised when totals are requested for an invoice without items"""


@dataclass(frozen=True)
class LineTotal:
    description: str
    quantity: Decimal
    unit_price: Decimal
    cost_price: Decimal
    line_total: Decimal


@dataclass(frozen=True)
class InvoiceTotals:
    lines: List[LineTotal] = field(default_factory=list)
    subtotal: Decimal = ZERO
    tax_amount: Decimal = TAX_AMOUNT
    total: Decimal = ZERO


def compute_line_total(quantity: Any, unit_price: Any) -> Decimal:
    """line_total = quantity * unit_price, rounded to 2 places"""
    return round_money(to_decimal(quantity) * to_decimal(unit_price))


def compute_invoice_totals(items: Sequence[Any]) -> InvoiceTotals:
    """
    Compute line totals and invoice totals for an ordered item list

    Items may be objects or mappings exposing description, quantity,
    unit_price and an optional cost_price (defaults to 0).

    Raises:
        EmptyInvoiceError: when ``items`` is empty
    """
    if not items:
        raise EmptyInvoiceError("An invoice must have at least one item")

    lines: List[LineTotal] = []
    subtotal = ZERO

    for item in items:
        quantity = to_decimal(_read(item, "quantity"))
        unit_price = to_decimal(_read(item, "unit_price"))
        line_total = compute_line_total(quantity, unit_price)

        lines.append(
            LineTotal(
                description=_read(item, "description") or "",
                quantity=quantity,
                unit_price=unit_price,
                cost_price=to_decimal(_read(item, "cost_price")),
                line_total=line_total,
            )
        )
        subtotal += line_total

    subtotal = round_money(subtotal)
    return InvoiceTotals(
        lines=lines,
        subtotal=subtotal,
        tax_amount=TAX_AMOUNT,
        total=round_money(subtotal + TAX_AMOUNT),
    )


def _read(item: Any, name: str) -> Optional[Any]:
    if isinstance(item, dict):
        return item.get(name)
    return getattr(item, name, None)
