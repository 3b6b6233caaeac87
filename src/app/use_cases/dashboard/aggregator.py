"""Financial analytics aggregation

Pure functions over a snapshot of invoices and items. Every call recomputes
from scratch. Numeric fields pass through ``to_decimal`` so a corrupt
historical row counts as zero instead of failing the report.
"""

from collections import Counter
from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Any, Dict, Iterable, List, Mapping, Optional, Sequence, Tuple

from src.domain.invoice import InvoiceStatus
from src.domain.money import ZERO, round_money, to_decimal
from .dtos import (
    ClientOutstandingDTO,
    ClientSnapshotDTO,
    CompanySnapshotDTO,
    FinancialSummaryDTO,
    InvoiceStatusCountDTO,
    OutstandingInvoiceDTO,
    StatisticsResponseDTO,
    YearlyFinancialDTO,
)

OUTSTANDING_STATUSES = (InvoiceStatus.UNPAID.value, InvoiceStatus.PARTIALLY_PAID.value)


@dataclass
class _Totals:
    expenses: Decimal = ZERO
    revenue: Decimal = ZERO
    profit: Decimal = ZERO

    def add_item(self, item: Any) -> None:
        line_total = to_decimal(getattr(item, "line_total", None))
        cost = to_decimal(getattr(item, "quantity", None)) * to_decimal(getattr(item, "cost_price", None))
        self.expenses += cost
        self.revenue += line_total
        self.profit += line_total - cost


def status_of(invoice: Any) -> str:
    status = getattr(invoice, "status", None)
    if isinstance(status, Enum):
        return status.value
    return "" if status is None else str(status)


def is_outstanding(invoice: Any) -> bool:
    return status_of(invoice) in OUTSTANDING_STATUSES


def count_statuses(invoices: Iterable[Any]) -> InvoiceStatusCountDTO:
    histogram = Counter(status_of(invoice) for invoice in invoices)
    return InvoiceStatusCountDTO(
        paid=histogram[InvoiceStatus.PAID.value],
        unpaid=histogram[InvoiceStatus.UNPAID.value] + histogram[InvoiceStatus.PARTIALLY_PAID.value],
        draft=histogram[InvoiceStatus.DRAFT.value],
        # TODO: confirm whether overdue and cancelled invoices belong in total; they have no bucket
        total=sum(histogram.values()),
    )


def summarize_financials(
    invoices: Iterable[Any],
    items_by_invoice: Mapping[int, Sequence[Any]],
    current_year: int,
) -> Tuple[FinancialSummaryDTO, List[YearlyFinancialDTO]]:
    """
    Compute global and per-year expenses, revenue and profit

    An invoice without a date is booked in ``current_year``. Values are
    rounded once, after accumulation.

    Returns:
        (global summary, yearly summaries sorted by year ascending)
    """
    overall = _Totals()
    by_year: Dict[int, _Totals] = {}

    for invoice in invoices:
        invoice_date = getattr(invoice, "date", None)
        year = invoice_date.year if invoice_date else current_year
        year_totals = by_year.setdefault(year, _Totals())

        for item in items_by_invoice.get(invoice.id, ()):
            overall.add_item(item)
            year_totals.add_item(item)

    financial = FinancialSummaryDTO(
        expenses=round_money(overall.expenses),
        revenue=round_money(overall.revenue),
        profit=round_money(overall.profit),
    )
    yearly = [
        YearlyFinancialDTO(
            year=year,
            expenses=round_money(totals.expenses),
            revenue=round_money(totals.revenue),
            profit=round_money(totals.profit),
        )
        for year, totals in sorted(by_year.items())
    ]
    return financial, yearly


def outstanding_amount(invoice: Any) -> Decimal:
    """
    Amount still owed on an invoice

    unpaid -> total; partially_paid -> balance_due, or total when no
    balance was entered; any other status -> 0.
    """
    status = status_of(invoice)
    if status == InvoiceStatus.UNPAID.value:
        return to_decimal(invoice.total)
    if status == InvoiceStatus.PARTIALLY_PAID.value:
        balance_due = getattr(invoice, "balance_due", None)
        return to_decimal(invoice.total if balance_due is None else balance_due)
    return ZERO


def group_outstanding(
    invoices: Iterable[Any],
    clients: Mapping[int, Any],
    companies: Mapping[int, Any],
) -> List[ClientOutstandingDTO]:
    """
    Group unpaid and partially paid invoices by client

    The company shown for a client is the company of the first outstanding
    invoice encountered; later invoices under other companies do not change
    it. Result is sorted by total outstanding, highest first.
    """
    groups: Dict[int, ClientOutstandingDTO] = {}
    raw_totals: Dict[int, Decimal] = {}

    for invoice in invoices:
        if not is_outstanding(invoice):
            continue

        client_id = invoice.client_id
        if client_id not in groups:
            groups[client_id] = ClientOutstandingDTO(
                client=_client_snapshot(client_id, clients.get(client_id)),
                company=_company_snapshot(companies.get(invoice.company_id)),
            )
            raw_totals[client_id] = ZERO

        amount = outstanding_amount(invoice)
        group = groups[client_id]
        raw_totals[client_id] += amount
        group.invoice_count += 1
        group.invoices.append(
            OutstandingInvoiceDTO(
                invoice_number=invoice.invoice_number,
                total=round_money(invoice.total),
                balance_due=round_money(amount),
                due_date=getattr(invoice, "due_date", None),
                status=status_of(invoice),
            )
        )

    for client_id, group in groups.items():
        group.total_outstanding = round_money(raw_totals[client_id])

    return sorted(groups.values(), key=lambda g: g.total_outstanding, reverse=True)


def build_statistics(
    total_clients: int,
    invoices: Sequence[Any],
    items_by_invoice: Mapping[int, Sequence[Any]],
    clients: Mapping[int, Any],
    companies: Mapping[int, Any],
    current_year: int,
) -> StatisticsResponseDTO:
    invoice_status = count_statuses(invoices)
    financial, yearly = summarize_financials(invoices, items_by_invoice, current_year)

    return StatisticsResponseDTO(
        total_clients=total_clients,
        total_unpaid_invoices=invoice_status.unpaid,
        invoice_status=invoice_status,
        financial=financial,
        yearly_financial=yearly,
        clients_with_outstanding=group_outstanding(invoices, clients, companies),
    )


def _client_snapshot(client_id: int, client: Optional[Any]) -> ClientSnapshotDTO:
    if client is None:
        return ClientSnapshotDTO(id=client_id)
    return ClientSnapshotDTO(
        id=client.id,
        name=client.name,
        email=client.email,
        phone=client.phone,
    )


def _company_snapshot(company: Optional[Any]) -> Optional[CompanySnapshotDTO]:
    if company is None:
        return None
    return CompanySnapshotDTO(id=company.id, name=company.name)
