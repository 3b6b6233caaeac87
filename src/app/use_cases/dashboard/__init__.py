"""Dashboard use cases"""
from .get_statistics import GetStatistics
from .dtos import (
    InvoiceStatusCountDTO,
    FinancialSummaryDTO,
    YearlyFinancialDTO,
    ClientSnapshotDTO,
    CompanySnapshotDTO,
    OutstandingInvoiceDTO,
    ClientOutstandingDTO,
    StatisticsResponseDTO,
)

__all__ = [
    "GetStatistics",
    "InvoiceStatusCountDTO",
    "FinancialSummaryDTO",
    "YearlyFinancialDTO",
    "ClientSnapshotDTO",
    "CompanySnapshotDTO",
    "OutstandingInvoiceDTO",
    "ClientOutstandingDTO",
    "StatisticsResponseDTO",
]
