"""Invoice number generation

Numbers look like ``#ALPA-2025-07``: a fixed prefix, the calendar year and a
per-year sequence padded to at least two digits. The next number is derived
from the numbers already stored, there is no counter table. Two concurrent
creations can therefore compute the same number; the unique index on
``invoices.invoice_number`` rejects the second one and the caller retries
with a fresh scan.
"""

import re
from typing import Iterable

DEFAULT_INVOICE_PREFIX = "#ALPA"
SEQUENCE_MIN_WIDTH = 2

_LEADING_INT = re.compile(r"^\s*\+?(\d+)")


def invoice_number_prefix(year: int, prefix: str = DEFAULT_INVOICE_PREFIX) -> str:
    """Return the literal every number of ``year`` starts with, e.g. ``#ALPA-2025-``"""
    return f"{prefix}-{year:04d}-"


def parse_sequence(invoice_number: str) -> int:
    """
    Extract the sequence part of an invoice number

    The number is split on "-" and the leading digits of the third segment
    are the sequence. Malformed numbers yield 0.

    Examples:
        "#ALPA-2025-07" -> 7
        "#ALPA-2025-x1" -> 0
        "#ALPA-2025"    -> 0
    """
    parts = (invoice_number or "").split("-")
    if len(parts) < 3:
        return 0

    match = _LEADING_INT.match(parts[2])
    if not match:
        return 0
    return int(match.group(1))


def format_invoice_number(
    year: int, sequence: int, prefix: str = DEFAULT_INVOICE_PREFIX
) -> str:
    """Format a number; the sequence grows past 99 without truncation"""
    return f"{invoice_number_prefix(year, prefix)}{sequence:0{SEQUENCE_MIN_WIDTH}d}"


def next_invoice_number(
    existing_numbers: Iterable[str],
    year: int,
    prefix: str = DEFAULT_INVOICE_PREFIX,
) -> str:
    """
    Compute the next invoice number for ``year``

    Args:
        existing_numbers: Snapshot of stored invoice numbers (any year)
        year: Calendar year of the new invoice
        prefix: Literal prefix (default "#ALPA")

    Returns:
        Formatted number with sequence max(existing sequences of the year) + 1
    """
    year_prefix = invoice_number_prefix(year, prefix)

    max_sequence = 0
    for number in existing_numbers:
        if not number or not number.startswith(year_prefix):
            continue
        max_sequence = max(max_sequence, parse_sequence(number))

    return format_invoice_number(year, max_sequence + 1, prefix)
