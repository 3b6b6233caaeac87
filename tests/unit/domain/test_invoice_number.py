"""Unit tests for invoice number generation"""

import pytest

from src.domain.invoice_number import (
    format_invoice_number,
    invoice_number_prefix,
    next_invoice_number,
    parse_sequence,
)


class TestParseSequence:

    def test_parses_padded_sequence(self):
        assert parse_sequence("#ALPA-2025-07") == 7

    def test_parses_sequence_past_two_digits(self):
        assert parse_sequence("#ALPA-2025-123") == 123

    @pytest.mark.parametrize("number", ["#ALPA-2025-xx", "#ALPA-2025", "", "#ALPA-2025-"])
    def test_malformed_numbers_yield_zero(self, number):
        assert parse_sequence(number) == 0

    def test_leading_digits_are_used(self):
        assert parse_sequence("#ALPA-2025-12b") == 12


class TestFormatInvoiceNumber:

    def test_pads_to_two_digits(self):
        assert format_invoice_number(2025, 7) == "#ALPA-2025-07"

    def test_grows_past_99_without_truncation(self):
        assert format_invoice_number(2025, 100) == "#ALPA-2025-100"
        assert format_invoice_number(2025, 1234) == "#ALPA-2025-1234"

    def test_custom_prefix(self):
        assert invoice_number_prefix(2026, "#INV") == "#INV-2026-"
        assert format_invoice_number(2026, 3, "#INV") == "#INV-2026-03"


class TestNextInvoiceNumber:

    def test_first_invoice_of_year_starts_at_one(self):
        assert next_invoice_number([], 2025) == "#ALPA-2025-01"

    def test_uses_max_sequence_not_count(self):
        existing = ["#ALPA-2025-01", "#ALPA-2025-02", "#ALPA-2025-18"]
        assert next_invoice_number(existing, 2025) == "#ALPA-2025-19"

    def test_order_of_existing_numbers_is_irrelevant(self):
        existing = ["#ALPA-2025-18", "#ALPA-2025-02", "#ALPA-2025-01"]
        assert next_invoice_number(existing, 2025) == "#ALPA-2025-19"

    def test_other_years_are_ignored(self):
        existing = ["#ALPA-2024-57", "#ALPA-2025-03"]
        assert next_invoice_number(existing, 2025) == "#ALPA-2025-04"
        assert next_invoice_number(existing, 2026) == "#ALPA-2026-01"

    def test_malformed_numbers_do_not_break_scan(self):
        existing = ["#ALPA-2025-abc", None, "#ALPA-2025-05"]
        assert next_invoice_number(existing, 2025) == "#ALPA-2025-06"

    def test_crosses_into_three_digits(self):
        assert next_invoice_number(["#ALPA-2025-99"], 2025) == "#ALPA-2025-100"

    def test_sequence_is_strictly_increasing(self):
        existing = []
        for _ in range(12):
            existing.append(next_invoice_number(existing, 2025))

        sequences = [parse_sequence(number) for number in existing]
        assert sequences == list(range(1, 13))
        assert existing[0] == "#ALPA-2025-01"
        assert existing[-1] == "#ALPA-2025-12"
