# tests/test_formatter.py
"""
Formatter Tests - Unit Tests for Console Message Formatting

This module contains unit tests for the console text helpers and for the
number rendering used in conversion records.

Files that USE this module:
- pytest (test runner executes these tests)

Files that this module USES:
- fxconv.adapters.formatting.formatter (all formatter functions for testing)
- fxconv.domain.models (ConversionRecord and format_number)
- pytest (testing framework)
"""
import pytest  # Testing framework for writing and running tests

from fxconv.adapters.formatting.formatter import (
    NO_HISTORY,  # Empty history line
    banner,  # Cycle header
    conversion_failed,  # Failed conversion line
    final_result,  # Successful conversion line
    history_lines,  # Session history listing
    menu,  # Menu options
    popular_note,  # High-volume currency note
    records_in_memory,  # History count line
)
from fxconv.domain.models import ConversionRecord, format_number  # Domain model for test data


class TestFormatNumber:
    @pytest.mark.parametrize("value, expected", [
        (100.0, "100"),
        (92.5, "92.5"),
        (0.125, "0.125"),
        (-3.0, "-3"),
        (7, "7"),
    ])
    def test_format_number(self, value, expected):
        assert format_number(value) == expected


class TestConversionRecord:
    def test_text(self):
        record = ConversionRecord(amount=100.0, source="USD", target="EUR", converted=92.5)
        assert record.text == "100 USD = 92.5 EUR"
        assert str(record) == "100 USD = 92.5 EUR"

    def test_is_immutable(self):
        record = ConversionRecord(amount=1.0, source="USD", target="EUR", converted=0.9)
        with pytest.raises(AttributeError):
            record.amount = 2.0


class TestMessages:
    def test_banner(self):
        result = banner()
        assert "REAL-TIME CURRENCY CONVERTER" in result
        assert "=" * 41 in result

    def test_records_in_memory(self):
        assert records_in_memory(3) == "Records in memory: 3"

    def test_popular_note(self):
        assert "EUR is a high-volume currency." in popular_note("EUR")

    def test_final_result(self):
        record = ConversionRecord(amount=100.0, source="USD", target="EUR", converted=92.5)
        assert final_result(record).endswith("FINAL RESULT: 100 USD = 92.5 EUR")

    def test_conversion_failed(self):
        assert "An unexpected error occurred: boom" in conversion_failed("boom")

    def test_menu(self):
        lines = menu().strip().splitlines()
        assert lines == ["[1] New Conversion", "[2] View History", "[3] Exit"]


class TestHistoryLines:
    def test_empty_history(self):
        assert history_lines([]) == [NO_HISTORY]

    def test_numbered_from_one_in_order(self):
        records = [
            ConversionRecord(amount=100.0, source="USD", target="EUR", converted=92.5),
            ConversionRecord(amount=5.0, source="GBP", target="JPY", converted=950.25),
        ]

        lines = history_lines(records)

        assert "Session History" in lines[0]
        assert lines[1] == "1. 100 USD = 92.5 EUR"
        assert lines[2] == "2. 5 GBP = 950.25 JPY"
        assert lines[-1] == "-" * 23
