# src/fxconv/adapters/formatting/formatter.py
"""
Message Formatter - Text Formatting and Presentation

This module holds all user-facing text of the converter: the banner, prompts,
result and error lines, the menu, and the session history listing.

Files that USE this module:
- fxconv.application.session (prints every message through these helpers)
- tests.test_formatter (unit tests)

Files that this module USES:
- fxconv.domain.models (ConversionRecord for results and history)
"""
from __future__ import annotations

from typing import List, Sequence

from fxconv.domain.models import ConversionRecord

# -------- prompts --------

PROMPT_AMOUNT = "\n> Enter the amount to convert: "
PROMPT_SOURCE = "> Source Currency (e.g., USD): "
PROMPT_TARGET = "> Target Currency (e.g., EUR): "
PROMPT_OPTION = "\nSelect an option: "
PROMPT_CONTINUE = "\nPress Enter to continue..."

# -------- menu options --------

OPTION_NEW = "1"
OPTION_HISTORY = "2"
OPTION_EXIT = "3"

# -------- fixed messages --------

INVALID_AMOUNT = "ERROR: The value entered is not a number. Please try again."
FETCHING = "🔄 Fetching rates from international market..."
CHECK_CONNECTION = "Please check your internet connection or currency codes."
GOODBYE = "\nThank you for using the converter. Goodbye!"
NO_HISTORY = "\n--- No history yet ---"


def banner() -> str:
    """Header shown at the start of every conversion cycle."""
    rule = "=" * 41
    return f"\n{rule}\n   REAL-TIME CURRENCY CONVERTER\n{rule}"


def records_in_memory(count: int) -> str:
    return f"Records in memory: {count}"


def popular_note(code: str) -> str:
    return f"ℹ️  Info: {code} is a high-volume currency."


def final_result(record: ConversionRecord) -> str:
    return f"\n✅ FINAL RESULT: {record.text}"


def conversion_failed(message: str) -> str:
    """
    Format a failed conversion.

    Args:
        message: Error text, already carrying the underlying detail

    Returns:
        Error line for the console
    """
    return f"\n❌ An unexpected error occurred: {message}"


def menu() -> str:
    return "\n".join([
        f"\n[{OPTION_NEW}] New Conversion",
        f"[{OPTION_HISTORY}] View History",
        f"[{OPTION_EXIT}] Exit",
    ])


def history_lines(records: Sequence[ConversionRecord]) -> List[str]:
    """
    Format the session history, numbered from 1 in insertion order.

    Args:
        records: Recorded conversions, oldest first

    Returns:
        Lines to print; a single "no history" line when records is empty
    """
    if not records:
        return [NO_HISTORY]

    lines = ["\n--- Session History ---"]
    lines.extend(f"{index}. {record.text}" for index, record in enumerate(records, start=1))
    lines.append("-" * 23)
    return lines
