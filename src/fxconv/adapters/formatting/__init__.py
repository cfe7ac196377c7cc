# src/fxconv/adapters/formatting/__init__.py
"""
Formatting Adapters - Console Text

This package contains the user-facing text of the converter.
"""

from fxconv.adapters.formatting.formatter import (
    banner,
    conversion_failed,
    final_result,
    history_lines,
    menu,
    popular_note,
    records_in_memory,
)

__all__ = [
    "banner",
    "conversion_failed",
    "final_result",
    "history_lines",
    "menu",
    "popular_note",
    "records_in_memory",
]
