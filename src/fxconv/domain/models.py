# src/fxconv/domain/models.py
"""
Domain Models - Pure Business Objects

This module contains domain models representing core business concepts:
- Completed conversions
- The set of high-volume currencies

Files that USE this module:
- fxconv.application.* (history store and session controller)
- fxconv.adapters.formatting.formatter (renders records and history)
- tests.* (tests use domain models for test data)

Files that this module USES:
- None (pure domain layer, no external dependencies)
"""

from __future__ import annotations  # Enable postponed evaluation of annotations

from dataclasses import dataclass  # Decorator for creating data classes

# High-volume currencies, used only for an informational note
POPULAR_CURRENCIES: tuple[str, ...] = ("USD", "EUR", "GBP", "CAD", "JPY", "MXN", "AUD")


def format_number(value: float) -> str:
    """
    Render a number the way the converter prints it.

    Integral values drop the trailing ".0" (100.0 -> "100"); everything else
    uses the shortest repr that round-trips (92.5 -> "92.5").
    """
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return repr(value) if isinstance(value, float) else str(value)


@dataclass(frozen=True)
class ConversionRecord:
    """
    One completed conversion.

    Attributes:
        amount: Amount entered by the user
        source: Source currency code (uppercased)
        target: Target currency code (uppercased)
        converted: Converted amount returned by the rate provider
    """
    amount: float
    source: str
    target: str
    converted: float

    @property
    def text(self) -> str:
        """Human-readable form, e.g. '100 USD = 92.5 EUR'."""
        return f"{format_number(self.amount)} {self.source} = {format_number(self.converted)} {self.target}"

    def __str__(self) -> str:
        return self.text


def is_popular(code: str) -> bool:
    """True if code is one of POPULAR_CURRENCIES (exact, case-sensitive match)."""
    return code in POPULAR_CURRENCIES
