# src/fxconv/domain/errors.py
"""
Domain Errors - Business Logic Exceptions

This module defines domain-specific exceptions raised while collecting input
and converting amounts. None of them is fatal to the session.
"""


class DomainError(Exception):
    """Base exception for domain errors."""
    pass


class InputError(DomainError):
    """Raised when the amount entered by the user is not a number."""
    pass


class ConversionError(DomainError):
    """Raised when a conversion fails (network error, bad response or unknown currency code)."""

    MESSAGE = "Conversion failed: invalid currency code or connectivity problem."

    def __init__(self, detail: str):
        self.detail = detail
        super().__init__(f"{self.MESSAGE} Details: {detail}")
