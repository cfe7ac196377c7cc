# src/fxconv/domain/__init__.py
"""
Domain Layer - Pure Business Objects

This package contains domain models and business rules.
No dependencies on infrastructure or external systems.
"""

from fxconv.domain.models import (
    POPULAR_CURRENCIES,
    ConversionRecord,
    format_number,
    is_popular,
)
from fxconv.domain.errors import (
    ConversionError,
    DomainError,
    InputError,
)

__all__ = [
    "ConversionRecord",
    "POPULAR_CURRENCIES",
    "format_number",
    "is_popular",
    "DomainError",
    "InputError",
    "ConversionError",
]
