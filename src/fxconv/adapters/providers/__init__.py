# src/fxconv/adapters/providers/__init__.py
"""
Provider Adapters - External API Clients

This package contains adapters for external exchange rate APIs.
All providers implement the RateProvider interface.
"""

from fxconv.adapters.providers.base import RateProvider
from fxconv.adapters.providers.frankfurter import FrankfurterProvider

__all__ = [
    "RateProvider",
    "FrankfurterProvider",
]
