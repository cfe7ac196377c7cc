# src/fxconv/adapters/providers/base.py
"""
Base Provider Interface for Exchange Rate Providers

This module defines the abstract base class for all exchange rate providers.
It establishes the contract that all provider implementations must follow.

Files that USE this module:
- fxconv.adapters.providers.frankfurter (FrankfurterProvider implements RateProvider)
- fxconv.application.session (SessionController depends on RateProvider)
- tests.test_session (fake providers for scripted sessions)

Files that this module USES:
- None (pure interface definition)
"""
from abc import ABC, abstractmethod


class RateProvider(ABC):
    @abstractmethod
    def convert(self, source: str, target: str, amount: float) -> float:
        """
        Return amount expressed in target currency.

        Raises:
            ConversionError: If the conversion cannot be completed
        """
        raise NotImplementedError
