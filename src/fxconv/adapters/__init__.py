# src/fxconv/adapters/__init__.py
"""
Adapters Layer - External Interfaces

This package contains all adapters for external systems:
- Providers (exchange-rate APIs)
- Console (terminal input/output)
- Formatting (output text)
"""

__all__ = []
