# src/fxconv/shared/__init__.py
"""
Shared Utilities - Cross-cutting Concerns

This package contains shared utilities used across all layers:
- Validation and input parsing
- Logging configuration
"""

from fxconv.shared.validators import (
    LOG_LEVELS,
    normalize_currency_code,
    parse_amount,
    validate_api_url,
    validate_log_level,
)
from fxconv.shared.logging_conf import setup_logging

__all__ = [
    "parse_amount",
    "normalize_currency_code",
    "validate_api_url",
    "validate_log_level",
    "LOG_LEVELS",
    "setup_logging",
]
