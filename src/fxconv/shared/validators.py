# src/fxconv/shared/validators.py
"""
Input Validation Utilities - User Input and Configuration Validation

This module parses the amount typed by the user, normalises currency codes,
and validates configuration values before they reach the rest of the app.

Files that USE this module:
- fxconv.config.settings (uses validation functions in Settings field validators)
- fxconv.application.session (parse_amount and normalize_currency_code)

Files that this module USES:
- fxconv.domain.errors (InputError for unparseable amounts)
"""
import math
import re

from fxconv.domain.errors import InputError

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

# Plain ASCII decimal with optional sign and exponent, e.g. "100", "-0.5", "1e3"
AMOUNT_PATTERN = re.compile(r"^[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?$")


def parse_amount(value: str) -> float:
    """
    Parse the amount entered by the user.

    The whole string must be a number: "12x" is rejected rather than read as 12.
    Surrounding whitespace is tolerated. Python-only spellings such as
    "1_000", "inf" or non-ASCII digits are rejected.

    Args:
        value: Raw text from the prompt

    Returns:
        The amount as a finite float

    Raises:
        InputError: If the text is empty, not a number, or not finite
    """
    if value is None or not value.strip():
        raise InputError("Amount is empty")

    if not AMOUNT_PATTERN.match(value.strip()):
        raise InputError(f"Amount is not a number: {value!r}")

    amount = float(value)

    if not math.isfinite(amount):
        raise InputError(f"Amount is not a finite number: {value!r}")

    return amount


def normalize_currency_code(code: str) -> str:
    """Uppercase a currency code exactly as typed (no trimming)."""
    return code.upper()


def validate_api_url(url: str) -> bool:
    """
    Validate exchange-rate API URL format.

    Args:
        url: URL to validate

    Returns:
        True if valid, False otherwise
    """
    if not url:
        return False

    return bool(re.match(r'^https?://[^\s/]+', url))


def validate_log_level(level: str) -> bool:
    """Return True if level names a standard logging level."""
    if not level:
        return False

    return level.upper() in LOG_LEVELS
