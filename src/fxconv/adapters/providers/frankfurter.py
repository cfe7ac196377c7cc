# src/fxconv/adapters/providers/frankfurter.py
"""
Frankfurter API Provider for Currency Conversion

This module implements the Frankfurter API client (https://www.frankfurter.app)
used to convert an amount from one currency to another. Each conversion is a
single request: there is no cache, no retry and no backoff.

Files that USE this module:
- fxconv.app (wires FrankfurterProvider into the session)
- tests.test_providers (unit tests)

Files that this module USES:
- fxconv.adapters.providers.base (RateProvider interface)
- fxconv.config (settings for API URL and timeout)
- fxconv.domain.errors (ConversionError)
"""
import logging
import math
import requests
from typing import Optional

from fxconv.adapters.providers.base import RateProvider
from fxconv.config import settings
from fxconv.domain.errors import ConversionError

log = logging.getLogger(__name__)


class FrankfurterProvider(RateProvider):
    def __init__(self, base_url: Optional[str] = None, timeout: Optional[int] = None):
        """
        Initialize Frankfurter API provider.

        Args:
            base_url: Optional custom API URL (defaults to settings.api_url)
            timeout: Optional HTTP timeout in seconds (defaults to settings.http_timeout_seconds,
                     which is None unless configured)
        """
        self.url = base_url or settings.api_url
        self.timeout = timeout if timeout is not None else settings.http_timeout_seconds

    def convert(self, source: str, target: str, amount: float) -> float:
        """
        Convert amount from source to target currency.

        Identical codes (compared as given, case-sensitive) return the amount
        unchanged without a request.

        Args:
            source: Source currency code, e.g. "USD"
            target: Target currency code, e.g. "EUR"
            amount: Amount in source currency

        Returns:
            Converted amount read from rates[target] of the response

        Raises:
            ConversionError: On network failure, non-2xx response, invalid JSON,
                             or a response without a numeric rate for target
        """
        if source == target:
            log.debug("Same currency %s, skipping request", source)
            return amount

        params = {"amount": amount, "from": source, "to": target}
        try:
            log.info("Requesting conversion %s %s -> %s from Frankfurter", amount, source, target)
            resp = requests.get(self.url, params=params, timeout=self.timeout)
            resp.raise_for_status()
            data = resp.json()
        except requests.exceptions.JSONDecodeError as e:
            log.warning("Frankfurter API returned invalid JSON: %s", e)
            raise ConversionError(f"invalid JSON response: {e}") from e
        except requests.exceptions.Timeout as e:
            log.info("Frankfurter API timeout after %s seconds", self.timeout)
            raise ConversionError(f"request timed out after {self.timeout}s") from e
        except requests.exceptions.HTTPError as e:
            # 4xx here usually means an unknown currency code
            log.info("Frankfurter API HTTP error: %s", e)
            raise ConversionError(str(e)) from e
        except requests.exceptions.RequestException as e:
            log.info("Frankfurter API request failed (network/connection error): %s", e)
            raise ConversionError(str(e)) from e
        except ValueError as e:
            log.warning("Frankfurter API returned invalid JSON: %s", e)
            raise ConversionError(f"invalid JSON response: {e}") from e

        # Expect: {"amount":100.0,"base":"USD","date":"...","rates":{"EUR":92.5}}
        rates = data.get("rates") if isinstance(data, dict) else None
        if not isinstance(rates, dict) or target not in rates:
            log.info("Frankfurter response has no rate for %s: %s", target, data)
            raise ConversionError(f"response has no rate for {target}")

        value = rates[target]
        # JSON numbers only: strings, booleans and NaN/Infinity are rejected
        if isinstance(value, bool) or not isinstance(value, (int, float)) or not math.isfinite(value):
            log.warning("Frankfurter returned non-numeric rate for %s: %r", target, value)
            raise ConversionError(f"non-numeric rate for {target}: {value!r}")

        converted = float(value)
        log.info("Frankfurter converted %s %s = %s %s", amount, source, converted, target)
        return converted
