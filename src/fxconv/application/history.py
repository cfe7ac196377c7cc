# src/fxconv/application/history.py
"""
History Store - Session Conversion History

This module keeps the conversions completed during one session. It replaces a
module-level list with an object owned by the session controller, so several
sessions (or tests) never share history.

Files that USE this module:
- fxconv.application.session (records successful conversions, lists them)
- tests.test_history (unit tests)

Files that this module USES:
- fxconv.domain.models (ConversionRecord)
"""
from __future__ import annotations

import logging
from typing import Iterator, List, Tuple

from fxconv.domain.models import ConversionRecord

logger = logging.getLogger(__name__)


class HistoryStore:
    """Append-only, in-memory history of conversions, oldest first."""

    def __init__(self):
        self._records: List[ConversionRecord] = []

    def record(self, entry: ConversionRecord) -> None:
        """
        Append a completed conversion.

        Args:
            entry: Conversion to remember for the rest of the session
        """
        self._records.append(entry)
        logger.debug("History entry %d recorded: %s", len(self._records), entry)

    def list(self) -> Tuple[ConversionRecord, ...]:
        """
        Get the recorded conversions.

        Returns:
            Read-only snapshot in insertion order
        """
        return tuple(self._records)

    def count(self) -> int:
        return len(self._records)

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[ConversionRecord]:
        return iter(self.list())
