# tests/test_history.py
"""
History Store Tests - Unit Tests for the Session History

Files that USE this module:
- pytest (test runner executes these tests)

Files that this module USES:
- fxconv.application.history (HistoryStore for testing)
- fxconv.domain.models (ConversionRecord for test data)
"""
from fxconv.application.history import HistoryStore
from fxconv.domain.models import ConversionRecord


def _record(n: int) -> ConversionRecord:
    return ConversionRecord(amount=float(n), source="USD", target="EUR", converted=n * 0.9)


class TestHistoryStore:
    def test_starts_empty(self):
        history = HistoryStore()
        assert history.count() == 0
        assert len(history) == 0
        assert history.list() == ()

    def test_preserves_insertion_order(self):
        history = HistoryStore()
        records = [_record(n) for n in range(1, 6)]
        for record in records:
            history.record(record)

        assert history.count() == 5
        assert list(history.list()) == records
        assert list(history) == records

    def test_list_is_a_snapshot(self):
        history = HistoryStore()
        history.record(_record(1))

        snapshot = history.list()
        history.record(_record(2))

        assert isinstance(snapshot, tuple)
        assert len(snapshot) == 1
        assert history.count() == 2
