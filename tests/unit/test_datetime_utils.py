"""
Unit tests for fieldvue.utils.datetime_utils
"""
from datetime import datetime, timedelta, timezone

from fieldvue.utils.datetime_utils import ensure_utc, utc_now


class TestEnsureUtc:
    def test_none_returns_none(self):
        assert ensure_utc(None) is None

    def test_naive_assumed_utc(self):
        result = ensure_utc(datetime(2025, 1, 15, 12, 0, 0))
        assert result.tzinfo == timezone.utc
        assert result.hour == 12

    def test_aware_converted_to_utc(self):
        dt = datetime(2025, 1, 15, 12, 0, 0, tzinfo=timezone(timedelta(hours=5, minutes=30)))
        result = ensure_utc(dt)
        assert result.tzinfo == timezone.utc
        assert (result.hour, result.minute) == (6, 30)


def test_utc_now_is_aware():
    assert utc_now().tzinfo == timezone.utc
