"""Tests for timestamp helpers."""

from datetime import datetime, timedelta, timezone

from pattern_check.utils.time import ensure_utc, format_timestamp, utc_now


class TestTimeHelpers:
    """Test suite for time helpers."""

    def test_utc_now_is_aware(self) -> None:
        now = utc_now()
        assert now.tzinfo is not None
        assert now.utcoffset() == timedelta(0)

    def test_naive_assumed_utc(self) -> None:
        naive = datetime(2024, 1, 1, 8, 30)
        assert ensure_utc(naive) == datetime(2024, 1, 1, 8, 30, tzinfo=timezone.utc)

    def test_other_timezone_converted(self) -> None:
        plus_two = timezone(timedelta(hours=2))
        ts = datetime(2024, 1, 1, 10, 0, tzinfo=plus_two)
        assert ensure_utc(ts) == datetime(2024, 1, 1, 8, 0, tzinfo=timezone.utc)

    def test_none_passthrough(self) -> None:
        assert ensure_utc(None) is None
        assert format_timestamp(None) is None

    def test_format(self) -> None:
        ts = datetime(2024, 1, 1, 8, 0, tzinfo=timezone.utc)
        assert format_timestamp(ts) == "2024-01-01T08:00:00+00:00"
