"""Unit tests for UTC day windows."""

from datetime import datetime, timedelta, timezone

import pytest
from pydantic import ValidationError

from showcase.domain.value import DayWindow, as_utc, utc_date, utc_midnight


class TestUtcMidnight:
    """Tests for utc_midnight."""

    def test_truncates_to_midnight_utc(self):
        """Any instant maps to the midnight starting its UTC day."""
        instant = datetime(2026, 10, 19, 23, 59, 59, tzinfo=timezone.utc)

        assert utc_midnight(instant) == datetime(2026, 10, 19, tzinfo=timezone.utc)

    def test_converts_other_offsets_to_utc_first(self):
        """An evening in UTC-5 already belongs to the next UTC day."""
        eastern = timezone(timedelta(hours=-5))
        instant = datetime(2026, 10, 19, 21, 0, tzinfo=eastern)  # 02:00 UTC on the 20th

        assert utc_midnight(instant) == datetime(2026, 10, 20, tzinfo=timezone.utc)
        assert utc_date(instant) == datetime(2026, 10, 20).date()

    def test_naive_datetimes_are_treated_as_utc(self):
        """Naive datetimes are read as UTC."""
        assert as_utc(datetime(2026, 10, 19, 5, 0)) == datetime(
            2026, 10, 19, 5, 0, tzinfo=timezone.utc
        )


class TestDayWindow:
    """Tests for DayWindow."""

    def test_containing_spans_the_utc_day(self):
        """The window containing an instant is that UTC day."""
        window = DayWindow.containing(datetime(2026, 10, 19, 12, tzinfo=timezone.utc))

        assert window.start == datetime(2026, 10, 19, tzinfo=timezone.utc)
        assert window.end == datetime(2026, 10, 20, tzinfo=timezone.utc)
        assert window.day == datetime(2026, 10, 19).date()

    def test_previous_is_the_day_before(self):
        """previous() is the full UTC day before the current one."""
        window = DayWindow.previous(datetime(2026, 10, 19, 0, 5, tzinfo=timezone.utc))

        assert window.start == datetime(2026, 10, 18, tzinfo=timezone.utc)
        assert window.end == datetime(2026, 10, 19, tzinfo=timezone.utc)

    def test_midnight_belongs_to_the_day_it_starts(self):
        """An instant exactly at midnight T is inside the day starting at T."""
        midnight = datetime(2026, 10, 19, tzinfo=timezone.utc)

        assert DayWindow.containing(midnight).start == midnight
        assert DayWindow.containing(midnight).contains(midnight)
        assert not DayWindow.previous(midnight).contains(midnight)

    def test_end_is_exclusive(self):
        """The end instant is outside the window."""
        window = DayWindow.containing(datetime(2026, 10, 19, 8, tzinfo=timezone.utc))

        assert window.contains(window.end - timedelta(microseconds=1))
        assert not window.contains(window.end)

    def test_rejects_windows_not_starting_at_midnight(self):
        """Windows must start at UTC midnight."""
        start = datetime(2026, 10, 19, 1, tzinfo=timezone.utc)

        with pytest.raises(ValidationError):
            DayWindow(start=start, end=start + timedelta(days=1))

    def test_rejects_windows_longer_than_a_day(self):
        """Windows must span exactly one day."""
        start = datetime(2026, 10, 19, tzinfo=timezone.utc)

        with pytest.raises(ValidationError):
            DayWindow(start=start, end=start + timedelta(days=2))
