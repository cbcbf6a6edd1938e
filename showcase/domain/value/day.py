"""UTC calendar-day windows.

Every "today" and "yesterday" in the voting subsystem is a UTC day. Windows
are half-open, so an instant exactly at midnight belongs to the day that
starts at that midnight.
"""

from datetime import date, datetime, time, timedelta, timezone

from pydantic import model_validator

from showcase.domain.value.common import ValueObject

ONE_DAY = timedelta(days=1)


def as_utc(instant: datetime) -> datetime:
    """Return the instant as an aware UTC datetime.

    Naive datetimes are interpreted as already being in UTC.
    """
    if instant.tzinfo is None:
        return instant.replace(tzinfo=timezone.utc)
    return instant.astimezone(timezone.utc)


def utc_midnight(instant: datetime) -> datetime:
    """Midnight UTC of the UTC date the instant falls on."""
    return datetime.combine(as_utc(instant).date(), time.min, tzinfo=timezone.utc)


def utc_date(instant: datetime) -> date:
    """UTC calendar date of an instant."""
    return as_utc(instant).date()


class DayWindow(ValueObject):
    """A single UTC day as the half-open interval ``[start, end)``."""

    start: datetime
    end: datetime

    @model_validator(mode="after")
    def validate_one_day(self) -> "DayWindow":
        """Windows always span exactly one UTC day starting at midnight."""
        if self.start != utc_midnight(self.start):
            raise ValueError("Day window must start at UTC midnight")
        if self.end - self.start != ONE_DAY:
            raise ValueError("Day window must span exactly one day")
        return self

    @classmethod
    def containing(cls, instant: datetime) -> "DayWindow":
        """The UTC day that contains ``instant``."""
        start = utc_midnight(instant)
        return cls(start=start, end=start + ONE_DAY)

    @classmethod
    def previous(cls, instant: datetime) -> "DayWindow":
        """The UTC day before the one that contains ``instant``."""
        end = utc_midnight(instant)
        return cls(start=end - ONE_DAY, end=end)

    @property
    def day(self) -> date:
        """Calendar date this window covers."""
        return self.start.date()

    def contains(self, instant: datetime) -> bool:
        """Whether ``instant`` falls inside the window."""
        return self.start <= as_utc(instant) < self.end
