"""
Time sources for the domain.

Derived queries such as ``BirthDate.age_in_months(now)`` take the reference
instant as an argument; use-cases and repositories obtain it from a Clock
injected at construction time.
"""

from datetime import date, datetime, time, tzinfo
from typing import Optional, Protocol, Union

from puppy_care.core.config import APP_TZ


class Clock(Protocol):
    def now(self) -> datetime: ...


class SystemClock:
    """Wall clock in the application timezone."""

    def __init__(self, tz: Optional[tzinfo] = None):
        self.tz = tz or APP_TZ

    def now(self) -> datetime:
        return datetime.now(self.tz)


class FixedClock:
    """Clock frozen at a given instant; ``advance`` moves it forward."""

    def __init__(self, instant: datetime):
        self._instant = to_aware(instant)

    def now(self) -> datetime:
        return self._instant

    def advance(self, delta) -> None:
        self._instant = self._instant + delta


SYSTEM_CLOCK = SystemClock()


def to_aware(value: Union[date, datetime], tz: Optional[tzinfo] = None) -> datetime:
    """
    Normalise a date or datetime to a timezone-aware datetime.

    Naive datetimes are interpreted in ``tz`` (default APP_TZ); a bare date
    becomes midnight of that day.
    """
    tz = tz or APP_TZ
    if not isinstance(value, datetime):
        value = datetime.combine(value, time.min)
    if value.tzinfo is None:
        return value.replace(tzinfo=tz)
    return value
