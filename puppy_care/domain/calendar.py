"""
Calendar event aggregate, its value objects and recurrence rules.
"""

import calendar
import math
from dataclasses import dataclass
from datetime import date, datetime, timedelta
from enum import Enum
from typing import Iterator, Optional, Union

from puppy_care.core.clock import SYSTEM_CLOCK, Clock, to_aware
from puppy_care.core.result import DomainError, Failure, Success
from puppy_care.domain.base import Entity, ValueObject, coerce_enum, is_blank


class EventType(str, Enum):
    VACCINATION = "vaccination"
    VET_APPOINTMENT = "vet_appointment"
    FEEDING = "feeding"
    TRAINING = "training"
    GROOMING = "grooming"
    MEDICATION = "medication"
    CUSTOM = "custom"

    @classmethod
    def create(cls, value):
        member = coerce_enum(cls, value)
        if member is None:
            return Failure(DomainError.validation("Invalid event type"))
        return Success(member)


class RecurringType(str, Enum):
    DAILY = "daily"
    WEEKLY = "weekly"
    MONTHLY = "monthly"
    YEARLY = "yearly"


class UrgencyLevel(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


@dataclass(frozen=True)
class EventId(ValueObject):
    value: str

    @classmethod
    def create(cls, value: str):
        if is_blank(value):
            return Failure(DomainError.validation("EventId cannot be empty"))
        return Success(cls._build(value))


@dataclass(frozen=True)
class EventTitle(ValueObject):
    value: str

    MAX_LENGTH = 200

    @classmethod
    def create(cls, value: str):
        if is_blank(value):
            return Failure(DomainError.validation("EventTitle cannot be empty"))
        if len(value) > cls.MAX_LENGTH:
            return Failure(
                DomainError.validation(
                    f"EventTitle cannot exceed {cls.MAX_LENGTH} characters"
                )
            )
        return Success(cls._build(value))


@dataclass(frozen=True)
class EventDescription(ValueObject):
    value: str

    MAX_LENGTH = 1000

    @classmethod
    def create(cls, value: Optional[str]):
        text = "" if value is None else value
        if not isinstance(text, str):
            return Failure(DomainError.validation("EventDescription must be a string"))
        if len(text) > cls.MAX_LENGTH:
            return Failure(
                DomainError.validation(
                    f"EventDescription cannot exceed {cls.MAX_LENGTH} characters"
                )
            )
        return Success(cls._build(text))


@dataclass(frozen=True)
class EventDateTime(ValueObject):
    value: datetime

    @classmethod
    def create(cls, value: Union[date, datetime]):
        if value is None:
            return Failure(DomainError.validation("EventDateTime cannot be null"))
        return Success(cls._build(to_aware(value)))

    def is_past(self, now: datetime) -> bool:
        return self.value < to_aware(now)

    def is_future(self, now: datetime) -> bool:
        return self.value > to_aware(now)

    def days_until(self, now: datetime) -> int:
        return math.ceil((self.value - to_aware(now)) / timedelta(days=1))


def add_months(value: datetime, months: int) -> datetime:
    """
    Advance ``value`` by calendar months with day rollover.

    A day-of-month missing from the target month spills into the next one:
    Jan 31 + 1 month is Mar 2 in a leap year (Mar 3 otherwise).
    """
    total = value.month - 1 + months
    year = value.year + total // 12
    month = total % 12 + 1
    last_day = calendar.monthrange(year, month)[1]
    overflow = max(value.day - last_day, 0)
    moved = value.replace(year=year, month=month, day=min(value.day, last_day))
    return moved + timedelta(days=overflow)


@dataclass(frozen=True)
class RecurringPattern(ValueObject):
    type: RecurringType
    interval: int
    end_date: Optional[datetime] = None

    @classmethod
    def create(
        cls,
        type: Union[RecurringType, str],
        interval: int,
        end_date: Optional[Union[date, datetime]] = None,
        clock: Clock = SYSTEM_CLOCK,
    ):
        pattern = cls._validated(type, interval, end_date)
        if isinstance(pattern, Failure):
            return pattern
        end = pattern.value.end_date
        if end is not None and end <= clock.now():
            return Failure(
                DomainError.validation("Recurring end date must be in the future")
            )
        return pattern

    @classmethod
    def restore(
        cls,
        type: Union[RecurringType, str],
        interval: int,
        end_date: Optional[Union[date, datetime]] = None,
    ):
        """Rehydrate a stored pattern whose end date may since have passed."""
        return cls._validated(type, interval, end_date)

    @classmethod
    def _validated(cls, type, interval, end_date):
        recurring_type = coerce_enum(RecurringType, type)
        if recurring_type is None:
            return Failure(DomainError.validation("Invalid recurring type"))
        if isinstance(interval, bool) or not isinstance(interval, int) or interval <= 0:
            return Failure(DomainError.validation("Recurring interval must be positive"))
        end = to_aware(end_date) if end_date is not None else None
        return Success(cls._build(recurring_type, interval, end))

    def should_recur(self, current_date: datetime) -> bool:
        if self.end_date is not None and to_aware(current_date) > self.end_date:
            return False
        return True

    def get_next_occurrence(self, from_date: Union[date, datetime]) -> datetime:
        start = to_aware(from_date)
        if self.type is RecurringType.DAILY:
            return start + timedelta(days=self.interval)
        if self.type is RecurringType.WEEKLY:
            return start + timedelta(days=7 * self.interval)
        if self.type is RecurringType.MONTHLY:
            return add_months(start, self.interval)
        return add_months(start, 12 * self.interval)

    def occurrences(self, start: datetime, until: datetime) -> Iterator[datetime]:
        """Occurrences strictly after ``start`` up to ``until`` (inclusive)."""
        limit = to_aware(until)
        current = self.get_next_occurrence(start)
        while current <= limit and self.should_recur(current):
            yield current
            current = self.get_next_occurrence(current)


@dataclass(frozen=True, eq=False)
class Event(Entity):
    id: EventId
    title: EventTitle
    description: EventDescription
    event_date_time: EventDateTime
    event_type: EventType
    puppy_id: str
    recurring_pattern: Optional[RecurringPattern]
    created_at: datetime
    updated_at: datetime

    @classmethod
    def create(
        cls,
        id: EventId,
        title: EventTitle,
        description: EventDescription,
        event_date_time: EventDateTime,
        event_type: EventType,
        puppy_id: str,
        now: datetime,
        recurring_pattern: Optional[RecurringPattern] = None,
    ):
        if is_blank(puppy_id):
            return Failure(DomainError.validation("PuppyId cannot be empty"))
        return Success(
            cls(
                id,
                title,
                description,
                event_date_time,
                event_type,
                puppy_id,
                recurring_pattern,
                now,
                now,
            )
        )

    def update_title(self, new_title: EventTitle, now: datetime) -> "Event":
        return self._evolve(now, title=new_title)

    def update_description(self, new_description: EventDescription, now: datetime) -> "Event":
        return self._evolve(now, description=new_description)

    def update_date_time(self, new_date_time: EventDateTime, now: datetime) -> "Event":
        return self._evolve(now, event_date_time=new_date_time)

    def update_type(self, new_type: EventType, now: datetime) -> "Event":
        return self._evolve(now, event_type=new_type)

    @property
    def is_recurring(self) -> bool:
        return self.recurring_pattern is not None

    def is_upcoming(self, now: datetime) -> bool:
        return self.event_date_time.is_future(now)

    def is_overdue(self, now: datetime) -> bool:
        """Only missed vaccinations count as overdue."""
        return (
            self.event_date_time.is_past(now)
            and self.event_type is EventType.VACCINATION
        )

    def urgency_level(self, now: datetime) -> UrgencyLevel:
        days_until = self.event_date_time.days_until(now)
        if days_until <= 1:
            return UrgencyLevel.HIGH
        if days_until <= 7:
            return UrgencyLevel.MEDIUM
        return UrgencyLevel.LOW
