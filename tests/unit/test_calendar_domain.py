"""
Unit tests for calendar events, their value objects and recurrence rules.

This module tests:
- Title/description/type validation messages
- Calendar arithmetic of recurring patterns (day rollover, leap years)
- Urgency, upcoming and overdue classification against a fixed instant
"""

from datetime import datetime, timedelta, timezone

import pytest

from puppy_care.core.clock import FixedClock
from puppy_care.core.result import Failure, Success
from puppy_care.domain.calendar import (
    Event,
    EventDateTime,
    EventDescription,
    EventId,
    EventTitle,
    EventType,
    RecurringPattern,
    RecurringType,
    UrgencyLevel,
    add_months,
)

NOW = datetime(2024, 6, 15, 12, 0, tzinfo=timezone.utc)


def _utc(*args):
    return datetime(*args, tzinfo=timezone.utc)


def make_event(when=NOW + timedelta(days=3), event_type=EventType.VACCINATION, **kwargs):
    return Event.create(
        EventId.create(kwargs.get("event_id", "e-1")).value,
        EventTitle.create(kwargs.get("title", "First DHPP Vaccination")).value,
        EventDescription.create(kwargs.get("description")).value,
        EventDateTime.create(when).value,
        event_type,
        kwargs.get("puppy_id", "p-1"),
        NOW,
        recurring_pattern=kwargs.get("recurring_pattern"),
    )


def pattern(type, interval=1, end_date=None):
    return RecurringPattern.create(type, interval, end_date, clock=FixedClock(NOW)).value


@pytest.mark.unit
@pytest.mark.domain
@pytest.mark.calendar
class TestEventValueObjects:
    """Validation of the event value objects."""

    def test_event_id_rejects_blank(self):
        assert EventId.create("").error.message == "EventId cannot be empty"

    def test_title_rejects_blank(self):
        assert EventTitle.create("   ").error.message == "EventTitle cannot be empty"

    def test_title_length_limit(self):
        assert isinstance(EventTitle.create("t" * 200), Success)
        assert (
            EventTitle.create("t" * 201).error.message
            == "EventTitle cannot exceed 200 characters"
        )

    def test_description_defaults_to_empty(self):
        assert EventDescription.create(None).value.value == ""

    def test_description_length_limit(self):
        assert isinstance(EventDescription.create("d" * 1000), Success)
        assert (
            EventDescription.create("d" * 1001).error.message
            == "EventDescription cannot exceed 1000 characters"
        )

    def test_description_must_be_text(self):
        assert EventDescription.create(42).error.message == "EventDescription must be a string"

    def test_date_time_rejects_none(self):
        assert EventDateTime.create(None).error.message == "EventDateTime cannot be null"

    def test_event_type_accepts_raw_value(self):
        assert EventType.create("vet_appointment").value is EventType.VET_APPOINTMENT

    def test_event_type_rejects_unknown(self):
        assert EventType.create("birthday").error.message == "Invalid event type"

    def test_direct_construction_is_rejected(self):
        with pytest.raises(TypeError, match="EventTitle must be built with EventTitle.create"):
            EventTitle("Vet visit")


@pytest.mark.unit
@pytest.mark.domain
@pytest.mark.calendar
class TestEventDateTime:
    def test_past_and_future(self):
        later = EventDateTime.create(NOW + timedelta(minutes=1)).value
        earlier = EventDateTime.create(NOW - timedelta(minutes=1)).value
        assert later.is_future(NOW) and not later.is_past(NOW)
        assert earlier.is_past(NOW) and not earlier.is_future(NOW)

    def test_days_until_rounds_partial_days_up(self):
        value = EventDateTime.create(NOW + timedelta(hours=25)).value
        assert value.days_until(NOW) == 2

    def test_days_until_negative_for_past(self):
        value = EventDateTime.create(NOW - timedelta(days=3)).value
        assert value.days_until(NOW) == -3


@pytest.mark.unit
@pytest.mark.domain
@pytest.mark.calendar
class TestRecurringPattern:
    """Recurring pattern validation and next-occurrence arithmetic."""

    def test_rejects_unknown_type(self):
        result = RecurringPattern.create("hourly", 1, clock=FixedClock(NOW))
        assert result.error.message == "Invalid recurring type"

    @pytest.mark.parametrize("interval", [0, -2, 1.5, None, True])
    def test_rejects_non_positive_interval(self, interval):
        result = RecurringPattern.create("daily", interval, clock=FixedClock(NOW))
        assert result.error.message == "Recurring interval must be positive"

    @pytest.mark.parametrize("end_date", [NOW, NOW - timedelta(days=1)])
    def test_rejects_end_date_not_in_future(self, end_date):
        result = RecurringPattern.create("weekly", 1, end_date, clock=FixedClock(NOW))
        assert isinstance(result, Failure)
        assert result.error.message == "Recurring end date must be in the future"

    def test_restore_accepts_past_end_date(self):
        restored = RecurringPattern.restore("weekly", 1, NOW - timedelta(days=30))
        assert isinstance(restored, Success)

    def test_daily(self):
        assert pattern("daily", 3).get_next_occurrence(_utc(2024, 1, 30)) == _utc(2024, 2, 2)

    def test_weekly(self):
        assert pattern(RecurringType.WEEKLY, 2).get_next_occurrence(
            _utc(2024, 1, 1)
        ) == _utc(2024, 1, 15)

    def test_monthly_rolls_over_short_month(self):
        assert pattern("monthly").get_next_occurrence(_utc(2024, 1, 31)) == _utc(2024, 3, 2)

    def test_monthly_rolls_over_non_leap_february(self):
        assert pattern("monthly").get_next_occurrence(_utc(2023, 1, 31)) == _utc(2023, 3, 3)

    def test_monthly_keeps_time_of_day(self):
        assert pattern("monthly", 2).get_next_occurrence(
            _utc(2024, 11, 10, 9, 30)
        ) == _utc(2025, 1, 10, 9, 30)

    def test_yearly_from_leap_day(self):
        assert pattern("yearly").get_next_occurrence(_utc(2024, 2, 29)) == _utc(2025, 3, 1)

    def test_should_recur_respects_end_date(self):
        recurring = pattern("daily", 1, _utc(2024, 7, 1))
        assert recurring.should_recur(_utc(2024, 7, 1))
        assert not recurring.should_recur(_utc(2024, 7, 2))

    def test_should_recur_without_end_date(self):
        assert pattern("yearly").should_recur(_utc(2099, 1, 1))

    def test_occurrences_until_inclusive(self):
        recurring = pattern("weekly")
        assert list(recurring.occurrences(_utc(2024, 6, 1), _utc(2024, 6, 29))) == [
            _utc(2024, 6, 8),
            _utc(2024, 6, 15),
            _utc(2024, 6, 22),
            _utc(2024, 6, 29),
        ]

    def test_occurrences_stop_at_end_date(self):
        recurring = pattern("weekly", 1, _utc(2024, 6, 20))
        assert list(recurring.occurrences(_utc(2024, 6, 1), _utc(2024, 12, 31))) == [
            _utc(2024, 6, 8),
            _utc(2024, 6, 15),
        ]


@pytest.mark.unit
def test_add_months_across_year_boundary():
    assert add_months(_utc(2024, 12, 15), 1) == _utc(2025, 1, 15)
    assert add_months(_utc(2024, 8, 31), 1) == _utc(2024, 10, 1)


@pytest.mark.unit
@pytest.mark.domain
@pytest.mark.calendar
class TestEventEntity:
    """Event creation, updates and status queries."""

    def test_create_rejects_blank_puppy_id(self):
        assert make_event(puppy_id="").error.message == "PuppyId cannot be empty"

    def test_create_sets_timestamps_and_recurrence(self):
        event = make_event(recurring_pattern=pattern("monthly")).value
        assert event.created_at == NOW == event.updated_at
        assert event.is_recurring

    def test_one_off_event_is_not_recurring(self):
        assert not make_event().value.is_recurring

    def test_update_title_preserves_other_fields(self):
        event = make_event(description="Bring the booklet").value
        later = NOW + timedelta(minutes=5)
        updated = event.update_title(EventTitle.create("Booster").value, later)

        assert updated.title.value == "Booster"
        assert updated.description.value == "Bring the booklet"
        assert updated.event_date_time == event.event_date_time
        assert updated.updated_at == later
        assert event.title.value == "First DHPP Vaccination"

    def test_update_type(self):
        updated = make_event().value.update_type(EventType.GROOMING, NOW)
        assert updated.event_type is EventType.GROOMING

    @pytest.mark.parametrize(
        "delta, level",
        [
            (timedelta(hours=2), UrgencyLevel.HIGH),
            (timedelta(days=1), UrgencyLevel.HIGH),
            (timedelta(days=2), UrgencyLevel.MEDIUM),
            (timedelta(days=7), UrgencyLevel.MEDIUM),
            (timedelta(days=8), UrgencyLevel.LOW),
            (timedelta(days=-4), UrgencyLevel.HIGH),
        ],
    )
    def test_urgency_level(self, delta, level):
        assert make_event(when=NOW + delta).value.urgency_level(NOW) is level

    def test_upcoming(self):
        assert make_event(when=NOW + timedelta(days=1)).value.is_upcoming(NOW)
        assert not make_event(when=NOW - timedelta(days=1)).value.is_upcoming(NOW)

    def test_only_missed_vaccinations_are_overdue(self):
        past = NOW - timedelta(days=1)
        assert make_event(when=past).value.is_overdue(NOW)
        assert not make_event(when=past, event_type=EventType.FEEDING).value.is_overdue(NOW)
        assert not make_event(when=NOW + timedelta(days=1)).value.is_overdue(NOW)
