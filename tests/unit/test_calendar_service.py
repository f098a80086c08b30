"""
Unit tests for the calendar use-cases.

This module tests:
- Event creation with and without a recurring pattern
- Partial updates that leave unspecified fields untouched
- Health timeline generation, including a save failure half-way through
- Listing queries (by puppy, upcoming, by date range) and deletion
"""

from datetime import datetime, timedelta, timezone

import pytest

from puppy_care.core.result import ErrorCode, Failure, Success
from puppy_care.domain.calendar import EventType, RecurringType
from puppy_care.schemas.dtos import (
    CreateEventCommand,
    GenerateHealthTimelineCommand,
    RecurringPatternCommand,
    UpdateEventCommand,
)
from puppy_care.services.calendar_service import (
    CreateEventUseCase,
    DeleteEventUseCase,
    GenerateHealthTimelineUseCase,
    GetEventsByDateRangeUseCase,
    GetPuppyEventsUseCase,
    GetUpcomingEventsUseCase,
    UpdateEventUseCase,
)
from tests.factories.repository_factories import EventRepositoryFactory

NOW = datetime(2024, 6, 15, 12, 0, tzinfo=timezone.utc)


def event_command(**overrides):
    values = dict(
        title="Vet check-up",
        description="Annual check",
        event_date_time=NOW + timedelta(days=3),
        event_type="vet_appointment",
        puppy_id="p-1",
    )
    values.update(overrides)
    return CreateEventCommand(**values)


@pytest.fixture
def create_event(event_repo, clock):
    use_case = CreateEventUseCase(event_repo, clock=clock)

    def _create(**overrides):
        return use_case.execute(event_command(**overrides))

    return _create


@pytest.mark.unit
@pytest.mark.services
@pytest.mark.calendar
class TestCreateEvent:
    """Test event creation functionality."""

    def test_create_event_success(self, create_event, event_repo):
        result = create_event()

        assert isinstance(result, Success)
        event = result.value
        assert event.title.value == "Vet check-up"
        assert event.event_type is EventType.VET_APPOINTMENT
        assert event.created_at == NOW
        assert not event.is_recurring
        assert event_repo.count() == 1

    def test_create_recurring_event(self, create_event):
        pattern = RecurringPatternCommand(
            type="monthly", interval=1, end_date=NOW + timedelta(days=365)
        )
        event = create_event(event_type="medication", recurring_pattern=pattern).value

        assert event.recurring_pattern.type is RecurringType.MONTHLY
        assert event.recurring_pattern.end_date == NOW + timedelta(days=365)

    def test_recurring_end_date_in_past(self, create_event, event_repo):
        pattern = RecurringPatternCommand(type="daily", interval=1, end_date=NOW)
        result = create_event(recurring_pattern=pattern)

        assert result.error.message == "Recurring end date must be in the future"
        assert event_repo.count() == 0

    @pytest.mark.parametrize(
        "overrides, message",
        [
            ({"title": ""}, "EventTitle cannot be empty"),
            ({"description": "x" * 1001}, "EventDescription cannot exceed 1000 characters"),
            ({"event_date_time": None}, "EventDateTime cannot be null"),
            ({"event_type": "party"}, "Invalid event type"),
            ({"puppy_id": ""}, "PuppyId cannot be empty"),
        ],
    )
    def test_validation_failures(self, create_event, event_repo, overrides, message):
        result = create_event(**overrides)

        assert isinstance(result, Failure)
        assert result.error.code is ErrorCode.VALIDATION_ERROR
        assert result.error.message == message
        assert event_repo.count() == 0

    def test_events_in_the_past_are_allowed(self, create_event):
        assert isinstance(create_event(event_date_time=NOW - timedelta(days=30)), Success)


@pytest.mark.unit
@pytest.mark.services
@pytest.mark.calendar
class TestUpdateEvent:
    """Test partial event updates."""

    def test_only_given_fields_change(self, create_event, event_repo, clock):
        original = create_event().value
        clock.advance(timedelta(hours=2))

        result = UpdateEventUseCase(event_repo, clock=clock).execute(
            UpdateEventCommand(event_id=original.id.value, title="Vaccine booster")
        )

        updated = result.value
        assert updated.title.value == "Vaccine booster"
        assert updated.description == original.description
        assert updated.event_date_time == original.event_date_time
        assert updated.event_type is original.event_type
        assert updated.created_at == NOW
        assert updated.updated_at == NOW + timedelta(hours=2)
        assert event_repo.find_by_id(original.id.value).value.title.value == "Vaccine booster"

    def test_update_every_field(self, create_event, event_repo, clock):
        original = create_event().value
        new_time = NOW + timedelta(days=10)

        updated = UpdateEventUseCase(event_repo, clock=clock).execute(
            UpdateEventCommand(
                event_id=original.id.value,
                title="Grooming",
                description="",
                event_date_time=new_time,
                event_type="grooming",
            )
        ).value

        assert updated.title.value == "Grooming"
        assert updated.description.value == ""
        assert updated.event_date_time.value == new_time
        assert updated.event_type is EventType.GROOMING

    def test_invalid_field_leaves_event_untouched(self, create_event, event_repo, clock):
        original = create_event().value

        result = UpdateEventUseCase(event_repo, clock=clock).execute(
            UpdateEventCommand(event_id=original.id.value, title="New", event_type="party")
        )

        assert result.error.message == "Invalid event type"
        assert event_repo.find_by_id(original.id.value).value.title.value == "Vet check-up"

    def test_blank_event_id(self, event_repo, clock):
        result = UpdateEventUseCase(event_repo, clock=clock).execute(
            UpdateEventCommand(event_id="")
        )
        assert result.error.message == "EventId cannot be empty"

    def test_not_found(self, event_repo, clock):
        result = UpdateEventUseCase(event_repo, clock=clock).execute(
            UpdateEventCommand(event_id="missing", title="x")
        )
        assert result.error.code is ErrorCode.NOT_FOUND
        assert result.error.message == "Event with id missing not found"


@pytest.mark.unit
@pytest.mark.services
@pytest.mark.calendar
class TestGenerateHealthTimeline:
    """Test vaccination timeline generation."""

    def test_newborn_gets_four_vaccinations(self, event_repo, clock):
        result = GenerateHealthTimelineUseCase(event_repo, clock=clock).execute(
            GenerateHealthTimelineCommand(
                puppy_id="p-1", breed="Beagle", birth_date=NOW - timedelta(days=1)
            )
        )

        events = result.value
        assert [e.title.value for e in events] == [
            "First DHPP Vaccination",
            "Second DHPP Vaccination",
            "Third DHPP Vaccination",
            "Rabies Vaccination",
        ]
        assert all(e.event_type is EventType.VACCINATION for e in events)
        assert all(e.puppy_id == "p-1" for e in events)
        assert events[0].description.value.startswith("First dose of DHPP")
        assert events[0].event_date_time.value == NOW - timedelta(days=1) + timedelta(weeks=6)
        assert event_repo.count() == 4

    def test_adult_gets_no_events(self, event_repo, clock):
        result = GenerateHealthTimelineUseCase(event_repo, clock=clock).execute(
            GenerateHealthTimelineCommand(
                puppy_id="p-1", breed="Beagle", birth_date=NOW - timedelta(days=730)
            )
        )

        assert result == Success([])
        assert event_repo.count() == 0

    def test_future_birth_date(self, event_repo, clock):
        result = GenerateHealthTimelineUseCase(event_repo, clock=clock).execute(
            GenerateHealthTimelineCommand(
                puppy_id="p-1", breed="Beagle", birth_date=NOW + timedelta(days=1)
            )
        )
        assert result.error.message == "BirthDate cannot be in the future"

    def test_blank_puppy_id(self, event_repo, clock):
        result = GenerateHealthTimelineUseCase(event_repo, clock=clock).execute(
            GenerateHealthTimelineCommand(puppy_id=" ", breed="Beagle", birth_date=NOW)
        )
        assert result.error.message == "PuppyId cannot be empty"
        assert event_repo.count() == 0

    def test_save_failure_reports_saved_events(self, clock):
        repo = EventRepositoryFactory.create_failing_after(2)

        result = GenerateHealthTimelineUseCase(repo, clock=clock).execute(
            GenerateHealthTimelineCommand(
                puppy_id="p-1", breed="Beagle", birth_date=NOW - timedelta(days=1)
            )
        )

        assert isinstance(result, Failure)
        assert result.error.code is ErrorCode.INTERNAL_ERROR
        assert result.error.message == "Failed to save health timeline event 3 of 4: disk full"
        assert result.error.details["failed_index"] == 2
        assert len(result.error.details["saved_event_ids"]) == 2
        # The batch stops at the first failed save
        assert repo.save.call_count == 3


@pytest.mark.unit
@pytest.mark.services
@pytest.mark.calendar
class TestEventQueries:
    def test_puppy_events_sorted_by_date(self, create_event, event_repo):
        later = create_event(title="Later", event_date_time=NOW + timedelta(days=9)).value
        earlier = create_event(title="Earlier", event_date_time=NOW - timedelta(days=2)).value
        create_event(puppy_id="p-2")

        result = GetPuppyEventsUseCase(event_repo).execute("p-1")

        assert result.value == [earlier, later]

    def test_upcoming_events(self, create_event, event_repo):
        create_event(event_date_time=NOW - timedelta(days=1))
        third = create_event(event_date_time=NOW + timedelta(days=30)).value
        first = create_event(event_date_time=NOW + timedelta(hours=1)).value
        second = create_event(event_date_time=NOW + timedelta(days=2)).value

        result = GetUpcomingEventsUseCase(event_repo).execute("p-1", limit=2)

        assert result.value == [first, second]
        assert third not in result.value

    def test_upcoming_events_limit_must_be_positive(self, event_repo):
        result = GetUpcomingEventsUseCase(event_repo).execute("p-1", limit=0)
        assert result.error.message == "Limit must be positive"

    def test_date_range_is_inclusive(self, create_event, event_repo):
        start, end = NOW, NOW + timedelta(days=7)
        on_start = create_event(event_date_time=start).value
        on_end = create_event(event_date_time=end).value
        create_event(event_date_time=end + timedelta(seconds=1))

        result = GetEventsByDateRangeUseCase(event_repo).execute(start, end)

        assert set(result.value) == {on_start, on_end}

    def test_date_range_requires_both_bounds(self, event_repo):
        result = GetEventsByDateRangeUseCase(event_repo).execute(NOW, None)
        assert result.error.message == "Start and end dates are required"

    def test_date_range_rejects_inverted_bounds(self, event_repo):
        result = GetEventsByDateRangeUseCase(event_repo).execute(NOW, NOW - timedelta(days=1))
        assert result.error.message == "End date must be after start date"

    def test_delete(self, create_event, event_repo):
        event = create_event().value

        assert DeleteEventUseCase(event_repo).execute(event.id.value) == Success(None)
        assert event_repo.count() == 0

    def test_delete_not_found(self, event_repo):
        result = DeleteEventUseCase(event_repo).execute("missing")
        assert result.error.code is ErrorCode.NOT_FOUND
