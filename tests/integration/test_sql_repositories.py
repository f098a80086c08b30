"""
Integration tests for the SQLAlchemy repositories on an in-memory SQLite database.

This module tests:
- Entity <-> row mapping for every aggregate, including recurring patterns
- Ordering, filtering and limits applied in SQL
- Database errors and invalid stored rows surfacing as INTERNAL_ERROR failures
"""

from datetime import datetime, timedelta, timezone

import pytest
from sqlalchemy.exc import OperationalError

from puppy_care.core.clock import FixedClock
from puppy_care.core.result import ErrorCode, Success
from puppy_care.db.base import EventModel
from puppy_care.domain.ai import AIRecommendation
from puppy_care.domain.analytics import AnalyticsEvent
from puppy_care.domain.calendar import (
    Event,
    EventDateTime,
    EventDescription,
    EventId,
    EventTitle,
    EventType,
    RecurringPattern,
    RecurringType,
)
from puppy_care.domain.puppy import (
    BirthDate,
    Breed,
    Puppy,
    PuppyId,
    PuppyName,
    Weight,
    WeightUnit,
)
from puppy_care.domain.training import TrainingSession
from puppy_care.domain.user import Email, User, UserId, UserRole
from puppy_care.repositories.ai_repo import AIRepository
from puppy_care.repositories.analytics_repo import AnalyticsRepository
from puppy_care.repositories.event_repo import EventRepository
from puppy_care.repositories.puppy_repo import PuppyRepository
from puppy_care.repositories.training_repo import TrainingRepository
from puppy_care.repositories.user_repo import UserRepository

NOW = datetime(2024, 6, 15, 12, 0, tzinfo=timezone.utc)


def make_puppy(puppy_id="p-1", owner_id="owner-1", created_at=NOW):
    return Puppy.create(
        PuppyId.create(puppy_id).value,
        PuppyName.create("Rex").value,
        Breed.create("Labrador").value,
        BirthDate.create(datetime(2024, 4, 1, 8, 30, tzinfo=timezone.utc), clock=FixedClock(NOW)).value,
        Weight.create(12.5, "lbs").value,
        owner_id,
        created_at,
    ).value


def make_event(event_id, when, puppy_id="p-1", event_type=EventType.VACCINATION, pattern=None):
    return Event.create(
        EventId.create(event_id).value,
        EventTitle.create("Rabies Vaccination").value,
        EventDescription.create("First rabies vaccination").value,
        EventDateTime.create(when).value,
        event_type,
        puppy_id,
        NOW,
        recurring_pattern=pattern,
    ).value


@pytest.mark.integration
@pytest.mark.database
@pytest.mark.puppy
class TestPuppyRepository:
    @pytest.fixture
    def repo(self, session_factory, clock):
        return PuppyRepository(session_factory, clock=clock)

    def test_round_trip(self, repo):
        puppy = make_puppy()
        assert repo.save(puppy) == Success(puppy)

        loaded = repo.find_by_id("p-1").value

        assert loaded == puppy
        assert loaded.name.value == "Rex"
        assert loaded.current_weight.value == 12.5
        assert loaded.current_weight.unit is WeightUnit.LBS
        assert loaded.birth_date.value == puppy.birth_date.value
        assert loaded.created_at == NOW

    def test_find_missing(self, repo):
        assert repo.find_by_id("missing") == Success(None)

    def test_update(self, repo):
        puppy = make_puppy()
        repo.save(puppy)
        later = NOW + timedelta(days=1)

        repo.update(puppy.update_weight(Weight.create(6, "kg").value, later))

        loaded = repo.find_by_id("p-1").value
        assert loaded.current_weight.value == 6.0
        assert loaded.current_weight.unit is WeightUnit.KG
        assert loaded.updated_at == later

    def test_update_missing(self, repo):
        result = repo.update(make_puppy())
        assert result.error.code is ErrorCode.NOT_FOUND

    def test_find_by_owner_ordered_by_creation(self, repo):
        repo.save(make_puppy("p-2", created_at=NOW + timedelta(minutes=5)))
        repo.save(make_puppy("p-1"))
        repo.save(make_puppy("p-3", owner_id="owner-2"))

        found = repo.find_by_owner_id("owner-1").value

        assert [p.id.value for p in found] == ["p-1", "p-2"]
        assert len(repo.find_all().value) == 3

    def test_delete(self, repo):
        repo.save(make_puppy())
        assert repo.delete("p-1") == Success(None)
        assert repo.find_by_id("p-1") == Success(None)
        assert repo.delete("p-1") == Success(None)


@pytest.mark.integration
@pytest.mark.database
@pytest.mark.calendar
class TestEventRepository:
    @pytest.fixture
    def repo(self, session_factory, clock):
        return EventRepository(session_factory, clock=clock)

    def test_round_trip_with_pattern(self, repo, clock):
        pattern = RecurringPattern.create(
            "monthly", 2, NOW + timedelta(days=90), clock=clock
        ).value
        event = make_event("e-1", NOW + timedelta(days=3), pattern=pattern)
        repo.save(event)

        loaded = repo.find_by_id("e-1").value

        assert loaded.title.value == "Rabies Vaccination"
        assert loaded.description.value == "First rabies vaccination"
        assert loaded.event_type is EventType.VACCINATION
        assert loaded.event_date_time.value == NOW + timedelta(days=3)
        assert loaded.recurring_pattern.type is RecurringType.MONTHLY
        assert loaded.recurring_pattern.interval == 2
        assert loaded.recurring_pattern.end_date == NOW + timedelta(days=90)

    def test_one_off_event_has_no_pattern(self, repo):
        repo.save(make_event("e-1", NOW))
        assert repo.find_by_id("e-1").value.recurring_pattern is None

    def test_expired_pattern_still_loads(self, repo, clock):
        pattern = RecurringPattern.create("weekly", 1, NOW + timedelta(days=1), clock=clock).value
        repo.save(make_event("e-1", NOW - timedelta(days=10), pattern=pattern))
        clock.advance(timedelta(days=30))

        loaded = repo.find_by_id("e-1").value

        assert loaded.recurring_pattern.end_date == NOW + timedelta(days=1)

    def test_queries(self, repo, clock):
        repo.save(make_event("past", NOW - timedelta(days=1)))
        repo.save(make_event("late", NOW + timedelta(days=20)))
        repo.save(make_event("soon", NOW + timedelta(hours=3)))
        repo.save(make_event("feed", NOW + timedelta(days=1), event_type=EventType.FEEDING))
        repo.save(make_event("other", NOW + timedelta(hours=1), puppy_id="p-2"))

        by_puppy = repo.find_by_puppy_id("p-1").value
        assert [e.id.value for e in by_puppy] == ["past", "soon", "feed", "late"]

        upcoming = repo.find_upcoming_events("p-1", limit=2).value
        assert [e.id.value for e in upcoming] == ["soon", "feed"]

        in_range = repo.find_by_date_range(NOW - timedelta(days=1), NOW + timedelta(days=1)).value
        assert [e.id.value for e in in_range] == ["past", "other", "soon", "feed"]

        feeding = repo.find_by_type(EventType.FEEDING).value
        assert [e.id.value for e in feeding] == ["feed"]

    def test_invalid_stored_row_is_internal_error(self, repo, session_factory):
        with session_factory() as session:
            session.add(
                EventModel(
                    id="bad",
                    title="Broken",
                    description="",
                    event_date_time=NOW,
                    event_type="party",
                    puppy_id="p-1",
                    created_at=NOW,
                    updated_at=NOW,
                )
            )
            session.commit()

        result = repo.find_by_id("bad")

        assert result.error.code is ErrorCode.INTERNAL_ERROR
        assert result.error.message == "Stored event is invalid"

    def test_database_error_is_internal_error(self, repo, monkeypatch):
        original_factory = repo.session_factory

        def _broken_factory():
            raise_on_query = original_factory()

            def _query(*args, **kwargs):
                raise OperationalError("SELECT", {}, Exception("database is locked"))

            raise_on_query.query = _query
            return raise_on_query

        monkeypatch.setattr(repo, "session_factory", _broken_factory)

        result = repo.find_by_puppy_id("p-1")

        assert result.error.code is ErrorCode.INTERNAL_ERROR
        assert result.error.message == "Failed to find event"


@pytest.mark.integration
@pytest.mark.database
@pytest.mark.user
class TestUserRepository:
    @pytest.fixture
    def repo(self, session_factory, clock):
        return UserRepository(session_factory, clock=clock)

    def test_round_trip_and_email_lookup(self, repo):
        user = User.create(
            UserId.create("u-1").value,
            Email.create("Owner@Example.com").value,
            NOW,
            role=UserRole.FAMILY_MEMBER,
        )
        repo.save(user)

        loaded = repo.find_by_email("owner@example.com").value

        assert loaded == user
        assert loaded.role is UserRole.FAMILY_MEMBER
        assert loaded.is_active
        assert repo.find_by_email("nobody@example.com") == Success(None)

    def test_update_active_flag(self, repo):
        user = User.create(UserId.create("u-1").value, Email.create("a@b.co").value, NOW)
        repo.save(user)

        repo.update(user.deactivate(NOW))

        assert repo.find_by_id("u-1").value.is_active is False


@pytest.mark.integration
@pytest.mark.database
class TestTrackingRepositories:
    def test_training_sessions(self, session_factory, clock):
        repo = TrainingRepository(session_factory, clock=clock)
        session = TrainingSession.create("t-1", "p-1", "recall", 15, "", NOW, NOW).value
        repo.save(session)
        repo.save(session.update_notes("Came back every time", NOW + timedelta(hours=1)))

        found = repo.find_by_puppy_id("p-1").value

        assert len(found) == 1
        assert found[0].notes == "Came back every time"
        assert found[0].duration == 15
        assert found[0].completed_at == NOW

    def test_ai_recommendations(self, session_factory, clock):
        repo = AIRepository(session_factory, clock=clock)
        recommendation = AIRecommendation.create(
            "r-1", "p-1", "nutrition", "Four meals", 0.75, NOW, metadata={"model": "v1"}
        ).value
        repo.save(recommendation)

        loaded = repo.find_by_id("r-1").value

        assert loaded.confidence == 0.75
        assert loaded.metadata == {"model": "v1"}
        assert [r.id for r in repo.find_by_category("nutrition").value] == ["r-1"]
        assert repo.find_by_category("exercise").value == []

    def test_analytics_events(self, session_factory, clock):
        repo = AnalyticsRepository(session_factory, clock=clock)
        first = AnalyticsEvent.create("a-1", "u-1", "page_view", "home", NOW, {"ref": "mail"}).value
        second = AnalyticsEvent.create(
            "a-2", "u-1", "click", "add_event", NOW + timedelta(days=2)
        ).value
        repo.save(first)
        repo.save(second)

        assert [e.id for e in repo.find_by_user_id("u-1").value] == ["a-1", "a-2"]
        assert [e.id for e in repo.find_by_event_type("click").value] == ["a-2"]
        in_range = repo.find_by_date_range(NOW - timedelta(hours=1), NOW + timedelta(hours=1))
        assert [e.id for e in in_range.value] == ["a-1"]
        assert repo.find_by_id("a-1").value.properties == {"ref": "mail"}
