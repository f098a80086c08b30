"""
Keyed-map repositories for tests and the ``memory`` backend.

Entities are stored in insertion-ordered dicts keyed by their id string.
There is no concurrency control: concurrent writers race on the same key,
the last ``save`` wins.
"""

import logging
from datetime import datetime
from typing import Callable, Dict, Generic, List, Optional, TypeVar

from puppy_care.core.clock import SYSTEM_CLOCK, Clock, to_aware
from puppy_care.core.result import DomainError, DomainResult, Failure, Success
from puppy_care.domain.ai import AIRecommendation
from puppy_care.domain.analytics import AnalyticsEvent
from puppy_care.domain.calendar import Event, EventType
from puppy_care.domain.interfaces import (
    IAIRepository,
    IAnalyticsRepository,
    IEventRepository,
    IPuppyRepository,
    ITrainingRepository,
    IUserRepository,
)
from puppy_care.domain.puppy import Puppy
from puppy_care.domain.training import TrainingSession
from puppy_care.domain.user import User

logger = logging.getLogger(__name__)

T = TypeVar("T")


def entity_key(entity) -> str:
    """Id string of an entity whose id is either a value object or a str."""
    return getattr(entity.id, "value", entity.id)


class InMemoryStore(Generic[T]):
    """Shared storage and helpers for the in-memory adapters."""

    resource = "Entity"

    def __init__(self):
        self._items: Dict[str, T] = {}

    # Test helpers
    def clear(self) -> None:
        self._items.clear()

    def count(self) -> int:
        return len(self._items)

    def all(self) -> List[T]:
        return list(self._items.values())

    def _guard(self, operation: str, action: Callable[[], DomainResult]) -> DomainResult:
        try:
            return action()
        except Exception as e:
            logger.error(
                f"{self.resource} repository {operation} failed: {e}",
                exc_info=True,
                extra={"context": {"operation": operation}},
            )
            return Failure(DomainError.internal(f"Failed to {operation} {self.resource.lower()}"))

    def _select(self, predicate: Callable[[T], bool]) -> List[T]:
        return [item for item in self._items.values() if predicate(item)]

    def find_by_id(self, id: str) -> DomainResult[Optional[T]]:
        return self._guard("find", lambda: Success(self._items.get(id)))

    def save(self, entity: T) -> DomainResult[T]:
        def _save():
            self._items[entity_key(entity)] = entity
            return Success(entity)

        return self._guard("save", _save)

    def update(self, entity: T) -> DomainResult[T]:
        def _update():
            key = entity_key(entity)
            if key not in self._items:
                return Failure(DomainError.not_found(self.resource, key))
            self._items[key] = entity
            return Success(entity)

        return self._guard("update", _update)

    def delete(self, id: str) -> DomainResult[None]:
        def _delete():
            self._items.pop(id, None)
            return Success(None)

        return self._guard("delete", _delete)


class InMemoryPuppyRepository(InMemoryStore[Puppy], IPuppyRepository):
    resource = "Puppy"

    def find_by_owner_id(self, owner_id: str) -> DomainResult[List[Puppy]]:
        return self._guard("find", lambda: Success(self._select(lambda p: p.owner_id == owner_id)))

    def find_all(self) -> DomainResult[List[Puppy]]:
        return self._guard("find", lambda: Success(self.all()))


class InMemoryEventRepository(InMemoryStore[Event], IEventRepository):
    resource = "Event"

    def __init__(self, clock: Clock = SYSTEM_CLOCK):
        super().__init__()
        self.clock = clock

    def find_by_puppy_id(self, puppy_id: str) -> DomainResult[List[Event]]:
        return self._guard("find", lambda: Success(self._select(lambda e: e.puppy_id == puppy_id)))

    def find_by_date_range(self, start: datetime, end: datetime) -> DomainResult[List[Event]]:
        start, end = to_aware(start), to_aware(end)
        return self._guard(
            "find",
            lambda: Success(
                self._select(lambda e: start <= e.event_date_time.value <= end)
            ),
        )

    def find_by_type(self, event_type: EventType) -> DomainResult[List[Event]]:
        wanted = EventType(event_type)
        return self._guard("find", lambda: Success(self._select(lambda e: e.event_type is wanted)))

    def find_upcoming_events(self, puppy_id: str, limit: int = 10) -> DomainResult[List[Event]]:
        def _upcoming():
            now = self.clock.now()
            upcoming = self._select(
                lambda e: e.puppy_id == puppy_id and e.event_date_time.is_future(now)
            )
            upcoming.sort(key=lambda e: e.event_date_time.value)
            return Success(upcoming[:limit])

        return self._guard("find", _upcoming)


class InMemoryUserRepository(InMemoryStore[User], IUserRepository):
    resource = "User"

    def find_by_email(self, email: str) -> DomainResult[Optional[User]]:
        def _by_email():
            matches = self._select(lambda u: u.email.value.lower() == email.lower())
            return Success(matches[0] if matches else None)

        return self._guard("find", _by_email)

    def find_all(self) -> DomainResult[List[User]]:
        return self._guard("find", lambda: Success(self.all()))


class InMemoryTrainingRepository(InMemoryStore[TrainingSession], ITrainingRepository):
    resource = "Training session"

    def find_by_puppy_id(self, puppy_id: str) -> DomainResult[List[TrainingSession]]:
        return self._guard("find", lambda: Success(self._select(lambda s: s.puppy_id == puppy_id)))


class InMemoryAIRepository(InMemoryStore[AIRecommendation], IAIRepository):
    resource = "AI recommendation"

    def find_by_puppy_id(self, puppy_id: str) -> DomainResult[List[AIRecommendation]]:
        return self._guard("find", lambda: Success(self._select(lambda r: r.puppy_id == puppy_id)))

    def find_by_category(self, category: str) -> DomainResult[List[AIRecommendation]]:
        return self._guard("find", lambda: Success(self._select(lambda r: r.category == category)))


class InMemoryAnalyticsRepository(InMemoryStore[AnalyticsEvent], IAnalyticsRepository):
    resource = "Analytics event"

    def find_by_user_id(self, user_id: str) -> DomainResult[List[AnalyticsEvent]]:
        return self._guard("find", lambda: Success(self._select(lambda e: e.user_id == user_id)))

    def find_by_event_type(self, event_type: str) -> DomainResult[List[AnalyticsEvent]]:
        return self._guard(
            "find", lambda: Success(self._select(lambda e: e.event_type == event_type))
        )

    def find_by_date_range(
        self, start: datetime, end: datetime
    ) -> DomainResult[List[AnalyticsEvent]]:
        start, end = to_aware(start), to_aware(end)
        return self._guard(
            "find", lambda: Success(self._select(lambda e: start <= e.timestamp <= end))
        )
