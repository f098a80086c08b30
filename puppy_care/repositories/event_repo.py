from datetime import datetime
from typing import List

from puppy_care.core.clock import to_aware
from puppy_care.core.result import DomainResult, Success
from puppy_care.db.base import EventModel
from puppy_care.domain.calendar import (
    Event,
    EventDateTime,
    EventDescription,
    EventId,
    EventTitle,
    EventType,
    RecurringPattern,
)
from puppy_care.domain.interfaces import IEventRepository
from puppy_care.repositories.base import (
    SQLAlchemyRepository,
    from_db_datetime,
    to_db_datetime,
)


class EventRepository(SQLAlchemyRepository, IEventRepository):
    model = EventModel
    resource = "Event"

    def find_by_puppy_id(self, puppy_id: str) -> DomainResult[List[Event]]:
        return self._run(
            "find",
            lambda session: Success(
                self._many(
                    session.query(EventModel)
                    .filter(EventModel.puppy_id == puppy_id)
                    .order_by(EventModel.event_date_time.asc())
                    .all()
                )
            ),
        )

    def find_by_date_range(self, start: datetime, end: datetime) -> DomainResult[List[Event]]:
        lower = to_db_datetime(to_aware(start))
        upper = to_db_datetime(to_aware(end))
        return self._run(
            "find",
            lambda session: Success(
                self._many(
                    session.query(EventModel)
                    .filter(EventModel.event_date_time >= lower)
                    .filter(EventModel.event_date_time <= upper)
                    .order_by(EventModel.event_date_time.asc())
                    .all()
                )
            ),
        )

    def find_by_type(self, event_type: EventType) -> DomainResult[List[Event]]:
        wanted = EventType(event_type).value
        return self._run(
            "find",
            lambda session: Success(
                self._many(
                    session.query(EventModel)
                    .filter(EventModel.event_type == wanted)
                    .order_by(EventModel.event_date_time.asc())
                    .all()
                )
            ),
        )

    def find_upcoming_events(self, puppy_id: str, limit: int = 10) -> DomainResult[List[Event]]:
        now = to_db_datetime(self.clock.now())
        return self._run(
            "find",
            lambda session: Success(
                self._many(
                    session.query(EventModel)
                    .filter(EventModel.puppy_id == puppy_id)
                    .filter(EventModel.event_date_time > now)
                    .order_by(EventModel.event_date_time.asc())
                    .limit(limit)
                    .all()
                )
            ),
        )

    def _to_domain(self, row: EventModel) -> Event:
        pattern = None
        if row.recurring_type is not None:
            # Stored end dates may have passed since creation
            pattern = RecurringPattern.restore(
                row.recurring_type,
                row.recurring_interval,
                from_db_datetime(row.recurring_end_date),
            ).get_or_raise()
        return Event(
            id=EventId.create(row.id).get_or_raise(),
            title=EventTitle.create(row.title).get_or_raise(),
            description=EventDescription.create(row.description).get_or_raise(),
            event_date_time=EventDateTime.create(
                from_db_datetime(row.event_date_time)
            ).get_or_raise(),
            event_type=EventType.create(row.event_type).get_or_raise(),
            puppy_id=row.puppy_id,
            recurring_pattern=pattern,
            created_at=from_db_datetime(row.created_at),
            updated_at=from_db_datetime(row.updated_at),
        )

    def _to_model(self, event: Event) -> EventModel:
        pattern = event.recurring_pattern
        return EventModel(
            id=event.id.value,
            title=event.title.value,
            description=event.description.value,
            event_date_time=to_db_datetime(event.event_date_time.value),
            event_type=event.event_type.value,
            puppy_id=event.puppy_id,
            recurring_type=pattern.type.value if pattern else None,
            recurring_interval=pattern.interval if pattern else None,
            recurring_end_date=to_db_datetime(pattern.end_date) if pattern else None,
            created_at=to_db_datetime(event.created_at),
            updated_at=to_db_datetime(event.updated_at),
        )
