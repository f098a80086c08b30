"""
Calendar use-cases: event CRUD, listings and vaccination timeline generation.
"""

import logging
from datetime import datetime
from typing import List, Optional

from puppy_care.core.clock import SYSTEM_CLOCK, Clock, to_aware
from puppy_care.core.result import DomainError, DomainResult, Failure, Success
from puppy_care.domain.calendar import (
    Event,
    EventDateTime,
    EventDescription,
    EventId,
    EventTitle,
    EventType,
    RecurringPattern,
)
from puppy_care.domain.health_timeline import upcoming_doses
from puppy_care.domain.interfaces import IEventRepository
from puppy_care.domain.puppy import BirthDate, PuppyId
from puppy_care.schemas.dtos import (
    CreateEventCommand,
    GenerateHealthTimelineCommand,
    RecurringPatternCommand,
    UpdateEventCommand,
)
from puppy_care.services.common import log_outcome, new_id, require_found

logger = logging.getLogger(__name__)


class CreateEventUseCase:
    """Validate every field, build the event and persist it."""

    def __init__(self, event_repository: IEventRepository, clock: Clock = SYSTEM_CLOCK):
        self.event_repository = event_repository
        self.clock = clock

    def execute(self, command: CreateEventCommand) -> DomainResult[Event]:
        result = self._create(command)
        return log_outcome(
            logger,
            "Create event",
            result,
            puppy_id=command.puppy_id,
            event_type=str(command.event_type),
        )

    def _create(self, command: CreateEventCommand) -> DomainResult[Event]:
        event_id = EventId.create(new_id())
        if isinstance(event_id, Failure):
            return event_id
        title = EventTitle.create(command.title)
        if isinstance(title, Failure):
            return title
        description = EventDescription.create(command.description)
        if isinstance(description, Failure):
            return description
        event_date_time = EventDateTime.create(command.event_date_time)
        if isinstance(event_date_time, Failure):
            return event_date_time
        event_type = EventType.create(command.event_type)
        if isinstance(event_type, Failure):
            return event_type
        pattern = self._recurring_pattern(command.recurring_pattern)
        if isinstance(pattern, Failure):
            return pattern

        event = Event.create(
            event_id.value,
            title.value,
            description.value,
            event_date_time.value,
            event_type.value,
            command.puppy_id,
            self.clock.now(),
            recurring_pattern=pattern.value,
        )
        if isinstance(event, Failure):
            return event
        return self.event_repository.save(event.value)

    def _recurring_pattern(
        self, command: Optional[RecurringPatternCommand]
    ) -> DomainResult[Optional[RecurringPattern]]:
        if command is None:
            return Success(None)
        return RecurringPattern.create(
            command.type, command.interval, command.end_date, clock=self.clock
        )


class UpdateEventUseCase:
    """
    Apply a partial update.

    Only fields that are not None in the command are validated and changed;
    everything else on the event is carried over as is.
    """

    def __init__(self, event_repository: IEventRepository, clock: Clock = SYSTEM_CLOCK):
        self.event_repository = event_repository
        self.clock = clock

    def execute(self, command: UpdateEventCommand) -> DomainResult[Event]:
        result = self._update(command)
        return log_outcome(logger, "Update event", result, event_id=command.event_id)

    def _update(self, command: UpdateEventCommand) -> DomainResult[Event]:
        event_id = EventId.create(command.event_id)
        if isinstance(event_id, Failure):
            return event_id
        found = require_found(
            self.event_repository.find_by_id(command.event_id), "Event", command.event_id
        )
        if isinstance(found, Failure):
            return found

        event = found.value
        now = self.clock.now()

        if command.title is not None:
            title = EventTitle.create(command.title)
            if isinstance(title, Failure):
                return title
            event = event.update_title(title.value, now)

        if command.description is not None:
            description = EventDescription.create(command.description)
            if isinstance(description, Failure):
                return description
            event = event.update_description(description.value, now)

        if command.event_date_time is not None:
            event_date_time = EventDateTime.create(command.event_date_time)
            if isinstance(event_date_time, Failure):
                return event_date_time
            event = event.update_date_time(event_date_time.value, now)

        if command.event_type is not None:
            event_type = EventType.create(command.event_type)
            if isinstance(event_type, Failure):
                return event_type
            event = event.update_type(event_type.value, now)

        return self.event_repository.update(event)


class GenerateHealthTimelineUseCase:
    """
    Create the vaccination events still due for a puppy.

    Events are built first and saved one by one. A save failure stops the
    batch; events saved before it stay in the repository and their ids are
    reported in the error details.
    """

    def __init__(self, event_repository: IEventRepository, clock: Clock = SYSTEM_CLOCK):
        self.event_repository = event_repository
        self.clock = clock

    def execute(self, command: GenerateHealthTimelineCommand) -> DomainResult[List[Event]]:
        puppy_id = PuppyId.create(command.puppy_id)
        if isinstance(puppy_id, Failure):
            return puppy_id
        birth_date = BirthDate.create(command.birth_date, clock=self.clock)
        if isinstance(birth_date, Failure):
            return birth_date

        now = self.clock.now()
        events: List[Event] = []
        for dose, due_at in upcoming_doses(command.breed, birth_date.value.value, now):
            built = self._build_event(command.puppy_id, dose.name, dose.description, due_at, now)
            if isinstance(built, Failure):
                return built
            events.append(built.value)

        saved: List[Event] = []
        for index, event in enumerate(events):
            result = self.event_repository.save(event)
            if isinstance(result, Failure):
                saved_ids = [e.id.value for e in saved]
                logger.warning(
                    f"Health timeline partially saved: {len(saved)} of {len(events)} events",
                    extra={
                        "context": {
                            "puppy_id": command.puppy_id,
                            "saved_event_ids": saved_ids,
                            "failed_index": index,
                            "error_code": result.error.code.value,
                        }
                    },
                )
                return Failure(
                    DomainError.internal(
                        f"Failed to save health timeline event {index + 1} of {len(events)}: "
                        f"{result.error.message}",
                        details={"saved_event_ids": saved_ids, "failed_index": index},
                    )
                )
            saved.append(result.value)

        logger.info(
            f"Health timeline generated with {len(saved)} events",
            extra={"context": {"puppy_id": command.puppy_id}},
        )
        return Success(saved)

    def _build_event(
        self, puppy_id: str, name: str, description: str, due_at: datetime, now: datetime
    ) -> DomainResult[Event]:
        event_id = EventId.create(new_id())
        if isinstance(event_id, Failure):
            return event_id
        title = EventTitle.create(name)
        if isinstance(title, Failure):
            return title
        event_description = EventDescription.create(description)
        if isinstance(event_description, Failure):
            return event_description
        event_date_time = EventDateTime.create(due_at)
        if isinstance(event_date_time, Failure):
            return event_date_time
        return Event.create(
            event_id.value,
            title.value,
            event_description.value,
            event_date_time.value,
            EventType.VACCINATION,
            puppy_id,
            now,
        )


class GetPuppyEventsUseCase:
    def __init__(self, event_repository: IEventRepository):
        self.event_repository = event_repository

    def execute(self, puppy_id: str) -> DomainResult[List[Event]]:
        """All events of a puppy, earliest first."""
        return self.event_repository.find_by_puppy_id(puppy_id).map(
            lambda events: sorted(events, key=lambda e: e.event_date_time.value)
        )


class GetUpcomingEventsUseCase:
    def __init__(self, event_repository: IEventRepository):
        self.event_repository = event_repository

    def execute(self, puppy_id: str, limit: int = 10) -> DomainResult[List[Event]]:
        if limit <= 0:
            return Failure(DomainError.validation("Limit must be positive"))
        return self.event_repository.find_upcoming_events(puppy_id, limit)


class GetEventsByDateRangeUseCase:
    def __init__(self, event_repository: IEventRepository):
        self.event_repository = event_repository

    def execute(self, start: datetime, end: datetime) -> DomainResult[List[Event]]:
        if start is None or end is None:
            return Failure(DomainError.validation("Start and end dates are required"))
        start, end = to_aware(start), to_aware(end)
        if end < start:
            return Failure(DomainError.validation("End date must be after start date"))
        return self.event_repository.find_by_date_range(start, end)


class DeleteEventUseCase:
    def __init__(self, event_repository: IEventRepository):
        self.event_repository = event_repository

    def execute(self, event_id: str) -> DomainResult[None]:
        found = require_found(self.event_repository.find_by_id(event_id), "Event", event_id)
        if isinstance(found, Failure):
            return log_outcome(logger, "Delete event", found, event_id=event_id)
        return log_outcome(
            logger, "Delete event", self.event_repository.delete(event_id), event_id=event_id
        )
