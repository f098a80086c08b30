"""
Analytics event tracking service.
"""

import logging
from datetime import datetime
from typing import Any, Dict, List, Optional

from puppy_care.core.clock import SYSTEM_CLOCK, Clock, to_aware
from puppy_care.core.result import DomainError, DomainResult, Failure
from puppy_care.domain.analytics import AnalyticsEvent
from puppy_care.domain.interfaces import IAnalyticsRepository
from puppy_care.services.common import log_outcome, new_id, require_found

logger = logging.getLogger(__name__)


class AnalyticsService:
    def __init__(self, analytics_repository: IAnalyticsRepository, clock: Clock = SYSTEM_CLOCK):
        self.analytics_repository = analytics_repository
        self.clock = clock

    def track_event(
        self,
        user_id: str,
        event_type: str,
        event_name: str,
        properties: Optional[Dict[str, Any]] = None,
    ) -> DomainResult[AnalyticsEvent]:
        created = AnalyticsEvent.create(
            new_id(), user_id, event_type, event_name, self.clock.now(), properties=properties
        )
        if isinstance(created, Failure):
            return log_outcome(logger, "Track event", created, user_id=user_id)
        return log_outcome(
            logger,
            "Track event",
            self.analytics_repository.save(created.value),
            user_id=user_id,
            event_type=event_type,
        )

    def get_event(self, event_id: str) -> DomainResult[AnalyticsEvent]:
        return require_found(
            self.analytics_repository.find_by_id(event_id), "Analytics event", event_id
        )

    def get_user_events(self, user_id: str) -> DomainResult[List[AnalyticsEvent]]:
        return self.analytics_repository.find_by_user_id(user_id)

    def get_events_by_type(self, event_type: str) -> DomainResult[List[AnalyticsEvent]]:
        return self.analytics_repository.find_by_event_type(event_type)

    def get_events_by_date_range(
        self, start: datetime, end: datetime
    ) -> DomainResult[List[AnalyticsEvent]]:
        if start is None or end is None:
            return Failure(DomainError.validation("Start and end dates are required"))
        start, end = to_aware(start), to_aware(end)
        if end < start:
            return Failure(DomainError.validation("End date must be after start date"))
        return self.analytics_repository.find_by_date_range(start, end)

    def enrich_event(
        self, event_id: str, additional_properties: Dict[str, Any]
    ) -> DomainResult[AnalyticsEvent]:
        if not isinstance(additional_properties, dict):
            return Failure(DomainError.validation("Properties must be an object"))
        found = self.get_event(event_id)
        if isinstance(found, Failure):
            return found
        enriched = found.value.enrich_properties(additional_properties, self.clock.now())
        return log_outcome(
            logger,
            "Enrich analytics event",
            self.analytics_repository.save(enriched),
            event_id=event_id,
        )

    def delete_event(self, event_id: str) -> DomainResult[None]:
        found = self.get_event(event_id)
        if isinstance(found, Failure):
            return found
        return log_outcome(
            logger,
            "Delete analytics event",
            self.analytics_repository.delete(event_id),
            event_id=event_id,
        )
