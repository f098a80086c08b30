from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, Optional

from puppy_care.core.result import DomainError, Failure, Success
from puppy_care.domain.base import Entity, is_blank


@dataclass(frozen=True, eq=False)
class AnalyticsEvent(Entity):
    id: str
    user_id: str
    event_type: str
    event_name: str
    timestamp: datetime
    created_at: datetime
    updated_at: datetime
    properties: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def create(
        cls,
        id: str,
        user_id: str,
        event_type: str,
        event_name: str,
        now: datetime,
        properties: Optional[Dict[str, Any]] = None,
    ):
        if is_blank(user_id):
            return Failure(DomainError.validation("UserId cannot be empty"))
        if is_blank(event_type):
            return Failure(DomainError.validation("Event type cannot be empty"))
        if is_blank(event_name):
            return Failure(DomainError.validation("Event name cannot be empty"))
        return Success(
            cls(id, user_id, event_type, event_name, now, now, now, dict(properties or {}))
        )

    def enrich_properties(self, additional: Dict[str, Any], now: datetime) -> "AnalyticsEvent":
        """Shallow merge; keys in ``additional`` win. ``self`` is left untouched."""
        return self._evolve(now, properties={**self.properties, **additional})
