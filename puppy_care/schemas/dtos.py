"""
Data Transfer Objects (DTOs) for use-case commands and API responses.

Commands carry raw caller input; validation happens in the domain value
objects the use-cases build from them. Responses flatten entities into
JSON-ready dictionaries.
"""

from dataclasses import asdict, dataclass, field
from datetime import date, datetime
from typing import Any, Dict, List, Optional, Union

DateLike = Union[date, datetime]


def _iso(value: Optional[datetime]) -> Optional[str]:
    return value.isoformat() if value is not None else None


# ===========================
# Puppy
# ===========================


@dataclass
class CreatePuppyCommand:
    """DTO for puppy creation requests."""

    name: str
    breed: str
    birth_date: DateLike
    current_weight: float
    owner_id: str
    weight_unit: str = "kg"


@dataclass
class UpdatePuppyWeightCommand:
    """DTO for weight update requests."""

    puppy_id: str
    new_weight: float
    weight_unit: str = "kg"


@dataclass
class PuppyResponse:
    """DTO for puppy API responses."""

    id: str
    name: str
    breed: str
    birth_date: str
    current_weight: float
    weight_unit: str
    owner_id: str
    age_in_weeks: int
    is_adult: bool
    feeding_frequency: int
    created_at: str
    updated_at: str

    @classmethod
    def from_domain(cls, puppy, now: datetime) -> "PuppyResponse":
        """Create response from domain entity; age fields are relative to ``now``."""
        return cls(
            id=puppy.id.value,
            name=puppy.name.value,
            breed=puppy.breed.value,
            birth_date=_iso(puppy.birth_date.value),
            current_weight=puppy.current_weight.value,
            weight_unit=puppy.current_weight.unit.value,
            owner_id=puppy.owner_id,
            age_in_weeks=puppy.birth_date.age_in_weeks(now),
            is_adult=puppy.is_adult(now),
            feeding_frequency=puppy.feeding_frequency(now),
            created_at=_iso(puppy.created_at),
            updated_at=_iso(puppy.updated_at),
        )

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


# ===========================
# Calendar
# ===========================


@dataclass
class RecurringPatternCommand:
    type: str
    interval: int
    end_date: Optional[DateLike] = None


@dataclass
class CreateEventCommand:
    """DTO for event creation requests."""

    title: str
    event_date_time: DateLike
    event_type: str
    puppy_id: str
    description: Optional[str] = None
    recurring_pattern: Optional[RecurringPatternCommand] = None


@dataclass
class UpdateEventCommand:
    """DTO for partial event updates; None means "leave unchanged"."""

    event_id: str
    title: Optional[str] = None
    description: Optional[str] = None
    event_date_time: Optional[DateLike] = None
    event_type: Optional[str] = None


@dataclass
class GenerateHealthTimelineCommand:
    puppy_id: str
    breed: str
    birth_date: DateLike


@dataclass
class EventResponse:
    """DTO for calendar event API responses."""

    id: str
    title: str
    description: str
    event_date_time: str
    event_type: str
    puppy_id: str
    is_recurring: bool
    recurring_pattern: Optional[Dict[str, Any]]
    is_upcoming: bool
    is_overdue: bool
    urgency_level: str
    created_at: str
    updated_at: str

    @classmethod
    def from_domain(cls, event, now: datetime) -> "EventResponse":
        """Create response from domain entity; status fields are relative to ``now``."""
        pattern = event.recurring_pattern
        return cls(
            id=event.id.value,
            title=event.title.value,
            description=event.description.value,
            event_date_time=_iso(event.event_date_time.value),
            event_type=event.event_type.value,
            puppy_id=event.puppy_id,
            is_recurring=event.is_recurring,
            recurring_pattern=(
                {
                    "type": pattern.type.value,
                    "interval": pattern.interval,
                    "end_date": _iso(pattern.end_date),
                }
                if pattern is not None
                else None
            ),
            is_upcoming=event.is_upcoming(now),
            is_overdue=event.is_overdue(now),
            urgency_level=event.urgency_level(now).value,
            created_at=_iso(event.created_at),
            updated_at=_iso(event.updated_at),
        )

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


# ===========================
# Users
# ===========================


@dataclass
class RegisterUserCommand:
    email: str
    role: str = "user"


@dataclass
class UserResponse:
    """DTO for user API responses."""

    id: str
    email: str
    role: str
    is_active: bool
    is_admin: bool
    can_manage_family: bool
    created_at: str
    updated_at: str

    @classmethod
    def from_domain(cls, user) -> "UserResponse":
        """Create response from domain entity."""
        return cls(
            id=user.id.value,
            email=user.email.value,
            role=user.role.value,
            is_active=user.is_active,
            is_admin=user.is_admin(),
            can_manage_family=user.can_manage_family(),
            created_at=_iso(user.created_at),
            updated_at=_iso(user.updated_at),
        )

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


# ===========================
# Training / AI / Analytics
# ===========================


@dataclass
class TrainingSessionResponse:
    id: str
    puppy_id: str
    session_type: str
    duration: int
    notes: str
    completed_at: str
    created_at: str
    updated_at: str

    @classmethod
    def from_domain(cls, session) -> "TrainingSessionResponse":
        return cls(
            id=session.id,
            puppy_id=session.puppy_id,
            session_type=session.session_type,
            duration=session.duration,
            notes=session.notes,
            completed_at=_iso(session.completed_at),
            created_at=_iso(session.created_at),
            updated_at=_iso(session.updated_at),
        )

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass
class AIRecommendationResponse:
    id: str
    puppy_id: str
    category: str
    recommendation: str
    confidence: float
    created_at: str
    updated_at: str
    metadata: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_domain(cls, recommendation) -> "AIRecommendationResponse":
        return cls(
            id=recommendation.id,
            puppy_id=recommendation.puppy_id,
            category=recommendation.category,
            recommendation=recommendation.recommendation,
            confidence=recommendation.confidence,
            created_at=_iso(recommendation.created_at),
            updated_at=_iso(recommendation.updated_at),
            metadata=dict(recommendation.metadata),
        )

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass
class AnalyticsEventResponse:
    id: str
    user_id: str
    event_type: str
    event_name: str
    timestamp: str
    created_at: str
    updated_at: str
    properties: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_domain(cls, event) -> "AnalyticsEventResponse":
        return cls(
            id=event.id,
            user_id=event.user_id,
            event_type=event.event_type,
            event_name=event.event_name,
            timestamp=_iso(event.timestamp),
            created_at=_iso(event.created_at),
            updated_at=_iso(event.updated_at),
            properties=dict(event.properties),
        )

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def to_dict_list(items: List[Any], builder) -> List[Dict[str, Any]]:
    """Serialize a list of entities with a response ``from_domain`` builder."""
    return [builder(item).to_dict() for item in items]
