"""
Domain package - Pure business logic layer.

This package contains:
- base.py: value object and entity building blocks
- puppy.py, calendar.py, user.py, training.py, ai.py, analytics.py: aggregates
- health_timeline.py: the vaccination schedule
- interfaces.py: Repository contracts

Nothing in this package performs I/O; repositories are injected as interfaces.
"""

from .ai import AIRecommendation
from .analytics import AnalyticsEvent
from .calendar import (
    Event,
    EventDateTime,
    EventDescription,
    EventId,
    EventTitle,
    EventType,
    RecurringPattern,
    RecurringType,
    UrgencyLevel,
)
from .interfaces import (
    IAIRepository,
    IAnalyticsRepository,
    IEventReader,
    IEventRepository,
    IEventWriter,
    IPuppyReader,
    IPuppyRepository,
    IPuppyWriter,
    ITrainingRepository,
    IUserReader,
    IUserRepository,
    IUserWriter,
)
from .puppy import BirthDate, Breed, Puppy, PuppyId, PuppyName, Weight, WeightUnit
from .training import TrainingSession
from .user import Email, User, UserId, UserRole

__all__ = [
    # Entities
    "Puppy",
    "Event",
    "User",
    "TrainingSession",
    "AIRecommendation",
    "AnalyticsEvent",
    # Value objects
    "PuppyId",
    "PuppyName",
    "Breed",
    "Weight",
    "WeightUnit",
    "BirthDate",
    "EventId",
    "EventTitle",
    "EventDescription",
    "EventDateTime",
    "EventType",
    "RecurringPattern",
    "RecurringType",
    "UrgencyLevel",
    "UserId",
    "Email",
    "UserRole",
    # Repository interfaces
    "IPuppyRepository",
    "IEventRepository",
    "IUserRepository",
    "ITrainingRepository",
    "IAIRepository",
    "IAnalyticsRepository",
    # Segregated interfaces
    "IPuppyReader",
    "IPuppyWriter",
    "IEventReader",
    "IEventWriter",
    "IUserReader",
    "IUserWriter",
]
