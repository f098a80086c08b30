"""
Schemas package - Data Transfer Objects.

This package contains the command records accepted by the use-cases and
the response DTOs rendered by the controllers.
"""

from .dtos import (
    AIRecommendationResponse,
    AnalyticsEventResponse,
    CreateEventCommand,
    CreatePuppyCommand,
    EventResponse,
    GenerateHealthTimelineCommand,
    PuppyResponse,
    RecurringPatternCommand,
    RegisterUserCommand,
    TrainingSessionResponse,
    UpdateEventCommand,
    UpdatePuppyWeightCommand,
    UserResponse,
)

__all__ = [
    # Puppy DTOs
    "CreatePuppyCommand",
    "UpdatePuppyWeightCommand",
    "PuppyResponse",
    # Calendar DTOs
    "CreateEventCommand",
    "UpdateEventCommand",
    "RecurringPatternCommand",
    "GenerateHealthTimelineCommand",
    "EventResponse",
    # User DTOs
    "RegisterUserCommand",
    "UserResponse",
    # Other aggregates
    "TrainingSessionResponse",
    "AIRecommendationResponse",
    "AnalyticsEventResponse",
]
