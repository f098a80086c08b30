# Services package initialization
# Use-cases and application services; each depends only on domain interfaces

from . import (
    ai_service,
    analytics_service,
    calendar_service,
    puppy_service,
    training_service,
    user_service,
)

__all__ = [
    "ai_service",
    "analytics_service",
    "calendar_service",
    "puppy_service",
    "training_service",
    "user_service",
]
