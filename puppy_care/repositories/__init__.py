"""
Repository adapters.

``in_memory`` holds keyed-map adapters; the ``*_repo`` modules hold the
SQLAlchemy adapters. ``build_repositories`` wires one family of adapters
for the application.
"""

from dataclasses import dataclass

from puppy_care.core.clock import SYSTEM_CLOCK, Clock
from puppy_care.core.exceptions import ConfigurationError
from puppy_care.domain.interfaces import (
    IAIRepository,
    IAnalyticsRepository,
    IEventRepository,
    IPuppyRepository,
    ITrainingRepository,
    IUserRepository,
)


@dataclass
class Repositories:
    puppies: IPuppyRepository
    events: IEventRepository
    users: IUserRepository
    training: ITrainingRepository
    ai: IAIRepository
    analytics: IAnalyticsRepository


def build_repositories(backend: str, clock: Clock = SYSTEM_CLOCK, session_factory=None) -> Repositories:
    """Create the adapters for ``backend`` ('memory' or 'sql')."""
    if backend == "memory":
        from .in_memory import (
            InMemoryAIRepository,
            InMemoryAnalyticsRepository,
            InMemoryEventRepository,
            InMemoryPuppyRepository,
            InMemoryTrainingRepository,
            InMemoryUserRepository,
        )

        return Repositories(
            puppies=InMemoryPuppyRepository(),
            events=InMemoryEventRepository(clock=clock),
            users=InMemoryUserRepository(),
            training=InMemoryTrainingRepository(),
            ai=InMemoryAIRepository(),
            analytics=InMemoryAnalyticsRepository(),
        )
    if backend == "sql":
        from .ai_repo import AIRepository
        from .analytics_repo import AnalyticsRepository
        from .event_repo import EventRepository
        from .puppy_repo import PuppyRepository
        from .training_repo import TrainingRepository
        from .user_repo import UserRepository

        return Repositories(
            puppies=PuppyRepository(session_factory, clock=clock),
            events=EventRepository(session_factory, clock=clock),
            users=UserRepository(session_factory, clock=clock),
            training=TrainingRepository(session_factory, clock=clock),
            ai=AIRepository(session_factory, clock=clock),
            analytics=AnalyticsRepository(session_factory, clock=clock),
        )
    raise ConfigurationError(
        f"Unsupported REPOSITORY_BACKEND '{backend}'", invalid_keys=["REPOSITORY_BACKEND"]
    )
