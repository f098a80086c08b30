"""
Abstract repository interfaces following the Interface Segregation Principle.

Every operation returns a Result: adapter exceptions are converted into
``INTERNAL_ERROR`` failures at the repository boundary. Lookups by id
return ``Success(None)`` when nothing is stored under that id; deciding
whether that is an error is the use-case's job.
"""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import List, Optional

from puppy_care.core.result import DomainResult
from puppy_care.domain.ai import AIRecommendation
from puppy_care.domain.analytics import AnalyticsEvent
from puppy_care.domain.calendar import Event, EventType
from puppy_care.domain.puppy import Puppy
from puppy_care.domain.training import TrainingSession
from puppy_care.domain.user import User


class IPuppyReader(ABC):
    """Interface for puppy read operations."""

    @abstractmethod
    def find_by_id(self, puppy_id: str) -> DomainResult[Optional[Puppy]]:
        """Get puppy by ID (None when absent)."""
        pass

    @abstractmethod
    def find_by_owner_id(self, owner_id: str) -> DomainResult[List[Puppy]]:
        """Get all puppies of an owner."""
        pass

    @abstractmethod
    def find_all(self) -> DomainResult[List[Puppy]]:
        """Get every stored puppy."""
        pass


class IPuppyWriter(ABC):
    """Interface for puppy write operations."""

    @abstractmethod
    def save(self, puppy: Puppy) -> DomainResult[Puppy]:
        """Insert or replace a puppy."""
        pass

    @abstractmethod
    def update(self, puppy: Puppy) -> DomainResult[Puppy]:
        """Replace an existing puppy (NOT_FOUND when absent)."""
        pass

    @abstractmethod
    def delete(self, puppy_id: str) -> DomainResult[None]:
        """Delete a puppy."""
        pass


class IPuppyRepository(IPuppyReader, IPuppyWriter):
    """Complete puppy repository interface combining read/write operations."""

    pass


class IEventReader(ABC):
    """Interface for calendar event read operations."""

    @abstractmethod
    def find_by_id(self, event_id: str) -> DomainResult[Optional[Event]]:
        """Get event by ID (None when absent)."""
        pass

    @abstractmethod
    def find_by_puppy_id(self, puppy_id: str) -> DomainResult[List[Event]]:
        """Get all events of a puppy."""
        pass

    @abstractmethod
    def find_by_date_range(
        self, start: datetime, end: datetime
    ) -> DomainResult[List[Event]]:
        """Get events whose date lies in [start, end]."""
        pass

    @abstractmethod
    def find_by_type(self, event_type: EventType) -> DomainResult[List[Event]]:
        """Get events of one type."""
        pass

    @abstractmethod
    def find_upcoming_events(
        self, puppy_id: str, limit: int = 10
    ) -> DomainResult[List[Event]]:
        """Future events of a puppy, soonest first, at most ``limit``."""
        pass


class IEventWriter(ABC):
    """Interface for calendar event write operations."""

    @abstractmethod
    def save(self, event: Event) -> DomainResult[Event]:
        """Insert or replace an event."""
        pass

    @abstractmethod
    def update(self, event: Event) -> DomainResult[Event]:
        """Replace an existing event."""
        pass

    @abstractmethod
    def delete(self, event_id: str) -> DomainResult[None]:
        """Delete an event."""
        pass


class IEventRepository(IEventReader, IEventWriter):
    """Complete event repository interface combining read/write operations."""

    pass


class IUserReader(ABC):
    """Interface for user read operations."""

    @abstractmethod
    def find_by_id(self, user_id: str) -> DomainResult[Optional[User]]:
        """Get user by ID (None when absent)."""
        pass

    @abstractmethod
    def find_by_email(self, email: str) -> DomainResult[Optional[User]]:
        """Get user by email (None when absent)."""
        pass

    @abstractmethod
    def find_all(self) -> DomainResult[List[User]]:
        """Get every stored user."""
        pass


class IUserWriter(ABC):
    """Interface for user write operations."""

    @abstractmethod
    def save(self, user: User) -> DomainResult[User]:
        """Insert or replace a user."""
        pass

    @abstractmethod
    def update(self, user: User) -> DomainResult[User]:
        """Replace an existing user."""
        pass

    @abstractmethod
    def delete(self, user_id: str) -> DomainResult[None]:
        """Delete a user."""
        pass


class IUserRepository(IUserReader, IUserWriter):
    """Complete user repository interface combining read/write operations."""

    pass


class ITrainingRepository(ABC):
    """Training session storage."""

    @abstractmethod
    def find_by_id(self, session_id: str) -> DomainResult[Optional[TrainingSession]]:
        pass

    @abstractmethod
    def find_by_puppy_id(self, puppy_id: str) -> DomainResult[List[TrainingSession]]:
        pass

    @abstractmethod
    def save(self, session: TrainingSession) -> DomainResult[TrainingSession]:
        pass

    @abstractmethod
    def delete(self, session_id: str) -> DomainResult[None]:
        pass


class IAIRepository(ABC):
    """AI recommendation storage."""

    @abstractmethod
    def find_by_id(self, recommendation_id: str) -> DomainResult[Optional[AIRecommendation]]:
        pass

    @abstractmethod
    def find_by_puppy_id(self, puppy_id: str) -> DomainResult[List[AIRecommendation]]:
        pass

    @abstractmethod
    def find_by_category(self, category: str) -> DomainResult[List[AIRecommendation]]:
        pass

    @abstractmethod
    def save(self, recommendation: AIRecommendation) -> DomainResult[AIRecommendation]:
        pass

    @abstractmethod
    def delete(self, recommendation_id: str) -> DomainResult[None]:
        pass


class IAnalyticsRepository(ABC):
    """Analytics event storage."""

    @abstractmethod
    def find_by_id(self, event_id: str) -> DomainResult[Optional[AnalyticsEvent]]:
        pass

    @abstractmethod
    def find_by_user_id(self, user_id: str) -> DomainResult[List[AnalyticsEvent]]:
        pass

    @abstractmethod
    def find_by_event_type(self, event_type: str) -> DomainResult[List[AnalyticsEvent]]:
        pass

    @abstractmethod
    def find_by_date_range(
        self, start: datetime, end: datetime
    ) -> DomainResult[List[AnalyticsEvent]]:
        """Get events whose timestamp lies in [start, end]."""
        pass

    @abstractmethod
    def save(self, event: AnalyticsEvent) -> DomainResult[AnalyticsEvent]:
        pass

    @abstractmethod
    def delete(self, event_id: str) -> DomainResult[None]:
        pass
