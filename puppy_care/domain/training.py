from dataclasses import dataclass
from datetime import datetime

from puppy_care.core.result import DomainError, Failure, Success
from puppy_care.domain.base import Entity, is_blank


@dataclass(frozen=True, eq=False)
class TrainingSession(Entity):
    """A completed training session; ``duration`` is in minutes."""

    id: str
    puppy_id: str
    session_type: str
    duration: int
    notes: str
    completed_at: datetime
    created_at: datetime
    updated_at: datetime

    @classmethod
    def create(
        cls,
        id: str,
        puppy_id: str,
        session_type: str,
        duration: int,
        notes: str,
        completed_at: datetime,
        now: datetime,
    ):
        if is_blank(puppy_id):
            return Failure(DomainError.validation("PuppyId cannot be empty"))
        if is_blank(session_type):
            return Failure(DomainError.validation("Session type cannot be empty"))
        if isinstance(duration, bool) or not isinstance(duration, (int, float)) or duration <= 0:
            return Failure(DomainError.validation("Duration must be positive"))
        return Success(
            cls(id, puppy_id, session_type, duration, notes or "", completed_at, now, now)
        )

    def update_notes(self, notes: str, now: datetime) -> "TrainingSession":
        return self._evolve(now, notes=notes or "")
