"""
Training session service.
"""

import logging
from datetime import datetime
from typing import List, Optional

from puppy_care.core.clock import SYSTEM_CLOCK, Clock, to_aware
from puppy_care.core.result import DomainResult, Failure
from puppy_care.domain.interfaces import ITrainingRepository
from puppy_care.domain.training import TrainingSession
from puppy_care.services.common import log_outcome, new_id, require_found

logger = logging.getLogger(__name__)


class TrainingService:
    """Application service for training-session use-cases."""

    def __init__(self, training_repository: ITrainingRepository, clock: Clock = SYSTEM_CLOCK):
        self.training_repository = training_repository
        self.clock = clock

    def create_training_session(
        self,
        puppy_id: str,
        session_type: str,
        duration: int,
        notes: str = "",
        completed_at: Optional[datetime] = None,
    ) -> DomainResult[TrainingSession]:
        """Record a session; ``completed_at`` defaults to now."""
        now = self.clock.now()
        session = TrainingSession.create(
            new_id(),
            puppy_id,
            session_type,
            duration,
            notes,
            to_aware(completed_at) if completed_at is not None else now,
            now,
        )
        if isinstance(session, Failure):
            return log_outcome(logger, "Create training session", session, puppy_id=puppy_id)
        return log_outcome(
            logger,
            "Create training session",
            self.training_repository.save(session.value),
            puppy_id=puppy_id,
        )

    def get_training_session(self, session_id: str) -> DomainResult[TrainingSession]:
        return require_found(
            self.training_repository.find_by_id(session_id), "Training session", session_id
        )

    def get_puppy_training_sessions(self, puppy_id: str) -> DomainResult[List[TrainingSession]]:
        return self.training_repository.find_by_puppy_id(puppy_id)

    def update_training_notes(self, session_id: str, notes: str) -> DomainResult[TrainingSession]:
        found = self.get_training_session(session_id)
        if isinstance(found, Failure):
            return found
        updated = found.value.update_notes(notes, self.clock.now())
        return log_outcome(
            logger,
            "Update training notes",
            self.training_repository.save(updated),
            session_id=session_id,
        )

    def delete_training_session(self, session_id: str) -> DomainResult[None]:
        found = self.get_training_session(session_id)
        if isinstance(found, Failure):
            return found
        return log_outcome(
            logger,
            "Delete training session",
            self.training_repository.delete(session_id),
            session_id=session_id,
        )
