from typing import List

from puppy_care.core.result import DomainResult, Success
from puppy_care.db.base import TrainingSessionModel
from puppy_care.domain.interfaces import ITrainingRepository
from puppy_care.domain.training import TrainingSession
from puppy_care.repositories.base import (
    SQLAlchemyRepository,
    from_db_datetime,
    to_db_datetime,
)


class TrainingRepository(SQLAlchemyRepository, ITrainingRepository):
    model = TrainingSessionModel
    resource = "Training session"

    def find_by_puppy_id(self, puppy_id: str) -> DomainResult[List[TrainingSession]]:
        return self._run(
            "find",
            lambda session: Success(
                self._many(
                    session.query(TrainingSessionModel)
                    .filter(TrainingSessionModel.puppy_id == puppy_id)
                    .order_by(TrainingSessionModel.completed_at.asc())
                    .all()
                )
            ),
        )

    def _to_domain(self, row: TrainingSessionModel) -> TrainingSession:
        return TrainingSession(
            id=row.id,
            puppy_id=row.puppy_id,
            session_type=row.session_type,
            duration=row.duration,
            notes=getattr(row, "notes", "") or "",
            completed_at=from_db_datetime(row.completed_at),
            created_at=from_db_datetime(row.created_at),
            updated_at=from_db_datetime(row.updated_at),
        )

    def _to_model(self, session: TrainingSession) -> TrainingSessionModel:
        return TrainingSessionModel(
            id=session.id,
            puppy_id=session.puppy_id,
            session_type=session.session_type,
            duration=session.duration,
            notes=session.notes,
            completed_at=to_db_datetime(session.completed_at),
            created_at=to_db_datetime(session.created_at),
            updated_at=to_db_datetime(session.updated_at),
        )
