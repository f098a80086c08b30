from typing import List

from puppy_care.core.result import DomainResult, Success
from puppy_care.db.base import AIRecommendationModel
from puppy_care.domain.ai import AIRecommendation
from puppy_care.domain.interfaces import IAIRepository
from puppy_care.repositories.base import (
    SQLAlchemyRepository,
    from_db_datetime,
    to_db_datetime,
)


class AIRepository(SQLAlchemyRepository, IAIRepository):
    model = AIRecommendationModel
    resource = "AI recommendation"

    def find_by_puppy_id(self, puppy_id: str) -> DomainResult[List[AIRecommendation]]:
        return self._run(
            "find",
            lambda session: Success(
                self._many(
                    session.query(AIRecommendationModel)
                    .filter(AIRecommendationModel.puppy_id == puppy_id)
                    .order_by(AIRecommendationModel.created_at.asc())
                    .all()
                )
            ),
        )

    def find_by_category(self, category: str) -> DomainResult[List[AIRecommendation]]:
        return self._run(
            "find",
            lambda session: Success(
                self._many(
                    session.query(AIRecommendationModel)
                    .filter(AIRecommendationModel.category == category)
                    .order_by(AIRecommendationModel.created_at.asc())
                    .all()
                )
            ),
        )

    def _to_domain(self, row: AIRecommendationModel) -> AIRecommendation:
        return AIRecommendation(
            id=row.id,
            puppy_id=row.puppy_id,
            category=row.category,
            recommendation=row.recommendation,
            confidence=row.confidence,
            created_at=from_db_datetime(row.created_at),
            updated_at=from_db_datetime(row.updated_at),
            metadata=dict(getattr(row, "metadata_json", None) or {}),
        )

    def _to_model(self, recommendation: AIRecommendation) -> AIRecommendationModel:
        return AIRecommendationModel(
            id=recommendation.id,
            puppy_id=recommendation.puppy_id,
            category=recommendation.category,
            recommendation=recommendation.recommendation,
            confidence=recommendation.confidence,
            metadata_json=dict(recommendation.metadata),
            created_at=to_db_datetime(recommendation.created_at),
            updated_at=to_db_datetime(recommendation.updated_at),
        )
