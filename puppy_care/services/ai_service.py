"""
AI recommendation service.

Recommendations are produced elsewhere; this service stores them and lets
callers adjust their confidence.
"""

import logging
from typing import Any, Dict, List, Optional

from puppy_care.core.clock import SYSTEM_CLOCK, Clock
from puppy_care.core.result import DomainResult, Failure
from puppy_care.domain.ai import AIRecommendation
from puppy_care.domain.interfaces import IAIRepository
from puppy_care.services.common import log_outcome, new_id, require_found

logger = logging.getLogger(__name__)


class AIService:
    def __init__(self, ai_repository: IAIRepository, clock: Clock = SYSTEM_CLOCK):
        self.ai_repository = ai_repository
        self.clock = clock

    def generate_recommendation(
        self,
        puppy_id: str,
        category: str,
        recommendation: str,
        confidence: float,
        metadata: Optional[Dict[str, Any]] = None,
    ) -> DomainResult[AIRecommendation]:
        created = AIRecommendation.create(
            new_id(),
            puppy_id,
            category,
            recommendation,
            confidence,
            self.clock.now(),
            metadata=metadata,
        )
        if isinstance(created, Failure):
            return log_outcome(logger, "Generate recommendation", created, puppy_id=puppy_id)
        return log_outcome(
            logger,
            "Generate recommendation",
            self.ai_repository.save(created.value),
            puppy_id=puppy_id,
            category=category,
        )

    def get_recommendation(self, recommendation_id: str) -> DomainResult[AIRecommendation]:
        return require_found(
            self.ai_repository.find_by_id(recommendation_id),
            "AI recommendation",
            recommendation_id,
        )

    def get_puppy_recommendations(self, puppy_id: str) -> DomainResult[List[AIRecommendation]]:
        return self.ai_repository.find_by_puppy_id(puppy_id)

    def get_recommendations_by_category(
        self, category: str
    ) -> DomainResult[List[AIRecommendation]]:
        return self.ai_repository.find_by_category(category)

    def update_confidence(
        self, recommendation_id: str, confidence: float
    ) -> DomainResult[AIRecommendation]:
        found = self.get_recommendation(recommendation_id)
        if isinstance(found, Failure):
            return found
        updated = found.value.update_confidence(confidence, self.clock.now())
        if isinstance(updated, Failure):
            return log_outcome(
                logger, "Update confidence", updated, recommendation_id=recommendation_id
            )
        return log_outcome(
            logger,
            "Update confidence",
            self.ai_repository.save(updated.value),
            recommendation_id=recommendation_id,
        )

    def delete_recommendation(self, recommendation_id: str) -> DomainResult[None]:
        found = self.get_recommendation(recommendation_id)
        if isinstance(found, Failure):
            return found
        return log_outcome(
            logger,
            "Delete recommendation",
            self.ai_repository.delete(recommendation_id),
            recommendation_id=recommendation_id,
        )
