import math
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, Optional

from puppy_care.core.result import DomainError, Failure, Success
from puppy_care.domain.base import Entity, is_blank


def _validate_confidence(confidence):
    if (
        isinstance(confidence, bool)
        or not isinstance(confidence, (int, float))
        or math.isnan(confidence)
        or not 0 <= confidence <= 1
    ):
        return Failure(DomainError.validation("Confidence must be between 0 and 1"))
    return Success(float(confidence))


@dataclass(frozen=True, eq=False)
class AIRecommendation(Entity):
    """Generated advice for a puppy with a confidence score in [0, 1]."""

    id: str
    puppy_id: str
    category: str
    recommendation: str
    confidence: float
    created_at: datetime
    updated_at: datetime
    metadata: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def create(
        cls,
        id: str,
        puppy_id: str,
        category: str,
        recommendation: str,
        confidence: float,
        now: datetime,
        metadata: Optional[Dict[str, Any]] = None,
    ):
        if is_blank(puppy_id):
            return Failure(DomainError.validation("PuppyId cannot be empty"))
        if is_blank(category):
            return Failure(DomainError.validation("Category cannot be empty"))
        if is_blank(recommendation):
            return Failure(DomainError.validation("Recommendation cannot be empty"))
        checked = _validate_confidence(confidence)
        if isinstance(checked, Failure):
            return checked
        return Success(
            cls(
                id,
                puppy_id,
                category,
                recommendation,
                checked.value,
                now,
                now,
                dict(metadata or {}),
            )
        )

    def update_confidence(self, confidence: float, now: datetime):
        return _validate_confidence(confidence).map(
            lambda value: self._evolve(now, confidence=value)
        )
