from datetime import datetime
from typing import List

from puppy_care.core.clock import to_aware
from puppy_care.core.result import DomainResult, Success
from puppy_care.db.base import AnalyticsEventModel
from puppy_care.domain.analytics import AnalyticsEvent
from puppy_care.domain.interfaces import IAnalyticsRepository
from puppy_care.repositories.base import (
    SQLAlchemyRepository,
    from_db_datetime,
    to_db_datetime,
)


class AnalyticsRepository(SQLAlchemyRepository, IAnalyticsRepository):
    model = AnalyticsEventModel
    resource = "Analytics event"

    def find_by_user_id(self, user_id: str) -> DomainResult[List[AnalyticsEvent]]:
        return self._run(
            "find",
            lambda session: Success(
                self._many(
                    session.query(AnalyticsEventModel)
                    .filter(AnalyticsEventModel.user_id == user_id)
                    .order_by(AnalyticsEventModel.timestamp.asc())
                    .all()
                )
            ),
        )

    def find_by_event_type(self, event_type: str) -> DomainResult[List[AnalyticsEvent]]:
        return self._run(
            "find",
            lambda session: Success(
                self._many(
                    session.query(AnalyticsEventModel)
                    .filter(AnalyticsEventModel.event_type == event_type)
                    .order_by(AnalyticsEventModel.timestamp.asc())
                    .all()
                )
            ),
        )

    def find_by_date_range(
        self, start: datetime, end: datetime
    ) -> DomainResult[List[AnalyticsEvent]]:
        lower = to_db_datetime(to_aware(start))
        upper = to_db_datetime(to_aware(end))
        return self._run(
            "find",
            lambda session: Success(
                self._many(
                    session.query(AnalyticsEventModel)
                    .filter(AnalyticsEventModel.timestamp >= lower)
                    .filter(AnalyticsEventModel.timestamp <= upper)
                    .order_by(AnalyticsEventModel.timestamp.asc())
                    .all()
                )
            ),
        )

    def _to_domain(self, row: AnalyticsEventModel) -> AnalyticsEvent:
        return AnalyticsEvent(
            id=row.id,
            user_id=row.user_id,
            event_type=row.event_type,
            event_name=row.event_name,
            timestamp=from_db_datetime(row.timestamp),
            created_at=from_db_datetime(row.created_at),
            updated_at=from_db_datetime(row.updated_at),
            properties=dict(row.properties or {}),
        )

    def _to_model(self, event: AnalyticsEvent) -> AnalyticsEventModel:
        return AnalyticsEventModel(
            id=event.id,
            user_id=event.user_id,
            event_type=event.event_type,
            event_name=event.event_name,
            properties=dict(event.properties),
            timestamp=to_db_datetime(event.timestamp),
            created_at=to_db_datetime(event.created_at),
            updated_at=to_db_datetime(event.updated_at),
        )
