"""
Shared plumbing for the SQLAlchemy repositories.

Each call opens its own session, commits on success and rolls back on a
``SQLAlchemyError``, which is reported as an ``INTERNAL_ERROR`` failure.
"""

import logging
from datetime import datetime, timezone
from typing import Callable, List, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from puppy_care.core.clock import SYSTEM_CLOCK, Clock
from puppy_care.core.config import APP_TZ
from puppy_care.core.exceptions import ResultUnwrapError
from puppy_care.core.result import DomainError, DomainResult, Failure, Success
from puppy_care.db.session import get_sessionmaker

logger = logging.getLogger(__name__)


def to_db_datetime(value: Optional[datetime]) -> Optional[datetime]:
    """Store instants in UTC; SQLite keeps no offset."""
    if value is None:
        return None
    return value.astimezone(timezone.utc)


def from_db_datetime(value: Optional[datetime]) -> Optional[datetime]:
    if value is None:
        return None
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.astimezone(APP_TZ)


class SQLAlchemyRepository:
    """Common CRUD for a single ORM model keyed by a string id."""

    model = None
    resource = "Entity"

    def __init__(self, session_factory: Optional[Callable[[], Session]] = None, clock: Clock = SYSTEM_CLOCK):
        self.session_factory = session_factory or get_sessionmaker()
        self.clock = clock

    # Subclasses map rows to entities and back
    def _to_domain(self, row):
        raise NotImplementedError

    def _to_model(self, entity):
        raise NotImplementedError

    def _run(self, operation: str, work: Callable[[Session], DomainResult]) -> DomainResult:
        session = self.session_factory()
        try:
            result = work(session)
            session.commit()
            return result
        except SQLAlchemyError as e:
            session.rollback()
            logger.error(
                f"{self.resource} repository {operation} failed: {e}",
                exc_info=True,
                extra={"context": {"operation": operation, "resource": self.resource}},
            )
            return Failure(DomainError.internal(f"Failed to {operation} {self.resource.lower()}"))
        except ResultUnwrapError as e:
            session.rollback()
            logger.error(
                f"Stored {self.resource.lower()} failed validation: {e}",
                extra={"context": {"operation": operation, "resource": self.resource}},
            )
            return Failure(DomainError.internal(f"Stored {self.resource.lower()} is invalid"))
        finally:
            session.close()

    def _many(self, rows) -> List:
        return [self._to_domain(row) for row in rows]

    def find_by_id(self, id: str) -> DomainResult:
        def _find(session: Session):
            row = session.get(self.model, id)
            return Success(self._to_domain(row) if row is not None else None)

        return self._run("find", _find)

    def save(self, entity) -> DomainResult:
        """Insert, or overwrite the row with the same id."""

        def _save(session: Session):
            session.merge(self._to_model(entity))
            return Success(entity)

        return self._run("save", _save)

    def update(self, entity) -> DomainResult:
        def _update(session: Session):
            key = self._to_model(entity).id
            if session.get(self.model, key) is None:
                return Failure(DomainError.not_found(self.resource, key))
            session.merge(self._to_model(entity))
            return Success(entity)

        return self._run("update", _update)

    def delete(self, id: str) -> DomainResult[None]:
        def _delete(session: Session):
            row = session.get(self.model, id)
            if row is not None:
                session.delete(row)
            return Success(None)

        return self._run("delete", _delete)
