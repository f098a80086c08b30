from typing import List, Optional

from sqlalchemy import func

from puppy_care.core.result import DomainResult, Success
from puppy_care.db.base import UserModel
from puppy_care.domain.interfaces import IUserRepository
from puppy_care.domain.user import Email, User, UserId, UserRole
from puppy_care.repositories.base import (
    SQLAlchemyRepository,
    from_db_datetime,
    to_db_datetime,
)


class UserRepository(SQLAlchemyRepository, IUserRepository):
    model = UserModel
    resource = "User"

    def find_by_email(self, email: str) -> DomainResult[Optional[User]]:
        def _find(session):
            row = (
                session.query(UserModel)
                .filter(func.lower(UserModel.email) == email.lower())
                .first()
            )
            return Success(self._to_domain(row) if row is not None else None)

        return self._run("find", _find)

    def find_all(self) -> DomainResult[List[User]]:
        return self._run(
            "find",
            lambda session: Success(
                self._many(session.query(UserModel).order_by(UserModel.created_at.asc()).all())
            ),
        )

    def _to_domain(self, row: UserModel) -> User:
        return User(
            id=UserId.create(row.id).get_or_raise(),
            email=Email.create(row.email).get_or_raise(),
            role=UserRole.create(row.role).get_or_raise(),
            is_active=bool(row.is_active),
            created_at=from_db_datetime(row.created_at),
            updated_at=from_db_datetime(row.updated_at),
        )

    def _to_model(self, user: User) -> UserModel:
        return UserModel(
            id=user.id.value,
            email=user.email.value,
            role=user.role.value,
            is_active=user.is_active,
            created_at=to_db_datetime(user.created_at),
            updated_at=to_db_datetime(user.updated_at),
        )
