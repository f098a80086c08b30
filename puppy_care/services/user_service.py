"""
User account use-cases.

Passwords, login and tokens are handled by the external authentication
provider; these use-cases only manage the account record.
"""

import logging

from puppy_care.core.clock import SYSTEM_CLOCK, Clock
from puppy_care.core.result import DomainError, DomainResult, Failure
from puppy_care.domain.interfaces import IUserRepository
from puppy_care.domain.user import Email, User, UserId, UserRole
from puppy_care.schemas.dtos import RegisterUserCommand
from puppy_care.services.common import log_outcome, new_id, require_found

logger = logging.getLogger(__name__)


class RegisterUserUseCase:
    def __init__(self, user_repository: IUserRepository, clock: Clock = SYSTEM_CLOCK):
        self.user_repository = user_repository
        self.clock = clock

    def execute(self, command: RegisterUserCommand) -> DomainResult[User]:
        return log_outcome(logger, "Register user", self._register(command))

    def _register(self, command: RegisterUserCommand) -> DomainResult[User]:
        email = Email.create(command.email)
        if isinstance(email, Failure):
            return email
        role = UserRole.create(command.role or UserRole.USER)
        if isinstance(role, Failure):
            return role

        existing = self.user_repository.find_by_email(email.value.value)
        if isinstance(existing, Failure):
            return existing
        if existing.value is not None:
            return Failure(DomainError.conflict("User with this email already exists"))

        user_id = UserId.create(new_id())
        if isinstance(user_id, Failure):
            return user_id
        user = User.create(user_id.value, email.value, self.clock.now(), role=role.value)
        return self.user_repository.save(user)


class GetUserUseCase:
    def __init__(self, user_repository: IUserRepository):
        self.user_repository = user_repository

    def execute(self, user_id: str) -> DomainResult[User]:
        return require_found(self.user_repository.find_by_id(user_id), "User", user_id)


class _UserChange:
    """Load a user, apply one change and persist it."""

    action = "Update user"

    def __init__(self, user_repository: IUserRepository, clock: Clock = SYSTEM_CLOCK):
        self.user_repository = user_repository
        self.clock = clock

    def _apply(self, user_id: str, change) -> DomainResult[User]:
        found = require_found(self.user_repository.find_by_id(user_id), "User", user_id)
        if isinstance(found, Failure):
            return log_outcome(logger, self.action, found, user_id=user_id)
        updated = change(found.value, self.clock.now())
        return log_outcome(
            logger, self.action, self.user_repository.update(updated), user_id=user_id
        )


class DeactivateUserUseCase(_UserChange):
    action = "Deactivate user"

    def execute(self, user_id: str) -> DomainResult[User]:
        return self._apply(user_id, lambda user, now: user.deactivate(now))


class ActivateUserUseCase(_UserChange):
    action = "Activate user"

    def execute(self, user_id: str) -> DomainResult[User]:
        return self._apply(user_id, lambda user, now: user.activate(now))


class ChangeUserRoleUseCase(_UserChange):
    action = "Change user role"

    def execute(self, user_id: str, role) -> DomainResult[User]:
        new_role = UserRole.create(role)
        if isinstance(new_role, Failure):
            return log_outcome(logger, self.action, new_role, user_id=user_id)
        return self._apply(user_id, lambda user, now: user.change_role(new_role.value, now))
