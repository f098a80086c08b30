"""
User aggregate: identity, email and role.

Credentials and sessions belong to the authentication provider and are not
modelled here.
"""

import re
from dataclasses import dataclass
from datetime import datetime
from enum import Enum

from puppy_care.core.result import DomainError, Failure, Success
from puppy_care.domain.base import Entity, ValueObject, coerce_enum, is_blank

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")


class UserRole(str, Enum):
    USER = "user"
    ADMIN = "admin"
    FAMILY_MEMBER = "family_member"

    @classmethod
    def create(cls, value):
        member = coerce_enum(cls, value)
        if member is None:
            return Failure(DomainError.validation("Invalid user role"))
        return Success(member)


@dataclass(frozen=True)
class UserId(ValueObject):
    value: str

    @classmethod
    def create(cls, value: str):
        if is_blank(value):
            return Failure(DomainError.validation("UserId cannot be empty"))
        return Success(cls._build(value))


@dataclass(frozen=True)
class Email(ValueObject):
    value: str

    @classmethod
    def create(cls, value: str):
        if is_blank(value):
            return Failure(DomainError.validation("Email cannot be empty"))
        if not EMAIL_PATTERN.fullmatch(value):
            return Failure(DomainError.validation("Email format is invalid"))
        return Success(cls._build(value))


@dataclass(frozen=True, eq=False)
class User(Entity):
    id: UserId
    email: Email
    role: UserRole
    is_active: bool
    created_at: datetime
    updated_at: datetime

    @classmethod
    def create(cls, id: UserId, email: Email, now: datetime, role: UserRole = UserRole.USER):
        """New users start active."""
        return cls(id, email, role, True, now, now)

    def deactivate(self, now: datetime) -> "User":
        return self._evolve(now, is_active=False)

    def activate(self, now: datetime) -> "User":
        return self._evolve(now, is_active=True)

    def change_role(self, new_role: UserRole, now: datetime) -> "User":
        return self._evolve(now, role=new_role)

    def is_admin(self) -> bool:
        return self.role is UserRole.ADMIN

    def can_manage_family(self) -> bool:
        return self.role in (UserRole.ADMIN, UserRole.USER)
