"""
Result type used by every domain and application operation.

A ``Result`` is either ``Success(value)`` or ``Failure(error)``. Callers branch
on the variant (``isinstance(result, Failure)``) before touching ``.value``;
a Failure simply has no ``value`` attribute, so there is no unchecked
accessor to misuse.

Usage:
    title = EventTitle.create(command.title)
    if isinstance(title, Failure):
        return title
    use(title.value)
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Generic, Iterable, List, Optional, TypeVar, Union

from puppy_care.core.exceptions import ResultUnwrapError

T = TypeVar("T")
U = TypeVar("U")
E = TypeVar("E")


class ErrorCode(str, Enum):
    """Closed set of domain error codes."""

    VALIDATION_ERROR = "VALIDATION_ERROR"
    NOT_FOUND = "NOT_FOUND"
    UNAUTHORIZED = "UNAUTHORIZED"
    FORBIDDEN = "FORBIDDEN"
    CONFLICT = "CONFLICT"
    INTERNAL_ERROR = "INTERNAL_ERROR"


@dataclass(frozen=True)
class DomainError:
    """Structured error carried by a Failure."""

    code: ErrorCode
    message: str
    details: Optional[Any] = field(default=None, compare=False)

    @classmethod
    def validation(cls, message: str, details: Any = None) -> "DomainError":
        return cls(ErrorCode.VALIDATION_ERROR, message, details)

    @classmethod
    def not_found(cls, resource: str, id: Optional[str] = None) -> "DomainError":
        message = f"{resource} with id {id} not found" if id else f"{resource} not found"
        return cls(ErrorCode.NOT_FOUND, message)

    @classmethod
    def unauthorized(cls, message: str = "Unauthorized access") -> "DomainError":
        return cls(ErrorCode.UNAUTHORIZED, message)

    @classmethod
    def forbidden(cls, message: str = "Forbidden access") -> "DomainError":
        return cls(ErrorCode.FORBIDDEN, message)

    @classmethod
    def conflict(cls, message: str, details: Any = None) -> "DomainError":
        return cls(ErrorCode.CONFLICT, message, details)

    @classmethod
    def internal(
        cls, message: str = "Internal server error", details: Any = None
    ) -> "DomainError":
        return cls(ErrorCode.INTERNAL_ERROR, message, details)

    def to_dict(self) -> dict:
        data = {"code": self.code.value, "message": self.message}
        if self.details is not None:
            data["details"] = self.details
        return data


@dataclass(frozen=True)
class Success(Generic[T]):
    value: T

    def is_success(self) -> bool:
        return True

    def is_failure(self) -> bool:
        return False

    def map(self, fn: Callable[[T], U]) -> "Success[U]":
        return Success(fn(self.value))

    def flat_map(self, fn: Callable[[T], "Result"]) -> "Result":
        return fn(self.value)

    def on_success(self, fn: Callable[[T], Any]) -> "Success[T]":
        fn(self.value)
        return self

    def on_failure(self, fn: Callable[[Any], Any]) -> "Success[T]":
        return self

    def get_or_else(self, default: T) -> T:
        return self.value

    def get_or_raise(self) -> T:
        return self.value


@dataclass(frozen=True)
class Failure(Generic[E]):
    error: E

    def is_success(self) -> bool:
        return False

    def is_failure(self) -> bool:
        return True

    def map(self, fn: Callable[[Any], Any]) -> "Failure[E]":
        return self

    def flat_map(self, fn: Callable[[Any], "Result"]) -> "Failure[E]":
        return self

    def on_success(self, fn: Callable[[Any], Any]) -> "Failure[E]":
        return self

    def on_failure(self, fn: Callable[[E], Any]) -> "Failure[E]":
        fn(self.error)
        return self

    def get_or_else(self, default: T) -> T:
        return default

    def get_or_raise(self):
        """Convert the failure into an exception. Process boundaries only."""
        raise ResultUnwrapError(self.error)


Result = Union[Success[T], Failure[E]]
DomainResult = Union[Success[T], Failure[DomainError]]


def success(value: T) -> Success[T]:
    return Success(value)


def failure(error: E) -> Failure[E]:
    return Failure(error)


def combine(results: Iterable[Result]) -> Result:
    """Return the first Failure (left to right) or Success of all values."""
    values: List[Any] = []
    for result in results:
        if isinstance(result, Failure):
            return result
        values.append(result.value)
    return Success(values)
