"""
Unit tests for the Result type.

Covers the Success/Failure variants, the monad laws for map/flat_map,
the side-effect hooks and ``combine``.
"""

import pytest

from puppy_care.core.exceptions import ResultUnwrapError
from puppy_care.core.result import (
    DomainError,
    ErrorCode,
    Failure,
    Success,
    combine,
    failure,
    success,
)


def _half(value):
    if value % 2:
        return Failure(DomainError.validation("odd"))
    return Success(value // 2)


@pytest.mark.unit
class TestResultVariants:
    """Test Success and Failure basics."""

    def test_success_reports_success(self):
        result = success(3)
        assert result.is_success()
        assert not result.is_failure()
        assert result.value == 3

    def test_failure_reports_failure(self):
        error = DomainError.validation("bad input")
        result = failure(error)
        assert result.is_failure()
        assert not result.is_success()
        assert result.error is error

    def test_failure_has_no_value(self):
        assert not hasattr(Failure(DomainError.internal()), "value")

    def test_get_or_else(self):
        assert Success(1).get_or_else(5) == 1
        assert Failure(DomainError.internal()).get_or_else(5) == 5

    def test_get_or_raise_on_failure(self):
        error = DomainError.not_found("Puppy", "p-1")
        with pytest.raises(ResultUnwrapError) as exc_info:
            Failure(error).get_or_raise()
        assert exc_info.value.error is error
        assert "NOT_FOUND" in str(exc_info.value)

    def test_get_or_raise_on_success(self):
        assert Success("x").get_or_raise() == "x"


@pytest.mark.unit
class TestMonadLaws:
    """map/flat_map behave like a monad."""

    def test_left_identity(self):
        assert Success(4).flat_map(_half) == _half(4)

    def test_right_identity(self):
        assert Success(4).flat_map(Success) == Success(4)
        failed = Failure(DomainError.internal())
        assert failed.flat_map(Success) == failed

    def test_associativity(self):
        left = Success(8).flat_map(_half).flat_map(_half)
        right = Success(8).flat_map(lambda v: _half(v).flat_map(_half))
        assert left == right == Success(2)

    def test_map_composition(self):
        def add_one(v):
            return v + 1

        def double(v):
            return v * 2

        assert Success(3).map(add_one).map(double) == Success(double(add_one(3)))
        assert Success(3).map(add_one).map(double) == Success(3).map(lambda v: double(add_one(v)))

    def test_map_skips_failure(self):
        failed = Failure(DomainError.validation("nope"))
        assert failed.map(lambda v: v + 1) is failed

    def test_flat_map_short_circuits(self):
        assert Success(3).flat_map(_half).flat_map(_half).error.message == "odd"


@pytest.mark.unit
class TestHooks:
    """on_success/on_failure run only for their variant."""

    def test_on_success(self):
        seen = []
        Success(1).on_success(seen.append).on_failure(seen.append)
        assert seen == [1]

    def test_on_failure(self):
        seen = []
        error = DomainError.internal()
        Failure(error).on_success(seen.append).on_failure(seen.append)
        assert seen == [error]


@pytest.mark.unit
class TestCombine:
    def test_all_successes(self):
        assert combine([Success(1), Success(2), Success(3)]) == Success([1, 2, 3])

    def test_empty(self):
        assert combine([]) == Success([])

    def test_first_failure_wins(self):
        first = Failure(DomainError.validation("first"))
        second = Failure(DomainError.validation("second"))
        assert combine([Success(1), first, second]) is first

    def test_failure_between_successes(self):
        error = DomainError.not_found("Puppy", "p-1")
        assert combine([Success(1), Failure(error), Success(2)]) == Failure(error)


@pytest.mark.unit
class TestDomainError:
    def test_not_found_message_with_id(self):
        error = DomainError.not_found("Event", "e-1")
        assert error.code is ErrorCode.NOT_FOUND
        assert error.message == "Event with id e-1 not found"

    def test_not_found_message_without_id(self):
        assert DomainError.not_found("Event").message == "Event not found"

    def test_to_dict_includes_details_only_when_set(self):
        assert DomainError.validation("x").to_dict() == {
            "code": "VALIDATION_ERROR",
            "message": "x",
        }
        assert DomainError.conflict("y", details={"k": 1}).to_dict()["details"] == {"k": 1}

    def test_details_do_not_affect_equality(self):
        assert DomainError.internal("x", details=1) == DomainError.internal("x", details=2)
