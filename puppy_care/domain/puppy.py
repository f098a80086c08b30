"""
Puppy aggregate and its value objects.
"""

import math
from dataclasses import dataclass
from datetime import date, datetime, timedelta
from enum import Enum
from typing import Union

from puppy_care.core.clock import SYSTEM_CLOCK, Clock, to_aware
from puppy_care.core.result import DomainError, Failure, Success
from puppy_care.domain.base import Entity, ValueObject, coerce_enum, is_blank

KG_PER_LB = 0.453592
ADULT_AGE_MONTHS = 12


class WeightUnit(str, Enum):
    KG = "kg"
    LBS = "lbs"


@dataclass(frozen=True)
class PuppyId(ValueObject):
    value: str

    @classmethod
    def create(cls, value: str):
        if is_blank(value):
            return Failure(DomainError.validation("PuppyId cannot be empty"))
        return Success(cls._build(value))


@dataclass(frozen=True)
class PuppyName(ValueObject):
    value: str

    MAX_LENGTH = 100

    @classmethod
    def create(cls, value: str):
        if is_blank(value):
            return Failure(DomainError.validation("PuppyName cannot be empty"))
        if len(value) > cls.MAX_LENGTH:
            return Failure(
                DomainError.validation(
                    f"PuppyName cannot exceed {cls.MAX_LENGTH} characters"
                )
            )
        return Success(cls._build(value))


@dataclass(frozen=True)
class Breed(ValueObject):
    value: str

    @classmethod
    def create(cls, value: str):
        if is_blank(value):
            return Failure(DomainError.validation("Breed cannot be empty"))
        return Success(cls._build(value))


@dataclass(frozen=True)
class Weight(ValueObject):
    value: float
    unit: WeightUnit

    @classmethod
    def create(cls, value: float, unit: Union[WeightUnit, str] = WeightUnit.KG):
        weight_unit = coerce_enum(WeightUnit, unit)
        if weight_unit is None:
            return Failure(DomainError.validation(f"Unsupported weight unit: {unit}"))
        if value is None or isinstance(value, bool) or not isinstance(value, (int, float)):
            return Failure(DomainError.validation("Weight must be positive"))
        if not math.isfinite(value) or value <= 0:
            return Failure(DomainError.validation("Weight must be positive"))
        return Success(cls._build(float(value), weight_unit))

    def to_kg(self) -> float:
        if self.unit is WeightUnit.KG:
            return self.value
        return self.value * KG_PER_LB

    def convert_to(self, target_unit: Union[WeightUnit, str]) -> "Weight":
        target = WeightUnit(target_unit)
        if target is self.unit:
            return self
        kg_value = self.to_kg()
        target_value = kg_value if target is WeightUnit.KG else kg_value / KG_PER_LB
        return type(self)._build(target_value, target)


@dataclass(frozen=True)
class BirthDate(ValueObject):
    value: datetime

    @classmethod
    def create(cls, value: Union[date, datetime], clock: Clock = SYSTEM_CLOCK):
        if value is None:
            return Failure(DomainError.validation("BirthDate cannot be null"))
        birth = to_aware(value)
        if birth > clock.now():
            return Failure(DomainError.validation("BirthDate cannot be in the future"))
        return Success(cls._build(birth))

    def age_in_days(self, now: datetime) -> int:
        diff = abs(to_aware(now) - self.value)
        return math.ceil(diff / timedelta(days=1))

    def age_in_weeks(self, now: datetime) -> int:
        return self.age_in_days(now) // 7

    def age_in_months(self, now: datetime) -> int:
        now = to_aware(now).astimezone(self.value.tzinfo)
        return (now.year - self.value.year) * 12 + (now.month - self.value.month)


@dataclass(frozen=True, eq=False)
class Puppy(Entity):
    id: PuppyId
    name: PuppyName
    breed: Breed
    birth_date: BirthDate
    current_weight: Weight
    owner_id: str
    created_at: datetime
    updated_at: datetime

    @classmethod
    def create(
        cls,
        id: PuppyId,
        name: PuppyName,
        breed: Breed,
        birth_date: BirthDate,
        current_weight: Weight,
        owner_id: str,
        now: datetime,
    ):
        if is_blank(owner_id):
            return Failure(DomainError.validation("OwnerId cannot be empty"))
        return Success(
            cls(id, name, breed, birth_date, current_weight, owner_id, now, now)
        )

    def update_weight(self, new_weight: Weight, now: datetime) -> "Puppy":
        return self._evolve(now, current_weight=new_weight)

    def is_adult(self, now: datetime) -> bool:
        return self.birth_date.age_in_months(now) >= ADULT_AGE_MONTHS

    def feeding_frequency(self, now: datetime) -> int:
        """Meals per day for the puppy's age."""
        months = self.birth_date.age_in_months(now)
        if months < 3:
            return 4
        if months < 6:
            return 3
        return 2
