"""
Puppy use-cases.

Each use-case validates its input through the domain value objects, stops at
the first failure and returns a Result; nothing here raises for expected
errors.
"""

import logging
from typing import List

from puppy_care.core.clock import SYSTEM_CLOCK, Clock
from puppy_care.core.result import DomainResult, Failure
from puppy_care.domain.interfaces import IPuppyRepository
from puppy_care.domain.puppy import BirthDate, Breed, Puppy, PuppyId, PuppyName, Weight
from puppy_care.schemas.dtos import CreatePuppyCommand, UpdatePuppyWeightCommand
from puppy_care.services.common import log_outcome, new_id, require_found

logger = logging.getLogger(__name__)


class CreatePuppyUseCase:
    """Register a new puppy for an owner."""

    def __init__(self, puppy_repository: IPuppyRepository, clock: Clock = SYSTEM_CLOCK):
        self.puppy_repository = puppy_repository
        self.clock = clock

    def execute(self, command: CreatePuppyCommand) -> DomainResult[Puppy]:
        result = self._create(command)
        return log_outcome(logger, "Create puppy", result, owner_id=command.owner_id)

    def _create(self, command: CreatePuppyCommand) -> DomainResult[Puppy]:
        name = PuppyName.create(command.name)
        if isinstance(name, Failure):
            return name
        breed = Breed.create(command.breed)
        if isinstance(breed, Failure):
            return breed
        birth_date = BirthDate.create(command.birth_date, clock=self.clock)
        if isinstance(birth_date, Failure):
            return birth_date
        weight = Weight.create(command.current_weight, command.weight_unit)
        if isinstance(weight, Failure):
            return weight
        puppy_id = PuppyId.create(new_id())
        if isinstance(puppy_id, Failure):
            return puppy_id

        puppy = Puppy.create(
            puppy_id.value,
            name.value,
            breed.value,
            birth_date.value,
            weight.value,
            command.owner_id,
            self.clock.now(),
        )
        if isinstance(puppy, Failure):
            return puppy
        return self.puppy_repository.save(puppy.value)


class GetPuppyByIdUseCase:
    def __init__(self, puppy_repository: IPuppyRepository):
        self.puppy_repository = puppy_repository

    def execute(self, puppy_id: str) -> DomainResult[Puppy]:
        return require_found(self.puppy_repository.find_by_id(puppy_id), "Puppy", puppy_id)


class GetPuppiesByOwnerUseCase:
    def __init__(self, puppy_repository: IPuppyRepository):
        self.puppy_repository = puppy_repository

    def execute(self, owner_id: str) -> DomainResult[List[Puppy]]:
        return self.puppy_repository.find_by_owner_id(owner_id)


class UpdatePuppyWeightUseCase:
    """
    Replace a puppy's current weight.

    The unit is taken verbatim from the command; no conversion from the
    previously stored unit is applied.
    """

    def __init__(self, puppy_repository: IPuppyRepository, clock: Clock = SYSTEM_CLOCK):
        self.puppy_repository = puppy_repository
        self.clock = clock

    def execute(self, command: UpdatePuppyWeightCommand) -> DomainResult[Puppy]:
        result = self._update(command)
        return log_outcome(logger, "Update puppy weight", result, puppy_id=command.puppy_id)

    def _update(self, command: UpdatePuppyWeightCommand) -> DomainResult[Puppy]:
        found = require_found(
            self.puppy_repository.find_by_id(command.puppy_id), "Puppy", command.puppy_id
        )
        if isinstance(found, Failure):
            return found
        weight = Weight.create(command.new_weight, command.weight_unit)
        if isinstance(weight, Failure):
            return weight
        updated = found.value.update_weight(weight.value, self.clock.now())
        return self.puppy_repository.update(updated)


class DeletePuppyUseCase:
    def __init__(self, puppy_repository: IPuppyRepository):
        self.puppy_repository = puppy_repository

    def execute(self, puppy_id: str) -> DomainResult[None]:
        found = require_found(self.puppy_repository.find_by_id(puppy_id), "Puppy", puppy_id)
        if isinstance(found, Failure):
            return log_outcome(logger, "Delete puppy", found, puppy_id=puppy_id)
        return log_outcome(
            logger, "Delete puppy", self.puppy_repository.delete(puppy_id), puppy_id=puppy_id
        )
