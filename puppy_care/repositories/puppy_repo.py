from typing import List

from puppy_care.core.result import DomainResult, Success
from puppy_care.db.base import PuppyModel
from puppy_care.domain.interfaces import IPuppyRepository
from puppy_care.domain.puppy import BirthDate, Breed, Puppy, PuppyId, PuppyName, Weight
from puppy_care.repositories.base import (
    SQLAlchemyRepository,
    from_db_datetime,
    to_db_datetime,
)


class PuppyRepository(SQLAlchemyRepository, IPuppyRepository):
    model = PuppyModel
    resource = "Puppy"

    def find_by_owner_id(self, owner_id: str) -> DomainResult[List[Puppy]]:
        return self._run(
            "find",
            lambda session: Success(
                self._many(
                    session.query(PuppyModel)
                    .filter(PuppyModel.owner_id == owner_id)
                    .order_by(PuppyModel.created_at.asc())
                    .all()
                )
            ),
        )

    def find_all(self) -> DomainResult[List[Puppy]]:
        return self._run(
            "find",
            lambda session: Success(
                self._many(session.query(PuppyModel).order_by(PuppyModel.created_at.asc()).all())
            ),
        )

    def _to_domain(self, row: PuppyModel) -> Puppy:
        return Puppy(
            id=PuppyId.create(row.id).get_or_raise(),
            name=PuppyName.create(row.name).get_or_raise(),
            breed=Breed.create(row.breed).get_or_raise(),
            birth_date=BirthDate.create(
                from_db_datetime(row.birth_date), clock=self.clock
            ).get_or_raise(),
            current_weight=Weight.create(row.weight_value, row.weight_unit).get_or_raise(),
            owner_id=row.owner_id,
            created_at=from_db_datetime(row.created_at),
            updated_at=from_db_datetime(row.updated_at),
        )

    def _to_model(self, puppy: Puppy) -> PuppyModel:
        return PuppyModel(
            id=puppy.id.value,
            name=puppy.name.value,
            breed=puppy.breed.value,
            birth_date=to_db_datetime(puppy.birth_date.value),
            weight_value=puppy.current_weight.value,
            weight_unit=puppy.current_weight.unit.value,
            owner_id=puppy.owner_id,
            created_at=to_db_datetime(puppy.created_at),
            updated_at=to_db_datetime(puppy.updated_at),
        )
