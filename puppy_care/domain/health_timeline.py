"""
Age-based vaccination schedule.

Doses are fixed offsets from the birth date. The schedule does not vary by
breed yet; the breed is accepted so callers don't change when it does.
"""

import logging
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import List, Tuple

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class VaccineDose:
    name: str
    description: str
    weeks: int

    def due_at(self, birth_date: datetime) -> datetime:
        # Elapsed time, not wall-clock: a DST change in between does not shift the hour
        elapsed = birth_date.astimezone(timezone.utc) + timedelta(weeks=self.weeks)
        return elapsed.astimezone(birth_date.tzinfo)


VACCINATION_SCHEDULE: Tuple[VaccineDose, ...] = (
    VaccineDose(
        "First DHPP Vaccination",
        "First dose of DHPP (Distemper, Hepatitis, Parvovirus, Parainfluenza)",
        6,
    ),
    VaccineDose("Second DHPP Vaccination", "Second dose of DHPP", 9),
    VaccineDose("Third DHPP Vaccination", "Third dose of DHPP", 12),
    VaccineDose("Rabies Vaccination", "First rabies vaccination", 16),
)


def vaccination_schedule(breed: str, birth_date: datetime) -> List[Tuple[VaccineDose, datetime]]:
    """Return every dose of the schedule paired with its due date."""
    logger.debug(
        "Breed does not affect the vaccination schedule",
        extra={"context": {"breed": breed}},
    )
    return [(dose, dose.due_at(birth_date)) for dose in VACCINATION_SCHEDULE]


def upcoming_doses(
    breed: str, birth_date: datetime, now: datetime
) -> List[Tuple[VaccineDose, datetime]]:
    """Doses due strictly after ``now``, in schedule order."""
    return [
        (dose, due_at)
        for dose, due_at in vaccination_schedule(breed, birth_date)
        if due_at > now
    ]
