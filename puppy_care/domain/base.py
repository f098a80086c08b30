"""
Building blocks for value objects and entities.

Value objects are frozen dataclasses that can only be built through their
``create()`` classmethod, which validates the input and returns a Result.
Calling the class directly raises TypeError.

Entities are frozen dataclasses compared by identity (their ``id``). Their
"update" methods return a new instance with a fresh ``updated_at``.
"""

from dataclasses import KW_ONLY, InitVar, dataclass, replace
from datetime import datetime

_FACTORY_KEY = object()


@dataclass(frozen=True)
class ValueObject:
    _: KW_ONLY
    factory_key: InitVar[object] = None

    def __post_init__(self, factory_key):
        if factory_key is not _FACTORY_KEY:
            name = type(self).__name__
            raise TypeError(f"{name} must be built with {name}.create()")

    @classmethod
    def _build(cls, *args, **kwargs):
        """Instantiate after validation. Only ``create``/``restore`` call this."""
        return cls(*args, factory_key=_FACTORY_KEY, **kwargs)


class Entity:
    """Identity semantics shared by all aggregates."""

    id: object
    created_at: datetime
    updated_at: datetime

    def __eq__(self, other):
        if not isinstance(other, Entity) or type(other) is not type(self):
            return NotImplemented
        return self.id == other.id

    def __hash__(self):
        return hash((type(self).__name__, self.id))

    def _evolve(self, now: datetime, **changes):
        """Copy with ``changes`` applied and ``updated_at`` set to ``now``."""
        return replace(self, updated_at=now, **changes)


def is_blank(value) -> bool:
    return not isinstance(value, str) or value.strip() == ""


def coerce_enum(enum_cls, value):
    """Return the member for ``value`` (member or raw value), or None."""
    if isinstance(value, enum_cls):
        return value
    try:
        return enum_cls(value)
    except ValueError:
        return None
