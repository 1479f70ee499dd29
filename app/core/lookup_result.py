"""Lookup Results — explicit success / not-found outcome for id-based lookups.

Invariants:
    - Lookups never raise for a missing id; they return NotFound
    - NotFound always carries the entity name and the id that was requested
    - Callers must branch on the result type before touching the value

Design Decisions:
    - Return values over exceptions: the route decides how a miss becomes a 404,
      same approach as the enforce_* checks returning error-or-None
"""

from dataclasses import dataclass
from typing import Any, Generic, TypeVar, Union

from app.core.errors import EntityNotFoundError

T = TypeVar("T")


@dataclass(frozen=True)
class Found(Generic[T]):
    """Lookup hit."""
    value: T


@dataclass(frozen=True)
class NotFound:
    """Lookup miss for a specific id."""
    entity: str
    entity_id: Any

    def to_error(self) -> EntityNotFoundError:
        return EntityNotFoundError(self.entity, self.entity_id)


LookupResult = Union[Found[T], NotFound]


def unwrap_or_raise(result: "LookupResult[T]") -> T:
    """Return the found value, or raise EntityNotFoundError for a miss."""
    if isinstance(result, NotFound):
        raise result.to_error()
    return result.value
