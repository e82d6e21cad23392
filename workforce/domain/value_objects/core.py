"""Domain value objects for the workforce task service.

Value objects are immutable types that represent domain concepts with
self-validation. They have no identity, only value.
"""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import TypeVar

from workforce.domain.enums import ReferenceType
from workforce.shared.utils.datetime import ensure_utc

E = TypeVar("E", bound=Enum)


def coerce_enum(enum_cls: type[E], value: E | str | None, field_name: str) -> E:
    """Return value as a member of enum_cls; accepts members, values, or names.

    Raises:
        ValueError: If value is None or not a known member.
    """
    if value is None:
        raise ValueError(f"{field_name} is required")
    if isinstance(value, enum_cls):
        return value
    if isinstance(value, str):
        raw = value.strip()
        for member in enum_cls:
            if raw == member.value or raw.upper() == member.name:
                return member
    allowed = ", ".join(m.name for m in enum_cls)
    raise ValueError(f"{field_name} must be one of {allowed}, got {value!r}")


def validate_positive_id(value: object, field_name: str) -> int:
    """Return value if it is a positive int (bool excluded); else raise ValueError."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{field_name} must be an integer, got {value!r}")
    if value <= 0:
        raise ValueError(f"{field_name} must be a positive integer, got {value}")
    return value


@dataclass(frozen=True)
class Reference:
    """Value object for the external business object a task is about.

    A reference is the (reference_type, reference_id) pair. Many tasks may
    share one reference over time; at most one of them is active after a
    reassignment.
    """

    reference_id: int
    reference_type: ReferenceType

    def __post_init__(self) -> None:
        """Validate id and normalize the type.

        Raises:
            ValueError: If the id is not positive or the type is missing/unknown.
        """
        validate_positive_id(self.reference_id, "reference_id")
        object.__setattr__(
            self,
            "reference_type",
            coerce_enum(ReferenceType, self.reference_type, "reference_type"),
        )

    @property
    def key(self) -> tuple[str, int]:
        """Hashable key used to serialize work on this reference."""
        return (self.reference_type.value, self.reference_id)

    def __str__(self) -> str:
        return f"{self.reference_type.value}/{self.reference_id}"


@dataclass(frozen=True)
class DateWindow:
    """Inclusive [start, end] time window used by the daily task view.

    Both bounds are normalized to UTC. end must not precede start.
    """

    start: datetime
    end: datetime

    def __post_init__(self) -> None:
        """Normalize bounds and enforce ordering.

        Raises:
            ValueError: If a bound is missing or end is before start.
        """
        if self.start is None or self.end is None:
            raise ValueError("Date window requires both start and end")
        object.__setattr__(self, "start", ensure_utc(self.start))
        object.__setattr__(self, "end", ensure_utc(self.end))
        if self.end < self.start:
            raise ValueError("Date window end must not be before start")

    def contains(self, moment: datetime) -> bool:
        """Return whether moment falls within [start, end] inclusive."""
        return self.start <= ensure_utc(moment) <= self.end

    def precedes(self, moment: datetime) -> bool:
        """Return whether moment is strictly before the window start."""
        return ensure_utc(moment) < self.start
