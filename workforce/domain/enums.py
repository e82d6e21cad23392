"""Domain enumerations for the workforce task service.

Enums represent fixed sets of domain values (task status, priority,
reference type, activity action).
"""

from enum import Enum


class _ValuesMixin:
    """Mixin that adds a values() classmethod to str Enums."""

    @classmethod
    def values(cls) -> list[str]:
        """Return all valid values as strings."""
        return [member.value for member in cls]


class TaskStatus(_ValuesMixin, str, Enum):
    """Task lifecycle status.

    ASSIGNED and STARTED are active (work not yet finished or abandoned);
    COMPLETED and CANCELLED are terminal.
    """

    ASSIGNED = "ASSIGNED"
    STARTED = "STARTED"
    COMPLETED = "COMPLETED"
    CANCELLED = "CANCELLED"

    @property
    def is_terminal(self) -> bool:
        return self in (TaskStatus.COMPLETED, TaskStatus.CANCELLED)

    @property
    def is_active(self) -> bool:
        return not self.is_terminal


class Priority(_ValuesMixin, str, Enum):
    """Task priority, ordered by severity (HIGH is the most severe)."""

    HIGH = "HIGH"
    MEDIUM = "MEDIUM"
    LOW = "LOW"

    @property
    def rank(self) -> int:
        """Severity rank; higher means more severe."""
        return _PRIORITY_RANK[self]

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Priority):
            return NotImplemented
        return self.rank < other.rank

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Priority):
            return NotImplemented
        return self.rank <= other.rank

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Priority):
            return NotImplemented
        return self.rank > other.rank

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Priority):
            return NotImplemented
        return self.rank >= other.rank


_PRIORITY_RANK = {Priority.LOW: 1, Priority.MEDIUM: 2, Priority.HIGH: 3}


class ReferenceType(_ValuesMixin, str, Enum):
    """Kind of external business object a task is about."""

    ORDER = "ORDER"
    ENTITY = "ENTITY"
    CUSTOMER = "CUSTOMER"
    PRODUCT = "PRODUCT"

    @property
    def description(self) -> str:
        return f"{self.value.capitalize()} Reference"


class ActivityAction(_ValuesMixin, str, Enum):
    """Action recorded in a task's activity history."""

    TASK_CREATED = "TASK_CREATED"
    TASK_ASSIGNED = "TASK_ASSIGNED"
    STATUS_CHANGED = "STATUS_CHANGED"
    DESCRIPTION_CHANGED = "DESCRIPTION_CHANGED"
    PRIORITY_CHANGED = "PRIORITY_CHANGED"
    TASK_CANCELLED = "TASK_CANCELLED"
    COMMENT_ADDED = "COMMENT_ADDED"
