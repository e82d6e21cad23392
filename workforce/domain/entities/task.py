"""Task domain entity.

A task is a unit of work about an external business object (its reference),
assigned to one worker. Tasks are never deleted; cancellation is the only
removal semantics.
"""

from dataclasses import dataclass, field
from datetime import datetime

from workforce.domain.enums import Priority, ReferenceType, TaskStatus
from workforce.domain.value_objects.core import DateWindow, Reference
from workforce.shared.utils.datetime import utc_now


@dataclass
class TaskEntity:
    """Domain entity for a work task. id is None until the store assigns one."""

    reference_id: int
    reference_type: ReferenceType
    assignee_id: int
    status: TaskStatus
    deadline: datetime
    priority: Priority | None = None
    description: str | None = None
    task_type: str | None = None  # kind of work, e.g. "ARRANGE_PICKUP"
    id: int | None = None
    created_at: datetime = field(default_factory=utc_now)

    @property
    def reference(self) -> Reference:
        return Reference(self.reference_id, self.reference_type)

    def is_active(self) -> bool:
        return self.status.is_active

    def is_terminal(self) -> bool:
        return self.status.is_terminal

    def is_visible_in(self, window: DateWindow) -> bool:
        """Return whether this task belongs in the daily view for window.

        Cancelled tasks never show. A task shows when its deadline is inside
        the window, or when it is overdue (deadline before the window) and
        still open, so stale open work is carried forward until resolved.
        """
        if self.status is TaskStatus.CANCELLED:
            return False
        if window.contains(self.deadline):
            return True
        return window.precedes(self.deadline) and self.is_active()
