"""Task activity and comment entities.

Both are append-only records owned by a task; they are never updated.
"""

from dataclasses import dataclass, field
from datetime import datetime

from workforce.domain.enums import ActivityAction
from workforce.shared.utils.datetime import utc_now


@dataclass
class TaskActivityEntity:
    """One entry of a task's activity history."""

    task_id: int
    action: ActivityAction
    details: str
    actor_id: int | None = None
    id: int | None = None
    occurred_at: datetime = field(default_factory=utc_now)


@dataclass
class TaskCommentEntity:
    """Free-text comment left on a task."""

    task_id: int
    comment: str
    author_id: int | None = None
    id: int | None = None
    created_at: datetime = field(default_factory=utc_now)
